"""
Module for QuizTrainer class
"""

import logging

from .channel import TerminalChannel
from .quiz_store import QuizStore
from .server import QuizServer
from .session import QuizSession

SUGGESTED_CONFIGS = [
        ('host', '127.0.0.1'),
        ('port', 3030),
        ('prompt', 'quiz > '),
        ('answer_matching', 'strict'),
        ('min_matching_characters', 5),
        ('color', True),
        ('seed_quizzes', True),
        ('credits', []),
        ]

class QuizTrainer:
    """
    Quiz trainer: one shared quiz store, any number of sessions
    """

    def __init__(self, database_path, **kwargs):
        logging.info('Starting Quiz Trainer')
        self._config = kwargs
        self._check_config()

        self._store = QuizStore(database_path)

        if self._config['seed_quizzes']:
            seeded = self._store.seed()
            if seeded:
                logging.info('Seeded empty store with %s quizzes', seeded)

    @property
    def store(self):
        return self._store

    def session(self, channel, rng=None):
        """
        Create a session on the given channel

        Arguments:
            channel (LineChannel): Where the session reads and writes
            rng (random.Random, optional): Random source for play mode
        """

        return QuizSession(
                self._store,
                channel,
                prompt=self._config['prompt'],
                answer_matching=self._config['answer_matching'],
                min_matching_characters=self._config['min_matching_characters'],
                credits=self._config['credits'],
                rng=rng,
                )

    async def run_local(self):
        """
        Run a single session on the local terminal
        """

        channel = TerminalChannel(color=self._config['color'])
        await self.session(channel).run()

    def server(self, host=None, port=None):
        return QuizServer(
                self.session,
                host or self._config['host'],
                self._config['port'] if port is None else port,
                color=self._config['color'],
                )

    async def serve(self, host=None, port=None):
        await self.server(host, port).serve_forever()

    def close(self):
        self._store.close()

    def _check_config(self):
        for suggested in SUGGESTED_CONFIGS:
            key = suggested[0]
            default = suggested[1]
            if key not in self._config:
                logging.warning(
                        '%s not supplied to QuizTrainer, defaulting to %s',
                        key,
                        repr(default)
                        )
                self._config[key] = default
