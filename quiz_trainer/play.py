"""
Play mode: every quiz once, in random order, until the first wrong answer
"""

import random
import logging

from .out import log, colorize

class PlayRound:
    """
    State of one play session

    The pool holds the ids of the quizzes not asked yet. Each question is
    drawn uniformly from the pool and removed from it, so no quiz is asked
    twice. The score only grows.
    """

    def __init__(self, quiz_ids, rng=None):
        self._pool = list(quiz_ids)
        self._rng = rng or random.Random()
        self.score = 0

    @property
    def remaining(self):
        return len(self._pool)

    def next_id(self):
        index = self._rng.randrange(len(self._pool))
        return self._pool.pop(index)

    async def run(self, channel, get_quiz, check):
        """Ask questions until the pool is empty or an answer is wrong.

        Arguments:
            channel (LineChannel): Where questions are asked
            get_quiz (coroutine function): Fetches a quiz by id, returns None
                                           if it no longer exists
            check (callable): check(given_answer, correct_answer) -> bool

        Returns:
            bool: True if every question was answered correctly
        """

        if not self._pool:
            log(channel, 'There are no questions to answer!', 'red')
            return False

        while self._pool:
            quiz_id = self.next_id()
            quiz = await get_quiz(quiz_id)
            if quiz is None:
                logging.info('Quiz %s was deleted during play, skipping', quiz_id)
                continue

            answer = await channel.read_line(colorize(f'{quiz.question}? ', 'red', channel.color))

            if not check(answer, quiz.answer):
                log(channel, 'Incorrect.', 'red')
                log(channel, f'Game over. Final score: {self.score}', 'magenta')
                return False

            self.score += 1
            log(channel, f'Correct! You have {self.score} right so far.', 'green')

        log(channel, f'No questions left. Game over. Final score: {self.score}', 'green')
        return True
