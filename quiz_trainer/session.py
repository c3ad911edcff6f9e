"""
Module for QuizSession class
"""

import re
import random
import asyncio
import logging

from tabulate import tabulate

from .answers import check_answer
from .errors import ChannelClosed, MissingParameter, NotANumber, NotFound, QuizError, ValidationError
from .out import log, biglog, errorlog, colorize
from .play import PlayRound

def validate_id(value):
    """
    Parse the id argument of a command

    Raises:
        MissingParameter: no argument was given
        NotANumber: the argument is not an integer
    """

    if value is None or value.strip() == '':
        raise MissingParameter('id')

    if not re.fullmatch(r'[+-]?[0-9]+', value.strip()):
        raise NotANumber(value)

    return int(value)

def parse_line(line):
    """
    Split an input line into a lower case command word and an optional argument
    """

    words = line.strip().split(maxsplit=1)
    if not words:
        return None, None

    argument = words[1].strip() if len(words) > 1 else None
    return words[0].lower(), argument


class QuizSession:
    """
    One interactive session on a line channel

    The session reads a line, runs the matching command to completion and only
    then prompts again. Errors raised by a command are reported on the channel
    and never end the session; quit or a closed channel does.
    """
    # pylint: disable=too-many-instance-attributes

    def __init__(self, store, channel, **kwargs):
        self._store = store
        self._channel = channel
        self._prompt = kwargs.get('prompt', 'quiz > ')
        self._answer_matching = kwargs.get('answer_matching', 'strict')
        self._min_matching_characters = kwargs.get('min_matching_characters', 5)
        self._credits = kwargs.get('credits', [])
        self._banner = kwargs.get('banner', 'CORE Quiz')
        self._rng = kwargs.get('rng') or random.Random()

    async def run(self):
        """
        Run the command loop until quit or until the channel is closed
        """

        logging.info('Session started')
        if self._banner:
            biglog(self._channel, self._banner, 'green')

        try:
            while not self._channel.closed:
                line = await self._channel.read_line(self._prompt)
                await self.handle_line(line)
        except ChannelClosed:
            logging.info('Channel closed while waiting for input')

        logging.info('Session ended')

    async def handle_line(self, line):
        command, argument = parse_line(line)
        if command is None:
            return

        handler = self.dispatch(command)
        if handler is None:
            errorlog(self._channel, f"Command '{command}' not recognized.")
            log(self._channel, "Use 'help' to see the available commands.", 'green')
            return

        logging.info('Command: %s, argument: %s', command, argument)

        try:
            await handler(argument)
        except ValidationError as ex:
            errorlog(self._channel, str(ex))
            for message in ex.messages:
                errorlog(self._channel, message)
        except QuizError as ex:
            errorlog(self._channel, str(ex))
        except ChannelClosed:
            raise
        except Exception as ex:
            logging.exception(ex)
            errorlog(self._channel, 'Unexpected error, the command was not completed.')

    def dispatch(self, command):
        """
        Returns:
            The handler coroutine function for the command word, or None
        """

        command = command.lower()
        for aliases, _, handler in self._commands():
            if command in aliases:
                return handler
        return None

    def _commands(self):
        return (
            (['h', 'help'], 'Show this help.', self._help_cmd),
            (['list'], 'List the existing quizzes.', self._list_cmd),
            (['show'], 'Show the question and the answer of the given quiz.', self._show_cmd),
            (['add'], 'Add a new quiz interactively.', self._add_cmd),
            (['delete'], 'Delete the given quiz.', self._delete_cmd),
            (['edit'], 'Edit the given quiz.', self._edit_cmd),
            (['test'], 'Test the given quiz.', self._test_cmd),
            (['p', 'play'], 'Play: answer all the quizzes in random order.', self._play_cmd),
            (['credits'], 'Credits.', self._credits_cmd),
            (['q', 'quit'], 'Quit the program.', self._quit_cmd),
        )

    async def _call_store(self, method, *args):
        return await asyncio.to_thread(method, *args)

    async def _get_quiz(self, quiz_id):
        quiz = await self._call_store(self._store.get_by_id, quiz_id)
        if quiz is None:
            raise NotFound(quiz_id)
        return quiz

    async def _ask(self, text, prefill=None):
        return await self._channel.read_line(colorize(f' {text}: ', 'red', self._channel.color), prefill)

    def _check(self, answer, correct_answer):
        return check_answer(
                answer,
                correct_answer,
                self._answer_matching,
                self._min_matching_characters
                )

    def _format_quiz(self, quiz, show_answer=False):
        text = f"[{colorize(quiz.id, 'magenta', self._channel.color)}]: {quiz.question}"
        if show_answer:
            text += f" {colorize('=>', 'magenta', self._channel.color)} {quiz.answer}"
        return text

    async def _help_cmd(self, _argument):
        usage = {'show': 'show <id>', 'delete': 'delete <id>', 'edit': 'edit <id>', 'test': 'test <id>'}
        rows = []
        for aliases, description, _ in self._commands():
            name = usage.get(aliases[-1], '|'.join(aliases))
            rows.append((name, f'- {description}'))

        log(self._channel, 'Commands:')
        for line in tabulate(rows, tablefmt='plain').split('\n'):
            log(self._channel, f'   {line}')

    async def _list_cmd(self, _argument):
        quizzes = await self._call_store(self._store.list_all)
        if not quizzes:
            log(self._channel, 'There are no quizzes.', 'magenta')

        for quiz in quizzes:
            log(self._channel, f'  {self._format_quiz(quiz)}')

    async def _show_cmd(self, argument):
        quiz = await self._get_quiz(validate_id(argument))
        log(self._channel, f'  {self._format_quiz(quiz, show_answer=True)}')

    async def _add_cmd(self, _argument):
        question = await self._ask('Enter a question')
        answer = await self._ask('Enter the answer')
        quiz = await self._call_store(self._store.create, question, answer)
        log(self._channel, f" {colorize('Added', 'magenta', self._channel.color)} {self._format_quiz(quiz, show_answer=True)}")

    async def _delete_cmd(self, argument):
        quiz_id = validate_id(argument)
        await self._call_store(self._store.delete_by_id, quiz_id)
        log(self._channel, f" Deleted quiz [{colorize(quiz_id, 'magenta', self._channel.color)}]")

    async def _edit_cmd(self, argument):
        quiz = await self._get_quiz(validate_id(argument))
        question = await self._ask('Enter a question', prefill=quiz.question)
        answer = await self._ask('Enter the answer', prefill=quiz.answer)
        quiz = await self._call_store(self._store.update, quiz.id, question, answer)
        log(self._channel, f" Changed quiz [{colorize(quiz.id, 'magenta', self._channel.color)}] to: {quiz.question} {colorize('=>', 'magenta', self._channel.color)} {quiz.answer}")

    async def _test_cmd(self, argument):
        quiz = await self._get_quiz(validate_id(argument))
        answer = await self._channel.read_line(colorize(f'{quiz.question}? ', 'red', self._channel.color))

        if self._check(answer, quiz.answer):
            log(self._channel, 'Your answer is correct.')
            biglog(self._channel, 'Correct', 'green')
        else:
            log(self._channel, 'Your answer is incorrect.')
            biglog(self._channel, 'Incorrect', 'red')

    async def _play_cmd(self, _argument):
        quizzes = await self._call_store(self._store.list_all)
        play_round = PlayRound([quiz.id for quiz in quizzes], self._rng)
        await play_round.run(self._channel, self._call_store_get, self._check)
        logging.info('Play finished with score %s', play_round.score)

    async def _call_store_get(self, quiz_id):
        return await self._call_store(self._store.get_by_id, quiz_id)

    async def _credits_cmd(self, _argument):
        log(self._channel, 'Authors:')
        for line in self._credits:
            log(self._channel, line, 'green')

    async def _quit_cmd(self, _argument):
        log(self._channel, 'Bye!', 'green')
        self._channel.close()
