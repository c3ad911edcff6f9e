"""
Line channels: where a session prints output and reads its next line of input
"""

import re
import sys
import asyncio
import logging
import readline

from .errors import ChannelClosed
from .out import errorlog

REG_ANSI_CODE = re.compile(r'\x1b\[[0-9;]*m')
STREAM_LIMIT = 2 ** 16

def readline_prompt(prompt):
    """
    Mark ANSI escape codes as invisible so readline measures the prompt width
    correctly
    """

    return REG_ANSI_CODE.sub(lambda match: f'\001{match[0]}\002', prompt)


class LineTooLong(Exception):
    pass


class LineChannel:
    """
    Bidirectional line channel used by a quiz session

    Subclasses implement write_line(), read_line() and close(). Only one
    read_line() is awaited at a time by a session.
    """

    def __init__(self, color=True):
        self.color = color
        self._closed = False

    @property
    def closed(self):
        return self._closed

    def write_line(self, text):
        raise NotImplementedError

    async def read_line(self, prompt='', prefill=None):
        """Print prompt and return the next line without its line ending.

        When prefill is given, the user starts from that value. Transports that
        cannot edit a line show it in brackets and return it for an empty reply.

        Raises:
            ChannelClosed: the channel is closed or the remote end went away
        """

        raise NotImplementedError

    def close(self):
        self._closed = True

    @staticmethod
    def _default_prompt(prompt, prefill):
        if prefill is None:
            return prompt
        return f'{prompt}[{prefill}] '

    @staticmethod
    def _default_answer(line, prefill):
        if prefill is not None and not line.strip():
            return prefill
        return line


class TerminalChannel(LineChannel):
    """
    Channel on the local terminal (stdin/stdout)
    """

    def __init__(self, color=True, stdin=None, stdout=None):
        super().__init__(color=color)
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def write_line(self, text):
        if self._closed:
            return
        self._stdout.write(f'{text}\n')
        self._stdout.flush()

    async def read_line(self, prompt='', prefill=None):
        if self._closed:
            raise ChannelClosed()

        try:
            return await asyncio.to_thread(self._blocking_read, prompt, prefill)
        except EOFError as ex:
            logging.info('End of input on terminal')
            self.close()
            raise ChannelClosed() from ex

    def _can_prefill(self):
        return self._stdin is sys.stdin and self._stdout is sys.stdout and sys.stdin.isatty()

    def _blocking_read(self, prompt, prefill):
        if prefill is None or not self._can_prefill():
            self._stdout.write(self._default_prompt(prompt, prefill))
            self._stdout.flush()
            line = self._stdin.readline()
            if not line:
                raise EOFError()
            return self._default_answer(line.rstrip('\r\n'), prefill)

        def insert_prefill():
            readline.insert_text(prefill)
            readline.redisplay()

        readline.set_pre_input_hook(insert_prefill)
        try:
            return input(readline_prompt(prompt))
        finally:
            readline.set_pre_input_hook()

    def close(self):
        if not self._closed:
            logging.info('Closing terminal channel')
        super().close()


class StreamChannel(LineChannel):
    """
    Channel on a pair of asyncio streams, one per socket client
    """

    def __init__(self, reader, writer, color=True, encoding='utf-8', limit=STREAM_LIMIT):
        super().__init__(color=color)
        self.limit = limit
        self._reader = reader
        self._writer = writer
        self._encoding = encoding

    @property
    def peer(self):
        return self._writer.get_extra_info('peername')

    def write_line(self, text):
        if self._closed:
            return
        self._writer.write(f'{text}\n'.encode(self._encoding))

    async def read_line(self, prompt='', prefill=None):
        if self._closed:
            raise ChannelClosed()

        try:
            self._writer.write(self._default_prompt(prompt, prefill).encode(self._encoding))
            await self._writer.drain()
            data = await self._read_data()
        except LineTooLong:
            logging.info('Line from %s exceeds %s bytes, discarded', self.peer, self.limit)
            errorlog(self, f'Input line too long, the limit is {self.limit} bytes.')
            return ''
        except (ConnectionError, asyncio.IncompleteReadError) as ex:
            logging.info('Connection lost with %s: %s', self.peer, ex)
            self.close()
            raise ChannelClosed() from ex

        if not data:
            logging.info('Client %s disconnected', self.peer)
            self.close()
            raise ChannelClosed()

        line = data.decode(self._encoding, errors='replace').rstrip('\r\n')
        return self._default_answer(line, prefill)

    async def _read_data(self):
        try:
            return await self._reader.readuntil(b'\n')
        except asyncio.IncompleteReadError as ex:
            # end of stream, possibly after an unterminated last line
            return ex.partial
        except asyncio.LimitOverrunError as ex:
            await self._discard_line(ex.consumed)
            raise LineTooLong() from ex

    async def _discard_line(self, consumed):
        """
        Drop the rest of an over-long line, up to and including its newline
        """

        while True:
            await self._reader.readexactly(consumed)
            try:
                await self._reader.readuntil(b'\n')
                return
            except asyncio.LimitOverrunError as ex:
                consumed = ex.consumed

    def close(self):
        if not self._closed:
            super().close()
            self._writer.close()

    async def wait_closed(self):
        try:
            await self._writer.wait_closed()
        except ConnectionError as ex:
            logging.debug('Connection reset while closing: %s', ex)
