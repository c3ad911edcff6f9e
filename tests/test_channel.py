import io
import asyncio
import unittest
from unittest.mock import AsyncMock, Mock

from quiz_trainer.channel import StreamChannel, TerminalChannel, readline_prompt
from quiz_trainer.errors import ChannelClosed
from quiz_trainer.out import biglog, colorize, errorlog, log

class TestTerminalChannel(unittest.IsolatedAsyncioTestCase):

    def channel(self, text):
        self._stdout = io.StringIO()
        return TerminalChannel(color=False, stdin=io.StringIO(text), stdout=self._stdout)

    async def test_read_and_write(self):
        channel = self.channel('list\nshow 1\r\n')
        channel.write_line('hello')

        self.assertEqual(await channel.read_line('quiz > '), 'list')
        self.assertEqual(await channel.read_line('quiz > '), 'show 1')
        self.assertEqual(self._stdout.getvalue(), 'hello\nquiz > quiz > ')

    async def test_end_of_input_closes(self):
        channel = self.channel('')
        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')
        self.assertTrue(channel.closed)

        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')

    async def test_prefill_without_tty(self):
        channel = self.channel('\nnew\n')
        self.assertEqual(await channel.read_line('Q: ', prefill='old'), 'old')
        self.assertEqual(await channel.read_line('Q: ', prefill='old'), 'new')
        self.assertEqual(self._stdout.getvalue(), 'Q: [old] Q: [old] ')

    async def test_prefill_only_on_real_terminal(self):
        class TtyInput(io.StringIO):
            def isatty(self):
                return True

        self._stdout = io.StringIO()
        channel = TerminalChannel(color=False, stdin=TtyInput('\n'), stdout=self._stdout)
        self.assertEqual(await channel.read_line('Q: ', prefill='old'), 'old')
        self.assertEqual(self._stdout.getvalue(), 'Q: [old] ')

    def test_readline_prompt_marks_escape_codes(self):
        self.assertEqual(readline_prompt('quiz > '), 'quiz > ')
        self.assertEqual(
                readline_prompt(colorize('Q: ', 'red')),
                '\001\x1b[1m\002\001\x1b[31m\002Q: \001\x1b[0m\002')

    def test_closed_channel_writes_nothing(self):
        channel = self.channel('')
        channel.close()
        channel.write_line('hello')
        self.assertEqual(self._stdout.getvalue(), '')


class TestStreamChannel(unittest.IsolatedAsyncioTestCase):

    def channel(self, data):
        reader = asyncio.StreamReader()
        reader.feed_data(data)
        reader.feed_eof()
        self._writer = Mock()
        self._writer.drain = AsyncMock()
        self._writer.get_extra_info.return_value = ('127.0.0.1', 5000)
        return StreamChannel(reader, self._writer, color=False)

    def written(self):
        return b''.join(c.args[0] for c in self._writer.write.call_args_list)

    async def test_read_line(self):
        channel = self.channel('show 1\r\nañadir\n'.encode('utf-8'))
        self.assertEqual(await channel.read_line('quiz > '), 'show 1')
        self.assertEqual(await channel.read_line('quiz > '), 'añadir')
        self.assertEqual(self.written(), b'quiz > quiz > ')
        self._writer.drain.assert_awaited()

    async def test_unterminated_last_line(self):
        channel = self.channel(b'list')
        self.assertEqual(await channel.read_line('quiz > '), 'list')
        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')

    async def test_line_too_long(self):
        channel = self.channel(b'x' * 70000 + b'\nlist\n')
        self.assertEqual(await channel.read_line('quiz > '), '')
        self.assertEqual(await channel.read_line('quiz > '), 'list')
        self.assertFalse(channel.closed)
        self.assertIn(b'Error: Input line too long, the limit is 65536 bytes.\n', self.written())

    async def test_line_too_long_at_end_of_stream(self):
        channel = self.channel(b'x' * 70000)
        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')
        self.assertTrue(channel.closed)

    async def test_prefill(self):
        channel = self.channel(b'\n')
        self.assertEqual(await channel.read_line('Q: ', prefill='old'), 'old')
        self.assertEqual(self.written(), b'Q: [old] ')

    async def test_disconnect(self):
        channel = self.channel(b'')
        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')
        self.assertTrue(channel.closed)
        self._writer.close.assert_called_once()

    async def test_connection_reset(self):
        channel = self.channel(b'')
        self._writer.drain.side_effect = ConnectionResetError()
        with self.assertRaises(ChannelClosed):
            await channel.read_line('quiz > ')
        self.assertTrue(channel.closed)

    async def test_close_once(self):
        channel = self.channel(b'')
        channel.write_line('bye')
        channel.close()
        channel.close()
        channel.write_line('ignored')
        self._writer.close.assert_called_once()
        self.assertEqual(self.written(), b'bye\n')


class TestOut(unittest.TestCase):

    def setUp(self):
        self._channel = Mock()
        self._channel.color = True

    def test_colorize(self):
        self.assertEqual(colorize('plain'), 'plain')
        self.assertEqual(colorize(3, 'red', enabled=False), '3')
        colored = colorize('id', 'magenta')
        self.assertIn('id', colored)
        self.assertTrue(colored.startswith('\x1b['))
        self.assertTrue(colored.endswith('\x1b[0m'))

    def test_log_and_errorlog(self):
        log(self._channel, 'hello')
        self._channel.write_line.assert_called_with('hello')
        self._channel.color = False
        errorlog(self._channel, 'bad')
        self._channel.write_line.assert_called_with('Error: bad')

    def test_biglog(self):
        self._channel.color = False
        biglog(self._channel, 'Correct')
        lines = [c.args[0] for c in self._channel.write_line.call_args_list]
        self.assertEqual(lines, ['===========', '  CORRECT  ', '==========='])


if __name__ == '__main__':
    unittest.main()
