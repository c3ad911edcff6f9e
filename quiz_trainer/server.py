"""
Module for QuizServer class
"""

import asyncio
import logging

from .channel import STREAM_LIMIT, StreamChannel

class QuizServer:
    """
    TCP server running one independent quiz session per client

    Arguments:
        session_factory (callable): session_factory(channel) -> QuizSession
        host (str): Address to bind
        port (int): Port to bind, 0 picks a free one
        color (bool): Send ANSI colour codes to clients
    """

    def __init__(self, session_factory, host, port, color=True):
        self._session_factory = session_factory
        self._host = host
        self._port = port
        self._color = color
        self._server = None

    @property
    def addresses(self):
        if self._server is None:
            return []
        return [sock.getsockname() for sock in self._server.sockets]

    async def start(self):
        self._server = await asyncio.start_server(
                self._handle_client, self._host, self._port, limit=STREAM_LIMIT)
        logging.info('Quiz server listening on %s', self.addresses)
        return self._server

    async def serve_forever(self):
        if self._server is None:
            await self.start()

        async with self._server:
            await self._server.serve_forever()

    async def stop(self):
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()
            logging.info('Quiz server stopped')

    async def _handle_client(self, reader, writer):
        channel = StreamChannel(reader, writer, color=self._color, limit=STREAM_LIMIT)
        peer = channel.peer
        logging.info('Client connected: %s', peer)

        try:
            await self._session_factory(channel).run()
        finally:
            channel.close()
            await channel.wait_closed()
            logging.info('Client session closed: %s', peer)
