"""The control daemon: answers one parsed command per connection."""

from __future__ import annotations

import asyncio
import contextlib
import sys
from collections.abc import Sequence

from .commands import parse_command
from .errors import ParseCommandError
from .server import socket_path


def respond(line: str) -> str:
    """Return the reply for one received command line."""
    try:
        return repr(parse_command(line))
    except ParseCommandError as error:
        return repr(error)


async def handle_connection(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    """Read one line from the client, write the reply and close the connection."""
    try:
        raw = await reader.readline()
        writer.write(respond(raw.decode("utf-8")).encode("utf-8"))
        await writer.drain()
    finally:
        writer.close()
        with contextlib.suppress(OSError):
            await writer.wait_closed()


async def _handle_client(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
    try:
        await handle_connection(reader, writer)
    except (OSError, UnicodeDecodeError) as error:
        print(f"Error while handling connection: {error}", file=sys.stderr)


async def serve(path: str | None = None) -> None:
    """Listen on the daemon socket and answer clients until cancelled."""
    address = socket_path() if path is None else path
    server = await asyncio.start_unix_server(_handle_client, path=address)
    async with server:
        await server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the daemon. Command-line arguments are accepted and ignored."""
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass
    return 0