"""Client side of the daemon's local control socket."""

from __future__ import annotations

import os
import socket
import sys
import tempfile

NAME = "sonasd.sock"


def socket_path() -> str:
    """Return the address of the daemon's socket.

    On Linux this is a name in the abstract socket namespace; elsewhere it is
    a file in the temporary directory.
    """
    if sys.platform.startswith("linux"):
        return "\0" + NAME
    return os.path.join(tempfile.gettempdir(), NAME)


def send_bytes(data: bytes, path: str | None = None) -> str:
    """Send ``data`` to the daemon and return the first line of its reply."""
    address = socket_path() if path is None else path
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as connection:
        connection.connect(address)
        connection.sendall(data)
        with connection.makefile("rb") as stream:
            line = stream.readline()
    return line.decode("utf-8")


def send_line(line: str, path: str | None = None) -> str:
    """Send ``line`` followed by a newline and return the daemon's reply."""
    return send_bytes(f"{line}\n".encode("utf-8"), path)