import os
import socket
import threading

import pytest

from sonas.ctl import main
from sonas.server import socket_path


@pytest.fixture
def daemon_reply():
    started = []

    def start(reply):
        path = socket_path()
        if not path.startswith("\0") and os.path.exists(path):
            os.unlink(path)
        listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        listener.bind(path)
        listener.listen(1)
        received = []

        def run():
            conn, _ = listener.accept()
            with conn, conn.makefile("rb") as stream:
                received.append(stream.readline())
                conn.sendall(reply)

        thread = threading.Thread(target=run, daemon=True)
        thread.start()
        started.append((thread, listener, path))
        return received

    yield start

    for thread, listener, path in started:
        thread.join(timeout=5)
        listener.close()
        if not path.startswith("\0") and os.path.exists(path):
            os.unlink(path)


def test_main_sends_joined_arguments_and_prints_reply(daemon_reply, capsys):
    received = daemon_reply(b"ok")
    assert main(["album", "list-tracks", "id=5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ['"album list-tracks id=5"', '"ok"']
    assert received == [b"album list-tracks id=5\n"]


def test_main_with_no_arguments_sends_empty_line(daemon_reply, capsys):
    received = daemon_reply(b"empty")
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ['""', '"empty"']
    assert received == [b"\n"]