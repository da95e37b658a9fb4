"""Command-line client that sends its arguments to the daemon."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence

from .server import send_line


def _quoted(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Join the arguments into one command, send it and print the reply."""
    command = " ".join(sys.argv[1:] if argv is None else argv)
    print(_quoted(command))
    try:
        reply = send_line(command)
    except (OSError, UnicodeDecodeError) as error:
        print(repr(error))
    else:
        print(_quoted(reply))
    return 0