"""
The token report.

Renders one line per token, `Token <index>: length = <length>, data = <data>`,
and writes the lines to a text stream (stdout by default).
"""

import sys
from collections.abc import Iterable
from typing import TextIO

from tokenprint.lib.logger import Logger
from tokenprint.lib.token import TOKENS, Token, enumerate_tokens


class OutputWriteError(OSError):
    """Raised when the report cannot be written to its output stream."""

    pass


def format_line(index: int, token: Token) -> str:
    return f"Token {index}: length = {token.length}, data = {token.data}"


def write_report(stream: TextIO | None = None, tokens: Iterable[Token] = TOKENS) -> int:
    """
    Write one report line per token, in order, and flush the stream.

    Args:
        stream (TextIO, optional): Destination stream. Defaults to `sys.stdout`.
        tokens (Iterable[Token]): Tokens to report. Defaults to `TOKENS`.

    Returns:
        int: Number of lines written.

    Raises:
        OutputWriteError: If writing or flushing the stream fails.
    """

    out = stream if stream is not None else sys.stdout
    count = 0

    try:
        for index, token in enumerate_tokens(tokens):
            out.write(format_line(index, token) + "\n")
            count += 1
        out.flush()
    except OSError as e:
        raise OutputWriteError(f"Failed to write report: {e}") from e

    Logger.debug(f"Wrote {count} report line(s).")
    return count
