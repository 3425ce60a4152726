"""
Token records and the fixed token sequence.

A `Token` is a pair of unsigned 8-bit values. `TOKENS` is the ordered,
immutable sequence the report is built from.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

U8_MAX = 0xFF


class TokenRangeError(ValueError):
    """Raised when a token field does not fit in an unsigned byte."""

    pass


def _check_u8(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TokenRangeError(f"Token {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U8_MAX:
        raise TokenRangeError(f"Token {name} {value} out of range [0, {U8_MAX}]")


@dataclass(frozen=True, slots=True)
class Token:
    length: int
    data: int

    def __post_init__(self) -> None:
        _check_u8("length", self.length)
        _check_u8("data", self.data)


TOKENS: tuple[Token, ...] = (
    Token(length=5, data=10),
    Token(length=3, data=20),
    Token(length=8, data=30),
)


def enumerate_tokens(tokens: Iterable[Token] = TOKENS) -> Iterator[tuple[int, Token]]:
    """
    Lazily pair each token with its zero-based position.

    Args:
        tokens (Iterable[Token]): Tokens in report order. Defaults to `TOKENS`.

    Returns:
        Iterator[tuple[int, Token]]: Single-pass `(index, token)` pairs.
    """

    return enumerate(tokens)
