"""Whitespace token scanner for contest input."""

from __future__ import annotations

import io
import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple


class ScanError(ValueError):
    """Raised when the input cannot satisfy a read."""


class EndOfInput(ScanError):
    """Raised when the stream is exhausted before a token is found."""

    def __init__(self) -> None:
        super().__init__("unexpected end of input")


class TokenParseError(ScanError):
    """Raised when a token cannot be converted to the requested type."""

    def __init__(self, token: str, cast: Callable[[str], Any], reason: str) -> None:
        self.token = token
        self.cast = cast
        name = getattr(cast, "__name__", repr(cast))
        super().__init__(f"cannot parse {token!r} as {name}: {reason}")


class InputDecodeError(ScanError):
    """Raised when the stream holds bytes that are not valid text."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"input is not valid text: {reason}")


class Scanner:
    """Read whitespace-delimited tokens one line at a time.

    Lines are pulled from the stream only when the current one is used up,
    so interactive judges can be answered before their next reply arrives.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._tokens: List[str] = []
        self._pos = 0

    @classmethod
    def from_string(cls, text: str) -> "Scanner":
        return cls(io.StringIO(text))

    def scan(self, cast: Callable[[str], Any] = str) -> Any:
        """Return the next token converted by `cast`."""

        while self._pos >= len(self._tokens):
            self._fill()
        token = self._tokens[self._pos]
        self._pos += 1
        try:
            return cast(token)
        except (TypeError, ValueError) as exc:
            raise TokenParseError(token, cast, str(exc)) from exc

    def collect(self, count: int, cast: Callable[[str], Any] = str) -> List[Any]:
        return [self.scan(cast) for _ in range(count)]

    def scan_tuple(self, *casts: Callable[[str], Any]) -> Tuple[Any, ...]:
        return tuple(self.scan(cast) for cast in casts)

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line if it is used up."""

        if self._pos < len(self._tokens):
            rest = " ".join(self._tokens[self._pos :])
            self._tokens = []
            self._pos = 0
            return rest
        return self._readline().strip()

    def _fill(self) -> None:
        line = self._readline()
        self._tokens = line.split()
        self._pos = 0

    def _readline(self) -> str:
        try:
            line = self.stream.readline()
        except UnicodeDecodeError as exc:
            raise InputDecodeError(str(exc)) from exc
        if not line:
            raise EndOfInput()
        return line


__all__ = [
    "EndOfInput",
    "InputDecodeError",
    "ScanError",
    "Scanner",
    "TokenParseError",
]
