"""Logical line tokenizer for architecture files.

A ``#`` anywhere on a line starts a comment that runs to the end of that line. A
``\\`` at the end of a line (after comment removal) continues the statement on
the next line. Every remaining logical line is split on whitespace.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from fabarch.exceptions import MalformedLine

COMMENT = "#"
CONTINUATION = "\\"


@dataclass(frozen=True)
class LogicalLine:
    """A statement of the architecture file.

    Attributes
    ----------
    number : int
        1-based number of the physical line the statement starts on.
    tokens : tuple[str, ...]
        Whitespace separated words of the statement. Never empty.
    """

    number: int
    tokens: tuple[str, ...]

    @property
    def keyword(self) -> str:
        return self.tokens[0]


def tokenize(lines: Iterable[str]) -> Iterator[LogicalLine]:
    """Join continued lines, strip comments and split into tokens.

    Parameters
    ----------
    lines : Iterable[str]
        Physical lines of the architecture description.

    Yields
    ------
    LogicalLine
        Every non-empty statement in file order.
    """
    pending: list[str] = []
    start = 0
    for number, raw in enumerate(lines, start=1):
        text = raw.split(COMMENT, 1)[0].rstrip()
        if not pending:
            start = number
        if text.endswith(CONTINUATION):
            pending.append(text[: -len(CONTINUATION)])
            continue
        pending.append(text)
        tokens = tuple(" ".join(pending).split())
        pending = []
        if tokens:
            yield LogicalLine(start, tokens)

    if pending:
        tokens = tuple(" ".join(pending).split())
        if tokens:
            yield LogicalLine(start, tokens)


def read_arch_lines(path: Path) -> list[LogicalLine]:
    """Read an architecture file into its logical lines.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Architecture file {path} does not exist")
    with path.open(encoding="utf-8") as f:
        return list(tokenize(f))


class TokenCursor:
    """Hands out the words of one logical line after its keyword."""

    def __init__(self, line: LogicalLine) -> None:
        self.line = line
        self._pos = 1

    @property
    def number(self) -> int:
        return self.line.number

    @property
    def keyword(self) -> str:
        return self.line.keyword

    def next(self) -> str | None:
        """Return the next word, or ``None`` at the end of the line."""
        if self._pos >= len(self.line.tokens):
            return None
        token = self.line.tokens[self._pos]
        self._pos += 1
        return token

    def rest(self) -> list[str]:
        """Consume and return every remaining word."""
        remaining = list(self.line.tokens[self._pos :])
        self._pos = len(self.line.tokens)
        return remaining

    def expect_end(self) -> None:
        """Raise if any word is left on the line.

        Raises
        ------
        MalformedLine
            If the line has trailing words.
        """
        extra = self.next()
        if extra is not None:
            raise MalformedLine(
                f"Extra characters at end of line: '{extra}'",
                keyword=self.keyword,
                line=self.number,
            )
