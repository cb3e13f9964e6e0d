from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


def _line_and_column(source: bytes, position: int) -> Tuple[int, int]:
    # column counts decoded characters so the caret lines up with the text
    before = source[:position]
    line = before.count(b'\n') + 1
    line_start = before.rfind(b'\n') + 1
    column = len(source[line_start:position].decode('utf-8', errors='replace')) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


@dataclass
class BFCError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceUnavailable(BFCError):
    path: str


@dataclass
class SinkUnavailable(BFCError):
    path: str


@dataclass
class ResourceExhaustion(BFCError):
    pass


@dataclass
class ToolchainError(BFCError):
    tool: str
    stderr: str = ''


@dataclass
class BracketError(BFCError):
    position: int
    line: int = 0
    column: int = 0
    context: str = ''

    def __str__(self) -> str:
        return f"Error at position {self.position}: {self.message}"


@dataclass
class UnmatchedOpen(BracketError):
    pass


@dataclass
class UnmatchedClose(BracketError):
    pass


def make_bracket_error(kind: type, *, source: bytes, position: int) -> BracketError:
    """Build an UnmatchedOpen/UnmatchedClose with line info and a source snippet."""
    symbol = '[' if kind is UnmatchedOpen else ']'
    line, column = _line_and_column(source, position)
    lines = source.decode('utf-8', errors='replace').split('\n')
    ctx = _build_context(lines, line, column)
    return kind(
        message=f"Unmatched '{symbol}'",
        position=position,
        line=line,
        column=column,
        context=ctx,
    )
