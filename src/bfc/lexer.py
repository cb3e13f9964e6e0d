from typing import Iterator, NamedTuple, Union

from .ir import BF_OPS

_OPS = frozenset(BF_OPS.encode('ascii'))

ProgramText = Union[bytes, bytearray, str]


class Symbol(NamedTuple):
    char: str
    position: int  # byte offset in the unfiltered program


def as_bytes(program: ProgramText) -> bytes:
    if isinstance(program, str):
        return program.encode('utf-8')
    return bytes(program)


def filter_symbols(program: ProgramText) -> Iterator[Symbol]:
    """Yield the Brainfuck symbols of ``program`` in order; everything else is comment."""
    for pos, byte in enumerate(as_bytes(program)):
        if byte in _OPS:
            yield Symbol(chr(byte), pos)


def strip_comments(program: ProgramText) -> bytes:
    return ''.join(sym.char for sym in filter_symbols(program)).encode('ascii')
