from __future__ import annotations

from itertools import groupby
from operator import attrgetter
from typing import Iterable, List

from .errors import BracketError, ResourceExhaustion, UnmatchedClose, UnmatchedOpen, make_bracket_error
from .ir import CellDelta, Input, Instruction, LoopClose, LoopOpen, Output, PointerDelta
from .lexer import ProgramText, Symbol, as_bytes, filter_symbols
from .state import LoopState

_DIRECTION = {'+': 1, '-': -1, '>': 1, '<': -1}


def parse(symbols: Iterable[Symbol]) -> List[Instruction]:
    """
    Validate brackets and merge runs in one forward scan over ``symbols``;
    only the current run is looked ahead into.

    Runs of one mutating symbol ('+', '-', '>', '<') become a single
    CellDelta/PointerDelta whose magnitude is the run length. '.' and ','
    are emitted one per symbol. Each '[' gets the next loop id and each ']'
    closes the innermost open id.

    Raises:
        UnmatchedClose: at the first ']' with no open loop.
        UnmatchedOpen: after the scan if any '[' is left open.
    """
    loops = LoopState()
    out: List[Instruction] = []

    for ch, group in groupby(symbols, key=attrgetter('char')):
        if ch in _DIRECTION:
            count = sum(1 for _ in group) * _DIRECTION[ch]
            out.append(CellDelta(count) if ch in '+-' else PointerDelta(count))
            continue

        for _ch, pos in group:
            if ch == '.':
                out.append(Output())
            elif ch == ',':
                out.append(Input())
            elif ch == '[':
                out.append(LoopOpen(loops.open(pos)))
            elif ch == ']':
                label = loops.close()
                if label is None:
                    raise UnmatchedClose(message="Unmatched ']'", position=pos)
                out.append(LoopClose(label))

    if loops.depth:
        raise UnmatchedOpen(message="Unmatched '['", position=loops.innermost_position())
    return out


def parse_program(program: ProgramText) -> List[Instruction]:
    """Filter and parse raw program text; bracket errors carry line/column context."""
    data = as_bytes(program)
    try:
        return parse(filter_symbols(data))
    except BracketError as e:
        raise make_bracket_error(type(e), source=data, position=e.position) from e
    except MemoryError as e:
        raise ResourceExhaustion(message="Memory allocation failed") from e
