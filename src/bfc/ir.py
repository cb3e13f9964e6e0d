from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ---------------- Instructions ----------------
@dataclass(frozen=True)
class CellDelta:
    count: int  # net +/- on current cell

@dataclass(frozen=True)
class PointerDelta:
    count: int  # net >/<

@dataclass(frozen=True)
class Output:
    pass

@dataclass(frozen=True)
class Input:
    pass

@dataclass(frozen=True)
class LoopOpen:
    id: int

@dataclass(frozen=True)
class LoopClose:
    id: int

Instruction = Union[CellDelta, PointerDelta, Output, Input, LoopOpen, LoopClose]

BF_OPS = "+-<>[],."


def to_source(instructions) -> str:
    """Render instructions back to canonical Brainfuck."""
    out = []
    for ins in instructions:
        if isinstance(ins, CellDelta):
            out.append(("+" * ins.count) if ins.count > 0 else ("-" * (-ins.count)))
        elif isinstance(ins, PointerDelta):
            out.append((">" * ins.count) if ins.count > 0 else ("<" * (-ins.count)))
        elif isinstance(ins, Output):
            out.append(".")
        elif isinstance(ins, Input):
            out.append(",")
        elif isinstance(ins, LoopOpen):
            out.append("[")
        elif isinstance(ins, LoopClose):
            out.append("]")
    return "".join(out)
