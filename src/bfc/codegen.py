from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .ir import CellDelta, Input, Instruction, LoopClose, LoopOpen, Output, PointerDelta
from .options import CompileOptions

# The data pointer lives in r12 for the whole program.
DATA_POINTER = "%r12"
CELL = f"({DATA_POINTER})"

SYS_READ = 0
SYS_WRITE = 1
SYS_EXIT = 60


class CodeGenerator:
    """
    Emits x86-64 GNU assembler (AT&T syntax) for a validated instruction list.

    Output layout:
    - .data: one zero-initialized block of ``memory_size`` bytes
    - .text: the entry point, which loads the block address into r12
    - one block per instruction, in order
    - sys_exit(0)

    Cell arithmetic is byte-sized so it wraps modulo 256. Pointer moves
    are not bounds checked.
    """

    def __init__(self, options: Optional[CompileOptions] = None):
        self.options = options or CompileOptions()

    def generate(self, instructions: Iterable[Instruction]) -> Iterator[str]:
        yield from self.prologue()
        for ins in instructions:
            yield from self.emit(ins)
        yield from self.epilogue()

    # ===== Sections =====

    def prologue(self) -> List[str]:
        opts = self.options
        return [
            "    .section .data",
            f"{opts.memory_label}:",
            f"    .zero {opts.memory_size}",
            "",
            "    .section .text",
            f"    .globl {opts.entry_point}",
            "",
            f"{opts.entry_point}:",
            *self._comment_line("Initialize data pointer in r12"),
            f"    leaq {opts.memory_label}(%rip), {DATA_POINTER}",
            "",
        ]

    def epilogue(self) -> List[str]:
        return [
            "",
            *self._comment_line("Exit program"),
            self._line(f"movq ${SYS_EXIT}, %rax", "sys_exit"),
            self._line("xorq %rdi, %rdi", "exit code 0"),
            "    syscall",
        ]

    # ===== Instructions =====

    def emit(self, ins: Instruction) -> List[str]:
        if isinstance(ins, CellDelta):
            return [self._delta(ins.count, "b", CELL, "+-", wrap=True)]
        if isinstance(ins, PointerDelta):
            return [self._delta(ins.count, "q", DATA_POINTER, "><", wrap=False)]
        if isinstance(ins, Output):
            return self._syscall(SYS_WRITE, 1, "Output character (.)", "sys_write", "stdout")
        if isinstance(ins, Input):
            return self._syscall(SYS_READ, 0, "Input character (,)", "sys_read", "stdin")
        if isinstance(ins, LoopOpen):
            return [
                self._line(f"{self._start_label(ins.id)}:", "[", indent=""),
                f"    cmpb $0, {CELL}",
                f"    je {self._end_label(ins.id)}",
                "",
            ]
        if isinstance(ins, LoopClose):
            return [
                f"    cmpb $0, {CELL}",
                self._line(f"jne {self._start_label(ins.id)}", "]"),
                f"{self._end_label(ins.id)}:",
                "",
            ]
        raise TypeError(f"Unknown instruction: {ins!r}")

    def _delta(self, count: int, suffix: str, operand: str, symbols: str, *, wrap: bool) -> str:
        symbol = symbols[0] if count > 0 else symbols[1]
        magnitude = abs(count)
        if magnitude == 1:
            op = "inc" if count > 0 else "dec"
            return self._line(f"{op}{suffix} {operand}", symbol)
        op = "add" if count > 0 else "sub"
        imm = magnitude % 256 if wrap else magnitude
        return self._line(f"{op}{suffix} ${imm}, {operand}", f"{symbol} x{magnitude}")

    def _syscall(self, number: int, fd: int, title: str, name: str, stream: str) -> List[str]:
        return [
            *self._comment_line(title),
            self._line(f"movq ${number}, %rax", name),
            self._line(f"movq ${fd}, %rdi", stream),
            self._line(f"movq {DATA_POINTER}, %rsi", "buffer"),
            self._line("movq $1, %rdx", "length"),
            "    syscall",
            "",
        ]

    # ===== Helpers =====

    @staticmethod
    def _start_label(label: int) -> str:
        return f"loop_start_{label}"

    @staticmethod
    def _end_label(label: int) -> str:
        return f"loop_end_{label}"

    def _line(self, text: str, note: str, *, indent: str = "    ") -> str:
        if not self.options.annotate:
            return f"{indent}{text}"
        return f"{indent}{text:<20} # {note}"

    def _comment_line(self, text: str) -> List[str]:
        return [f"    # {text}"] if self.options.annotate else []


def generate(instructions: Iterable[Instruction], options: Optional[CompileOptions] = None) -> Iterator[str]:
    return CodeGenerator(options).generate(instructions)
