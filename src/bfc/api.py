from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .codegen import generate
from .ir import Instruction, LoopOpen
from .lexer import ProgramText
from .options import DEFAULT_OUTPUT, CompileOptions
from .parser import parse_program
from .sinks import BufferSink, FileSink, read_source


@dataclass(frozen=True)
class CompileResult:
    asm: str
    instructions: List[Instruction]
    loop_count: int


def _result(instructions: List[Instruction], asm: str) -> CompileResult:
    loops = sum(1 for ins in instructions if isinstance(ins, LoopOpen))
    return CompileResult(asm=asm, instructions=instructions, loop_count=loops)


def compile_string(source: ProgramText, *, options: Optional[CompileOptions] = None) -> CompileResult:
    instructions = parse_program(source)
    sink = BufferSink()
    sink.write_lines(generate(instructions, options))
    return _result(instructions, sink.getvalue())


def compile_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path] = DEFAULT_OUTPUT,
    *,
    options: Optional[CompileOptions] = None,
) -> CompileResult:
    # Validate fully before touching the output file.
    instructions = parse_program(read_source(input_path))
    lines = list(generate(instructions, options))
    with FileSink(output_path) as sink:
        sink.write_lines(lines)
    return _result(instructions, "".join(f"{line}\n" for line in lines))
