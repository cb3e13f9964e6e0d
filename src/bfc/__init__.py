from .api import CompileResult, compile_file, compile_string
from .codegen import CodeGenerator, generate
from .errors import (
    BFCError,
    BracketError,
    ResourceExhaustion,
    SinkUnavailable,
    SourceUnavailable,
    ToolchainError,
    UnmatchedClose,
    UnmatchedOpen,
)
from .ir import CellDelta, Input, LoopClose, LoopOpen, Output, PointerDelta
from .lexer import Symbol, filter_symbols, strip_comments
from .options import CompileOptions
from .parser import parse, parse_program
from .sinks import BufferSink, FileSink, StreamSink, read_source

__all__ = [
    'CompileOptions',
    'CompileResult',
    'compile_string',
    'compile_file',
    'CodeGenerator',
    'generate',
    'parse',
    'parse_program',
    'filter_symbols',
    'strip_comments',
    'Symbol',
    'CellDelta',
    'PointerDelta',
    'Output',
    'Input',
    'LoopOpen',
    'LoopClose',
    'BufferSink',
    'StreamSink',
    'FileSink',
    'read_source',
    'BFCError',
    'BracketError',
    'UnmatchedOpen',
    'UnmatchedClose',
    'SourceUnavailable',
    'SinkUnavailable',
    'ResourceExhaustion',
    'ToolchainError',
]
