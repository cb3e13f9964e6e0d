from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import compile_file
from .errors import BFCError, BracketError
from .options import DEFAULT_OUTPUT, MEMORY_SIZE, CompileOptions
from .toolchain import assemble, build_hint


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfc",
        description="Compiles Brainfuck code to x86-64 assembly (AT&T syntax).",
    )
    parser.add_argument("input", help="Brainfuck source file")
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT, help=f"assembly output (default {DEFAULT_OUTPUT})")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    parser.add_argument("--no-comments", action="store_true", help="Do not annotate emitted lines")
    parser.add_argument("--memory-size", type=int, default=MEMORY_SIZE, help=f"Tape size in bytes (default {MEMORY_SIZE})")
    parser.add_argument("--build", nargs="?", const="program", default=None, metavar="EXE",
                        help="Assemble and link with as/ld (default executable: program)")
    parser.add_argument("--show-context", action="store_true", help="Show the source around bracket errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.memory_size <= 0:
        parser.error("--memory-size must be positive")

    def say(msg: str = "") -> None:
        if not args.quiet:
            print(msg)

    say("Brainfuck Compiler")
    say(f"Input:  {args.input}")
    say(f"Output: {args.output}")

    options = CompileOptions(memory_size=args.memory_size, annotate=not args.no_comments)
    try:
        compile_file(args.input, args.output, options=options)
        say("Compilation successful!")
        if args.build:
            exe = assemble(args.output, args.build)
            say(f"Built executable: {exe}")
        else:
            say()
            for line in build_hint(args.output):
                say(line)
    except BFCError as e:
        print(str(e), file=sys.stderr)
        if args.show_context and isinstance(e, BracketError) and e.context:
            print(e.context, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
