from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from .errors import ToolchainError

PathLike = Union[str, Path]


def _run(cmd: List[str], *, timeout_s: float) -> None:
    tool = cmd[0]
    if shutil.which(tool) is None:
        raise ToolchainError(message=f"Could not find '{tool}' on PATH", tool=tool)
    try:
        p = subprocess.run(cmd, text=True, capture_output=True, timeout=timeout_s)
    except subprocess.TimeoutExpired as e:
        raise ToolchainError(message=f"'{tool}' timed out after {timeout_s:g}s", tool=tool) from e
    if p.returncode != 0:
        raise ToolchainError(
            message=f"'{tool}' failed with exit code {p.returncode}: {p.stderr.strip()}",
            tool=tool,
            stderr=p.stderr,
        )


def assemble(asm_path: PathLike, exe_path: PathLike = "program", *, obj_path: Optional[PathLike] = None,
             timeout_s: float = 60.0) -> Path:
    """Assemble with GNU as and link with ld; returns the executable path."""
    asm = Path(asm_path)
    exe = Path(exe_path)
    obj = Path(obj_path) if obj_path is not None else exe.with_suffix(".o")
    _run(["as", str(asm), "-o", str(obj)], timeout_s=timeout_s)
    _run(["ld", str(obj), "-o", str(exe)], timeout_s=timeout_s)
    return exe


def build_hint(output_path: PathLike) -> List[str]:
    return [
        "To assemble and run:",
        f"  as {output_path} -o output.o",
        "  ld output.o -o program",
        "  ./program",
    ]
