from __future__ import annotations

from dataclasses import dataclass

MEMORY_SIZE = 30000
DEFAULT_OUTPUT = "output.s"


@dataclass(frozen=True)
class CompileOptions:
    memory_size: int = MEMORY_SIZE
    memory_label: str = "memory"
    entry_point: str = "_start"
    annotate: bool = True  # trailing '# <symbol>' comments on emitted lines

    def __post_init__(self) -> None:
        if self.memory_size <= 0:
            raise ValueError(f"memory_size must be positive, got {self.memory_size}")
