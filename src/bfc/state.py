from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class LoopState:
    """Loop bookkeeping for a single scan: open loops and the next label id."""

    stack: List[Tuple[int, int]] = field(default_factory=list)  # (id, position of '[')
    next_label: int = 0

    def open(self, position: int) -> int:
        label = self.next_label
        self.next_label += 1
        self.stack.append((label, position))
        return label

    def close(self) -> Optional[int]:
        if not self.stack:
            return None
        label, _pos = self.stack.pop()
        return label

    @property
    def depth(self) -> int:
        return len(self.stack)

    def innermost_position(self) -> int:
        return self.stack[-1][1]
