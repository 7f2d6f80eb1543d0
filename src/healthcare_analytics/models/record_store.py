"""
Versioned in-memory record store passed through the cleaning steps.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable
import pandas as pd

log = logging.getLogger(__name__)

Step = Callable[[pd.DataFrame], pd.DataFrame]

@dataclass(frozen=True, eq=False)
class RecordStore:
    frame: pd.DataFrame
    version: int = 0
    history: tuple[str, ...] = field(default_factory=tuple)

    def apply(self, name: str, step: Step) -> RecordStore:
        """Run a step on a copy of the frame and return the next version."""
        out = step(self.frame.copy())
        if len(out) != len(self.frame):
            raise ValueError(f"Step {name!r} changed row count {len(self.frame)} -> {len(out)}")
        log.debug("Applied %s (v%d -> v%d)", name, self.version, self.version + 1)
        return RecordStore(out, self.version + 1, self.history + (name,))

    def __len__(self) -> int:
        return len(self.frame)
