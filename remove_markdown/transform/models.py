"""Error types for the rewrite pipeline."""

from __future__ import annotations


class PatternError(Exception):
    """Wraps a regex compile or matching fault with the failing stage."""

    def __init__(self, stage_index: int, stage_name: str, cause: Exception) -> None:
        self.stage_index = stage_index
        self.stage_name = stage_name
        super().__init__(f"stage {stage_index} ({stage_name}) failed: {cause}")
        self.__cause__ = cause
