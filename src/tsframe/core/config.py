"""Frame configuration.

A single frozen configuration object controls the reserved index column,
default column naming, display defaults and how strictly construction
checks index ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DEFAULT_DESCRIBE_STATS: tuple[str, ...] = (
    "mean",
    "min",
    "median",
    "max",
    "nmissing",
    "eltype",
)


@dataclass(frozen=True)
class FrameConfig:
    """Configuration for TSFrame construction and display.

    Args:
        index_col: Reserved name of the index column
        column_prefix: Prefix for generated data column names (x1, x2, ...)
        head_rows: Default row count for head() and tail()
        on_unsorted: What to do with an unsorted index - raise or log a warning
        describe_stats: Statistics computed by describe() when none are requested
    """

    index_col: str = "Index"
    column_prefix: str = "x"
    head_rows: int = 10
    on_unsorted: Literal["error", "warn"] = "error"
    describe_stats: tuple[str, ...] = DEFAULT_DESCRIBE_STATS

    def __post_init__(self) -> None:
        if not self.index_col:
            raise ValueError("index_col must be a non-empty string")
        if self.head_rows <= 0:
            raise ValueError(f"head_rows must be positive, got {self.head_rows}")
        if self.on_unsorted not in ("error", "warn"):
            raise ValueError(
                f"on_unsorted must be 'error' or 'warn', got {self.on_unsorted!r}"
            )
        if not self.describe_stats:
            raise ValueError("describe_stats must name at least one statistic")

    @classmethod
    def strict(cls) -> FrameConfig:
        """Strict preset - unsorted indexes are rejected."""
        return cls(on_unsorted="error")

    @classmethod
    def lenient(cls) -> FrameConfig:
        """Lenient preset - unsorted indexes are accepted with a warning.

        Endpoint results over an unsorted index are not meaningful; this preset
        exists for inspecting raw data before sorting it.
        """
        return cls(on_unsorted="warn")
