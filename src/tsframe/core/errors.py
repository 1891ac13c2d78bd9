"""Core error types with rich context.

Every error raised by tsframe derives from ``TSFrameError`` and also from
the builtin exception callers would naturally catch (``ValueError`` or
``TypeError``).
"""

# ruff: noqa: N818

from __future__ import annotations

from typing import Any


class TSFrameError(Exception):
    """Base exception with rich context.

    Attributes:
        error_code: Unique error code string for programmatic handling
        message: Human-readable error message
        context: Additional context data for debugging
        fix_hint: Actionable hint for resolving the error
    """

    error_code: str = "E_UNKNOWN"
    fix_hint: str = ""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        fix_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        if fix_hint is not None:
            self.fix_hint = fix_hint

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.context:
            parts.append(f"(context: {self.context})")
        if self.fix_hint:
            parts.append(f"[hint: {self.fix_hint}]")
        return " ".join(parts)

    def to_agent_dict(self) -> dict[str, Any]:
        """Return a structured dict with error_code, message, fix_hint and context."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "fix_hint": self.fix_hint,
            "context": self.context,
        }


class EDomain(TSFrameError, ValueError):
    """Numeric argument outside its domain (stride or period length <= 0)."""

    error_code = "E_DOMAIN"
    fix_hint = "Strides and period lengths must be positive integers"


class EArgument(TSFrameError, ValueError):
    """Unrecognized argument value, e.g. an unknown unit name."""

    error_code = "E_ARGUMENT"
    fix_hint = (
        "Use one of: years, quarters, months, weeks, days, hours, minutes, "
        "seconds, milliseconds, microseconds, nanoseconds"
    )


class ETypeMismatch(TSFrameError, TypeError):
    """Selector cannot be applied to the kind of values in the index."""

    error_code = "E_TYPE_MISMATCH"
    fix_hint = "Calendar and duration units need a date, datetime or time-of-day index"


class EReservedName(TSFrameError, ValueError):
    """Attempt to use the reserved index column name for a data column."""

    error_code = "E_RESERVED_NAME"
    fix_hint = "Pick a column name other than the index column name"


class EContract(TSFrameError, ValueError):
    """Input data violates the frame construction contract."""

    error_code = "E_CONTRACT"
    fix_hint = "The index must have exactly one entry per data row"


class EUnsortedIndex(EContract):
    """Index is not sorted in non-decreasing order."""

    error_code = "E_INDEX_UNSORTED"
    fix_hint = "Sort the data by its index before building the frame"


ERROR_REGISTRY: dict[str, type[TSFrameError]] = {
    "E_DOMAIN": EDomain,
    "E_ARGUMENT": EArgument,
    "E_TYPE_MISMATCH": ETypeMismatch,
    "E_RESERVED_NAME": EReservedName,
    "E_CONTRACT": EContract,
    "E_INDEX_UNSORTED": EUnsortedIndex,
}


def get_error_class(error_code: str) -> type[TSFrameError]:
    """Get error class by code."""
    return ERROR_REGISTRY.get(error_code, TSFrameError)
