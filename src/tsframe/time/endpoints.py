"""Period end-point resolution.

``endpoints`` returns the 1-based positions of the last element of each
period bucket of an index, keeping every k-th bucket. The index comes
either from a raw sequence or from a table exposing one.

Examples:
    >>> import datetime as dt
    >>> from tsframe.time import Month, endpoints
    >>> dates = [dt.date(2024, 1, 30), dt.date(2024, 1, 31), dt.date(2024, 2, 1)]
    >>> endpoints(dates, Month(1))
    [2, 3]
    >>> endpoints([-3, -2, -1, 0, 1, 2, 3], lambda i: i**2, 2)
    [5, 7]
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

import pandas as pd

from tsframe.core.errors import EArgument, ETypeMismatch
from tsframe.time.calendar import calendar_endpoints
from tsframe.time.fixed import fixed_endpoints
from tsframe.time.kinds import as_index, infer_index_kind
from tsframe.time.stride import function_endpoints
from tsframe.time.units import Period, TimeUnit, UnitClass, classify

logger = logging.getLogger(__name__)

Selector = Period | str | TimeUnit | Callable[[pd.Index], Any]


@runtime_checkable
class IndexedTable(Protocol):
    """A table whose rows are labelled by an ordered index."""

    @property
    def index(self) -> pd.Index: ...

    @property
    def nrow(self) -> int: ...


def source_index(source: IndexedTable | pd.DataFrame | Iterable[Any]) -> tuple[pd.Index, str]:
    """Index of a table (or DataFrame row labels) or of a raw sequence."""
    if isinstance(source, (IndexedTable, pd.DataFrame)):
        return source.index, "table"
    return as_index(source), "sequence"


def endpoints(
    source: IndexedTable | Iterable[Any],
    on: Selector,
    k: int = 1,
) -> list[int]:
    """Compute period end positions of an index.

    Args:
        source: A sequence of index values, or a table exposing ``index``
        on: A typed period such as ``Month(2)``; a unit name such as
            ``"months"`` or ``TimeUnit.MONTHS``; or a classifier function,
            applied to the whole index or, failing that, to each element
        k: Keep every k-th bucket. Ignored for typed periods, whose
            multiplier plays this role

    Returns:
        Strictly increasing 1-based positions into ``source``

    Raises:
        EDomain: If ``k`` or the period multiplier is not positive
        EArgument: If a unit name is not recognized
        ETypeMismatch: If a calendar or duration unit is applied to an index
            that cannot carry it
    """
    index, source_name = source_index(source)

    # a bare period class means one unit, e.g. Month -> Month(1)
    if isinstance(on, type) and issubclass(on, Period):
        on = on()

    if callable(on) and not isinstance(on, (Period, str, TimeUnit)):
        logger.debug("endpoints: classifier function over %d %s rows", len(index), source_name)
        return function_endpoints(index, on, k)

    if not isinstance(on, (Period, str, TimeUnit)):
        raise EArgument(
            f"Unsupported selector of type {type(on).__name__}",
            context={"selector": repr(on)},
            fix_hint="Pass a Period such as Month(1), a unit name, or a function",
        )

    resolved = classify(on, k)
    if len(index) == 0:
        return []
    kind = infer_index_kind(index)
    if not kind.is_temporal:
        raise ETypeMismatch(
            f"Cannot bucket a {source_name} with a non-time index by {resolved.unit.value}",
            context={"dtype": str(index.dtype), "unit": resolved.unit.value},
            fix_hint="Use a classifier function for plain indexes",
        )

    logger.debug(
        "endpoints: %s x%d over %d %s rows of kind %s",
        resolved.unit.value,
        resolved.stride,
        len(index),
        source_name,
        kind.value,
    )
    if resolved.unit_class is UnitClass.CALENDAR:
        return calendar_endpoints(index, kind, resolved.unit, resolved.stride)
    return fixed_endpoints(index, kind, resolved.unit, resolved.stride)


__all__ = ["IndexedTable", "Selector", "endpoints", "source_index"]
