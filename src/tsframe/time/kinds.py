"""Index element kinds and conversions.

An index holds values of exactly one kind:

- ``DATE``: ``datetime.date`` values (day resolution, calendar aware)
- ``DATETIME``: timestamps (``pd.Timestamp``, ``datetime.datetime``,
  ``numpy.datetime64``); tz-aware values are handled on local wall time
- ``TIME_OF_DAY``: ``datetime.time`` values or ``timedelta64`` offsets
  since midnight
- ``PLAIN``: anything else totally ordered, e.g. integers
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from enum import StrEnum
from typing import Any

import numpy as np
import pandas as pd

from tsframe.core.errors import ETypeMismatch
from tsframe.time.units import TimeUnit, UnitClass


class IndexKind(StrEnum):
    DATE = "date"
    DATETIME = "datetime"
    TIME_OF_DAY = "time_of_day"
    PLAIN = "plain"

    @property
    def is_temporal(self) -> bool:
        return self is not IndexKind.PLAIN

    @property
    def has_calendar(self) -> bool:
        return self in (IndexKind.DATE, IndexKind.DATETIME)


def as_index(values: Iterable[Any]) -> pd.Index:
    """Wrap a sequence in a pandas Index without changing element kind."""
    if isinstance(values, pd.Index):
        return values
    if isinstance(values, (pd.Series, np.ndarray)):
        return pd.Index(values)
    return pd.Index(list(values))


def _scalar_kind(value: Any) -> IndexKind:
    # datetime is a subclass of date, so it has to be tested first
    if isinstance(value, (dt.datetime, np.datetime64)):
        return IndexKind.DATETIME
    if isinstance(value, dt.date):
        return IndexKind.DATE
    if isinstance(value, (dt.time, dt.timedelta, np.timedelta64)):
        return IndexKind.TIME_OF_DAY
    return IndexKind.PLAIN


def infer_index_kind(index: pd.Index) -> IndexKind:
    """Infer the element kind of an index.

    Raises:
        ETypeMismatch: If an object index mixes element kinds
    """
    dtype = index.dtype
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return IndexKind.DATETIME
    if pd.api.types.is_timedelta64_dtype(dtype):
        return IndexKind.TIME_OF_DAY
    if dtype != object or len(index) == 0:
        return IndexKind.PLAIN

    kinds = {_scalar_kind(v) for v in index}
    if len(kinds) > 1:
        raise ETypeMismatch(
            "Index mixes values of different kinds",
            context={"kinds": sorted(k.value for k in kinds)},
            fix_hint="Convert every index value to the same type",
        )
    return kinds.pop()


def as_datetime_index(index: pd.Index, kind: IndexKind) -> pd.DatetimeIndex:
    """Return a tz-naive DatetimeIndex of wall-clock times for a calendar kind."""
    if not kind.has_calendar:
        raise ETypeMismatch(
            f"Index of kind '{kind.value}' has no calendar dates",
            context={"kind": kind.value},
        )
    stamps = pd.DatetimeIndex(pd.to_datetime(index))
    if stamps.tz is not None:
        stamps = stamps.tz_localize(None)
    return stamps


def _time_to_nanos(t: dt.time) -> int:
    seconds = t.hour * 3600 + t.minute * 60 + t.second
    return seconds * 10**9 + t.microsecond * 1000


def as_nanos(index: pd.Index, kind: IndexKind) -> np.ndarray:
    """Return int64 nanoseconds: since the epoch for calendar kinds,
    since midnight for time-of-day kinds.
    """
    if kind.has_calendar:
        stamps = as_datetime_index(index, kind)
        return stamps.to_numpy(dtype="datetime64[ns]").view(np.int64)
    if kind is IndexKind.TIME_OF_DAY:
        if pd.api.types.is_timedelta64_dtype(index.dtype):
            return index.to_numpy(dtype="timedelta64[ns]").view(np.int64)
        if len(index) and isinstance(index[0], dt.time):
            return np.fromiter(
                (_time_to_nanos(t) for t in index), dtype=np.int64, count=len(index)
            )
        return pd.TimedeltaIndex(index).to_numpy(dtype="timedelta64[ns]").view(np.int64)
    raise ETypeMismatch(
        "Plain index values have no time arithmetic",
        context={"kind": kind.value, "dtype": str(index.dtype)},
    )


def check_unit_kind(kind: IndexKind, unit: TimeUnit, source: str = "sequence") -> None:
    """Check that ``unit`` can bucket values of ``kind``.

    Calendar units and days need calendar dates; hours and finer need a
    sub-day resolution (datetimes or times of day).

    Raises:
        ETypeMismatch: If the combination is not supported
    """
    if unit.unit_class is UnitClass.CALENDAR or unit is TimeUnit.DAYS:
        supported = kind.has_calendar
    else:
        supported = kind in (IndexKind.DATETIME, IndexKind.TIME_OF_DAY)
    if not supported:
        raise ETypeMismatch(
            f"Cannot bucket a {source} with '{kind.value}' index by {unit.value}",
            context={"kind": kind.value, "unit": unit.value},
        )


__all__ = [
    "IndexKind",
    "as_index",
    "infer_index_kind",
    "as_datetime_index",
    "as_nanos",
    "check_unit_kind",
]
