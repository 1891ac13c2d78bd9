"""Regularity checks for index spacing."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd

from tsframe.core.errors import ETypeMismatch
from tsframe.time.endpoints import source_index
from tsframe.time.kinds import IndexKind, as_datetime_index, as_nanos, infer_index_kind
from tsframe.time.units import Period, TimeUnit, UnitClass

Spacing = Period | dt.timedelta | np.timedelta64 | int | float


def calendar_offset(period: Period) -> pd.DateOffset:
    """DateOffset stepping one calendar period forward."""
    if period.unit is TimeUnit.YEARS:
        return pd.DateOffset(years=period.n)
    if period.unit is TimeUnit.QUARTERS:
        return pd.DateOffset(months=3 * period.n)
    if period.unit is TimeUnit.MONTHS:
        return pd.DateOffset(months=period.n)
    if period.unit is TimeUnit.WEEKS:
        return pd.DateOffset(weeks=period.n)
    raise ValueError(f"{period.unit.value} is not a calendar unit")


def _spacing_nanos(unit: Spacing, kind: IndexKind) -> int:
    if isinstance(unit, Period):
        return unit.nanos
    if isinstance(unit, (dt.timedelta, np.timedelta64, pd.Timedelta)):
        return int(pd.Timedelta(unit).value)
    raise ETypeMismatch(
        f"Spacing of type {type(unit).__name__} does not apply to a {kind.value} index",
        context={"unit": repr(unit), "kind": kind.value},
    )


def isregular(values: Iterable[Any], unit: Spacing | None = None) -> bool:
    """Return True if consecutive index values are evenly spaced.

    Args:
        values: Index values, or a table exposing ``index``
        unit: Expected spacing. Defaults to the first observed difference.
            Calendar periods (e.g. ``Month(1)``) are checked by stepping the
            calendar, so month starts one month apart are regular.

    Returns:
        True for sequences of length 0 or 1.
    """
    index, _ = source_index(values)
    if len(index) <= 1:
        return True

    kind = infer_index_kind(index)

    if isinstance(unit, Period) and unit.unit_class is UnitClass.CALENDAR:
        stamps = as_datetime_index(index, kind)
        stepped = stamps[:-1] + calendar_offset(unit)
        return bool((stamps[1:] == stepped).all())

    if kind.is_temporal:
        diffs = np.diff(as_nanos(index, kind))
        step = diffs[0] if unit is None else _spacing_nanos(unit, kind)
        return bool((diffs == step).all())

    if isinstance(unit, (Period, dt.timedelta, np.timedelta64)):
        raise ETypeMismatch(
            "Time spacing does not apply to a plain index",
            context={"unit": repr(unit), "dtype": str(index.dtype)},
        )
    diffs = np.diff(index.to_numpy())
    step = diffs[0] if unit is None else unit
    return bool(np.all(diffs == step))


__all__ = ["Spacing", "calendar_offset", "isregular"]
