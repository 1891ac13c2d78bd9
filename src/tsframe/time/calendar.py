"""Calendar bucketing for years, quarters, months and weeks."""

from __future__ import annotations

import numpy as np
import pandas as pd

from tsframe.time.kinds import IndexKind, as_datetime_index, check_unit_kind
from tsframe.time.stride import period_closes, take_every
from tsframe.time.units import UNIT_NANOS, TimeUnit, UnitClass


def calendar_keys(stamps: pd.DatetimeIndex, unit: TimeUnit) -> np.ndarray:
    """Integer key of the calendar period each timestamp falls in.

    Weeks run Monday to Sunday and are keyed by the day number of their
    Monday.
    """
    year = stamps.year.to_numpy(dtype=np.int64)
    if unit is TimeUnit.YEARS:
        return year
    if unit is TimeUnit.QUARTERS:
        return year * 4 + stamps.quarter.to_numpy(dtype=np.int64) - 1
    if unit is TimeUnit.MONTHS:
        return year * 12 + stamps.month.to_numpy(dtype=np.int64) - 1
    if unit is TimeUnit.WEEKS:
        midnight = stamps.normalize().to_numpy(dtype="datetime64[ns]").view(np.int64)
        days = midnight // UNIT_NANOS[TimeUnit.DAYS]
        return days - stamps.dayofweek.to_numpy(dtype=np.int64)
    raise ValueError(f"{unit.value} is not a calendar unit")


def calendar_endpoints(
    index: pd.Index,
    kind: IndexKind,
    unit: TimeUnit,
    n: int = 1,
) -> list[int]:
    """Positions closing every n-th calendar period of ``index``.

    The last element always closes the final period, so a trailing partial
    period is reported as long as at least ``n`` periods are present.
    """
    if unit.unit_class is not UnitClass.CALENDAR:
        raise ValueError(f"{unit.value} is not a calendar unit")
    check_unit_kind(kind, unit)
    keys = calendar_keys(as_datetime_index(index, kind), unit)
    return take_every(period_closes(keys), n, len(keys))


__all__ = ["calendar_keys", "calendar_endpoints"]
