"""Fixed-duration bucketing for days down to nanoseconds.

Each element is keyed by its integer number of whole units: nanoseconds
since the epoch for dates and datetimes, or since the first element for
times of day, floor-divided by the unit length. When the index is
already sampled at the requested unit every element closes its own
period, so a stride of ``n`` keeps positions ``n, 2n, ...``; a finer
index is regrouped into coarser periods by the same division.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from tsframe.time.kinds import IndexKind, as_nanos, check_unit_kind
from tsframe.time.stride import period_closes, take_every
from tsframe.time.units import TimeUnit, UnitClass

logger = logging.getLogger(__name__)


def duration_keys(nanos: np.ndarray, unit: TimeUnit) -> np.ndarray:
    """Whole units elapsed for each nanosecond offset."""
    return np.floor_divide(nanos, unit.nanos)


def fixed_endpoints(
    index: pd.Index,
    kind: IndexKind,
    unit: TimeUnit,
    n: int = 1,
) -> list[int]:
    """Positions closing every n-th fixed-duration period of ``index``.

    If the index spans fewer than ``n`` periods the result is empty; a
    partial final period is only reported after a complete stride.
    """
    if unit.unit_class is not UnitClass.FIXED:
        raise ValueError(f"{unit.value} is not a fixed-duration unit")
    check_unit_kind(kind, unit)
    nanos = as_nanos(index, kind)
    if kind is IndexKind.TIME_OF_DAY and len(nanos):
        # times of day have no calendar anchor; periods start at the first element
        nanos = nanos - nanos[0]
    keys = duration_keys(nanos, unit)
    raw = period_closes(keys)
    if len(raw) < n:
        logger.debug(
            "Index spans %d %s period(s), fewer than the stride %d", len(raw), unit.value, n
        )
    return take_every(raw, n, len(keys))


__all__ = ["duration_keys", "fixed_endpoints"]
