"""Time utilities: period units, index kinds, endpoints and regularity."""

from .calendar import calendar_endpoints, calendar_keys
from .endpoints import IndexedTable, Selector, endpoints
from .fixed import duration_keys, fixed_endpoints
from .kinds import IndexKind, as_index, infer_index_kind
from .regularity import calendar_offset, isregular
from .stride import function_endpoints, period_closes, take_every
from .units import (
    Day,
    Hour,
    Microsecond,
    Millisecond,
    Minute,
    Month,
    Nanosecond,
    Period,
    Quarter,
    ResolvedUnit,
    Second,
    TimeUnit,
    UnitClass,
    Week,
    Year,
    classify,
    resolve_unit_name,
)

__all__ = [
    # Units
    "TimeUnit",
    "UnitClass",
    "Period",
    "Year",
    "Quarter",
    "Month",
    "Week",
    "Day",
    "Hour",
    "Minute",
    "Second",
    "Millisecond",
    "Microsecond",
    "Nanosecond",
    "ResolvedUnit",
    "classify",
    "resolve_unit_name",
    # Index kinds
    "IndexKind",
    "as_index",
    "infer_index_kind",
    # Bucketing
    "calendar_keys",
    "calendar_endpoints",
    "duration_keys",
    "fixed_endpoints",
    "period_closes",
    "take_every",
    "function_endpoints",
    # Engine
    "IndexedTable",
    "Selector",
    "endpoints",
    # Regularity
    "calendar_offset",
    "isregular",
]
