"""tsframe - time-indexed tables with period endpoints.

A TSFrame is a table whose first column is an ordered index (dates,
datetimes, times of day or integers) and whose other columns hold
observations. ``endpoints`` finds the rows that close each calendar or
fixed-duration period of an index.

Basic usage:
    >>> import pandas as pd
    >>> from tsframe import TSFrame, Month
    >>> ts = TSFrame.from_values(range(90), pd.date_range("2024-01-01", periods=90))
    >>> ts.endpoints(Month(1))
    [31, 60, 90]

Named units with a stride:
    >>> ts.endpoints("days", 30)
    [30, 60, 90]
"""

__version__ = "0.1.0"

from tsframe.core.config import FrameConfig
from tsframe.core.errors import (
    EArgument,
    EContract,
    EDomain,
    EReservedName,
    ETypeMismatch,
    EUnsortedIndex,
    TSFrameError,
)
from tsframe.core.frame import TSFrame, build_frame
from tsframe.discovery import describe
from tsframe.time import (
    Day,
    Hour,
    IndexKind,
    Microsecond,
    Millisecond,
    Minute,
    Month,
    Nanosecond,
    Period,
    Quarter,
    Second,
    TimeUnit,
    Week,
    Year,
    endpoints,
    isregular,
)

__all__ = [
    "__version__",
    # Data
    "TSFrame",
    "build_frame",
    "FrameConfig",
    # Endpoints
    "endpoints",
    "isregular",
    "IndexKind",
    "TimeUnit",
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
    # Errors
    "TSFrameError",
    "EDomain",
    "EArgument",
    "ETypeMismatch",
    "EReservedName",
    "EContract",
    "EUnsortedIndex",
    # Discovery
    "describe",
]
