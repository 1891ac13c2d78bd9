"""Tests for boundary detection, stride selection and per-unit bucketers."""

from __future__ import annotations

import datetime as dt

import numpy as np
import pandas as pd
import pytest

from tsframe.core.errors import EArgument, EDomain, ETypeMismatch
from tsframe.time.calendar import calendar_endpoints, calendar_keys
from tsframe.time.fixed import duration_keys, fixed_endpoints
from tsframe.time.kinds import IndexKind, as_index
from tsframe.time.stride import (
    function_endpoints,
    last_of_each_key,
    period_closes,
    take_every,
)
from tsframe.time.units import TimeUnit

# ---------------------------------------------------------------------------
# period_closes / take_every
# ---------------------------------------------------------------------------


class TestPeriodCloses:
    def test_runs(self) -> None:
        keys = np.array([1, 1, 2, 2, 2, 3])
        assert period_closes(keys).tolist() == [2, 5, 6]

    def test_single_run(self) -> None:
        assert period_closes(np.array([7, 7, 7])).tolist() == [3]

    def test_empty(self) -> None:
        assert period_closes(np.array([], dtype=np.int64)).tolist() == []


class TestTakeEvery:
    def test_stride_one_is_identity(self) -> None:
        raw = np.array([2, 5, 6])
        assert take_every(raw, 1, 6) == [2, 5, 6]

    def test_tail_is_closed(self) -> None:
        raw = np.array([2, 4, 6, 7])
        assert take_every(raw, 2, 7) == [4, 7]

    def test_no_duplicate_tail(self) -> None:
        raw = np.array([2, 4, 6, 8])
        assert take_every(raw, 2, 8) == [4, 8]

    def test_too_few_boundaries(self) -> None:
        assert take_every(np.array([3, 5]), 3, 5) == []

    def test_open_tail(self) -> None:
        raw = np.array([2, 4, 6, 7])
        assert take_every(raw, 2, 7, close_tail=False) == [4, 7]
        assert take_every(raw, 3, 7, close_tail=False) == [6]

    def test_plain_ints(self) -> None:
        assert all(type(p) is int for p in take_every(np.array([1, 2]), 1, 2))


# ---------------------------------------------------------------------------
# Classifier functions
# ---------------------------------------------------------------------------


class TestFunctionEndpoints:
    def test_last_of_each_key_is_sorted(self) -> None:
        keys = ["b", "a", "b", "c", "a"]
        assert last_of_each_key(keys).tolist() == [3, 4, 5]

    def test_groups_need_not_be_contiguous(self) -> None:
        index = pd.Index([1, 2, 3, 4, 5, 6])
        assert function_endpoints(index, lambda i: i % 2) == [5, 6]

    def test_stride(self) -> None:
        index = pd.Index(range(10))
        assert function_endpoints(index, lambda i: i // 2, 2) == [4, 8]

    def test_constant_key_is_one_group(self) -> None:
        assert function_endpoints(pd.Index([1, 2, 3]), lambda i: 1) == [3]

    def test_elementwise_fallback(self) -> None:
        index = pd.Index(["a1", "b1", "a2"])
        assert function_endpoints(index, lambda s: s[0]) == [2, 3]

    def test_unhashable_keys_raise(self) -> None:
        with pytest.raises(EArgument, match="hashable"):
            function_endpoints(pd.Index([1, 2, 3]), lambda v: [v])

    def test_non_positive_stride_raises(self) -> None:
        with pytest.raises(EDomain):
            function_endpoints(pd.Index([1, 2, 3]), lambda i: i, 0)


# ---------------------------------------------------------------------------
# Calendar bucketer
# ---------------------------------------------------------------------------


class TestCalendarKeys:
    def test_quarter_keys(self) -> None:
        stamps = pd.DatetimeIndex(["2023-12-31", "2024-01-01", "2024-03-31", "2024-04-01"])
        keys = calendar_keys(stamps, TimeUnit.QUARTERS)
        assert keys.tolist() == [2023 * 4 + 3, 2024 * 4, 2024 * 4, 2024 * 4 + 1]

    def test_week_key_is_monday(self) -> None:
        # Monday 2024-05-13 through Sunday 2024-05-19 share a key
        stamps = pd.date_range("2024-05-13", "2024-05-20", freq="D")
        keys = calendar_keys(stamps, TimeUnit.WEEKS)
        assert len(set(keys[:7].tolist())) == 1
        assert keys[7] == keys[0] + 7

    def test_week_key_ignores_time_of_day(self) -> None:
        stamps = pd.DatetimeIndex(["2024-05-19 23:59", "2024-05-20 00:00"])
        keys = calendar_keys(stamps, TimeUnit.WEEKS)
        assert keys[1] == keys[0] + 7

    def test_fixed_unit_rejected(self) -> None:
        with pytest.raises(ValueError):
            calendar_keys(pd.DatetimeIndex(["2024-01-01"]), TimeUnit.DAYS)


class TestCalendarEndpoints:
    def test_monthly_over_datetimes(self) -> None:
        index = pd.date_range("2024-01-30", periods=5, freq="D")
        assert calendar_endpoints(index, IndexKind.DATETIME, TimeUnit.MONTHS) == [2, 5]

    def test_year_end_crossing(self) -> None:
        index = as_index([dt.date(2023, 12, 31), dt.date(2024, 1, 1)])
        assert calendar_endpoints(index, IndexKind.DATE, TimeUnit.YEARS) == [1, 2]

    def test_times_rejected(self) -> None:
        index = as_index([dt.time(9)])
        with pytest.raises(ETypeMismatch):
            calendar_endpoints(index, IndexKind.TIME_OF_DAY, TimeUnit.MONTHS)


# ---------------------------------------------------------------------------
# Fixed-duration bucketer
# ---------------------------------------------------------------------------


class TestFixedEndpoints:
    def test_duration_keys_floor(self) -> None:
        nanos = np.array([0, 999, 1_000, 1_999, 2_000])
        assert duration_keys(nanos, TimeUnit.MICROSECONDS).tolist() == [0, 0, 1, 1, 2]

    def test_days_over_datetimes(self) -> None:
        index = pd.DatetimeIndex(["2024-01-01 10:00", "2024-01-01 23:00", "2024-01-02 01:00"])
        assert fixed_endpoints(index, IndexKind.DATETIME, TimeUnit.DAYS) == [2, 3]

    def test_stride_longer_than_span(self, caplog: pytest.LogCaptureFixture) -> None:
        index = pd.date_range("2024-01-01", periods=3, freq="h")
        with caplog.at_level("DEBUG", logger="tsframe.time.fixed"):
            assert fixed_endpoints(index, IndexKind.DATETIME, TimeUnit.HOURS, 4) == []
        assert "fewer than the stride" in caplog.text

    def test_calendar_unit_rejected(self) -> None:
        index = pd.date_range("2024-01-01", periods=3, freq="h")
        with pytest.raises(ValueError):
            fixed_endpoints(index, IndexKind.DATETIME, TimeUnit.MONTHS)
