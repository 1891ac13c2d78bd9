"""Tests for applying NumPy ufuncs to a TSFrame."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from tsframe import TSFrame


@pytest.fixture
def ts() -> TSFrame:
    rng = np.random.default_rng(7)
    a = rng.integers(-10_000, 10_001, 100) / 77
    b = rng.integers(-10_000, 10_001, 100) / 77
    return TSFrame.from_dataframe(pd.DataFrame({"Index": range(1, 101), "A": a, "B": b}))


class TestUfuncBroadcasting:
    def test_sin_returns_frame(self, ts: TSFrame) -> None:
        sin_ts = np.sin(ts)
        assert isinstance(sin_ts, TSFrame)
        assert sin_ts.names == ["A_sin", "B_sin"]

    def test_sin_keeps_index(self, ts: TSFrame) -> None:
        sin_ts = np.sin(ts)
        assert sin_ts["Index"].tolist() == ts["Index"].tolist()

    def test_sin_values(self, ts: TSFrame) -> None:
        sin_ts = np.sin(ts)
        np.testing.assert_array_equal(sin_ts["A_sin"].to_numpy(), np.sin(ts["A"].to_numpy()))
        np.testing.assert_array_equal(sin_ts["B_sin"].to_numpy(), np.sin(ts["B"].to_numpy()))

    def test_log_of_complex_single_column(self, ts: TSFrame) -> None:
        log_ts = np.log(ts[:, ["A"]].apply(complex))
        assert isinstance(log_ts, TSFrame)
        assert log_ts.names == ["A_complex_log"]
        assert log_ts["Index"].tolist() == ts["Index"].tolist()
        for i in range(100):
            assert log_ts["A_complex_log"].iloc[i] == pytest.approx(np.log(complex(ts["A"].iloc[i])))

    def test_binary_ufunc_not_supported(self, ts: TSFrame) -> None:
        with pytest.raises(TypeError):
            np.add(ts, ts)
