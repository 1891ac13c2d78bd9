"""TSFrame implementation.

Immutable wrapper around a DataFrame whose first column is an ordered
index (dates, datetimes, times of day or plain integers) and whose other
columns are observations. All operations return new instances.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import pandas as pd

from tsframe.core.config import FrameConfig
from tsframe.core.errors import EArgument, EContract, EReservedName, EUnsortedIndex
from tsframe.time.endpoints import Selector, endpoints
from tsframe.time.kinds import as_index
from tsframe.time.regularity import Spacing, isregular

logger = logging.getLogger(__name__)

StatRequest = str | tuple[Callable[[pd.Series], Any], str]


def _numeric(s: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(s.dtype) and not pd.api.types.is_bool_dtype(s.dtype)


def _orderable(s: pd.Series) -> bool:
    if (
        _numeric(s)
        or pd.api.types.is_datetime64_any_dtype(s.dtype)
        or pd.api.types.is_timedelta64_dtype(s.dtype)
    ):
        return True
    if s.dtype != object:
        return False
    # date and time objects are stored with object dtype
    values = s.dropna()
    return len(values) > 0 and (
        all(isinstance(v, dt.date) for v in values) or all(isinstance(v, dt.time) for v in values)
    )


def _when(check: Callable[[pd.Series], bool], fn: Callable[[pd.Series], Any]):
    def stat(s: pd.Series) -> Any:
        return fn(s) if check(s) else None

    return stat


# Built-in statistics for describe(); each receives the full column.
STATISTICS: dict[str, Callable[[pd.Series], Any]] = {
    "mean": _when(_numeric, lambda s: s.mean()),
    "std": _when(_numeric, lambda s: s.std()),
    "min": _when(_orderable, lambda s: s.min()),
    "q25": _when(_numeric, lambda s: s.quantile(0.25)),
    "median": _when(_numeric, lambda s: s.median()),
    "q75": _when(_numeric, lambda s: s.quantile(0.75)),
    "max": _when(_orderable, lambda s: s.max()),
    "nunique": lambda s: int(s.nunique()),
    "nmissing": lambda s: int(s.isna().sum()),
    "first": lambda s: s.iloc[0] if len(s) else None,
    "last": lambda s: s.iloc[-1] if len(s) else None,
    "eltype": lambda s: str(s.dtype),
}


def _resolve_stats(stats: Sequence[StatRequest]) -> list[tuple[str, Callable[[pd.Series], Any]]]:
    resolved: list[tuple[str, Callable[[pd.Series], Any]]] = []
    for request in stats:
        if isinstance(request, str):
            if request == "all":
                resolved.extend(STATISTICS.items())
                continue
            if request not in STATISTICS:
                raise EArgument(
                    f"Unknown statistic: {request!r}",
                    context={"allowed": ["all", *STATISTICS]},
                    fix_hint="Pass a (function, name) pair for custom statistics",
                )
            resolved.append((request, STATISTICS[request]))
        else:
            fn, name = request
            resolved.append((str(name), lambda s, fn=fn: fn(s.dropna())))
    return resolved


@dataclass(frozen=True, eq=False)
class TSFrame:
    """Immutable time-indexed table.

    Attributes:
        coredata: DataFrame whose first column is the index column
        config: Frame configuration (reserved index name, display defaults)

    Examples:
        >>> import pandas as pd
        >>> ts = TSFrame.from_values([1.0, 2.0, 3.0], pd.date_range("2024-01-01", periods=3))
        >>> ts.shape
        (3, 1)
        >>> ts.names
        ['x1']
    """

    coredata: pd.DataFrame
    config: FrameConfig = field(default_factory=FrameConfig)

    def __post_init__(self) -> None:
        index_col = self.config.index_col
        columns = list(self.coredata.columns)
        if not columns or columns[0] != index_col:
            raise EContract(
                f"First column must be the index column '{index_col}'",
                context={"columns": columns[:5]},
            )
        duplicated = self.coredata.columns[self.coredata.columns.duplicated()]
        if len(duplicated):
            raise EContract(
                "Column names must be unique",
                context={"duplicates": list(duplicated)},
            )
        if not self.check_consistency():
            if self.config.on_unsorted == "error":
                raise EUnsortedIndex(
                    "Index is not sorted in non-decreasing order",
                    context={"n_rows": len(self.coredata)},
                )
            logger.warning(
                "Index of %d rows is not sorted; endpoints and regularity checks "
                "will not be meaningful",
                len(self.coredata),
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_values(
        cls,
        values: Any,
        index: Iterable[Any] | None = None,
        *,
        columns: Sequence[str] | None = None,
        config: FrameConfig | None = None,
    ) -> TSFrame:
        """Create a TSFrame from a 1-D or 2-D array of observations.

        Args:
            values: Observations, one row per index entry
            index: Index values; defaults to 1..n
            columns: Column names; defaults to x1, x2, ...
            config: Frame configuration

        Raises:
            EContract: If the index length does not match the data
            EReservedName: If a column uses the index column name
        """
        config = config or FrameConfig()
        if isinstance(values, pd.Series):
            if columns is None and values.name is not None:
                columns = [str(values.name)]
            values = values.to_numpy()
        arr = np.asarray(values)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        elif arr.ndim != 2:
            raise EContract(
                f"Values must be 1-D or 2-D, got {arr.ndim} dimensions",
                context={"shape": arr.shape},
            )

        n_rows, n_cols = arr.shape
        names = (
            list(columns)
            if columns is not None
            else [f"{config.column_prefix}{i}" for i in range(1, n_cols + 1)]
        )
        if len(names) != n_cols:
            raise EContract(
                f"Got {len(names)} column names for {n_cols} columns",
                context={"columns": names},
            )
        if len(set(names)) != len(names):
            raise EContract("Column names must be unique", context={"columns": names})

        data = {config.index_col: _index_values(index, n_rows).array}
        for j, name in enumerate(names):
            _check_not_reserved(name, config)
            data[name] = arr[:, j]
        return cls(coredata=pd.DataFrame(data), config=config)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        index: str | Iterable[Any] | None = None,
        *,
        config: FrameConfig | None = None,
    ) -> TSFrame:
        """Create a TSFrame from a DataFrame.

        The index is taken, in order of preference, from ``index`` (a column
        name or a sequence of values), from an existing index column, from a
        non-default DataFrame row index, or generated as 1..n.

        Raises:
            EContract: If the index length does not match the data
            EReservedName: If ``index`` is given and the DataFrame also has a
                column named like the index column
        """
        config = config or FrameConfig()
        index_col = config.index_col
        data = df.copy()

        if isinstance(index, str):
            if index not in data.columns:
                raise EContract(
                    f"Index column '{index}' not found",
                    context={"columns": list(data.columns)},
                )
            if index != index_col:
                _check_not_reserved_columns(data.columns, config)
            index_values = data.pop(index)
        elif index is not None:
            _check_not_reserved_columns(data.columns, config)
            index_values = _index_values(index, len(data))
        elif index_col in data.columns:
            index_values = data.pop(index_col)
        elif not isinstance(data.index, pd.RangeIndex):
            index_values = data.index
        else:
            index_values = _index_values(None, len(data))

        data = data.reset_index(drop=True)
        data.columns = [str(c) for c in data.columns]
        # .array keeps the dtype (tz included) and avoids aligning on labels
        data.insert(0, index_col, index_values.array)
        return cls(coredata=data, config=config)

    # ------------------------------------------------------------------
    # Size and access
    # ------------------------------------------------------------------

    @property
    def nrow(self) -> int:
        """Number of rows."""
        return int(self.coredata.shape[0])

    nr = nrow

    @property
    def ncol(self) -> int:
        """Number of data columns, excluding the index."""
        return int(self.coredata.shape[1] - 1)

    nc = ncol

    @property
    def shape(self) -> tuple[int, int]:
        return (self.nrow, self.ncol)

    size = shape

    def __len__(self) -> int:
        return self.nrow

    @property
    def index(self) -> pd.Index:
        """The index column as a pandas Index, element kind preserved."""
        return pd.Index(self.coredata[self.config.index_col])

    @property
    def names(self) -> list[str]:
        """Data column names, excluding the index."""
        return [str(c) for c in self.coredata.columns[1:]]

    def to_dataframe(self) -> pd.DataFrame:
        """Return a copy of the underlying DataFrame."""
        return self.coredata.copy()

    def first(self) -> TSFrame:
        """First row as a TSFrame."""
        return self._with(self.coredata.iloc[:1])

    def head(self, n: int | None = None) -> TSFrame:
        """First ``n`` rows (default from config)."""
        return self._with(self.coredata.head(self.config.head_rows if n is None else n))

    def tail(self, n: int | None = None) -> TSFrame:
        """Last ``n`` rows (default from config)."""
        return self._with(self.coredata.tail(self.config.head_rows if n is None else n))

    def rows(self, selector: int | slice | Sequence[int] | np.ndarray) -> TSFrame:
        """Select rows by 0-based position, slice, position list or boolean mask."""
        if isinstance(selector, (int, np.integer)):
            selector = [int(selector)]
        return self._with(self.coredata.iloc[selector])

    def columns(self, names: str | Sequence[str]) -> TSFrame:
        """Select data columns by name; the index column is always kept."""
        if isinstance(names, str):
            names = [names]
        index_col = self.config.index_col
        keep = [index_col] + [c for c in names if c != index_col]
        return self._with(self.coredata.loc[:, keep])

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            row_key, col_key = key
            subset = self.rows(row_key) if not _is_full_slice(row_key) else self
            return subset[col_key]
        if isinstance(key, str):
            return self.coredata[key].reset_index(drop=True)
        if isinstance(key, list) and all(isinstance(k, str) for k in key):
            return self.columns(key)
        return self.rows(key)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def rename(self, colnames: Sequence[str]) -> TSFrame:
        """Rename the data columns, in order.

        Raises:
            EReservedName: If a new name equals the index column name
            EContract: If the number of names does not match ncol
        """
        new_names = [str(c) for c in colnames]
        for name in new_names:
            _check_not_reserved(name, self.config)
        if len(new_names) != self.ncol:
            raise EContract(
                f"Got {len(new_names)} names for {self.ncol} columns",
                context={"names": new_names, "current": self.names},
            )
        renamed = self.coredata.copy()
        renamed.columns = [self.config.index_col, *new_names]
        return self._with(renamed)

    def apply(self, func: Callable[[Any], Any], name: str | None = None) -> TSFrame:
        """Apply ``func`` elementwise to every data column.

        Output columns are named ``<column>_<name>``, where ``name`` defaults
        to the function's ``__name__``. The index is unchanged.
        """
        label = name or getattr(func, "__name__", None) or type(func).__name__
        label = label.strip("<>")
        index_col = self.config.index_col
        data = {index_col: self.coredata[index_col]}
        for col in self.names:
            series = self.coredata[col]
            if isinstance(func, np.ufunc):
                data[f"{col}_{label}"] = func(series)
            else:
                data[f"{col}_{label}"] = series.map(func)
        return self._with(pd.DataFrame(data))

    def __array_ufunc__(self, ufunc: np.ufunc, method: str, *inputs: Any, **kwargs: Any) -> Any:
        if method == "__call__" and len(inputs) == 1 and inputs[0] is self and not kwargs:
            return self.apply(ufunc)
        return NotImplemented

    # ------------------------------------------------------------------
    # Summaries and checks
    # ------------------------------------------------------------------

    def describe(self, *stats: StatRequest, cols: str | Sequence[str] | None = None) -> pd.DataFrame:
        """Per-column summary statistics.

        Args:
            *stats: Statistic names (see ``STATISTICS``; ``"all"`` for every
                one) or ``(function, name)`` pairs applied to the non-missing
                values. Defaults to ``config.describe_stats``.
            cols: Column name or names to describe; defaults to all columns
                including the index

        Returns:
            DataFrame with a ``variable`` column and one column per statistic
        """
        requested = _resolve_stats(stats or self.config.describe_stats)
        if cols is None:
            selected = list(self.coredata.columns)
        elif isinstance(cols, str):
            selected = [cols]
        else:
            selected = list(cols)

        records = []
        for col in selected:
            series = self.coredata[col]
            record: dict[str, Any] = {"variable": col}
            for stat_name, fn in requested:
                record[stat_name] = fn(series)
            records.append(record)
        return pd.DataFrame.from_records(records, columns=["variable", *(n for n, _ in requested)])

    def check_consistency(self) -> bool:
        """True if the index is sorted in non-decreasing order."""
        return bool(self.index.is_monotonic_increasing)

    def isregular(self, unit: Spacing | None = None) -> bool:
        """True if index values are evenly spaced (see ``tsframe.time.isregular``)."""
        return isregular(self, unit)

    def endpoints(self, on: Selector, k: int = 1) -> list[int]:
        """1-based row positions closing each period (see ``tsframe.time.endpoints``)."""
        return endpoints(self, on, k)

    def period_ends(self, on: Selector, k: int = 1) -> TSFrame:
        """Rows at the end of each period."""
        positions = self.endpoints(on, k)
        return self.rows([p - 1 for p in positions])

    def summary(self) -> str:
        return f"({self.nrow} x {self.ncol}) TSFrame"

    def __repr__(self) -> str:
        title = f"{self.nrow}×{self.ncol} TSFrame with {self.index.dtype} Index"
        return f"{title}\n{self.coredata.to_string(index=False, max_rows=20)}"

    def _with(self, df: pd.DataFrame) -> TSFrame:
        return TSFrame(coredata=df.reset_index(drop=True), config=self.config)


def _index_values(index: Iterable[Any] | None, n_rows: int) -> pd.Index:
    if index is None:
        return pd.RangeIndex(1, n_rows + 1)
    values = as_index(index)
    if len(values) != n_rows:
        raise EContract(
            f"Index length {len(values)} does not match {n_rows} data rows",
            context={"index_length": len(values), "n_rows": n_rows},
        )
    return values


def _check_not_reserved(name: str, config: FrameConfig) -> None:
    if name == config.index_col:
        raise EReservedName(
            f"Column name `{config.index_col}` not allowed in TSFrame object",
            context={"name": name},
        )


def _check_not_reserved_columns(columns: Iterable[Any], config: FrameConfig) -> None:
    for col in columns:
        _check_not_reserved(str(col), config)


def _is_full_slice(key: Any) -> bool:
    return isinstance(key, slice) and key == slice(None)


def build_frame(
    data: Any,
    index: Any = None,
    config: FrameConfig | None = None,
) -> TSFrame:
    """Build a TSFrame from a DataFrame or from raw values."""
    if isinstance(data, pd.DataFrame):
        return TSFrame.from_dataframe(data, index=index, config=config)
    return TSFrame.from_values(data, index=index, config=config)


__all__ = ["TSFrame", "STATISTICS", "build_frame"]
