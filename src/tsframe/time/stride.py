"""Boundary detection and stride selection.

Shared by the calendar and fixed-duration bucketers, and home of the
classifier-function path that buckets any index by a user-supplied key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np
import pandas as pd

from tsframe.core.errors import EArgument
from tsframe.time.units import check_positive

logger = logging.getLogger(__name__)


def period_closes(keys: np.ndarray) -> np.ndarray:
    """1-based positions of the last element of each run of equal keys.

    The final position ``len(keys)`` always closes the last run, complete
    or not.
    """
    n = len(keys)
    if n == 0:
        return np.empty(0, dtype=np.int64)
    changes = np.flatnonzero(keys[1:] != keys[:-1]) + 1
    return np.append(changes, n).astype(np.int64)


def take_every(raw: np.ndarray, k: int, n: int, close_tail: bool = True) -> list[int]:
    """Keep every k-th boundary of ``raw``.

    With ``close_tail`` the final position ``n`` is appended when at least
    one boundary was kept and the last kept one falls short of ``n``.
    Fewer than ``k`` boundaries always gives an empty result.
    """
    kept = raw[k - 1 :: k]
    if close_tail and len(kept) and kept[-1] != n:
        kept = np.append(kept, n)
    return [int(p) for p in kept]


def last_of_each_key(keys: Any) -> np.ndarray:
    """1-based positions of the last occurrence of every distinct key, ascending.

    Keys must be hashable; tuples count as one key each.
    """
    last = pd.Series(list(keys)).drop_duplicates(keep="last").index
    return np.sort(last.to_numpy(dtype=np.int64)) + 1


def _vectorized_keys(index: pd.Index, on: Callable[[Any], Any]) -> Any | None:
    """Keys from ``on(index)``, or None if ``on`` does not work on the whole index."""
    try:
        keys = on(index)
    except (AttributeError, TypeError, ValueError):
        return None
    if isinstance(keys, (str, bytes)) or not hasattr(keys, "__len__"):
        return None
    if isinstance(keys, np.ndarray) and keys.ndim != 1:
        return None
    if len(keys) != len(index):
        return None
    return keys


def function_endpoints(
    index: pd.Index,
    on: Callable[[Any], Any],
    k: int = 1,
) -> list[int]:
    """Endpoints of the groups formed by the keys ``on`` assigns.

    ``on`` is first applied to the whole index. If that fails, or does not
    give one key per element, it is applied to each element instead. Each
    distinct key closes at its last occurrence; every k-th of those
    positions is kept, and a trailing incomplete stride is dropped.

    Raises:
        EDomain: If ``k`` is not a positive integer
        EArgument: If the keys are not hashable
    """
    k = check_positive(k, "k")
    keys = _vectorized_keys(index, on)
    if keys is None:
        logger.debug("Classifier applied elementwise over %d values", len(index))
        keys = [on(value) for value in index]
    try:
        raw = last_of_each_key(keys)
    except TypeError as exc:
        raise EArgument(
            "Classifier function must return one hashable key per index element",
            context={"n": len(index), "error": str(exc)},
            fix_hint="Return scalars or tuples, e.g. lambda d: (d.year, d.month)",
        ) from exc
    return take_every(raw, k, len(index), close_tail=False)


__all__ = ["period_closes", "take_every", "last_of_each_key", "function_endpoints"]
