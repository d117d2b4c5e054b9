"""Ranks of values along the rows or columns of a matrix, with tie handling."""

from __future__ import annotations

import enum
import itertools
import math
import random
from typing import Any, Iterable, List, Optional

import numpy as np

from matstats.ranges import _is_missing, _lines, _matrix


class TiesMethod(str, enum.Enum):
    """How tied values are ranked."""

    AVERAGE = "average"
    FIRST = "first"
    LAST = "last"
    RANDOM = "random"
    MIN = "min"
    MAX = "max"
    DENSE = "dense"


def _ties_method(value: Any) -> TiesMethod:
    try:
        return TiesMethod(value)
    except ValueError:
        raise ValueError(f"Unknown value of 'ties_method': {value!r}") from None


def _rank_line(values: List[Any], method: TiesMethod, rng: random.Random) -> List[Any]:
    ranks: List[Any] = [None] * len(values)
    present = sorted(
        ((v, i) for i, v in enumerate(values) if not _is_missing(v)),
        key=lambda pair: pair[0],
    )
    position = 0
    dense = 0
    for _, group in itertools.groupby(present, key=lambda pair: pair[0]):
        members = [i for _, i in group]
        first = position
        above = position + len(members)
        dense += 1
        if method is TiesMethod.RANDOM:
            rng.shuffle(members)
        for k, index in enumerate(members):
            if method in (TiesMethod.FIRST, TiesMethod.RANDOM):
                ranks[index] = first + k + 1
            elif method is TiesMethod.LAST:
                ranks[index] = above - k
            elif method is TiesMethod.AVERAGE:
                ranks[index] = (first + above + 1) / 2
            elif method is TiesMethod.MIN:
                ranks[index] = first + 1
            elif method is TiesMethod.MAX:
                ranks[index] = above
            else:
                ranks[index] = dense
        position = above
    return ranks


def _ranks(
    x: Any,
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    ties_method: Any,
    seed: Any,
    by_row: bool,
) -> np.ndarray:
    kind, arr = _matrix(x)
    method = _ties_method(ties_method)
    lines, nr, nc = _lines(kind, arr, rows, cols, by_row)
    shape = (nr, nc) if by_row else (nc, nr)

    rng = random.Random(seed)
    flat = [rank for line in lines for rank in _rank_line(line, method, rng)]
    if method is TiesMethod.AVERAGE or any(rank is None for rank in flat):
        filled = [math.nan if rank is None else float(rank) for rank in flat]
        result = np.array(filled, dtype=float).reshape(shape)
    else:
        result = np.array(flat, dtype=np.int64).reshape(shape)
    return result if by_row else result.T


def row_ranks(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    ties_method: Any = TiesMethod.MAX,
    seed: Any = None,
) -> np.ndarray:
    """Rank the values within each selected row, over the selected columns.

    The result has one row per selected row and one column per selected
    column.  Missing values get a missing (NaN) rank and are left out of the
    ranking.  Average ranks are floats; other ranks are integers unless a
    rank is missing.  ``seed`` seeds the shuffling of ``TiesMethod.RANDOM``.
    """
    return _ranks(x, rows, cols, ties_method, seed, by_row=True)


def col_ranks(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    ties_method: Any = TiesMethod.MAX,
    seed: Any = None,
) -> np.ndarray:
    """Rank the values within each selected column, over the selected rows.

    The result keeps the shape of the selection; ties and missing values are
    handled as in :func:`row_ranks`.
    """
    return _ranks(x, rows, cols, ties_method, seed, by_row=False)