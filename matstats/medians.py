"""Medians along the rows or columns of a matrix."""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional

import numpy as np

from matstats.ranges import _is_missing, _lines, _matrix
from matstats.validation import check_flag


def _median(values: List[Any], na_rm: bool) -> float:
    kept = []
    for value in values:
        if _is_missing(value):
            if not na_rm:
                return math.nan
            continue
        kept.append(value)
    if not kept:
        return math.nan
    kept.sort()
    mid = len(kept) // 2
    if len(kept) % 2 == 1:
        return float(kept[mid])
    return (float(kept[mid - 1]) + float(kept[mid])) / 2


def _medians(
    x: Any,
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    na_rm: Any,
    has_na: Any,
    by_row: bool,
) -> np.ndarray:
    narm = check_flag(na_rm, "na_rm")
    hasna = check_flag(has_na, "has_na")
    if not hasna:
        narm = False
    kind, arr = _matrix(x)
    lines, _, _ = _lines(kind, arr, rows, cols, by_row)
    return np.array([_median(line, narm) for line in lines], dtype=float)


def row_medians(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: Any = False,
    has_na: Any = True,
) -> np.ndarray:
    """Median of each selected row, over the selected columns.

    ``rows`` and ``cols`` are zero-based; a missing index selects a missing
    value.  A row holding a missing value gives NaN unless ``na_rm`` is true;
    a row with no values left gives NaN.  With ``has_na`` false, ``na_rm``
    is ignored.  The median of an even count is the mean of the middle two.
    """
    return _medians(x, rows, cols, na_rm, has_na, by_row=True)


def col_medians(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: Any = False,
    has_na: Any = True,
) -> np.ndarray:
    """Median of each selected column, over the selected rows.

    Missing values are handled as in :func:`row_medians`.
    """
    return _medians(x, rows, cols, na_rm, has_na, by_row=False)