"""Cumulative products along the rows or columns of a matrix."""

from __future__ import annotations

import itertools
import operator
import warnings
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from matstats.ranges import _lines, _matrix, _to_array
from matstats.validation import INT_MAX, INT_MIN, ValueKind


def _cumprod_integer(values: List[Optional[int]]) -> Tuple[List[Optional[int]], bool]:
    """Running product; a missing value or an overflow makes the rest missing."""
    out: List[Optional[int]] = []
    product = 1
    ok = True
    overflow = False
    for value in values:
        if ok:
            if value is None:
                ok = False
            else:
                product *= value
                if product < INT_MIN or product > INT_MAX:
                    ok = False
                    overflow = True
        out.append(product if ok else None)
    return out, overflow


def _cumprods(
    x: Any,
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    by_row: bool,
) -> np.ndarray:
    kind, arr = _matrix(x)
    lines, nr, nc = _lines(kind, arr, rows, cols, by_row)
    if nr == 0 or nc == 0:
        dtype = float if kind is ValueKind.REAL else np.int64
        return np.empty((nr, nc), dtype=dtype)

    overflow = False
    flat: List[Any] = []
    for line in lines:
        if kind is ValueKind.REAL:
            flat.extend(itertools.accumulate(line, operator.mul))
        else:
            products, flagged = _cumprod_integer(line)
            overflow = overflow or flagged
            flat.extend(products)

    if overflow:
        warnings.warn(
            "Integer overflow. Detected one or more elements whose absolute "
            f"values were out of the range [{INT_MIN},{INT_MAX}] that can be "
            "used to for integers. Such values are set to missing.",
            RuntimeWarning,
            stacklevel=3,
        )

    if by_row:
        return _to_array(flat, (nr, nc), kind)
    return _to_array(flat, (nc, nr), kind).T


def row_cumprods(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
) -> np.ndarray:
    """Cumulative product along each selected row, over the selected columns.

    ``rows`` and ``cols`` are zero-based; a missing index selects a missing
    value.  For integer data a missing value, or a product outside the
    integer range (which also warns), makes the rest of the row missing, and
    the result is then returned as floats with NaN.
    """
    return _cumprods(x, rows, cols, by_row=True)


def col_cumprods(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
) -> np.ndarray:
    """Cumulative product down each selected column, over the selected rows.

    Missing values and integer overflow are handled as in :func:`row_cumprods`.
    """
    return _cumprods(x, rows, cols, by_row=False)