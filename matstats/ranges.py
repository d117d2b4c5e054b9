"""Column minimums, maximums, ranges and order statistics of matrices."""

from __future__ import annotations

import enum
import math
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from matstats.validation import ValueKind, check_flag, select_indices, value_kind


class RangeWhat(enum.IntEnum):
    """Which extremes :func:`col_ranges` reports."""

    MIN = 0
    MAX = 1
    RANGE = 2


def _checked_kind(arr: np.ndarray, label: str = "x") -> ValueKind:
    """Kind of a numeric (integer or real) array; logical and other data refused."""
    try:
        kind = value_kind(arr)
    except TypeError:
        raise TypeError(
            f"Argument '{label}' must be of type logical, integer or numeric, "
            f"not '{arr.dtype}'."
        ) from None
    if kind is ValueKind.LOGICAL:
        raise TypeError(f"Argument '{label}' cannot be logical.")
    return kind


def _matrix(x: Any, label: str = "x") -> Tuple[ValueKind, np.ndarray]:
    arr = np.asarray(x)
    if arr.ndim != 2:
        raise ValueError(f"Argument '{label}' must be a matrix.")
    return _checked_kind(arr, label), arr


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _lines(
    kind: ValueKind,
    arr: np.ndarray,
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    by_row: bool,
) -> Tuple[List[List[Any]], int, int]:
    """Selected rows (or columns) of ``arr`` as lists of Python values.

    Missing indices give NaN for real data and None for integer data.
    Returns the lines and the numbers of selected rows and columns.
    """
    nrow, ncol = arr.shape
    row_sel = select_indices(rows, nrow)
    col_sel = select_indices(cols, ncol)
    table = arr.tolist()
    is_real = kind is ValueKind.REAL
    missing = math.nan if is_real else None
    convert = float if is_real else int

    def cell(r: Optional[int], c: Optional[int]) -> Any:
        if r is None or c is None:
            return missing
        return convert(table[r][c])

    if by_row:
        lines = [[cell(r, c) for c in col_sel] for r in row_sel]
    else:
        lines = [[cell(r, c) for r in row_sel] for c in col_sel]
    return lines, len(row_sel), len(col_sel)


def _to_array(flat: List[Any], shape: Tuple[int, ...], kind: ValueKind) -> np.ndarray:
    """Array of results; integer results with a missing value become floats."""
    if kind is ValueKind.REAL:
        return np.array(flat, dtype=float).reshape(shape)
    if any(value is None for value in flat):
        filled = [math.nan if value is None else float(value) for value in flat]
        return np.array(filled, dtype=float).reshape(shape)
    return np.array(flat, dtype=np.int64).reshape(shape)


def _extremes(values: Iterable[Any], na_rm: bool) -> Tuple[str, Any, Any]:
    """Return ("missing" | "empty" | "ok", low, high) for one column."""
    low = high = None
    counted = False
    for value in values:
        if _is_missing(value):
            if not na_rm:
                return "missing", None, None
            continue
        if not counted:
            low = high = value
            counted = True
        elif value < low:
            low = value
        elif value > high:
            high = value
    return ("ok" if counted else "empty"), low, high


def col_ranges(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    what: Any = RangeWhat.RANGE,
    na_rm: Any = False,
    has_na: Any = True,
) -> np.ndarray:
    """Minimum, maximum or both for each selected column of ``x``.

    ``rows`` and ``cols`` are zero-based; a missing index selects a missing
    value.  A column holding a missing value gives NaN unless ``na_rm`` is
    true.  A column with no values left gives +inf as minimum and -inf as
    maximum; integer results are then returned as floats.  With
    ``RangeWhat.RANGE`` the result has one row per column, minimums in the
    first column and maximums in the second.
    """
    kind, arr = _matrix(x)
    try:
        which = RangeWhat(int(what))
    except (TypeError, ValueError):
        raise ValueError(f"Invalid value of 'what': {what!r}") from None
    narm = check_flag(na_rm, "na_rm")
    hasna = check_flag(has_na, "has_na")
    if not hasna:
        narm = False

    columns, _, ncols = _lines(kind, arr, rows, cols, by_row=False)
    results = [_extremes(column, narm) for column in columns]

    lows: List[float] = []
    highs: List[float] = []
    as_float = kind is ValueKind.REAL
    for state, low, high in results:
        if state == "missing":
            as_float = True
            lows.append(math.nan)
            highs.append(math.nan)
        elif state == "empty":
            as_float = True
            lows.append(math.inf)
            highs.append(-math.inf)
        else:
            lows.append(low)
            highs.append(high)

    dtype = float if as_float else arr.dtype
    if which is RangeWhat.MIN:
        return np.array(lows, dtype=dtype)
    if which is RangeWhat.MAX:
        return np.array(highs, dtype=dtype)
    out = np.empty((ncols, 2), dtype=dtype)
    if ncols:
        out[:, 0] = lows
        out[:, 1] = highs
    return out


def col_mins(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: Any = False,
) -> np.ndarray:
    """Minimum of each selected column of ``x``."""
    return col_ranges(x, rows, cols, RangeWhat.MIN, na_rm, True)


def col_maxs(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    na_rm: Any = False,
) -> np.ndarray:
    """Maximum of each selected column of ``x``."""
    return col_ranges(x, rows, cols, RangeWhat.MAX, na_rm, True)


def col_order_stats(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    which: Any = 1,
) -> np.ndarray:
    """The ``which``-th smallest value (counting from 1) of each selected column.

    Missing values are not supported: missing indices raise ValueError, and
    NaN values in real data sort after every number.
    """
    kind, arr = _matrix(x)
    which_arr = np.asarray(which)
    if which_arr.size != 1:
        raise ValueError("Argument 'which' must be a single number.")
    if which_arr.dtype.kind not in "iuf":
        raise TypeError("Argument 'which' must be a numeric number.")
    raw = which_arr.reshape(-1)[0]
    if which_arr.dtype.kind == "f" and not math.isfinite(raw):
        raise ValueError(f"Argument 'which' is out of range: {raw}")

    nrow, ncol = arr.shape
    row_sel = select_indices(rows, nrow)
    col_sel = select_indices(cols, ncol)
    if any(r is None for r in row_sel) and col_sel:
        raise ValueError("Argument 'rows' must not contain missing value")
    if any(c is None for c in col_sel) and row_sel:
        raise ValueError("Argument 'cols' must not contain missing value")

    qq = int(raw) - 1
    if qq < 0 or qq >= len(row_sel):
        raise ValueError(f"Argument 'which' is out of range: {qq + 1}")

    dtype = float if kind is ValueKind.REAL else arr.dtype
    if not col_sel:
        return np.empty(0, dtype=dtype)
    sub = arr[np.ix_(row_sel, col_sel)]
    ordered = np.partition(sub, qq, axis=0)
    return np.asarray(ordered[qq, :], dtype=dtype)