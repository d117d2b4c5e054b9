"""Lagged and iterated differences of vectors and matrix rows or columns."""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional

import numpy as np

from matstats.ranges import _checked_kind, _lines, _to_array
from matstats.validation import ValueKind, select_indices


def _positive_int(value: Any, label: str) -> int:
    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype.kind not in "iuf":
        raise TypeError(f"Argument '{label}' must be a positive integer.")
    raw = arr.reshape(-1)[0]
    if arr.dtype.kind == "f" and not (math.isfinite(raw) and float(raw).is_integer()):
        raise ValueError(f"Argument '{label}' must be a positive integer.")
    number = int(raw)
    if number < 1:
        raise ValueError(f"Argument '{label}' must be a positive integer.")
    return number


def _subtract(a: Any, b: Any, kind: ValueKind) -> Any:
    if kind is ValueKind.REAL:
        return a - b
    if a is None or b is None:
        return None
    return a - b


def _differences(values: List[Any], lag: int, order: int, kind: ValueKind) -> List[Any]:
    for _ in range(order):
        values = [
            _subtract(later, earlier, kind)
            for earlier, later in zip(values, values[lag:])
        ]
    return values


def _matrix_diffs(
    x: Any,
    rows: Optional[Iterable[Any]],
    cols: Optional[Iterable[Any]],
    lag: Any,
    differences: Any,
    by_row: bool,
) -> np.ndarray:
    arr = np.asarray(x)
    if arr.ndim != 2:
        raise ValueError("Argument 'x' must be a matrix.")
    kind = _checked_kind(arr, "x")
    lagg = _positive_int(lag, "lag")
    order = _positive_int(differences, "differences")

    lines, nr, nc = _lines(kind, arr, rows, cols, by_row)
    shrink = lagg * order
    if by_row:
        shape = (nr, max(0, nc - shrink))
    else:
        shape = (nc, max(0, nr - shrink))

    flat = [
        value
        for line in lines
        for value in _differences(line, lagg, order, kind)
    ]
    result = _to_array(flat, shape, kind)
    return result if by_row else result.T


def row_diffs(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    lag: Any = 1,
    differences: Any = 1,
) -> np.ndarray:
    """Lagged, iterated differences along each selected row.

    The result has ``max(0, ncols - lag * differences)`` columns.  For
    integer data a missing value gives a missing difference, and the result
    is then returned as floats with NaN.
    """
    return _matrix_diffs(x, rows, cols, lag, differences, by_row=True)


def col_diffs(
    x: Any,
    rows: Optional[Iterable[Any]] = None,
    cols: Optional[Iterable[Any]] = None,
    lag: Any = 1,
    differences: Any = 1,
) -> np.ndarray:
    """Lagged, iterated differences down each selected column.

    The result has ``max(0, nrows - lag * differences)`` rows.
    """
    return _matrix_diffs(x, rows, cols, lag, differences, by_row=False)


def diff2(
    x: Any,
    idxs: Optional[Iterable[Any]] = None,
    lag: Any = 1,
    differences: Any = 1,
) -> np.ndarray:
    """Lagged, iterated differences of the elements of ``x`` picked by ``idxs``.

    ``idxs`` is zero-based; a missing index picks a missing value.  The
    result has ``max(0, len(idxs) - lag * differences)`` elements.
    """
    arr = np.asarray(x)
    if arr.ndim > 1:
        raise ValueError("Argument 'x' must be a matrix or a vector.")
    kind = _checked_kind(arr, "x")
    lagg = _positive_int(lag, "lag")
    order = _positive_int(differences, "differences")

    is_real = kind is ValueKind.REAL
    values = [float(v) if is_real else int(v) for v in arr.reshape(-1).tolist()]
    positions = select_indices(idxs, len(values))
    missing = math.nan if is_real else None
    picked = [missing if p is None else values[p] for p in positions]

    result = _differences(picked, lagg, order, kind)
    return _to_array(result, (len(result),), kind)