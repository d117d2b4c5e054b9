"""Element-wise arithmetic between a matrix and a recycled vector."""

from __future__ import annotations

import enum
import math
import warnings
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from matstats.validation import (
    INT_MAX,
    INT_MIN,
    ValueKind,
    check_flag,
    select_indices,
    value_kind,
)


class Operator(str, enum.Enum):
    """The arithmetic operators :func:`x_op_y` supports."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def _operator(value: Any) -> Operator:
    try:
        return Operator(value)
    except ValueError:
        raise ValueError(f"Unknown value of 'operator': {value!r}") from None


def _kind(arr: np.ndarray, label: str) -> ValueKind:
    try:
        return value_kind(arr)
    except TypeError:
        raise TypeError(
            f"Argument '{label}' must be of type logical, integer or numeric, "
            f"not '{arr.dtype}'."
        ) from None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _apply(op: Operator, a: Any, b: Any) -> Any:
    if a is None or b is None:
        return None
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUB:
        return a - b
    if op is Operator.MUL:
        return a * b
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def _combine(op: Operator, a: Any, b: Any, na_rm: bool) -> Any:
    if na_rm and op in (Operator.ADD, Operator.MUL):
        if _is_missing(a):
            return b
        if _is_missing(b):
            return a
    return _apply(op, a, b)


def _prepare(
    x: Any, y: Any
) -> Tuple[np.ndarray, list, ValueKind, list, ValueKind]:
    arr = np.asarray(x)
    if arr.ndim != 2:
        raise ValueError("Argument 'x' must be a matrix.")
    x_kind = _kind(arr, "x")
    y_arr = np.asarray(y)
    if y_arr.ndim > 1:
        raise ValueError("Argument 'y' must be a vector.")
    y_kind = _kind(y_arr, "y")
    x_conv = float if x_kind is ValueKind.REAL else int
    y_conv = float if y_kind is ValueKind.REAL else int
    table = [[x_conv(v) for v in row] for row in arr.tolist()]
    y_values = [y_conv(v) for v in y_arr.reshape(-1).tolist()]
    return arr, table, x_kind, y_values, y_kind


def x_op_y(
    x: Any,
    y: Any,
    operator: Any = Operator.ADD,
    xrows: Optional[Iterable[Any]] = None,
    xcols: Optional[Iterable[Any]] = None,
    yidxs: Optional[Iterable[Any]] = None,
    commute: Any = False,
    na_rm: Any = False,
    by_row: Any = False,
) -> np.ndarray:
    """Combine each selected element of ``x`` with a recycled element of ``y``.

    ``y`` is recycled down the columns of the selection, or along its rows
    when ``by_row`` is true.  With ``commute`` the operands are swapped, so
    the result is ``y OP x``.  With ``na_rm`` a missing operand of ``+`` or
    ``*`` is ignored and the other one returned.  Both operands integer (or
    logical) give an integer result, except for ``/``; a result outside the
    integer range becomes missing and a warning is issued.  Missing values
    in an integer result turn it into floats with NaN.
    """
    arr, table, x_kind, y_values, y_kind = _prepare(x, y)
    op = _operator(operator)
    swap = check_flag(commute, "commute")
    narm = check_flag(na_rm, "na_rm")
    byrow = check_flag(by_row, "by_row")

    nrow, ncol = arr.shape
    row_sel = select_indices(xrows, nrow)
    col_sel = select_indices(xcols, ncol)
    y_sel = select_indices(yidxs, len(y_values))
    nr, nc = len(row_sel), len(col_sel)

    if nr * nc > 0 and not y_sel:
        raise ValueError("Argument 'y' selects no elements to recycle.")

    x_missing = math.nan if x_kind is ValueKind.REAL else None
    y_missing = math.nan if y_kind is ValueKind.REAL else None
    picked_y = [y_missing if p is None else y_values[p] for p in y_sel]
    integer_result = (
        x_kind is not ValueKind.REAL
        and y_kind is not ValueKind.REAL
        and op is not Operator.DIV
    )

    flat: List[Any] = []
    overflow = False
    for jj, c in enumerate(col_sel):
        for ii, r in enumerate(row_sel):
            xv = x_missing if r is None or c is None else table[r][c]
            position = ii * nc + jj if byrow else jj * nr + ii
            yv = picked_y[position % len(picked_y)]
            value = _combine(op, yv, xv, narm) if swap else _combine(op, xv, yv, narm)
            if integer_result and value is not None and not INT_MIN <= value <= INT_MAX:
                overflow = True
                value = None
            flat.append(value)

    if overflow:
        warnings.warn(
            "Integer overflow. Detected one or more elements whose absolute "
            f"values were out of the range [{INT_MIN},{INT_MAX}] that can be "
            "used to for integers. Such values are set to missing.",
            RuntimeWarning,
            stacklevel=2,
        )

    if integer_result and all(v is not None for v in flat):
        return np.array(flat, dtype=np.int64).reshape((nc, nr)).T
    filled = [math.nan if v is None else float(v) for v in flat]
    return np.array(filled, dtype=float).reshape((nc, nr)).T