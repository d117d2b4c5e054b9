"""Sums, products and weighted means of (optionally subsetted) vectors."""

from __future__ import annotations

import math
import sys
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from matstats.validation import ValueKind, check_flag, select_indices, value_kind

_DBL_MAX = sys.float_info.max


def _vector(x: Any, label: str) -> Tuple[ValueKind, list]:
    arr = np.asarray(x)
    if arr.ndim > 1:
        raise ValueError(f"Argument '{label}' must be a matrix or a vector.")
    try:
        kind = value_kind(arr)
    except TypeError:
        raise TypeError(
            f"Argument '{label}' must be of type logical, integer or numeric, "
            f"not '{arr.dtype}'."
        ) from None
    values = arr.reshape(-1).tolist()
    if kind is ValueKind.REAL:
        values = [float(v) for v in values]
    else:
        values = [int(v) for v in values]
    return kind, values


def _gather(values: list, positions: List[Optional[int]], missing: Any) -> list:
    return [missing if p is None else values[p] for p in positions]


def _is_nan(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _divide(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def _log_abs(t: float) -> float:
    if math.isnan(t):
        return math.nan
    if t == 0:
        return -math.inf
    if math.isinf(t):
        return math.inf
    return math.log(t)


def sum2(x: Any, idxs: Optional[Iterable[Any]] = None, na_rm: Any = False) -> float:
    """Sum the elements of ``x`` picked by zero-based ``idxs``.

    A missing index picks a missing value.  Missing values give NaN unless
    ``na_rm`` is true, in which case they are skipped.
    """
    kind, values = _vector(x, "x")
    narm = check_flag(na_rm, "na_rm")
    positions = select_indices(idxs, len(values))

    if kind is ValueKind.REAL:
        picked = _gather(values, positions, math.nan)
        total = 0.0
        for value in picked:
            if narm and math.isnan(value):
                continue
            total += value
        return total

    picked = _gather(values, positions, None)
    integer_total = 0
    for value in picked:
        if value is None:
            if narm:
                continue
            return math.nan
        integer_total += value
    return float(integer_total)


def product_exp_sum_log(
    x: Any, idxs: Optional[Iterable[Any]] = None, na_rm: Any = False
) -> float:
    """Product of the selected elements, computed as exp(sum(log|x|)) with sign.

    Any missing value that is not removed makes the result NaN.  The result
    saturates to plus or minus infinity on overflow.
    """
    kind, values = _vector(x, "x")
    narm = check_flag(na_rm, "na_rm")
    positions = select_indices(idxs, len(values))
    missing = math.nan if kind is ValueKind.REAL else None
    picked = _gather(values, positions, missing)

    log_sum = 0.0
    negative = False
    has_zero = False
    for value in picked:
        if narm and _is_nan(value):
            continue
        if kind is ValueKind.REAL:
            t = value
            if t < 0:
                negative = not negative
                t = -t
        else:
            if value is None:
                log_sum = math.nan
                break
            t = value
            if t < 0:
                negative = not negative
                t = -t
            elif t == 0:
                has_zero = True
                if narm:
                    break
        log_sum += _log_abs(float(t))

    if math.isnan(log_sum):
        return math.nan
    if has_zero:
        return 0.0
    try:
        result = math.exp(log_sum)
    except OverflowError:
        result = math.inf
    if negative:
        result = -result
    if result > _DBL_MAX:
        return math.inf
    if result < -_DBL_MAX:
        return -math.inf
    return result


def weighted_mean(
    x: Any,
    w: Any,
    idxs: Optional[Iterable[Any]] = None,
    na_rm: Any = False,
    refine: Any = True,
) -> float:
    """Weighted mean of the selected elements of ``x`` with weights ``w``.

    Elements with zero weight are ignored.  For real data, ``refine`` adds a
    second pass over the residuals for extra precision.
    """
    kind, values = _vector(x, "x")
    w_kind, weights = _vector(w, "w")
    if w_kind is ValueKind.LOGICAL:
        raise TypeError("Argument 'w' cannot be logical.")
    weights = [float(v) for v in weights]
    if len(weights) != len(values):
        raise ValueError(
            f"Argument 'w' and 'x' are of different lengths: "
            f"{len(weights)} != {len(values)}"
        )
    narm = check_flag(na_rm, "na_rm")
    do_refine = check_flag(refine, "refine")
    positions = select_indices(idxs, len(values))
    missing = math.nan if kind is ValueKind.REAL else None
    picked = _gather(values, positions, missing)
    picked_w = _gather(weights, positions, math.nan)
    pairs = [(wt, v) for wt, v in zip(picked_w, picked) if wt != 0]

    total = 0.0
    wtotal = 0.0
    for weight, value in pairs:
        if kind is ValueKind.REAL:
            if narm and math.isnan(value):
                continue
            total += weight * value
            wtotal += weight
        else:
            if value is None:
                if narm:
                    continue
                total = math.nan
                break
            total += weight * value
            wtotal += weight

    if wtotal > _DBL_MAX or wtotal < -_DBL_MAX:
        return math.nan
    if total > _DBL_MAX:
        return math.inf
    if total < -_DBL_MAX:
        return -math.inf
    avg = _divide(total, wtotal)

    if kind is ValueKind.REAL and do_refine and math.isfinite(avg):
        residual = 0.0
        for weight, value in pairs:
            if narm and math.isnan(value):
                continue
            residual += weight * (value - avg)
        avg += _divide(residual, wtotal)
    return avg