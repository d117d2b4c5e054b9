"""Means of values grouped into consecutive bins of a sorted variable."""

from __future__ import annotations

import math
import warnings
from typing import Any, Callable, List, Tuple, Union

import numpy as np

from matstats.validation import INT_MAX, ValueKind, check_flag, value_kind


def _real_vector(values: Any, label: str) -> List[float]:
    arr = np.asarray(values)
    if arr.ndim > 1:
        raise ValueError(f"Argument '{label}' must be a matrix or a vector.")
    try:
        kind = value_kind(arr)
    except TypeError:
        raise TypeError(
            f"Argument '{label}' must be of type logical, integer or numeric, "
            f"not '{arr.dtype}'."
        ) from None
    if kind is ValueKind.LOGICAL:
        raise TypeError(f"Argument '{label}' cannot be logical.")
    return [float(v) for v in arr.reshape(-1).tolist()]


def bin_means(
    y: Any, x: Any, bx: Any, count: Any = True, right: Any = False
) -> Union[np.ndarray, Tuple[np.ndarray, np.ndarray]]:
    """Average ``y`` over the bins that the boundaries ``bx`` cut ``x`` into.

    ``x`` is expected to be sorted in increasing order.  Bins are ``[u, v)``
    by default and ``(u, v]`` when ``right`` is true.  Empty bins get a NaN
    mean.  With ``count`` true, the number of values in each bin is returned
    as well, as the second item of a tuple.
    """
    ys = _real_vector(y, "y")
    xs = _real_vector(x, "x")
    if len(xs) != len(ys):
        raise ValueError(
            f"Argument 'y' and 'x' are of different lengths: {len(ys)} != {len(xs)}"
        )
    bounds = _real_vector(bx, "bx")
    nbins = len(bounds) - 1
    if nbins <= 0:
        raise ValueError(
            "Argument 'bx' must specify at least two bin boundaries "
            f"(= one bin): {len(bounds)}"
        )
    closed_right = check_flag(right, "right")
    with_count = check_flag(count, "count")

    before_first: Callable[[float, float], bool]
    past_bin: Callable[[float, float], bool]
    if closed_right:
        before_first = lambda v, b: v <= b  # noqa: E731
        past_bin = lambda v, b: v > b  # noqa: E731
    else:
        before_first = lambda v, b: v < b  # noqa: E731
        past_bin = lambda v, b: v >= b  # noqa: E731

    means = np.full(nbins, math.nan, dtype=float)
    counts = np.zeros(nbins, dtype=np.int64)
    overflow = False

    def close(jj: int, total: float, n: int) -> None:
        nonlocal overflow
        if n > INT_MAX:
            overflow = True
            counts[jj] = INT_MAX
        else:
            counts[jj] = n
        means[jj] = total / n if n > 0 else math.nan

    start = 0
    while start < len(xs) and before_first(xs[start], bounds[0]):
        start += 1

    jj = 0
    total = 0.0
    n = 0
    exhausted = False
    for xi, yi in zip(xs[start:], ys[start:]):
        while past_bin(xi, bounds[jj + 1]):
            close(jj, total, n)
            total = 0.0
            n = 0
            jj += 1
            if jj >= nbins:
                exhausted = True
                break
        if exhausted:
            break
        total += yi
        n += 1

    if jj < nbins:
        close(jj, total, n)

    if overflow:
        warnings.warn(
            "Integer overflow. Detected one or more bins with a count that is "
            "greater than what can be represented by the integer data type. "
            f"Setting count to the maximum integer possible ({INT_MAX}). "
            "The bin mean is still correct.",
            RuntimeWarning,
            stacklevel=2,
        )

    if with_count:
        return means, counts
    return means