"""Allocation of vectors, matrices and arrays filled with one value."""

from __future__ import annotations

import math
from typing import Any, Tuple

import numpy as np

from matstats.validation import value_kind


def _fill_value(value: Any) -> Tuple[np.dtype, Any]:
    arr = np.asarray(value)
    if arr.size != 1:
        raise ValueError("Argument 'value' must be a scalar.")
    try:
        value_kind(arr)
    except TypeError:
        raise TypeError(
            "Argument 'value' must be either of type integer, numeric or logical."
        ) from None
    return arr.dtype, arr.reshape(-1)[0]


def _single_integer(value: Any, label: str) -> int:
    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype.kind not in "iu":
        raise TypeError(f"Argument '{label}' must be a single integer.")
    number = int(arr.reshape(-1)[0])
    if number < 0:
        raise ValueError(f"Argument '{label}' is negative.")
    return number


def alloc_vector(length: Any, value: Any) -> np.ndarray:
    """Return a vector of ``length`` elements, each equal to ``value``.

    A float length is truncated toward zero.
    """
    arr = np.asarray(length)
    if arr.size != 1 or arr.dtype.kind not in "iuf":
        raise TypeError("Argument 'length' must be a single numeric.")
    raw = arr.reshape(-1)[0]
    if arr.dtype.kind == "f" and not math.isfinite(raw):
        raise ValueError("Argument 'length' must be finite.")
    n = int(raw)
    if n < 0:
        raise ValueError("Argument 'length' is negative.")
    dtype, fill = _fill_value(value)
    return np.full(n, fill, dtype=dtype)


def alloc_matrix(nrow: Any, ncol: Any, value: Any) -> np.ndarray:
    """Return an ``nrow`` by ``ncol`` column-major matrix filled with ``value``."""
    nr = _single_integer(nrow, "nrow")
    nc = _single_integer(ncol, "ncol")
    dtype, fill = _fill_value(value)
    return np.full((nr, nc), fill, dtype=dtype, order="F")


def alloc_array(dim: Any, value: Any) -> np.ndarray:
    """Return a column-major array of shape ``dim`` filled with ``value``."""
    arr = np.asarray(dim)
    if arr.ndim > 1 or arr.size == 0:
        raise ValueError(
            "Argument 'dim' must be an integer vector of at least length one."
        )
    if arr.dtype.kind not in "iu":
        raise TypeError(
            "Argument 'dim' must be an integer vector of at least length one."
        )
    shape = tuple(int(d) for d in arr.reshape(-1))
    if any(d < 0 for d in shape):
        raise ValueError(f"Argument 'dim' specifies a negative extent: {shape}")
    dtype, fill = _fill_value(value)
    return np.full(shape, fill, dtype=dtype, order="F")