"""Conversion of row-major element positions into column-major indices."""

from __future__ import annotations

import operator
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from matstats.validation import INT_MAX


def _matrix_dim(dim: Any) -> Tuple[int, int]:
    arr = np.asarray(dim)
    if arr.ndim != 1 or arr.size != 2 or arr.dtype.kind not in "iu":
        raise ValueError("Argument 'dim' must be an integer vector of length two.")
    nrow, ncol = (int(v) for v in arr)
    for d in (nrow, ncol):
        if d < 0:
            raise ValueError(f"Argument 'dim' specifies a negative value: {d}")
    if nrow * ncol > INT_MAX:
        raise ValueError(
            f"Argument 'dim' ({nrow},{ncol}) specifies a matrix that has more "
            f"than 2^31-1 elements: {nrow * ncol}"
        )
    return nrow, ncol


def index_by_row(dim: Any, idxs: Optional[Iterable[Any]] = None) -> List[int]:
    """Map one-based row-major positions to one-based column-major indices.

    Without ``idxs`` every element is listed, visiting the matrix row by row.
    """
    nrow, ncol = _matrix_dim(dim)
    if idxs is None:
        return [row + col * nrow for row in range(1, nrow + 1) for col in range(ncol)]

    n_max = nrow * ncol
    result: List[int] = []
    for value in idxs:
        position = operator.index(value)
        if position < 1:
            raise ValueError(
                f"Argument 'idxs' may only contain positive indices: {position}"
            )
        if position > n_max:
            raise IndexError(
                f"Argument 'idxs' contains indices larger than {n_max}: {position}"
            )
        row, col = divmod(position - 1, ncol)
        result.append(row + nrow * col + 1)
    return result