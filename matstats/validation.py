"""Argument checks and value conversions shared by the statistics functions."""

from __future__ import annotations

import enum
import math
import numbers
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

INT_MAX = 2**31 - 1
"""Largest value an integer result may hold."""

INT_MIN = -INT_MAX
"""Smallest value an integer result may hold (the one below it marks missing)."""

_C_INT_MIN = -(2**31)


class ValueKind(enum.Enum):
    """The three kinds of data the functions accept."""

    LOGICAL = "logical"
    INTEGER = "integer"
    REAL = "numeric"


def value_kind(x: Any) -> ValueKind:
    """Return the kind of a scalar, sequence or array, or raise TypeError."""
    arr = np.asarray(x)
    kind = arr.dtype.kind
    if kind == "b":
        return ValueKind.LOGICAL
    if kind in "iu":
        return ValueKind.INTEGER
    if kind == "f":
        return ValueKind.REAL
    raise TypeError(
        f"Argument must be of type logical, integer or numeric, not '{arr.dtype}'."
    )


def is_missing(value: Any) -> bool:
    """Tell whether a single value is missing: None or a NaN."""
    if value is None:
        return True
    if isinstance(value, (bool, np.bool_)):
        return False
    try:
        return math.isnan(value)
    except TypeError:
        return False


def check_flag(value: Any, label: str) -> bool:
    """Return a single logical argument as bool; missing values are refused."""
    arr = np.asarray(value)
    if arr.size != 1:
        raise ValueError(f"Argument '{label}' must be a single value.")
    if arr.dtype.kind not in "biu":
        raise TypeError(f"Argument '{label}' must be a logical.")
    flag = int(arr.reshape(-1)[0])
    if flag not in (0, 1):
        raise ValueError(f"Argument '{label}' must be either True or False.")
    return bool(flag)


def check_dim(dim: Any, length: int) -> Tuple[int, int]:
    """Check that ``dim`` is (nrow, ncol) describing ``length`` elements."""
    arr = np.asarray(dim)
    if arr.ndim != 1 or arr.size != 2 or arr.dtype.kind not in "iu":
        raise ValueError("Argument 'dim' must be an integer vector of length two.")
    nrow, ncol = (int(v) for v in arr)
    if nrow < 0:
        raise ValueError(
            f"Argument 'dim' specifies a negative number of rows (dim[1]): {nrow}"
        )
    if ncol < 0:
        raise ValueError(
            f"Argument 'dim' specifies a negative number of columns (dim[2]): {ncol}"
        )
    if nrow * ncol != length:
        raise ValueError(
            f"Argument 'dim' does not match length of argument 'x': "
            f"{nrow} * {ncol} != {length}"
        )
    return nrow, ncol


def int_from_float(value: float) -> Optional[int]:
    """Truncate a float to an integer; NaN and out-of-range values give None."""
    if math.isnan(value):
        return None
    if value > INT_MAX or value <= _C_INT_MIN:
        return None
    return int(value)


def float_from_int(value: Optional[int]) -> float:
    """Convert an integer to float; a missing integer (None) becomes NaN."""
    if value is None:
        return math.nan
    return float(value)


def _as_index(value: Any) -> Optional[int]:
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Indices must be integer or numeric, not logical.")
    if is_missing(value):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real) and float(value).is_integer():
        return int(value)
    raise TypeError(f"Indices must be whole numbers, not {value!r}.")


def select_indices(idxs: Optional[Iterable[Any]], max_index: int) -> List[Optional[int]]:
    """Resolve zero-based indices into a sequence of length ``max_index``.

    ``None`` selects every position in order.  Missing entries (None or NaN)
    are kept as None; any other index must lie in ``range(max_index)``.
    """
    if max_index < 0:
        raise ValueError(f"Argument 'max_index' is negative: {max_index}")
    if idxs is None:
        return list(range(max_index))
    items = idxs.tolist() if isinstance(idxs, np.ndarray) else list(idxs)
    selected: List[Optional[int]] = []
    for item in items:
        idx = _as_index(item)
        if idx is not None and not 0 <= idx < max_index:
            raise IndexError(f"Index {idx} is out of range [0, {max_index}).")
        selected.append(idx)
    return selected