# matstats

Summary statistics over vectors and over the rows or columns of matrices.
Most functions can be limited to a subset of rows, columns or elements, and
they all treat missing values in the same way.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Conventions

- Matrices are two-dimensional NumPy arrays or nested sequences. Data may be
  logical, integer or real, and each function states which of these it accepts.
- Subsetting arguments (`idxs`, `rows`, `cols`, `xrows`, `xcols`, `yidxs`) take
  **zero-based** indices. `None` selects everything. An index of `None` or NaN
  inside the list selects a missing value. Any other index must be in range,
  or `IndexError` is raised.
- In real data a missing value is NaN. When an integer result contains a
  missing value, the result is returned as floats and the missing entries are
  NaN.
- A bad dimension, index, flag or option raises `ValueError`, `TypeError` or
  `IndexError` with a message that names the argument.

## What is included

- `matstats.alloc`: `alloc_vector(length, value)`, `alloc_matrix(nrow, ncol, value)`
  and `alloc_array(dim, value)`. Each returns an array filled with one value,
  keeping the value's dtype. Matrices and arrays are column-major.
- `matstats.indexing`: `index_by_row(dim, idxs)` takes one-based row-major
  positions in an `nrow` by `ncol` matrix and returns the matching one-based
  column-major indices. Without `idxs` it lists every element, row by row.
- `matstats.binning`: `bin_means(y, x, bx, count, right)` averages `y` over the
  bins that the boundaries `bx` cut the sorted `x` into. Bins are `[u, v)` by
  default and `(u, v]` when `right` is true. An empty bin has a NaN mean. When
  `count` is true it returns `(means, counts)`.
- `matstats.reductions`:
  - `sum2(x, idxs, na_rm)` returns the sum.
  - `product_exp_sum_log(x, idxs, na_rm)` returns the product, computed through
    logarithms. It keeps the sign and saturates to ±inf.
  - `weighted_mean(x, w, idxs, na_rm, refine)` returns the weighted mean. Zero
    weights are skipped. For real data, `refine` adds a second pass over the
    residuals.
- `matstats.ranges`:
  - `col_ranges(x, rows, cols, what, na_rm, has_na)` takes `what` from
    `RangeWhat.MIN`, `RangeWhat.MAX` or `RangeWhat.RANGE`. `RANGE` returns an
    `ncols` by 2 matrix.
  - `col_mins` and `col_maxs` give the minimum or maximum of each column.
  - `col_order_stats(x, rows, cols, which)` gives the `which`-th smallest value
    of each column, counting from 1.
  - A column with no values left gives +inf as its minimum and -inf as its
    maximum.
- `matstats.cumulative`: `row_cumprods` and `col_cumprods`. For integer data,
  a missing value or an overflow past ±(2^31 − 1) makes the rest of the line
  missing. An overflow also issues a `RuntimeWarning`.
- `matstats.differences`:
  - `row_diffs(x, rows, cols, lag, differences)` and `col_diffs(...)` work on
    matrices.
  - `diff2(x, idxs, lag, differences)` works on vectors.
  - Each result is shorter than its input by `lag * differences`, and never
    shorter than zero.
- `matstats.medians`: `row_medians(x, rows, cols, na_rm, has_na)` and
  `col_medians(...)`. A line with no values left gives NaN. When `has_na` is
  false, `na_rm` is ignored.
- `matstats.ranks`: `row_ranks(x, rows, cols, ties_method, seed)` and
  `col_ranks(...)`.
  - `TiesMethod` offers `AVERAGE`, `FIRST`, `LAST`, `RANDOM`, `MIN`, `MAX` (the
    default) and `DENSE`.
  - Missing values get a NaN rank.
  - `seed` seeds the shuffle used by `RANDOM`.
- `matstats.arithmetic`: `x_op_y(x, y, operator, xrows, xcols, yidxs, commute,
  na_rm, by_row)`.
  - It combines each selected element of `x` with a recycled element of `y`,
    using `Operator.ADD`, `SUB`, `MUL` or `DIV`.
  - `y` is recycled down the columns, or along the rows when `by_row` is true.
  - `commute` computes `y OP x`.
  - With `na_rm`, a missing operand of `+` or `*` is ignored.
- `matstats.validation`: the shared helpers used by the other modules.
  - `ValueKind` and `value_kind` classify data.
  - `is_missing` tests a value for missingness.
  - `check_flag` and `check_dim` check arguments.
  - `int_from_float` and `float_from_int` convert values.
  - `select_indices` resolves subsetting indices.

## Example

```python
import numpy as np
from matstats.binning import bin_means
from matstats.medians import row_medians
from matstats.ranks import row_ranks, TiesMethod

x = np.array([[1.0, 3.0, 2.0], [4.0, np.nan, 6.0]])
row_medians(x, None, None, True, True)          # array([2., 5.])
row_ranks(x, None, None, TiesMethod.MIN, None)  # [[1., 3., 2.], [1., nan, 2.]]

means, counts = bin_means(
    np.array([1.0, 2.0, 3.0, 4.0]),
    np.array([0.5, 1.5, 2.5, 3.5]),
    np.array([0.0, 2.0, 4.0]),
    True,
    False,
)
# means == array([1.5, 3.5]), counts == array([2, 2])
```

## What is not included

This is a library only and has no command-line tool. It does not provide:

- row or column sums, means, variances, median absolute deviations or counts;
- log-sum-exp;
- cumulative sums, minimums or maximums (only cumulative products are
  available);
- sign tabulation or `anyMissing`-style checks beyond `is_missing` on single
  values.