"""Summary statistics over vectors and matrix rows or columns, with subsetting and missing-value handling."""

__version__ = "0.1.0"

__all__ = [
    "alloc",
    "arithmetic",
    "binning",
    "cumulative",
    "differences",
    "indexing",
    "medians",
    "ranges",
    "ranks",
    "reductions",
    "validation",
]