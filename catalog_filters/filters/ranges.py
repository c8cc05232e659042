"""Split a continuous numeric domain into evenly spaced buckets."""

from typing import TypedDict

from catalog_filters.exceptions import InvalidArgumentError


class Range(TypedDict):
    min_range: float
    max_range: float


def split_into_ranges(min_value: float, max_value: float, n: int) -> list[Range]:
    """Split ``[min_value, max_value]`` into ``n`` contiguous ranges.

    Bucket ``i`` spans ``[min + i * width, min + (i + 1) * width]``. Each
    lower bound is the previous bucket's upper bound, and the last upper bound
    is pinned to ``max_value`` so float drift never leaks past the domain.
    When ``min_value == max_value`` every bucket is the zero-width range
    ``[min_value, min_value]``.

    Values are not rounded here; rounding is a display concern.

    Args:
        min_value: Lower bound of the domain.
        max_value: Upper bound of the domain.
        n: Number of buckets, at least 1.

    Returns:
        List of ``n`` ranges ordered from lowest to highest.

    Raises:
        InvalidArgumentError: If ``n`` is not a positive integer or the bounds
            are inverted.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidArgumentError(f"Bucket count must be a positive integer, got {n!r}")
    if min_value > max_value:
        raise InvalidArgumentError(
            f"Range minimum {min_value!r} is greater than maximum {max_value!r}"
        )

    width = (max_value - min_value) / n
    ranges: list[Range] = []
    lower = min_value
    for i in range(n):
        upper = max_value if i == n - 1 else min_value + (i + 1) * width
        ranges.append({"min_range": lower, "max_range": upper})
        lower = upper

    return ranges
