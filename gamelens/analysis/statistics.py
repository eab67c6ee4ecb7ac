"""
Statistics primitives.

Mean, median and Pearson correlation over plain numeric sequences.
Shared by the aggregator and the orchestrator.
"""

import math
from typing import Sequence


def mean(values: Sequence[float]) -> float:
    """
    Arithmetic mean.

    Callers must not pass an empty sequence (raises ZeroDivisionError).
    """
    return sum(values) / len(values)


def median(values: Sequence[int]) -> float:
    """
    Median of a sequence, or 0.0 when it is empty.

    Sorts a copy; the caller's sequence is left untouched.
    """
    if not values:
        return 0.0

    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2.0
    return float(ordered[mid])


def pearson_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient of two equal-length sequences.

    Args:
        x: First sample
        y: Second sample, same length as x

    Returns:
        Coefficient in [-1, 1]. 0.0 when the lengths differ, either
        sample is empty, or either sample is constant.
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0

    mean_x = mean(x)
    mean_y = mean(y)

    numerator = 0.0
    sum_sq_x = 0.0
    sum_sq_y = 0.0
    for xi, yi in zip(x, y):
        dx = xi - mean_x
        dy = yi - mean_y
        numerator += dx * dy
        sum_sq_x += dx * dx
        sum_sq_y += dy * dy

    denominator = math.sqrt(sum_sq_x * sum_sq_y)
    if denominator == 0.0:
        return 0.0
    return numerator / denominator
