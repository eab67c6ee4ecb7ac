"""
Categorical Aggregator.

Groups a numeric metric by every label of a multi-valued categorical
column and ranks the labels by average.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Union

from gamelens.analysis.statistics import mean, median
from gamelens.models.category_stat import CategoryStat
from gamelens.models.fields import CategoricalField, NumericField
from gamelens.models.game import GameRecord

logger = logging.getLogger(__name__)

FieldSelector = Union[CategoricalField, Callable[[GameRecord], str]]
MetricSelector = Union[NumericField, Callable[[GameRecord], float]]

LABEL_SEPARATOR = ","


def split_labels(raw: str) -> List[str]:
    """
    Split a comma-separated category value into trimmed labels.

    Empty pieces are dropped, so "" and ", ," both yield [].
    """
    if not raw:
        return []
    return [piece.strip() for piece in raw.split(LABEL_SEPARATOR) if piece.strip()]


def bucket_by_category(
    records: Iterable[GameRecord],
    field_selector: FieldSelector,
    metric_selector: MetricSelector
) -> Dict[str, List[float]]:
    """
    Collect metric values per label.

    A record with several labels adds its metric value to each of their
    buckets.

    Args:
        records: Records to group
        field_selector: Returns the raw categorical text of a record
        metric_selector: Returns the metric value of a record

    Returns:
        Mapping of label -> metric values
    """
    buckets: Dict[str, List[float]] = defaultdict(list)
    for record in records:
        labels = split_labels(field_selector(record))
        if not labels:
            continue
        value = metric_selector(record)
        for label in labels:
            buckets[label].append(value)
    return dict(buckets)


def rank_categories(buckets: Dict[str, List[float]], top_n: int) -> List[CategoryStat]:
    """
    Rank buckets by mean, highest first.

    Labels with equal means are ordered alphabetically.

    Args:
        buckets: Mapping of label -> metric values
        top_n: Maximum number of entries returned

    Returns:
        At most top_n CategoryStat entries

    Raises:
        ValueError: If top_n is negative
    """
    if top_n < 0:
        raise ValueError(f"Invalid top_n: {top_n}. Must be non-negative")

    stats = [
        CategoryStat(label=label, mean=mean(values), median=median(values), count=len(values))
        for label, values in buckets.items()
        if values
    ]
    stats.sort(key=lambda stat: (-stat.mean, stat.label))
    return stats[:top_n]


def aggregate(
    records: Iterable[GameRecord],
    field_selector: FieldSelector,
    metric_selector: MetricSelector,
    top_n: int
) -> List[CategoryStat]:
    """
    Group records by a categorical column and rank the groups.

    An empty record set yields an empty ranking.
    """
    buckets = bucket_by_category(records, field_selector, metric_selector)
    ranked = rank_categories(buckets, top_n)

    logger.debug(
        f"Aggregated {len(buckets)} categories for {_selector_name(field_selector)}, "
        f"keeping top {len(ranked)}"
    )
    return ranked


def _selector_name(selector) -> str:
    if isinstance(selector, (CategoricalField, NumericField)):
        return selector.label
    return getattr(selector, "__name__", repr(selector))


# Design Rationale and Trade-offs:
#
# 1. Why break equal means by label?
#    - Python's sort is stable, so equal means would otherwise keep bucket
#      insertion order, which depends on where a label first appears in the file
#    - Alphabetical order gives the same ranking for any row order
#    - Trade-off: a category that appeared first in the data can rank below
#      an alphabetically earlier one with the same mean
#
# 2. Why count a multi-valued row once per label?
#    - A co-developed game is evidence for each of its developers
#    - Trade-off: bucket counts no longer sum to the number of records
