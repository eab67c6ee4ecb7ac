"""
Report formatting.

Builds the plain-text ranking and correlation reports printed by the
orchestrator. Downstream consumers parse these lines, so the line shapes
are fixed.
"""

from typing import Dict, List, Tuple

from gamelens.models.category_stat import CategoryStat

BANNER_FILL = "-"
DEFAULT_FILTER_LABEL = "final_rating>0"


def banner(title: str, width: int) -> str:
    """Title centred in a fixed-width dashed line."""
    return f" {title} ".center(width, BANNER_FILL)


def closing_banner(width: int) -> str:
    return BANNER_FILL * width


def format_category_report(
    field_name: str,
    stats: List[CategoryStat],
    top_n: int,
    width: int,
    metric_name: str = "plays",
    filter_label: str = DEFAULT_FILTER_LABEL
) -> str:
    """
    Ranked category report.

    Args:
        field_name: Categorical column that was ranked
        stats: Ranked entries, best first
        top_n: Ranking size requested (shown in the title)
        width: Banner width
        metric_name: Metric that was averaged
        filter_label: Filter applied to the records, shown in the title

    Returns:
        Report text, one line per rank between two banners
    """
    lines = [banner(f"Top {top_n} {field_name} by average {metric_name} ({filter_label})", width)]
    for rank, stat in enumerate(stats, start=1):
        lines.append(stat.format_line(rank))
    lines.append(closing_banner(width))
    return "\n".join(lines)


def format_correlation_report(
    correlations: Dict[Tuple[str, str], float],
    width: int,
    base_name: str = "plays",
    filter_label: str = DEFAULT_FILTER_LABEL
) -> str:
    """
    Correlation report.

    Args:
        correlations: (x name, y name) -> coefficient, in display order
        width: Banner width
        base_name: Metric every pair is correlated against
        filter_label: Filter applied to the records, shown in the title

    Returns:
        Report text with coefficients to 4 decimals between two banners
    """
    lines = [banner(f"Correlations with {base_name} (only games with {filter_label})", width)]
    for (x_name, y_name), value in correlations.items():
        lines.append(f"Correlation({x_name}, {y_name}): {value:.4f}")
    lines.append(closing_banner(width))
    return "\n".join(lines)
