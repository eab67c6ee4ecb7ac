"""
Analysis Orchestrator.

Runs the analysis over a loaded record set:
filter -> correlations -> category rankings -> scatter charts.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from gamelens.analysis.aggregation import aggregate
from gamelens.analysis.reporting import format_category_report, format_correlation_report
from gamelens.analysis.statistics import pearson_correlation
from gamelens.models.category_stat import CategoryStat
from gamelens.models.fields import CategoricalField, NumericField
from gamelens.models.game import GameRecord
from gamelens.utils.plotting import ScatterPlotter, ScatterRequest
import config.settings as settings

logger = logging.getLogger(__name__)

RecordPredicate = Callable[[GameRecord], bool]


@dataclass(frozen=True)
class RatingFilter:
    """
    Validity predicate keeping records whose final rating is strictly
    above a threshold.
    """
    threshold: float = 0.0

    def __call__(self, record: GameRecord) -> bool:
        return record.final_rating > self.threshold

    @property
    def description(self) -> str:
        return f"final_rating>{self.threshold:g}"


# Default validity predicate: only records with a positive final rating
is_rated = RatingFilter(0.0)


def rating_above(threshold: float) -> RatingFilter:
    return RatingFilter(threshold)


def describe_filter(predicate: RecordPredicate) -> str:
    """Text shown in report titles for the filter that was applied."""
    return getattr(predicate, "description", "custom filter")


@dataclass
class AnalysisReport:
    """
    Results of one orchestrator run.
    """
    total_records: int
    analyzed_records: int
    correlations: Dict[Tuple[str, str], float] = field(default_factory=dict)
    rankings: Dict[str, List[CategoryStat]] = field(default_factory=dict)
    charts: List[str] = field(default_factory=list)


class AnalysisOrchestrator:
    """
    Sequences the analysis for one dataset.

    Pipeline:
    1. Filter records by a validity predicate
    2. Correlate plays with final_rating, wishlists and reviews
    3. Rank developers, genres and platforms by average plays
    4. Render scatter charts of rating/wishlists against plays
    """

    def __init__(
        self,
        plotter: Optional[ScatterPlotter] = None,
        output_dir: str = "",
        top_n: int = settings.TOP_N,
        banner_width: int = settings.BANNER_WIDTH,
        categorical_fields: Sequence[CategoricalField] = None,
        correlation_targets: Sequence[NumericField] = None,
        scatter_charts: Sequence[Tuple[NumericField, NumericField, str]] = None
    ):
        """
        Initialize orchestrator.

        Args:
            plotter: Chart renderer (defaults to a ScatterPlotter from settings)
            output_dir: Directory chart images are written to
            top_n: Entries kept per category ranking
            banner_width: Width of report banners
            categorical_fields: Columns to rank (default: settings.CATEGORICAL_FIELDS)
            correlation_targets: Metrics correlated with plays (default: settings)
            scatter_charts: (x, y, file name) triples (default: settings.SCATTER_CHARTS)
        """
        if top_n < 0:
            raise ValueError(f"Invalid top_n: {top_n}. Must be non-negative")

        self.plotter = plotter or ScatterPlotter(
            width_px=settings.PLOT_WIDTH_PX,
            height_px=settings.PLOT_HEIGHT_PX,
            dpi=settings.PLOT_DPI,
            marker_size=settings.PLOT_MARKER_SIZE,
            color=settings.PLOT_COLOR
        )
        self.output_dir = str(output_dir)
        self.top_n = top_n
        self.banner_width = banner_width
        self.base_metric = NumericField.from_name(settings.CORRELATION_BASE)

        if categorical_fields is None:
            categorical_fields = [CategoricalField.from_name(name) for name in settings.CATEGORICAL_FIELDS]
        if correlation_targets is None:
            correlation_targets = [NumericField.from_name(name) for name in settings.CORRELATION_TARGETS]
        if scatter_charts is None:
            scatter_charts = [
                (NumericField.from_name(x), NumericField.from_name(y), filename)
                for x, y, filename in settings.SCATTER_CHARTS
            ]

        self.categorical_fields = list(categorical_fields)
        self.correlation_targets = list(correlation_targets)
        self.scatter_charts = list(scatter_charts)

    def run(
        self,
        records: Sequence[GameRecord],
        predicate: RecordPredicate = is_rated
    ) -> AnalysisReport:
        """
        Run the full analysis and print the reports.

        Args:
            records: Loaded records, in file order
            predicate: Validity filter applied before any analysis

        Returns:
            AnalysisReport with everything that was printed or rendered
        """
        filtered = self.filter_records(records, predicate)
        logger.info(f"Analyzing {len(filtered)} of {len(records)} records")

        report = AnalysisReport(
            total_records=len(records),
            analyzed_records=len(filtered)
        )

        filter_label = describe_filter(predicate)

        report.correlations = self.compute_correlations(filtered)
        print(format_correlation_report(
            report.correlations,
            self.banner_width,
            base_name=self.base_metric.label,
            filter_label=filter_label
        ))

        report.rankings = self.rank_all_categories(filtered)
        for field_name, stats in report.rankings.items():
            print(format_category_report(
                field_name,
                stats,
                self.top_n,
                self.banner_width,
                metric_name=self.base_metric.label,
                filter_label=filter_label
            ))

        report.charts = self.render_charts(filtered)

        logger.info(
            f"Analysis complete: {len(report.correlations)} correlations, "
            f"{len(report.rankings)} rankings, {len(report.charts)} charts"
        )
        return report

    def filter_records(
        self,
        records: Sequence[GameRecord],
        predicate: RecordPredicate = is_rated
    ) -> List[GameRecord]:
        """Order-preserving subsequence of records satisfying predicate."""
        return [record for record in records if predicate(record)]

    def extract_column(self, records: Sequence[GameRecord], metric: NumericField) -> List[float]:
        return [metric.extract(record) for record in records]

    def compute_correlations(self, records: Sequence[GameRecord]) -> Dict[Tuple[str, str], float]:
        """
        Correlate the base metric with every configured target.

        Returns:
            (base name, target name) -> coefficient, in configured order
        """
        base_values = self.extract_column(records, self.base_metric)

        correlations = {}
        for target in self.correlation_targets:
            target_values = self.extract_column(records, target)
            value = pearson_correlation(base_values, target_values)
            correlations[(self.base_metric.label, target.label)] = value
            logger.debug(f"Correlation({self.base_metric.label}, {target.label}) = {value:.6f}")
        return correlations

    def rank_all_categories(self, records: Sequence[GameRecord]) -> Dict[str, List[CategoryStat]]:
        """Rank every configured categorical column by average base metric."""
        return {
            categorical.label: aggregate(records, categorical, self.base_metric, self.top_n)
            for categorical in self.categorical_fields
        }

    def prepare_scatter(
        self,
        records: Sequence[GameRecord],
        x_metric: NumericField,
        y_metric: NumericField,
        output_path: str
    ) -> Optional[ScatterRequest]:
        """
        Build the plotting request for one metric pair.

        Returns:
            ScatterRequest, or None when there are no records to plot
        """
        if not records:
            return None

        return ScatterRequest(
            xs=self.extract_column(records, x_metric),
            ys=self.extract_column(records, y_metric),
            output_path=output_path,
            x_label=x_metric.title,
            y_label=y_metric.title
        )

    def render_charts(self, records: Sequence[GameRecord]) -> List[str]:
        """
        Render every configured scatter chart.

        An empty record set renders nothing and is not an error.

        Returns:
            Paths of the images written
        """
        written = []
        for x_metric, y_metric, filename in self.scatter_charts:
            output_path = os.path.join(self.output_dir, filename)
            request = self.prepare_scatter(records, x_metric, y_metric, output_path)
            if request is None:
                logger.info(f"No records to plot for {x_metric.title} vs {y_metric.title}")
                continue

            saved_path = self.plotter.render(request)
            if saved_path is None:
                continue

            print(f"Scatter plot of {request.x_label} vs {request.y_label} saved to {saved_path}")
            written.append(saved_path)
        return written
