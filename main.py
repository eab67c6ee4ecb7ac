"""
GameLens - Video Game Engagement Analysis

CLI entry point for running the analysis pipeline.
"""

import argparse
import logging
import sys

from gamelens.orchestrator import AnalysisOrchestrator, rating_above
from gamelens.utils.loader import GameLoader
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="GameLens - correlations, category rankings and scatter plots for game data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze the default dataset in the working directory
  python main.py

  # Analyze another file and write charts elsewhere
  python main.py --data data/games.csv --output-dir charts

  # Show the top 5 per category, only games rated above 3
  python main.py --top-n 5 --min-rating 3.0
        """
    )

    parser.add_argument(
        "--data",
        default=str(settings.DATA_PATH),
        help=f"Combined games CSV (default: {settings.DATA_PATH})"
    )

    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_ROOT,
        help="Directory for scatter plot images (default: working directory)"
    )

    parser.add_argument(
        "--top-n",
        type=int,
        default=settings.TOP_N,
        help=f"Categories shown per ranking (default: {settings.TOP_N})"
    )

    parser.add_argument(
        "--min-rating",
        type=float,
        default=settings.MIN_FINAL_RATING,
        help=f"Only analyze games with final_rating above this (default: {settings.MIN_FINAL_RATING})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    if args.top_n < 0:
        logger.error(f"--top-n must be non-negative, got {args.top_n}")
        sys.exit(1)

    # Print banner
    print("=" * 60)
    print("GameLens - Video Game Engagement Analysis")
    print("=" * 60)
    print(f"Data: {args.data}")
    print(f"Output dir: {args.output_dir or '.'}")
    print(f"Top N: {args.top_n}")
    print(f"Min rating: {args.min_rating:g}")
    print("=" * 60)
    print()

    try:
        records = GameLoader(args.data).load()
        print(f"Loaded {len(records)} combined game records.")

        orchestrator = AnalysisOrchestrator(
            output_dir=args.output_dir,
            top_n=args.top_n
        )
        report = orchestrator.run(records, predicate=rating_above(args.min_rating))

        logger.info(
            f"GameLens completed: {report.analyzed_records}/{report.total_records} "
            f"records analyzed, {len(report.charts)} charts written"
        )

        print()
        print("=" * 60)
        print("Analysis completed successfully")
        print("=" * 60)
        print(f"Records analyzed: {report.analyzed_records}/{report.total_records}")
        for chart_path in report.charts:
            print(f"Chart: {chart_path}")
        print("=" * 60)
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user")
        print("\nAnalysis interrupted")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        print(f"\nAnalysis failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
