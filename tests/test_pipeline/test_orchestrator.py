"""
Tests for the Analysis Orchestrator.

The plotter is mocked except in the end-to-end test that writes real PNGs.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock
from gamelens.models.fields import CategoricalField, NumericField
from gamelens.orchestrator import AnalysisOrchestrator, describe_filter, is_rated, rating_above
from gamelens.utils.plotting import ScatterPlotter


@pytest.fixture
def mock_plotter():
    """Plotter that reports success without drawing."""
    plotter = MagicMock(spec=ScatterPlotter)
    plotter.render.side_effect = lambda request: request.output_path
    return plotter


@pytest.fixture
def orchestrator(mock_plotter):
    return AnalysisOrchestrator(plotter=mock_plotter, output_dir="charts", top_n=10, banner_width=60)


def test_filter_preserves_order(orchestrator, sample_games):
    filtered = orchestrator.filter_records(sample_games)

    assert [game.id for game in filtered] == ["1", "2", "4"]


def test_rating_above_threshold(sample_games):
    assert rating_above(0.0) == is_rated
    assert is_rated.description == "final_rating>0"
    assert rating_above(3.5).description == "final_rating>3.5"
    kept = [game.id for game in sample_games if rating_above(3.5)(game)]
    assert kept == ["1", "2"]


def test_describe_filter_custom_predicate():
    assert describe_filter(lambda record: True) == "custom filter"


def test_extract_column_casts_to_float(orchestrator, sample_games):
    values = orchestrator.extract_column(sample_games, NumericField.PLAYS)

    assert values == [100.0, 200.0, 900.0, 50.0]
    assert all(isinstance(value, float) for value in values)


def test_compute_correlations_keys(orchestrator, make_game):
    games = [
        make_game(plays=100, final_rating=1.0, wishlists=10, reviews=5),
        make_game(plays=200, final_rating=2.0, wishlists=10, reviews=3),
        make_game(plays=300, final_rating=3.0, wishlists=10, reviews=1),
    ]

    correlations = orchestrator.compute_correlations(games)

    assert list(correlations) == [
        ("plays", "final_rating"),
        ("plays", "wishlists"),
        ("plays", "reviews"),
    ]
    assert correlations[("plays", "final_rating")] == pytest.approx(1.0)
    assert correlations[("plays", "wishlists")] == 0.0  # constant wishlists
    assert correlations[("plays", "reviews")] == pytest.approx(-1.0)


def test_compute_correlations_empty(orchestrator):
    correlations = orchestrator.compute_correlations([])

    assert all(value == 0.0 for value in correlations.values())


def test_rank_all_categories_developer(orchestrator, make_game):
    """Test DevA (mean 150) ranks above DevB (mean 100)."""
    games = [
        make_game(final_rating=4.0, plays=100, developer="DevA,DevB"),
        make_game(final_rating=4.5, plays=200, developer="DevA"),
    ]

    rankings = orchestrator.rank_all_categories(orchestrator.filter_records(games))

    assert list(rankings) == ["developer", "genre", "platform"]
    assert [stat.label for stat in rankings["developer"]] == ["DevA", "DevB"]
    assert rankings["developer"][0].mean == 150.0
    assert rankings["developer"][1].mean == 100.0


def test_prepare_scatter(orchestrator, sample_games):
    request = orchestrator.prepare_scatter(
        sample_games[:2], NumericField.FINAL_RATING, NumericField.PLAYS, "out.png"
    )

    assert request.xs == [4.0, 4.5]
    assert request.ys == [100.0, 200.0]
    assert request.x_label == "Final Rating"
    assert request.y_label == "Plays"


def test_prepare_scatter_empty(orchestrator):
    assert orchestrator.prepare_scatter([], NumericField.WISHLISTS, NumericField.PLAYS, "x.png") is None


def test_render_charts_confirmation(orchestrator, mock_plotter, sample_games, capsys):
    written = orchestrator.render_charts(sample_games)

    expected = [
        os.path.join("charts", "final_rating_vs_plays.png"),
        os.path.join("charts", "wishlists_vs_plays.png"),
    ]
    assert written == expected
    assert mock_plotter.render.call_count == 2

    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Scatter plot of Final Rating vs Plays saved to {expected[0]}",
        f"Scatter plot of Wishlists vs Plays saved to {expected[1]}",
    ]


def test_render_charts_empty_is_noop(orchestrator, mock_plotter, capsys):
    """Test an empty dataset skips plotting entirely and still succeeds."""
    assert orchestrator.render_charts([]) == []
    mock_plotter.render.assert_not_called()
    assert capsys.readouterr().out == ""


def test_run_prints_reports(orchestrator, sample_games, capsys):
    report = orchestrator.run(sample_games)

    assert report.total_records == 4
    assert report.analyzed_records == 3
    assert len(report.charts) == 2

    out = capsys.readouterr().out
    assert "Correlation(plays, final_rating): " in out
    assert "Correlation(plays, wishlists): " in out
    assert "Correlation(plays, reviews): " in out
    assert "1: DevA -> mean: 150.00, median: 150.00" in out
    assert "2: DevB -> mean: 100.00, median: 100.00" in out
    # Unrated Gamma is filtered out before ranking
    assert "DevC" not in out
    assert "Shooter" not in out
    assert "Correlations with plays (only games with final_rating>0)" in out
    assert "Top 10 developer by average plays (final_rating>0)" in out


def test_run_titles_show_applied_threshold(orchestrator, sample_games, capsys):
    """Test report titles name the threshold that was actually applied."""
    report = orchestrator.run(sample_games, predicate=rating_above(3.0))

    assert report.analyzed_records == 3
    out = capsys.readouterr().out
    assert "Correlations with plays (only games with final_rating>3)" in out
    assert "Top 10 genre by average plays (final_rating>3)" in out
    assert "final_rating>0" not in out


def test_run_empty_dataset(orchestrator, mock_plotter, capsys):
    report = orchestrator.run([])

    assert report.analyzed_records == 0
    assert report.charts == []
    assert all(stats == [] for stats in report.rankings.values())
    mock_plotter.render.assert_not_called()
    assert "Correlation(plays, reviews): 0.0000" in capsys.readouterr().out


def test_custom_fields(mock_plotter, make_game):
    orchestrator = AnalysisOrchestrator(
        plotter=mock_plotter,
        top_n=1,
        categorical_fields=[CategoricalField.GENRE],
        correlation_targets=[NumericField.BACKLOGS],
        scatter_charts=[]
    )
    games = [make_game(genre="RPG", plays=10), make_game(genre="Puzzle", plays=30)]

    report = orchestrator.run(games)

    assert list(report.rankings) == ["genre"]
    assert [stat.label for stat in report.rankings["genre"]] == ["Puzzle"]
    assert list(report.correlations) == [("plays", "backlogs")]


def test_negative_top_n_rejected(mock_plotter):
    with pytest.raises(ValueError):
        AnalysisOrchestrator(plotter=mock_plotter, top_n=-1)


def test_end_to_end_with_real_plotter(sample_games, capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        orchestrator = AnalysisOrchestrator(output_dir=tmpdir)

        report = orchestrator.run(sample_games)

        assert len(report.charts) == 2
        for path in report.charts:
            assert os.path.exists(path)
        assert "saved to" in capsys.readouterr().out


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
