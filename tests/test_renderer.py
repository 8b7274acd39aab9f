import pytest

from overlaylab.core.models import ColorResult
from overlaylab.logic.search.renderer import open_progress, render_progress, render_results, select_results


@pytest.fixture
def results():
    # 99 results, deliberately out of order
    return [ColorResult((i, 0, 0), 50, (i * 37 % 99) / 100) for i in range(99)]


def test_get_prefix_one(results):
    prefix, selected = select_results(results, 1)
    assert prefix == "Top result"
    assert len(selected) == 1
    assert selected[0].avg_distance == 0.0


def test_get_prefix_many(results):
    prefix, selected = select_results(results, 5)
    assert prefix == "Top 5 results"
    assert [r.avg_distance for r in selected] == [0.0, 0.01, 0.02, 0.03, 0.04]


def test_get_prefix_all(results):
    prefix, selected = select_results(results, 0)
    assert prefix == "All results"
    assert len(selected) == 99


def test_get_prefix_negative(results):
    prefix, selected = select_results(results, -3)
    assert prefix == "All results"
    assert len(selected) == 99


def test_get_prefix_more_than_available(results):
    prefix, selected = select_results(results, 2000)
    assert prefix == "All results"
    assert len(selected) == 99


def test_select_results_exact_count(results):
    prefix, _ = select_results(results, 99)
    assert prefix == "All results"


def test_render_results(capsys):
    render_results(
        [ColorResult((0, 0, 0), 30, 0.4), ColorResult((255, 20, 136), 50, 0.25)],
        1,
    )
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert "Top result, starting from the most similar color:" in lines[1]
    assert lines[2:] == ["#ff1488 at 50% opacity; average distance: 0.250000"]


def test_progress_bar_counts_alphas(capsys):
    with open_progress(5) as bar:
        render_progress(bar, 50, 0)
        render_progress(bar, 53, 12)
        assert bar.n == 2
        assert bar.total == 5
        assert bar.postfix == "last 53%, found 12 possible colors"
    captured = capsys.readouterr()
    assert "found 12 possible colors" in captured.err
    assert captured.out == ""


def test_progress_bar_quiet(capsys):
    with open_progress(5, quiet=True) as bar:
        render_progress(bar, 50, 3)
    assert capsys.readouterr().err == ""
