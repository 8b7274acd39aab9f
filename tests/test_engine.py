import pytest

from overlaylab.core import conversions as conv
from overlaylab.core.models import ColorResult, LinearColor
from overlaylab.logic.search import engine

BASE_HEX = ["#ffffff", "#bfbfbf", "#808080", "#404040", "#000000"]
TARGET_HEX = ["#f9bbbd", "#cc8e90", "#a06264", "#733537", "#46080a"]
MAX_DISTANCE = 0.5


@pytest.fixture(scope="module")
def colors():
    return conv.parse_color_pairs(BASE_HEX, TARGET_HEX)


@pytest.fixture(scope="module")
def inline_results(colors):
    base_colors, target_colors = colors
    return engine.search_alpha(base_colors, target_colors, 0.30, MAX_DISTANCE, workers=1)


def _as_set(results):
    return {(r.color, r.alpha, round(r.avg_distance, 9)) for r in results}


def test_search_alpha(inline_results):
    assert len(inline_results) > 0
    assert any(
        r.color == (237, 28, 35) and r.alpha == 30 and r.avg_distance <= MAX_DISTANCE
        for r in inline_results
    )
    assert all(r.alpha == 30 and r.avg_distance <= MAX_DISTANCE for r in inline_results)


def test_search_alpha_results_agree_with_single_candidate_check(colors, inline_results):
    base_colors, target_colors = colors
    target_labs = [conv.linear_to_lab(t) for t in target_colors]
    for result in inline_results[:25]:
        r, g, b = result.color
        overlay = LinearColor(r / 255, g / 255, b / 255, 0.30)
        match = engine.find_match(base_colors, target_labs, overlay, MAX_DISTANCE)
        assert match is not None
        assert match.color == result.color
        assert match.alpha == result.alpha
        assert match.avg_distance == pytest.approx(result.avg_distance, abs=1e-9)


def test_search_alpha_is_deterministic_across_workers(colors, inline_results):
    base_colors, target_colors = colors
    pooled = engine.search_alpha(base_colors, target_colors, 0.30, MAX_DISTANCE, workers=2)
    assert len(pooled) == len(inline_results)
    assert _as_set(pooled) == _as_set(inline_results)


def test_red_slice_skips_later_pairs_once_empty(colors, monkeypatch):
    base_colors, target_colors = colors
    target_labs = [conv.linear_to_lab(t) for t in target_colors]
    calls = []
    real = engine.delta_e_ciede2000_array

    def counting(lab1, lab2):
        calls.append(len(lab2))
        return real(lab1, lab2)

    monkeypatch.setattr(engine, "delta_e_ciede2000_array", counting)

    # Red 0 cannot produce the reddish targets: nothing survives the first pair
    assert engine._search_red_slice(0, base_colors, target_labs, 0.30, MAX_DISTANCE) == []
    assert calls == [65536]

    calls.clear()
    results = engine._search_red_slice(237, base_colors, target_labs, 0.30, MAX_DISTANCE)
    assert any(r.color == (237, 28, 35) for r in results)
    assert calls[0] == 65536
    assert all(later <= earlier for earlier, later in zip(calls, calls[1:]))
    assert calls[-1] < 65536


def test_find_match_short_circuits(monkeypatch):
    base_colors = [LinearColor(1.0, 1.0, 1.0), LinearColor(0.0, 0.0, 0.0)]
    target_labs = [(0.0, 0.0, 0.0), (0.0, 0.0, 0.0)]
    calls = []
    real = engine.delta_e_ciede2000

    def counting(lab1, lab2):
        calls.append((lab1, lab2))
        return real(lab1, lab2)

    monkeypatch.setattr(engine, "delta_e_ciede2000", counting)
    overlay = LinearColor(1.0, 1.0, 1.0, 0.5)
    assert engine.find_match(base_colors, target_labs, overlay, 1.0) is None
    assert len(calls) == 1


def test_find_match_averages_all_pairs():
    white, black = LinearColor(1.0, 1.0, 1.0), LinearColor(0.0, 0.0, 0.0)
    gray = LinearColor(0.5, 0.5, 0.5)
    overlay = LinearColor(0.0, 0.0, 0.0, 0.5)
    target_labs = [conv.linear_to_lab(gray), conv.linear_to_lab(black)]
    match = engine.find_match([white, black], target_labs, overlay, 0.1)
    assert match == ColorResult((0, 0, 0), 50, pytest.approx(0.0, abs=1e-9))


def test_measure_overlay_reports_every_pair():
    white, black = LinearColor(1.0, 1.0, 1.0), LinearColor(0.0, 0.0, 0.0)
    overlay = LinearColor(1.0, 1.0, 1.0, 0.5)
    measured = engine.measure_overlay([white, black], [black, white], overlay)
    assert len(measured) == 2
    assert measured[0][0][:3] == pytest.approx((1.0, 1.0, 1.0))
    assert measured[1][0][:3] == pytest.approx((0.5, 0.5, 0.5))
    assert all(distance > 0 for _, distance in measured)


@pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1, 1.5])
def test_search_alpha_rejects_alpha_outside_open_interval(alpha):
    white = LinearColor(1.0, 1.0, 1.0)
    with pytest.raises(ValueError):
        engine.search_alpha([white], [white], alpha, 1.0, workers=1)


def test_search_alpha_rejects_bad_color_lists():
    white = LinearColor(1.0, 1.0, 1.0)
    with pytest.raises(ValueError):
        engine.search_alpha([], [], 0.5, 1.0, workers=1)
    with pytest.raises(ValueError):
        engine.search_alpha([white, white], [white], 0.5, 1.0, workers=1)


def test_find_overlay_colors_drives_generator(monkeypatch):
    searched = []

    def fake_search(base_colors, target_colors, alpha, max_distance, workers=None, executor=None):
        percent = int(round(alpha * 100))
        searched.append(percent)
        if 73 <= percent <= 77:
            return [ColorResult((percent, 0, 0), percent, 0.1)]
        return []

    monkeypatch.setattr(engine, "search_alpha", fake_search)
    progress = []

    white = LinearColor(1.0, 1.0, 1.0)
    results = engine.find_overlay_colors(
        [white], [white], 1, 99, 1.0, workers=1,
        on_alpha=lambda alpha, found, total: progress.append((alpha, len(found), total)),
    )

    assert searched[-7:] == [74, 73, 72, 75, 76, 77, 78]
    assert sorted(r.alpha for r in results) == [73, 74, 75, 76, 77]
    assert [p[0] for p in progress] == searched
    assert progress[-1][2] == 5


def test_find_overlay_colors_no_matches(monkeypatch):
    monkeypatch.setattr(engine, "search_alpha", lambda *args, **kwargs: [])
    white = LinearColor(1.0, 1.0, 1.0)
    assert engine.find_overlay_colors([white], [white], 75, 86, 1.0, workers=1) == []


def test_find_overlay_colors_single_alpha(colors):
    base_colors, target_colors = colors
    results = engine.find_overlay_colors(base_colors, target_colors, 30, 30, MAX_DISTANCE, workers=1)
    assert any(r.color == (237, 28, 35) and r.alpha == 30 for r in results)
