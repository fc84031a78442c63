import pytest

from potential_model import PlayResult, build_window, export_summary, results_from_rows, summarize


def _pm(title="Song", constant=10.0, difficulty=2):
    return PlayResult(score=10_000_000, constant=constant, title=title, difficulty=difficulty)


def test_window_fills_top_then_recent():
    results = [_pm(f"Song {i}") for i in range(45)]
    best, recent = build_window(results)
    assert len(best) == 30
    assert len(recent) == 10
    assert [entry.rank for entry in best] == list(range(1, 31))
    assert [entry.rank for entry in recent] == list(range(1, 11))
    assert recent[0].result.title == "Song 30"
    assert all(entry.recent for entry in recent)
    assert not any(entry.recent for entry in best)


def test_unrated_results_do_not_consume_slots():
    results = [
        _pm("First"),
        PlayResult(score=9_900_000, constant=None, title="Unknown"),
        PlayResult(score="garbage", constant=10.0, title="Broken"),
        _pm("Second"),
    ]
    best, recent = build_window(results)
    assert [entry.result.title for entry in best] == ["First", "Second"]
    assert best[1].rank == 2
    assert recent == []


def test_summary_of_full_pm_window():
    summary = summarize([_pm(f"Song {i}") for i in range(40)], player="hikari")
    assert summary.total == pytest.approx(12.0)
    assert summary.display == pytest.approx(12.0)
    assert summary.best30_avg == pytest.approx(12.0)
    assert summary.recent10_avg == pytest.approx(12.0)
    assert all(entry.target is None for entry in summary.best30 + summary.recent10)
    assert [item.required_constant for item in summary.required] == pytest.approx(
        [10.5, 10.7, 11.2, 11.6, 11.9, 12.2]
    )
    assert summary.window.top == pytest.approx((12.0,) * 30)


def test_summary_targets_improvable_results():
    results = [_pm(f"Best {i}") for i in range(30)]
    results += [PlayResult(score=9_800_000, constant=10.0, title=f"Recent {i}") for i in range(10)]
    summary = summarize(results)
    assert summary.total == pytest.approx(11.75)
    assert summary.recent10_avg == pytest.approx(11.0)
    target = summary.recent10[0].target
    assert target is not None
    assert abs(target.score - 9_880_000) <= 1
    assert summary.best30[0].target is None


def test_partial_window_divides_by_forty():
    summary = summarize([_pm(f"Song {i}") for i in range(5)])
    assert summary.total == pytest.approx(1.5)
    assert summary.best30_avg == pytest.approx(12.0)
    assert summary.recent10_avg == 0.0
    assert summary.required[-1].required_constant == pytest.approx(0.4)


def test_export_shape():
    summary = summarize([_pm("Tempestissimo", 11.3, 3)], player="hikari")
    data = export_summary(summary)
    assert set(data) == {"player", "best30", "recent10", "required_constants"}
    assert data["player"]["username"] == "hikari"
    assert data["player"]["total"] == pytest.approx(13.3 / 40)
    entry = data["best30"][0]
    assert entry["rank"] == 1
    assert entry["title"] == "Tempestissimo"
    assert entry["difficulty"] == "BYD"
    assert entry["grade"] == "PM"
    assert entry["rating"] == pytest.approx(13.3)
    assert entry["target_score"] is None
    assert data["recent10"] == []
    assert [item["label"] for item in data["required_constants"]] == ["995W", "EX+", "EX", "970W", "960W", "AA"]


def test_results_from_rows_uses_lookup():
    constants = {("Tempestissimo", 3): 11.3}

    def lookup(title, difficulty):
        return constants.get((title, difficulty))

    rows = [
        {"title": "Tempestissimo", "difficulty": "BYD", "score": 9_900_000},
        {"title": "Missing Song", "difficulty": "FTR", "score": 9_000_000},
        {"title": "Tempestissimo", "difficulty": "hard", "score": 9_000_000},
    ]
    results = results_from_rows(rows, lookup)
    assert results[0].constant == 11.3
    assert results[0].difficulty == 3
    assert results[1].constant is None
    assert results[1].difficulty == 2
    assert results[2].difficulty is None
    assert results[2].constant is None
