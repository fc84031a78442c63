import logging
from typing import Any, Iterable, Mapping, Protocol

from .config import DEFAULT_CONFIG, Config
from .grades import difficulty_name, parse_difficulty, score_grade
from .ratings import aggregate_rating, display_rating, play_rating
from .requirements import solve_required_constants
from .target import solve_target_score_with_breakdown
from .types import PlayResult, PotentialSummary, WindowEntry
from .utils import mean

logger = logging.getLogger(__name__)


class ConstantLookup(Protocol):
    def __call__(self, title: str, difficulty: int) -> float | None: ...


def results_from_rows(rows: Iterable[Mapping[str, Any]], lookup: ConstantLookup) -> list[PlayResult]:
    results = []
    for row in rows:
        title = row.get("title")
        difficulty = parse_difficulty(row.get("difficulty"))
        constant = None
        if title and difficulty is not None:
            constant = lookup(title, difficulty)
        if constant is None:
            logger.debug("No chart constant for %r [%r]", title, row.get("difficulty"))
        results.append(
            PlayResult(score=row.get("score"), constant=constant, title=title, difficulty=difficulty)
        )
    return results


def build_window(
    results: Iterable[PlayResult], cfg: Config = DEFAULT_CONFIG
) -> tuple[list[WindowEntry], list[WindowEntry]]:
    best: list[WindowEntry] = []
    recent: list[WindowEntry] = []
    for index, result in enumerate(results):
        if len(best) >= cfg.top_size and len(recent) >= cfg.recent_size:
            break
        rating = play_rating(result.score, result.constant, cfg)
        if rating is None:
            # Unrated results do not consume a slot.
            logger.debug("Skipping result #%d (%r) without a rating", index + 1, result.title)
            continue
        if len(best) < cfg.top_size:
            best.append(WindowEntry(rank=len(best) + 1, result=result, rating=rating))
        else:
            recent.append(WindowEntry(rank=len(recent) + 1, result=result, rating=rating, recent=True))
    return best, recent


def _with_target(entry: WindowEntry, total: float, cfg: Config) -> WindowEntry:
    target = solve_target_score_with_breakdown(entry.result.constant, entry.result.score, total, cfg)
    return WindowEntry(rank=entry.rank, result=entry.result, rating=entry.rating, recent=entry.recent, target=target)


def summarize(
    results: Iterable[PlayResult],
    cfg: Config = DEFAULT_CONFIG,
    player: str | None = None,
) -> PotentialSummary:
    best, recent = build_window(results, cfg)
    top_ratings = [entry.rating for entry in best]
    recent_ratings = [entry.rating for entry in recent]
    total = aggregate_rating(top_ratings, recent_ratings, cfg)
    logger.info(
        "Potential %.4f from %d best and %d recent results", total, len(best), len(recent)
    )
    return PotentialSummary(
        total=total,
        display=display_rating(total, cfg),
        best30_avg=mean(top_ratings),
        recent10_avg=mean(recent_ratings),
        best30=[_with_target(entry, total, cfg) for entry in best],
        recent10=[_with_target(entry, total, cfg) for entry in recent],
        required=solve_required_constants(total, top_ratings, recent_ratings, cfg),
        player=player,
    )


def _entry_dict(entry: WindowEntry) -> dict[str, Any]:
    result = entry.result
    return {
        "rank": entry.rank,
        "title": result.title,
        "difficulty": difficulty_name(result.difficulty),
        "score": result.score,
        "constant": result.constant,
        "rating": entry.rating,
        "grade": score_grade(result.score),
        "target_score": entry.target.score if entry.target else None,
    }


def export_summary(summary: PotentialSummary) -> dict[str, Any]:
    return {
        "player": {
            "username": summary.player,
            "total": summary.total,
            "display": summary.display,
            "best30_avg": summary.best30_avg,
            "recent10_avg": summary.recent10_avg,
        },
        "best30": [_entry_dict(entry) for entry in summary.best30],
        "recent10": [_entry_dict(entry) for entry in summary.recent10],
        "required_constants": [
            {"label": item.label, "constant": item.required_constant, "score": item.score}
            for item in summary.required
        ],
    }
