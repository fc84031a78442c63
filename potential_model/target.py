import logging
import math
from typing import Any

from .config import DEFAULT_CONFIG, Config
from .ratings import display_steps, play_rating, replaced_total
from .types import TargetScore
from .utils import as_number

logger = logging.getLogger(__name__)


def _reaches(steps: int, total: float, old_rating: float, score: int, constant: float, cfg: Config) -> bool:
    new_rating = play_rating(score, constant, cfg)
    return display_steps(replaced_total(total, old_rating, new_rating, cfg), cfg) >= steps


def solve_target_score_with_breakdown(
    constant: Any,
    current_score: Any,
    total: Any,
    cfg: Config = DEFAULT_CONFIG,
) -> TargetScore | None:
    chart_constant = as_number(constant)
    score = as_number(current_score)
    current_total = as_number(total)
    if chart_constant is None or score is None or current_total is None:
        logger.debug(
            "Invalid target score input: constant=%r score=%r total=%r", constant, current_score, total
        )
        return None
    if score < 0 or chart_constant < 0:
        logger.debug("Negative target score input: constant=%r score=%r", constant, current_score)
        return None
    if score >= cfg.pm_score:
        logger.debug("Score %s is already PM, nothing to target", current_score)
        return None

    old_rating = play_rating(score, chart_constant, cfg)

    target_steps = display_steps(current_total, cfg) + 1
    left = math.floor(score) + 1
    right = cfg.pm_score
    result = None
    while left <= right:
        mid = (left + right) // 2
        if _reaches(target_steps, current_total, old_rating, mid, chart_constant, cfg):
            result = mid
            right = mid - 1
        else:
            left = mid + 1

    if result is None:
        logger.debug(
            "No score on constant %s lifts total %s by one quantum from %s", chart_constant, current_total, score
        )
        return None

    display_before = display_steps(current_total, cfg) / cfg.display_scale
    display_target = display_before + cfg.quantum
    new_total = replaced_total(current_total, old_rating, play_rating(result, chart_constant, cfg), cfg)
    display_after = display_steps(new_total, cfg) / cfg.display_scale
    return TargetScore(
        score=result,
        display_before=display_before,
        display_target=display_target,
        display_after=display_after,
        exact=abs(display_after - display_target) < cfg.exact_tolerance,
        overshoot=display_after > display_target + cfg.overshoot_margin,
    )


def solve_target_score(
    constant: Any,
    current_score: Any,
    total: Any,
    cfg: Config = DEFAULT_CONFIG,
) -> int | None:
    target = solve_target_score_with_breakdown(constant, current_score, total, cfg)
    if target is None:
        return None
    return target.score
