import logging
import math
from typing import Any, Iterable

from .config import DEFAULT_CONFIG, Config
from .ratings import display_steps
from .types import PotentialWindow, RequiredConstant
from .utils import as_number, as_numbers

logger = logging.getLogger(__name__)


def rating_deficit(total: float, cfg: Config = DEFAULT_CONFIG) -> float:
    target = (display_steps(total, cfg) + 1) / cfg.display_scale
    return cfg.window_size * (target - total)


def required_rating(window: PotentialWindow, deficit: float) -> float:
    top_min = window.top_min
    recent_min = window.recent_min
    candidates = []

    # New result displaces only the recent minimum.
    recent_only = recent_min + deficit
    if recent_only <= top_min:
        candidates.append(recent_only)

    # New result displaces only the top minimum.
    top_only = top_min + deficit
    if top_only <= recent_min:
        candidates.append(top_only)

    # New result enters both windows at once.
    both = (top_min + recent_min + deficit) / 2
    if both >= top_min and both >= recent_min:
        candidates.append(both)

    if not candidates:
        return max(top_min, recent_min) + deficit
    return min(candidates)


def _round_up_constant(value: float, cfg: Config) -> float:
    scaled = round(value * cfg.constant_scale, cfg.constant_precision)
    return math.ceil(scaled) / cfg.constant_scale


def solve_required_constants(
    total: Any,
    top: Iterable[Any],
    recent: Iterable[Any],
    cfg: Config = DEFAULT_CONFIG,
) -> list[RequiredConstant] | None:
    current_total = as_number(total)
    top_ratings = as_numbers(top)
    recent_ratings = as_numbers(recent)
    if current_total is None or top_ratings is None or recent_ratings is None:
        logger.debug("Invalid required constant input: total=%r top=%r recent=%r", total, top, recent)
        return None

    window = PotentialWindow(top=tuple(top_ratings), recent=tuple(recent_ratings))
    needed = required_rating(window, rating_deficit(current_total, cfg))
    return [
        RequiredConstant(
            label=grade.label,
            required_constant=_round_up_constant(needed - grade.offset, cfg),
            score=grade.score,
        )
        for grade in cfg.grade_offsets
    ]
