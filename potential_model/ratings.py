import logging
import math
from typing import Any, Iterable

from .config import DEFAULT_CONFIG, Config
from .utils import as_number, as_numbers

logger = logging.getLogger(__name__)


def play_rating(score: Any, constant: Any, cfg: Config = DEFAULT_CONFIG) -> float | None:
    value = as_number(score)
    chart_constant = as_number(constant)
    if value is None or chart_constant is None or value < 0 or chart_constant < 0:
        logger.debug("Invalid play rating input: score=%r constant=%r", score, constant)
        return None

    if value >= cfg.pm_score:
        return chart_constant + cfg.pm_bonus
    if value >= cfg.ex_score:
        return chart_constant + cfg.ex_bonus + (value - cfg.ex_score) / cfg.ex_divisor
    return max(0.0, chart_constant + (value - cfg.base_score) / cfg.base_divisor)


def display_steps(rating: float, cfg: Config = DEFAULT_CONFIG) -> int:
    """Whole display quanta in a finite rating; NaN or infinity raises."""
    return math.floor(round(rating * cfg.display_scale, cfg.display_precision))


def display_rating(rating: Any, cfg: Config = DEFAULT_CONFIG) -> float:
    value = as_number(rating)
    if value is None:
        return 0.0
    return display_steps(value, cfg) / cfg.display_scale


def aggregate_rating(
    top: Iterable[Any],
    recent: Iterable[Any],
    cfg: Config = DEFAULT_CONFIG,
) -> float | None:
    top_ratings = as_numbers(top)
    recent_ratings = as_numbers(recent)
    if top_ratings is None or recent_ratings is None:
        logger.debug("Invalid rating in window: top=%r recent=%r", top, recent)
        return None
    # The divisor is the full window size even when fewer slots are filled.
    return (sum(top_ratings) + sum(recent_ratings)) / cfg.window_size


def replaced_total(total: float, old_rating: float, new_rating: float, cfg: Config = DEFAULT_CONFIG) -> float:
    return total - old_rating / cfg.window_size + new_rating / cfg.window_size
