from typing import Any

from .config import DEFAULT_CONFIG, Config
from .ratings import display_rating
from .utils import as_number


def format_constant(constant: Any) -> str:
    value = as_number(constant)
    return "" if value is None else f"{value:.1f}"


def format_rating(rating: Any) -> str:
    value = as_number(rating)
    return "" if value is None else f"{value:.4f}"


def format_display(rating: Any, cfg: Config = DEFAULT_CONFIG) -> str:
    value = as_number(rating)
    return "" if value is None else f"{display_rating(value, cfg):.2f}"


def format_score(score: Any) -> str:
    value = as_number(score)
    return "" if value is None else f"{int(value):,}"
