from typing import Any

from .utils import as_number

DIFFICULTY_NAMES = ("PST", "PRS", "FTR", "BYD", "ETR")

_DIFFICULTY_ALIASES = {
    "past": 0,
    "pst": 0,
    "present": 1,
    "prs": 1,
    "future": 2,
    "ftr": 2,
    "beyond": 3,
    "byd": 3,
    "eternal": 4,
    "etr": 4,
}

_SCORE_GRADES = (
    (10_000_000, "PM"),
    (9_900_000, "EX+"),
    (9_800_000, "EX"),
    (9_500_000, "AA"),
    (9_200_000, "A"),
    (8_900_000, "B"),
    (8_600_000, "C"),
)


def score_grade(score: Any) -> str | None:
    value = as_number(score)
    if value is None:
        return None
    for threshold, label in _SCORE_GRADES:
        if value >= threshold:
            return label
    return "D"


def parse_difficulty(difficulty: Any) -> int | None:
    if isinstance(difficulty, bool) or difficulty is None:
        return None
    if isinstance(difficulty, int):
        return difficulty if 0 <= difficulty < len(DIFFICULTY_NAMES) else None
    return _DIFFICULTY_ALIASES.get(str(difficulty).strip().lower())


def difficulty_name(difficulty: Any) -> str | None:
    index = parse_difficulty(difficulty)
    if index is None:
        return None
    return DIFFICULTY_NAMES[index]
