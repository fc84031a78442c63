import math
from typing import Any, Iterable


def mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def as_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def as_numbers(values: Iterable[Any] | None) -> list[float] | None:
    if values is None:
        return None
    numbers = []
    for value in values:
        number = as_number(value)
        if number is None:
            return None
        numbers.append(number)
    return numbers
