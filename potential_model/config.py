from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GradeOffset:
    label: str
    score: int
    offset: float


GRADE_OFFSETS: Tuple[GradeOffset, ...] = (
    GradeOffset("995W", 9_950_000, 1.75),
    GradeOffset("EX+", 9_900_000, 1.5),
    GradeOffset("EX", 9_800_000, 1.0),
    GradeOffset("970W", 9_700_000, 0.667),
    GradeOffset("960W", 9_600_000, 0.333),
    GradeOffset("AA", 9_500_000, 0.0),
)


@dataclass(frozen=True)
class Config:
    pm_score: int = 10_000_000
    pm_bonus: float = 2.0

    ex_score: int = 9_800_000
    ex_bonus: float = 1.0
    ex_divisor: float = 200_000.0

    base_score: int = 9_500_000
    base_divisor: float = 300_000.0

    top_size: int = 30
    recent_size: int = 10

    display_scale: int = 100
    display_precision: int = 9
    exact_tolerance: float = 1e-4
    overshoot_margin: float = 0.005

    constant_scale: int = 10
    constant_precision: int = 9

    grade_offsets: Tuple[GradeOffset, ...] = GRADE_OFFSETS

    @property
    def window_size(self) -> int:
        return self.top_size + self.recent_size

    @property
    def quantum(self) -> float:
        return 1.0 / self.display_scale


DEFAULT_CONFIG = Config()
