from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class PlayResult:
    score: float
    constant: Optional[float]
    title: Optional[str] = None
    difficulty: Optional[int] = None  # 0=PST .. 4=ETR


@dataclass(frozen=True)
class PotentialWindow:
    top: Tuple[float, ...] = ()
    recent: Tuple[float, ...] = ()

    @property
    def top_min(self) -> float:
        return min(self.top) if self.top else 0.0

    @property
    def recent_min(self) -> float:
        return min(self.recent) if self.recent else 0.0


@dataclass(frozen=True)
class TargetScore:
    score: int
    display_before: float
    display_target: float
    display_after: float
    exact: bool
    overshoot: bool


@dataclass(frozen=True)
class RequiredConstant:
    label: str
    required_constant: float
    score: int


@dataclass(frozen=True)
class WindowEntry:
    rank: int
    result: PlayResult
    rating: float
    recent: bool = False
    target: Optional[TargetScore] = None


@dataclass(frozen=True)
class PotentialSummary:
    total: float
    display: float
    best30_avg: float
    recent10_avg: float
    best30: List[WindowEntry] = field(default_factory=list)
    recent10: List[WindowEntry] = field(default_factory=list)
    required: List[RequiredConstant] = field(default_factory=list)
    player: Optional[str] = None

    @property
    def window(self) -> PotentialWindow:
        return PotentialWindow(
            top=tuple(entry.rating for entry in self.best30),
            recent=tuple(entry.rating for entry in self.recent10),
        )
