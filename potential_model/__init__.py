from .config import DEFAULT_CONFIG, GRADE_OFFSETS, Config, GradeOffset
from .grades import difficulty_name, parse_difficulty, score_grade
from .ratings import aggregate_rating, display_rating, display_steps, play_rating
from .requirements import solve_required_constants
from .target import solve_target_score, solve_target_score_with_breakdown
from .types import PlayResult, PotentialSummary, PotentialWindow, RequiredConstant, TargetScore, WindowEntry
from .window import build_window, export_summary, results_from_rows, summarize

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "GRADE_OFFSETS",
    "GradeOffset",
    "PlayResult",
    "PotentialSummary",
    "PotentialWindow",
    "RequiredConstant",
    "TargetScore",
    "WindowEntry",
    "aggregate_rating",
    "build_window",
    "difficulty_name",
    "display_rating",
    "display_steps",
    "export_summary",
    "parse_difficulty",
    "play_rating",
    "results_from_rows",
    "score_grade",
    "solve_required_constants",
    "solve_target_score",
    "solve_target_score_with_breakdown",
    "summarize",
]
