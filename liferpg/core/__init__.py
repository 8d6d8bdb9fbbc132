"""LifeRPG Core Engine"""

from liferpg.core.behavior import BehaviorSummary, evaluate_behavior_mechanics
from liferpg.core.metabolic import compute_dynamic_tdee, compute_tdee
from liferpg.core.models import (
    ActivityLevel,
    AppState,
    CalorieStrategy,
    DailyEntry,
    Gender,
    Profile,
)
from liferpg.core.progression import (
    ProgressionSnapshot,
    compute_progression,
    level_from_xp,
    xp_to_next_level,
)

__all__ = [
    "ActivityLevel",
    "AppState",
    "CalorieStrategy",
    "DailyEntry",
    "Gender",
    "Profile",
    "BehaviorSummary",
    "evaluate_behavior_mechanics",
    "compute_tdee",
    "compute_dynamic_tdee",
    "ProgressionSnapshot",
    "compute_progression",
    "level_from_xp",
    "xp_to_next_level",
]
