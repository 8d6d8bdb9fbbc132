"""행동 메커니즘 Core 패키지

DB/UI 무관 순수 Python 로직.
"""

from liferpg.core.behavior.calorie import (
    count_trailing_in_range_streak,
    evaluate_calorie_adherence,
)
from liferpg.core.behavior.config import BEHAVIOR_CONFIG, BehaviorConfig
from liferpg.core.behavior.mechanics import (
    apply_behavior_xp_adjustments,
    empty_behavior_summary,
    evaluate_behavior_mechanics,
)
from liferpg.core.behavior.models import (
    BehaviorSummary,
    CalorieAdherence,
    CalorieEffect,
    RestDayState,
    XpAdjustment,
)
from liferpg.core.behavior.rest_day import evaluate_rest_day_eligibility
from liferpg.core.behavior.streaks import (
    count_comeback_streak,
    count_current_streak,
    count_longest_streak,
    count_missed_days,
    count_single_day_gaps_in_window,
)

__all__ = [
    # config
    "BehaviorConfig",
    "BEHAVIOR_CONFIG",
    # models
    "BehaviorSummary",
    "CalorieAdherence",
    "CalorieEffect",
    "RestDayState",
    "XpAdjustment",
    # streaks
    "count_missed_days",
    "count_current_streak",
    "count_comeback_streak",
    "count_longest_streak",
    "count_single_day_gaps_in_window",
    # calorie
    "evaluate_calorie_adherence",
    "count_trailing_in_range_streak",
    # rest day
    "evaluate_rest_day_eligibility",
    # mechanics
    "evaluate_behavior_mechanics",
    "empty_behavior_summary",
    "apply_behavior_xp_adjustments",
]
