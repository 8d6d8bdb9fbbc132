"""대사량 추정 Core 패키지

DB/UI 무관 순수 Python 로직.
"""

from liferpg.core.metabolic.dynamic_tdee import (
    DYNAMIC_TDEE_MAX_DELTA_RATIO,
    DYNAMIC_TDEE_SMOOTHING_ALPHA,
    DYNAMIC_TDEE_WINDOW_DAYS,
    DynamicTdeeResult,
    compute_dynamic_tdee,
    describe_tdee_delta,
)
from liferpg.core.metabolic.profile_metrics import (
    ACTIVITY_MULTIPLIERS,
    CALORIE_STRATEGY_BANDS,
    CalorieRange,
    compute_bmr,
    compute_healthy_calorie_range,
    compute_healthy_calorie_range_from_tdee,
    compute_tdee,
    is_profile_complete,
)

__all__ = [
    # profile_metrics
    "ACTIVITY_MULTIPLIERS",
    "CALORIE_STRATEGY_BANDS",
    "CalorieRange",
    "is_profile_complete",
    "compute_bmr",
    "compute_tdee",
    "compute_healthy_calorie_range",
    "compute_healthy_calorie_range_from_tdee",
    # dynamic_tdee
    "DYNAMIC_TDEE_WINDOW_DAYS",
    "DYNAMIC_TDEE_MAX_DELTA_RATIO",
    "DYNAMIC_TDEE_SMOOTHING_ALPHA",
    "DynamicTdeeResult",
    "compute_dynamic_tdee",
    "describe_tdee_delta",
]
