"""BMR / TDEE / 권장 칼로리 범위

프로필 기본 필드가 하나라도 없으면 모든 계산은 None을 반환한다 (예외 없음).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from liferpg.core.mathutil import round_half_up
from liferpg.core.models import ActivityLevel, CalorieStrategy, Gender, Profile

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# TDEE 대비 (최소 비율, 최대 비율)
CALORIE_STRATEGY_BANDS: dict[CalorieStrategy, tuple[float, float]] = {
    CalorieStrategy.MAINTAIN: (0.90, 1.10),
    CalorieStrategy.CUT: (0.80, 0.90),
    CalorieStrategy.GAIN: (1.05, 1.15),
}


@dataclass(frozen=True)
class CalorieRange:
    min: int
    max: int

    def contains(self, calories: float) -> bool:
        return self.min <= calories <= self.max


def is_profile_complete(profile: Optional[Profile]) -> bool:
    """BMR/TDEE 계산에 필요한 5개 필드가 모두 있는지."""
    if profile is None:
        return False
    return (
        profile.age is not None
        and profile.height_cm is not None
        and profile.weight_kg is not None
        and profile.gender is not None
        and profile.activity_level is not None
    )


def compute_bmr(profile: Optional[Profile]) -> Optional[float]:
    """Mifflin-St Jeor 기초대사량."""
    if not is_profile_complete(profile):
        return None
    gender_constant = -161 if profile.gender == Gender.FEMALE else 5
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + gender_constant
    )


def compute_tdee(profile: Optional[Profile]) -> Optional[int]:
    """BMR × 활동 계수."""
    bmr = compute_bmr(profile)
    if bmr is None:
        return None
    multiplier = ACTIVITY_MULTIPLIERS.get(profile.activity_level)
    if multiplier is None:
        return None
    return round_half_up(bmr * multiplier)


def compute_healthy_calorie_range_from_tdee(
    tdee: Optional[float],
    strategy: CalorieStrategy = CalorieStrategy.MAINTAIN,
) -> Optional[CalorieRange]:
    """임의 TDEE 기준값으로 전략별 칼로리 범위 계산.

    모르는 전략은 maintain으로 대체.
    """
    if tdee is None:
        return None
    min_ratio, max_ratio = CALORIE_STRATEGY_BANDS.get(
        strategy, CALORIE_STRATEGY_BANDS[CalorieStrategy.MAINTAIN]
    )
    return CalorieRange(
        min=round_half_up(tdee * min_ratio),
        max=round_half_up(tdee * max_ratio),
    )


def compute_healthy_calorie_range(
    profile: Optional[Profile],
    strategy: CalorieStrategy = CalorieStrategy.MAINTAIN,
) -> Optional[CalorieRange]:
    return compute_healthy_calorie_range_from_tdee(compute_tdee(profile), strategy)
