"""칼로리 준수 페널티 / 회복

프로필이 완전할 때만 활성화. 베이스라인 TDEE의 maintain 범위(±10%) 기준.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from liferpg.core.behavior.config import BEHAVIOR_CONFIG, BehaviorConfig, stepped_rate
from liferpg.core.behavior.models import CalorieAdherence, CalorieEffect
from liferpg.core.metabolic.profile_metrics import (
    CalorieRange,
    compute_healthy_calorie_range,
    is_profile_complete,
)
from liferpg.core.models import CalorieStrategy, DailyEntry, Profile

logger = logging.getLogger(__name__)


def count_trailing_in_range_streak(
    recent_entries: Sequence[DailyEntry], healthy_range: CalorieRange
) -> int:
    """최근부터 거꾸로 범위 내 칼로리가 이어진 일수.

    칼로리 미기록은 연속을 끊는다.
    """
    streak = 0
    for entry in reversed(recent_entries):
        if entry.calories is None:
            break
        if not healthy_range.contains(entry.calories):
            break
        streak += 1
    return streak


def evaluate_calorie_adherence(
    ordered_entries: Sequence[DailyEntry],
    profile: Optional[Profile],
    config: BehaviorConfig = BEHAVIOR_CONFIG,
) -> CalorieEffect:
    """최근 CALORIE_LOOKBACK_DAYS개 엔트리의 칼로리 준수 평가."""
    healthy_range = (
        compute_healthy_calorie_range(profile, CalorieStrategy.MAINTAIN)
        if is_profile_complete(profile)
        else None
    )
    if healthy_range is None:
        return CalorieEffect()

    recent = list(ordered_entries)[-config.CALORIE_LOOKBACK_DAYS :]
    logged = [e.calories for e in recent if e.calories is not None]
    deviation_days = sum(1 for c in logged if not healthy_range.contains(c))
    in_range_streak = count_trailing_in_range_streak(recent, healthy_range)

    penalty_rate = min(
        deviation_days * config.CALORIE_PENALTY_PER_DEVIATION_DAY,
        config.CALORIE_PENALTY_MAX_RATE,
    )
    recovery_rate = stepped_rate(
        in_range_streak,
        config.CALORIE_RECOVERY_TRIGGER_STREAK,
        config.CALORIE_RECOVERY_STEP_RATE,
        config.CALORIE_RECOVERY_MAX_RATE,
    )

    logger.debug(
        "Calorie adherence: range=%d~%d evaluated=%d deviation=%d streak=%d",
        healthy_range.min,
        healthy_range.max,
        len(logged),
        deviation_days,
        in_range_streak,
    )

    return CalorieEffect(
        penalty_rate=penalty_rate,
        recovery_rate=recovery_rate,
        adherence=CalorieAdherence(
            evaluated_days=len(logged),
            deviation_days=deviation_days,
            in_range_streak=in_range_streak,
            range_min=healthy_range.min,
            range_max=healthy_range.max,
            enabled=True,
        ),
    )
