"""행동 메커니즘 평가: 누락 페널티, 칼로리 준수, 복귀 보너스, 휴식일

개별 상한 + 합산 상한: 어떤 신호도, 그 합도 정책 상한을 넘지 않는다.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from liferpg.core.behavior.calorie import evaluate_calorie_adherence
from liferpg.core.behavior.config import BEHAVIOR_CONFIG, BehaviorConfig, stepped_rate
from liferpg.core.behavior.models import (
    BehaviorSummary,
    CalorieAdherence,
    XpAdjustment,
)
from liferpg.core.behavior.rest_day import (
    empty_rest_day_state,
    evaluate_rest_day_eligibility,
)
from liferpg.core.behavior.streaks import (
    count_comeback_streak,
    count_current_streak,
    count_missed_days,
)
from liferpg.core.dates import today
from liferpg.core.mathutil import round_half_up
from liferpg.core.models import DailyEntry, Profile

logger = logging.getLogger(__name__)


def empty_behavior_summary(config: BehaviorConfig = BEHAVIOR_CONFIG) -> BehaviorSummary:
    """기록 없음 → 모든 비율 0, 휴식일 불가."""
    return BehaviorSummary(
        total_missed_days=0,
        missed_day_penalty_rate=0.0,
        calorie_penalty_rate=0.0,
        penalty_rate=0.0,
        streak_recovery_rate=0.0,
        calorie_recovery_rate=0.0,
        recovery_rate=0.0,
        current_streak=0,
        comeback_streak=0,
        calorie_adherence=CalorieAdherence(),
        rest_day=empty_rest_day_state(config),
    )


def evaluate_behavior_mechanics(
    ordered_entries: Sequence[DailyEntry],
    profile: Optional[Profile] = None,
    reference_date: Optional[date] = None,
    config: BehaviorConfig = BEHAVIOR_CONFIG,
) -> BehaviorSummary:
    """정렬된 엔트리로 페널티/회복 비율과 휴식일 상태 계산.

    reference_date는 휴식일 판정에만 쓰인다 (기본: 오늘).
    """
    dates = sorted({e.date for e in ordered_entries})
    if not dates:
        return empty_behavior_summary(config)

    total_missed_days = count_missed_days(dates)
    current_streak = count_current_streak(dates)
    comeback_streak = count_comeback_streak(dates)

    missed_day_penalty_rate = min(
        total_missed_days * config.SOFT_PENALTY_PER_MISSED_DAY,
        config.SOFT_PENALTY_MAX_RATE,
    )

    calorie = evaluate_calorie_adherence(
        sorted(ordered_entries, key=lambda e: e.date), profile, config
    )

    penalty_rate = min(
        config.TOTAL_PENALTY_MAX_RATE,
        missed_day_penalty_rate + calorie.penalty_rate,
    )

    streak_recovery_rate = stepped_rate(
        comeback_streak,
        config.RECOVERY_TRIGGER_STREAK,
        config.RECOVERY_STEP_RATE,
        config.RECOVERY_MAX_RATE,
    )
    recovery_rate = min(
        config.total_recovery_max_rate,
        streak_recovery_rate + calorie.recovery_rate,
    )

    rest_day = evaluate_rest_day_eligibility(
        dates, current_streak, reference_date or today(), config
    )

    logger.debug(
        "Behavior: missed=%d streak=%d comeback=%d penalty=%.3f recovery=%.3f",
        total_missed_days,
        current_streak,
        comeback_streak,
        penalty_rate,
        recovery_rate,
    )

    return BehaviorSummary(
        total_missed_days=total_missed_days,
        missed_day_penalty_rate=missed_day_penalty_rate,
        calorie_penalty_rate=calorie.penalty_rate,
        penalty_rate=penalty_rate,
        streak_recovery_rate=streak_recovery_rate,
        calorie_recovery_rate=calorie.recovery_rate,
        recovery_rate=recovery_rate,
        current_streak=current_streak,
        comeback_streak=comeback_streak,
        calorie_adherence=calorie.adherence,
        rest_day=rest_day,
    )


def apply_behavior_xp_adjustments(
    base_overall_xp: int, penalty_rate: float, recovery_rate: float
) -> XpAdjustment:
    """비율을 XP로 환산. 결과는 0 미만이 되지 않는다."""
    penalty_xp = round_half_up(base_overall_xp * penalty_rate)
    recovery_xp = round_half_up(base_overall_xp * recovery_rate)
    return XpAdjustment(
        penalty_xp=penalty_xp,
        recovery_xp=recovery_xp,
        adjusted_overall_xp=max(0, base_overall_xp - penalty_xp + recovery_xp),
    )
