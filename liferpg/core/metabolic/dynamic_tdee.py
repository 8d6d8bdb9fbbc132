"""적응형 TDEE 추정

베이스라인(Mifflin + 활동 계수)에서 출발해 최근 활동량/섭취 신호로 보정한다.

1) 운동 시간·강도·걸음 수 평균을 기준값(45분, 6/10, 8000보)으로 나눠 활동 부하 비율 산출
2) 부하 비율 → 활동 보정 (-6% ~ +10%)
3) 베이스라인 대비 섭취 편차 평균 → 섭취 보정 (±8%)
4) 섭취 편차의 표준편차만큼 보정 크기를 줄임 (최대 5%, 부호 유지, 0 하한)
5) ±12% 클램프 후 0.6 배 (베이스라인 40% 유지)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from liferpg.core.mathutil import (
    clamp,
    mean_or_default,
    mean_or_none,
    population_std_dev,
    round_half_up,
)
from liferpg.core.metabolic.profile_metrics import compute_tdee
from liferpg.core.models import DailyEntry, Profile

logger = logging.getLogger(__name__)

DYNAMIC_TDEE_WINDOW_DAYS = 14
DYNAMIC_TDEE_MAX_DELTA_RATIO = 0.12
DYNAMIC_TDEE_SMOOTHING_ALPHA = 0.6

# 활동 부하 기준값
REFERENCE_EXERCISE_MINUTES = 45.0
REFERENCE_EXERCISE_EFFORT = 6.0
REFERENCE_STEPS = 8000.0

ACTIVITY_DELTA_SCALE = 0.08
ACTIVITY_DELTA_RANGE = (-0.06, 0.10)
INTAKE_DELTA_SCALE = 0.35
INTAKE_DELTA_RANGE = (-0.08, 0.08)
INTAKE_VARIANCE_SCALE = 0.25
INTAKE_VARIANCE_MAX = 0.05

STABLE_DELTA_THRESHOLD = 0.01


@dataclass(frozen=True)
class DynamicTdeeResult:
    baseline_tdee: Optional[int]
    dynamic_tdee: Optional[int]
    delta: int = 0
    delta_ratio: float = 0.0
    capped_delta_ratio: float = 0.0
    activity_delta_ratio: float = 0.0
    intake_delta_ratio: float = 0.0
    intake_variance_ratio: float = 0.0
    interpretation: str = ""


def describe_tdee_delta(delta_ratio: float) -> str:
    if abs(delta_ratio) < STABLE_DELTA_THRESHOLD:
        return "Dynamic TDEE is stable and aligned with your baseline profile estimate."
    if delta_ratio > 0:
        return "Dynamic TDEE is slightly elevated from recent activity and intake trends."
    return "Dynamic TDEE is slightly reduced based on recent recovery and intake trends."


def compute_activity_load_ratio(window_entries: Iterable[DailyEntry]) -> float:
    """기준값 대비 활동 부하. 1.0 = 기준 수준.

    창 안에 표본이 없는 신호는 제외하고, 신호가 하나도 없으면 1.0(중립).
    """
    window_entries = list(window_entries)
    signals = [
        (
            mean_or_none(e.exercise_minutes for e in window_entries),
            REFERENCE_EXERCISE_MINUTES,
        ),
        (
            mean_or_none(e.exercise_effort for e in window_entries),
            REFERENCE_EXERCISE_EFFORT,
        ),
        (mean_or_none(e.steps for e in window_entries), REFERENCE_STEPS),
    ]
    return mean_or_default(
        (avg / reference for avg, reference in signals if avg is not None),
        default=1.0,
    )


def compute_calorie_deviation_ratios(
    window_entries: Iterable[DailyEntry], baseline_tdee: float
) -> list[float]:
    """기록된 날마다 (섭취 - 베이스라인) / 베이스라인."""
    return [
        (e.calories - baseline_tdee) / baseline_tdee
        for e in window_entries
        if e.calories is not None and math.isfinite(e.calories)
    ]


def compute_dynamic_tdee(
    profile: Optional[Profile],
    entries: Iterable[DailyEntry],
    window_days: int = DYNAMIC_TDEE_WINDOW_DAYS,
) -> DynamicTdeeResult:
    """최근 window_days개 엔트리로 적응형 TDEE 계산.

    프로필이 불완전하면 baseline/dynamic 모두 None.
    """
    baseline_tdee = compute_tdee(profile)
    if baseline_tdee is None:
        return DynamicTdeeResult(
            baseline_tdee=None,
            dynamic_tdee=None,
            interpretation=(
                "Complete all profile fields to calculate baseline and adaptive TDEE."
            ),
        )

    ordered = sorted(entries, key=lambda e: e.date)
    window = ordered[-window_days:] if window_days > 0 else []

    activity_load_ratio = compute_activity_load_ratio(window)
    activity_delta_ratio = clamp(
        (activity_load_ratio - 1) * ACTIVITY_DELTA_SCALE, *ACTIVITY_DELTA_RANGE
    )

    deviation_ratios = compute_calorie_deviation_ratios(window, baseline_tdee)
    intake_delta_ratio = clamp(
        mean_or_default(deviation_ratios) * INTAKE_DELTA_SCALE, *INTAKE_DELTA_RANGE
    )
    intake_variance_ratio = min(
        INTAKE_VARIANCE_MAX,
        population_std_dev(deviation_ratios) * INTAKE_VARIANCE_SCALE,
    )

    raw_delta_ratio = activity_delta_ratio + intake_delta_ratio
    dampened = math.copysign(
        max(0.0, abs(raw_delta_ratio) - intake_variance_ratio), raw_delta_ratio
    )
    capped_delta_ratio = clamp(
        dampened, -DYNAMIC_TDEE_MAX_DELTA_RATIO, DYNAMIC_TDEE_MAX_DELTA_RATIO
    )
    smooth_delta_ratio = capped_delta_ratio * DYNAMIC_TDEE_SMOOTHING_ALPHA
    dynamic_tdee = round_half_up(baseline_tdee * (1 + smooth_delta_ratio))

    logger.debug(
        "Dynamic TDEE: baseline=%d activity=%.4f intake=%.4f variance=%.4f final=%.4f",
        baseline_tdee,
        activity_delta_ratio,
        intake_delta_ratio,
        intake_variance_ratio,
        smooth_delta_ratio,
    )

    return DynamicTdeeResult(
        baseline_tdee=baseline_tdee,
        dynamic_tdee=dynamic_tdee,
        delta=dynamic_tdee - baseline_tdee,
        delta_ratio=smooth_delta_ratio,
        capped_delta_ratio=capped_delta_ratio,
        activity_delta_ratio=activity_delta_ratio,
        intake_delta_ratio=intake_delta_ratio,
        intake_variance_ratio=intake_variance_ratio,
        interpretation=describe_tdee_delta(smooth_delta_ratio),
    )
