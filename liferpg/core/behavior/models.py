"""행동 메커니즘 결과 모델"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CalorieAdherence:
    evaluated_days: int = 0
    deviation_days: int = 0
    in_range_streak: int = 0
    range_min: Optional[int] = None
    range_max: Optional[int] = None
    enabled: bool = False


@dataclass(frozen=True)
class CalorieEffect:
    penalty_rate: float = 0.0
    recovery_rate: float = 0.0
    adherence: CalorieAdherence = field(default_factory=CalorieAdherence)


@dataclass(frozen=True)
class RestDayState:
    """휴식일 사용 가능 여부 (안내용, 자동 적용하지 않음)"""

    eligible: bool
    remaining_this_window: int
    message: str


@dataclass(frozen=True)
class XpAdjustment:
    penalty_xp: int
    recovery_xp: int
    adjusted_overall_xp: int


@dataclass(frozen=True)
class BehaviorSummary:
    total_missed_days: int
    missed_day_penalty_rate: float
    calorie_penalty_rate: float
    penalty_rate: float
    streak_recovery_rate: float
    calorie_recovery_rate: float
    recovery_rate: float
    current_streak: int
    comeback_streak: int
    calorie_adherence: CalorieAdherence
    rest_day: RestDayState
    penalty_xp: int = 0
    recovery_xp: int = 0

    def to_dict(self) -> dict:
        adherence = self.calorie_adherence
        return {
            "totalMissedDays": self.total_missed_days,
            "missedDayPenaltyRate": self.missed_day_penalty_rate,
            "caloriePenaltyRate": self.calorie_penalty_rate,
            "penaltyRate": self.penalty_rate,
            "streakRecoveryRate": self.streak_recovery_rate,
            "calorieRecoveryRate": self.calorie_recovery_rate,
            "recoveryRate": self.recovery_rate,
            "currentStreak": self.current_streak,
            "comebackStreak": self.comeback_streak,
            "penaltyXp": self.penalty_xp,
            "recoveryXp": self.recovery_xp,
            "calorieAdherence": {
                "evaluatedDays": adherence.evaluated_days,
                "deviationDays": adherence.deviation_days,
                "inRangeStreak": adherence.in_range_streak,
                "rangeMin": adherence.range_min,
                "rangeMax": adherence.range_max,
                "enabled": adherence.enabled,
            },
            "restDay": {
                "eligible": self.rest_day.eligible,
                "remainingThisWindow": self.rest_day.remaining_this_window,
                "message": self.rest_day.message,
            },
        }
