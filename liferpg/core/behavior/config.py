"""행동 메커니즘 튜닝 상수

연속 기록을 장려하되 과한 처벌은 피하도록 보수적으로 잡은 초기값.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BehaviorConfig:
    # 휴식일
    REST_DAY_MIN_STREAK: int = 3
    REST_DAY_WINDOW_DAYS: int = 7
    REST_DAY_MAX_USES_PER_WINDOW: int = 1

    # 누락일 페널티
    SOFT_PENALTY_PER_MISSED_DAY: float = 0.02
    SOFT_PENALTY_MAX_RATE: float = 0.25

    # 칼로리 준수
    CALORIE_LOOKBACK_DAYS: int = 7
    CALORIE_PENALTY_PER_DEVIATION_DAY: float = 0.015
    CALORIE_PENALTY_MAX_RATE: float = 0.12

    TOTAL_PENALTY_MAX_RATE: float = 0.30

    # 복귀 보너스
    RECOVERY_TRIGGER_STREAK: int = 3
    RECOVERY_STEP_RATE: float = 0.01
    RECOVERY_MAX_RATE: float = 0.08

    CALORIE_RECOVERY_TRIGGER_STREAK: int = 3
    CALORIE_RECOVERY_STEP_RATE: float = 0.005
    CALORIE_RECOVERY_MAX_RATE: float = 0.03

    @property
    def total_recovery_max_rate(self) -> float:
        return self.RECOVERY_MAX_RATE + self.CALORIE_RECOVERY_MAX_RATE


BEHAVIOR_CONFIG = BehaviorConfig()


def stepped_rate(streak: int, trigger: int, step: float, cap: float) -> float:
    """streak이 trigger 이상이면 trigger 당일부터 하루 step씩, cap 상한."""
    if streak < trigger:
        return 0.0
    return min((streak - trigger + 1) * step, cap)
