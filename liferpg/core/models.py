"""진행도 도메인 모델 (저장소 무관)"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

DAILY_FIELDS: tuple[str, ...] = (
    "calories",
    "sleep_hours",
    "mood",
    "steps",
    "exercise_minutes",
    "exercise_effort",
)

# 저장 JSON(camelCase) ↔ 모델 필드
DAILY_FIELD_ALIASES: dict[str, str] = {
    "calories": "calories",
    "sleep_hours": "sleepHours",
    "mood": "mood",
    "steps": "steps",
    "exercise_minutes": "exerciseMinutes",
    "exercise_effort": "exerciseEffort",
}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NONBINARY = "nonbinary"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class CalorieStrategy(str, Enum):
    MAINTAIN = "maintain"
    CUT = "cut"
    GAIN = "gain"


@dataclass(frozen=True)
class DailyEntry:
    """하루 기록. 모든 수치 필드는 독립적으로 None 가능 (부분 기록 허용)."""

    date: date
    calories: Optional[float] = None
    sleep_hours: Optional[float] = None
    mood: Optional[float] = None
    steps: Optional[float] = None
    exercise_minutes: Optional[float] = None
    exercise_effort: Optional[float] = None

    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    is_anomalous: bool = False
    anomaly_notes: tuple[str, ...] = ()

    def metric(self, key: str) -> Optional[float]:
        """DAILY_FIELDS 키로 값 조회. 모르는 키는 None."""
        if key not in DAILY_FIELDS:
            return None
        return getattr(self, key)

    def has_any_metric(self) -> bool:
        return any(getattr(self, key) is not None for key in DAILY_FIELDS)


@dataclass
class Profile:
    """사용자 프로필. 기본 5개 필드가 모두 있어야 BMR/TDEE 계산 가능."""

    age: Optional[int] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None

    # 파생값 (저장 시 항상 재계산)
    baseline_tdee: Optional[int] = None
    dynamic_tdee: Optional[int] = None
    dynamic_tdee_enabled: bool = False
    dynamic_tdee_window_days: int = 7
    updated_at: Optional[str] = None


REVIEW_TYPES: tuple[str, ...] = ("weekly", "monthly")

# 구조화 회고 필드 (구버전 payload는 text 하나)
REVIEW_STRUCTURED_FIELDS: tuple[str, ...] = ("wins", "blockers", "nextAction", "confidence")


def empty_reviews() -> dict[str, dict[str, dict[str, Any]]]:
    return {review_type: {} for review_type in REVIEW_TYPES}


@dataclass
class AppState:
    """저장 blob의 메모리 표현

    reviews: 유형(weekly/monthly) → 기간 키 → 회고 payload.
    extras: 엔진이 해석하지 않는 최상위 키 (settings, goals, onboardingComplete 등).
    저장 시 그대로 다시 기록한다.
    """

    entries: dict[date, DailyEntry] = field(default_factory=dict)
    profile: Profile = field(default_factory=Profile)
    accepted_quests: dict[str, bool] = field(default_factory=dict)
    reviews: dict[str, dict[str, dict[str, Any]]] = field(default_factory=empty_reviews)
    extras: dict[str, Any] = field(default_factory=dict)

    def ordered_entries(self) -> list[DailyEntry]:
        """날짜 오름차순 엔트리 목록 (호출마다 새로 생성)."""
        return [self.entries[key] for key in sorted(self.entries)]
