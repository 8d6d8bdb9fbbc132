"""저장 JSON blob 스키마 + 정규화

이전 버전 payload도 읽을 수 있도록 관대하게 검증한다.
잘못된 수치/열거형 값은 예외 대신 None으로 바꾸고,
형식이 틀린 날짜 키는 경고 로그 후 건너뛴다 (엔진에는 올바른 날짜만 전달).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from liferpg.core.dates import is_iso_day, parse_iso_day, to_iso_day
from liferpg.core.models import (
    REVIEW_TYPES,
    ActivityLevel,
    AppState,
    DailyEntry,
    Gender,
    Profile,
    empty_reviews,
)
from liferpg.core.progression.quests import QUESTS

logger = logging.getLogger(__name__)

DEFAULT_DYNAMIC_TDEE_WINDOW_DAYS = 7


# === 값 변환 ===


def to_nullable_number(value: Any) -> Optional[float]:
    """None/빈 문자열/숫자 아님 → None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if math.isfinite(parsed) else None


def to_nullable_int(value: Any) -> Optional[int]:
    """정수로 표현 가능한 값만 int, 나머지는 None."""
    parsed = to_nullable_number(value)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)


def _to_enum_or_none(enum_cls, value: Any):
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


# === 저장 스키마 ===


class StoredEntry(BaseModel):
    """엔트리 1건 (camelCase 저장)"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # 맵 키가 기준. 저장 시 키와 같은 값을 기록
    date: Optional[str] = None
    calories: Optional[float] = None
    sleep_hours: Optional[float] = Field(None, alias="sleepHours")
    mood: Optional[float] = None
    steps: Optional[float] = None
    exercise_minutes: Optional[float] = Field(None, alias="exerciseMinutes")
    exercise_effort: Optional[float] = Field(None, alias="exerciseEffort")

    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    is_anomalous: bool = Field(False, alias="isAnomalous")
    anomaly_notes: list[str] = Field(default_factory=list, alias="anomalyNotes")

    @field_validator(
        "calories",
        "sleep_hours",
        "mood",
        "steps",
        "exercise_minutes",
        "exercise_effort",
        mode="before",
    )
    @classmethod
    def _nullable_number(cls, value: Any) -> Optional[float]:
        return to_nullable_number(value)

    @field_validator("date", "created_at", "updated_at", mode="before")
    @classmethod
    def _nullable_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("is_anomalous", mode="before")
    @classmethod
    def _strict_flag(cls, value: Any) -> bool:
        return value is True

    @field_validator("anomaly_notes", mode="before")
    @classmethod
    def _notes(cls, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [str(note) for note in value]

    def to_entry(self, day) -> DailyEntry:
        return DailyEntry(
            date=day,
            calories=self.calories,
            sleep_hours=self.sleep_hours,
            mood=self.mood,
            steps=self.steps,
            exercise_minutes=self.exercise_minutes,
            exercise_effort=self.exercise_effort,
            created_at=self.created_at,
            updated_at=self.updated_at,
            is_anomalous=self.is_anomalous,
            anomaly_notes=tuple(self.anomaly_notes),
        )

    @classmethod
    def from_entry(cls, entry: DailyEntry) -> "StoredEntry":
        return cls(
            date=to_iso_day(entry.date),
            calories=entry.calories,
            sleep_hours=entry.sleep_hours,
            mood=entry.mood,
            steps=entry.steps,
            exercise_minutes=entry.exercise_minutes,
            exercise_effort=entry.exercise_effort,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
            is_anomalous=entry.is_anomalous,
            anomaly_notes=list(entry.anomaly_notes),
        )


class StoredProfile(BaseModel):
    """프로필 (모든 필드 nullable, 구버전 `tdee` 별칭 지원)"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    age: Optional[int] = None
    height_cm: Optional[float] = Field(None, alias="heightCm")
    weight_kg: Optional[float] = Field(None, alias="weightKg")
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = Field(None, alias="activityLevel")
    baseline_tdee: Optional[int] = Field(None, alias="baselineTdee")
    dynamic_tdee: Optional[int] = Field(None, alias="dynamicTdee")
    dynamic_tdee_enabled: bool = Field(False, alias="dynamicTdeeEnabled")
    dynamic_tdee_window_days: int = Field(
        DEFAULT_DYNAMIC_TDEE_WINDOW_DAYS, alias="dynamicTdeeWindowDays"
    )
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def _legacy_tdee_alias(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and data.get("baselineTdee") is None:
            if data.get("tdee") is not None:
                data = {**data, "baselineTdee": data["tdee"]}
        return data

    @field_validator("age", "baseline_tdee", "dynamic_tdee", mode="before")
    @classmethod
    def _nullable_int(cls, value: Any) -> Optional[int]:
        return to_nullable_int(value)

    @field_validator("height_cm", "weight_kg", mode="before")
    @classmethod
    def _nullable_number(cls, value: Any) -> Optional[float]:
        return to_nullable_number(value)

    @field_validator("gender", mode="before")
    @classmethod
    def _gender(cls, value: Any) -> Optional[Gender]:
        return _to_enum_or_none(Gender, value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _activity_level(cls, value: Any) -> Optional[ActivityLevel]:
        return _to_enum_or_none(ActivityLevel, value)

    @field_validator("dynamic_tdee_enabled", mode="before")
    @classmethod
    def _strict_flag(cls, value: Any) -> bool:
        return value is True

    @field_validator("dynamic_tdee_window_days", mode="before")
    @classmethod
    def _window_days(cls, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return DEFAULT_DYNAMIC_TDEE_WINDOW_DAYS

    @field_validator("updated_at", mode="before")
    @classmethod
    def _nullable_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    def to_profile(self) -> Profile:
        return Profile(
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            gender=self.gender,
            activity_level=self.activity_level,
            baseline_tdee=self.baseline_tdee,
            dynamic_tdee=self.dynamic_tdee,
            dynamic_tdee_enabled=self.dynamic_tdee_enabled,
            dynamic_tdee_window_days=self.dynamic_tdee_window_days,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_profile(cls, profile: Profile) -> "StoredProfile":
        return cls(
            age=profile.age,
            height_cm=profile.height_cm,
            weight_kg=profile.weight_kg,
            gender=profile.gender,
            activity_level=profile.activity_level,
            baseline_tdee=profile.baseline_tdee,
            dynamic_tdee=profile.dynamic_tdee,
            dynamic_tdee_enabled=profile.dynamic_tdee_enabled,
            dynamic_tdee_window_days=profile.dynamic_tdee_window_days,
            updated_at=profile.updated_at,
        )


class StoredState(BaseModel):
    """저장 blob 최상위

    모르는 최상위 키(settings, goals, onboardingComplete 등)는 extra로 보존해
    저장 시 다시 기록한다.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    entries: dict[str, Any] = Field(default_factory=dict)
    reviews: dict[str, dict[str, Any]] = Field(default_factory=dict, validate_default=True)
    accepted_quests: dict[str, bool] = Field(
        default_factory=dict, alias="acceptedQuests", validate_default=True
    )
    profile: StoredProfile = Field(default_factory=StoredProfile)

    @field_validator("entries", mode="before")
    @classmethod
    def _entries(cls, value: Any) -> dict[str, Any]:
        return dict(value) if isinstance(value, Mapping) else {}

    @field_validator("reviews", mode="before")
    @classmethod
    def _reviews(cls, value: Any) -> dict[str, dict[str, Any]]:
        return normalize_reviews(value)

    @field_validator("accepted_quests", mode="before")
    @classmethod
    def _accepted(cls, value: Any) -> dict[str, bool]:
        return normalize_accepted_quests(value)

    @field_validator("profile", mode="before")
    @classmethod
    def _profile(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, StoredProfile)) else {}

    def to_app_state(self) -> AppState:
        return AppState(
            entries={e.date: e for e in normalize_entries(self.entries)},
            profile=self.profile.to_profile(),
            accepted_quests=dict(self.accepted_quests),
            reviews={kind: dict(items) for kind, items in self.reviews.items()},
            extras=dict(self.model_extra or {}),
        )

    @classmethod
    def from_app_state(cls, state: AppState) -> "StoredState":
        return cls.model_validate(
            {
                **state.extras,
                "entries": {
                    to_iso_day(day): StoredEntry.from_entry(entry).model_dump(
                        by_alias=True
                    )
                    for day, entry in sorted(state.entries.items())
                },
                "reviews": state.reviews,
                "acceptedQuests": dict(state.accepted_quests),
                "profile": StoredProfile.from_profile(state.profile),
            }
        )


# === 정규화 ===


def normalize_entries(raw_entries: Mapping[str, Any]) -> list[DailyEntry]:
    """날짜 키 맵 → 날짜순 DailyEntry 목록.

    형식이 틀린 키와 객체가 아닌 값은 건너뛴다.
    """
    entries: list[DailyEntry] = []
    for key, raw in raw_entries.items():
        if not is_iso_day(key):
            logger.warning("Skipping entry with malformed date key: %r", key)
            continue
        if isinstance(raw, StoredEntry):
            stored = raw
        elif isinstance(raw, Mapping):
            stored = StoredEntry.model_validate(raw)
        else:
            logger.warning("Skipping non-object entry for %s", key)
            continue
        entries.append(stored.to_entry(parse_iso_day(key)))
    entries.sort(key=lambda e: e.date)
    return entries


def normalize_profile(raw_profile: Any) -> Profile:
    if not isinstance(raw_profile, Mapping):
        return Profile()
    return StoredProfile.model_validate(raw_profile).to_profile()


def normalize_accepted_quests(raw: Any) -> dict[str, bool]:
    """카탈로그 퀘스트는 모두 키를 갖고, 값은 정확히 True일 때만 수락."""
    accepted = {quest_id: False for quest_id in QUESTS}
    if isinstance(raw, Mapping):
        for quest_id, value in raw.items():
            accepted[str(quest_id)] = value is True
    return accepted


def normalize_reviews(raw: Any) -> dict[str, dict[str, Any]]:
    """weekly/monthly 키를 항상 갖는 회고 맵. 객체가 아닌 payload는 건너뛴다."""
    reviews = empty_reviews()
    if not isinstance(raw, Mapping):
        return reviews
    for review_type in REVIEW_TYPES:
        section = raw.get(review_type)
        if not isinstance(section, Mapping):
            continue
        for period, payload in section.items():
            if not isinstance(payload, Mapping):
                logger.warning("Skipping non-object %s review for %r", review_type, period)
                continue
            reviews[review_type][str(period)] = dict(payload)
    return reviews


def state_from_raw(raw: Any) -> AppState:
    """JSON에서 읽은 임의 객체 → AppState. 모르는 형태면 기본 상태."""
    if not isinstance(raw, Mapping):
        return StoredState().to_app_state()
    return StoredState.model_validate(raw).to_app_state()
