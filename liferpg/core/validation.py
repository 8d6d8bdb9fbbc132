"""엔트리/프로필 입력 검증

hard error는 저장 차단, soft anomaly는 저장하되 플래그만 남긴다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Optional

from liferpg.core.dates import local_now, to_local_naive
from liferpg.core.models import DailyEntry, Profile

EDIT_GRACE_PERIOD = timedelta(hours=24)

# (필드, 상한, 안내 문구)
ANOMALY_THRESHOLDS: tuple[tuple[str, float, str], ...] = (
    ("sleep_hours", 14, "Sleep > 14h"),
    ("steps", 60000, "Steps > 60,000"),
    ("calories", 8000, "Calories > 8,000"),
    ("exercise_minutes", 240, "Exercise > 240 minutes"),
)

PROFILE_RANGES: dict[str, tuple[float, float, str]] = {
    "age": (10, 120, "Age must be between 10 and 120."),
    "height_cm": (80, 260, "Height must be between 80 and 260 cm."),
    "weight_kg": (20, 400, "Weight must be between 20 and 400 kg."),
}


@dataclass
class EntryValidation:
    hard_errors: list[str] = field(default_factory=list)
    soft_warnings: list[str] = field(default_factory=list)
    anomalies: list[str] = field(default_factory=list)
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.hard_errors

    def add_error(self, field_name: str, message: str) -> None:
        self.hard_errors.append(message)
        self.field_errors.setdefault(field_name, []).append(message)


def is_editable(entry_date: date, now: Optional[datetime] = None) -> bool:
    """해당 날짜 종료 후 24시간까지만 수정 가능.

    날짜 경계는 today()와 같은 설정 타임존 기준. naive now는 이미 현지 시각으로 본다.
    """
    local = local_now() if now is None else to_local_naive(now)
    end_of_day = datetime.combine(entry_date, time.max)
    return local <= end_of_day + EDIT_GRACE_PERIOD


def validate_entry(entry: DailyEntry) -> EntryValidation:
    result = EntryValidation()

    if not entry.has_any_metric():
        result.add_error("date", "Please provide at least one metric in addition to date.")

    if entry.mood is not None and not 1 <= entry.mood <= 10:
        result.add_error("mood", "Mood must be between 1 and 10.")
    if entry.exercise_effort is not None and not 1 <= entry.exercise_effort <= 10:
        result.add_error("exercise_effort", "Exercise effort must be between 1 and 10.")

    # 운동 시간과 강도는 함께 기록
    minutes = entry.exercise_minutes
    if minutes is not None and minutes > 0 and entry.exercise_effort is None:
        result.add_error(
            "exercise_effort",
            "Exercise effort is required when exercise minutes are greater than 0.",
        )
    if entry.exercise_effort is not None and (minutes is None or minutes <= 0):
        result.add_error(
            "exercise_minutes",
            "Exercise minutes must be greater than 0 when exercise effort is provided.",
        )

    negative = [
        name
        for name in ("calories", "sleep_hours", "steps", "exercise_minutes")
        if getattr(entry, name) is not None and getattr(entry, name) < 0
    ]
    if negative:
        message = "Calories, sleep, steps, and exercise minutes cannot be negative."
        result.hard_errors.append(message)
        for name in negative:
            result.field_errors.setdefault(name, []).append(message)

    for field_name, limit, note in ANOMALY_THRESHOLDS:
        value = getattr(entry, field_name)
        if value is not None and value > limit:
            result.anomalies.append(note)

    if result.anomalies:
        result.soft_warnings.append(
            f"Anomalies detected: {', '.join(result.anomalies)}. "
            "Value included but flagged."
        )
    return result


def validate_profile(profile: Profile) -> dict[str, list[str]]:
    """필드별 오류. 빈 dict면 통과. None 필드는 검사하지 않는다."""
    errors: dict[str, list[str]] = {}
    for field_name, (low, high, message) in PROFILE_RANGES.items():
        value = getattr(profile, field_name)
        if value is not None and not low <= value <= high:
            errors.setdefault(field_name, []).append(message)
    return errors
