"""스킬/속성 XP 집계

엔트리 1건당 고정 기본 지급 + 조건부 보너스.
속성 XP = 속성에 매핑된 스킬 XP 합.
"""

from __future__ import annotations

from typing import Iterable

from liferpg.core.models import DailyEntry

DAILY_COMPLETION_XP = 20

BASE_SKILL_GAINS: dict[str, int] = {
    "Energy": 5,
    "Organisation": 5,
    "Emotional Balance": 5,
    "Strength": 15,
}

ATTRIBUTE_SKILLS: dict[str, tuple[str, ...]] = {
    "Body": ("Strength", "Flexibility", "Energy"),
    "Mind": ("Learning", "Organisation", "Creativity"),
    "Soul": ("Mindfulness", "Emotional Balance", "Connection"),
}

# === 보너스 조건 ===
SLEEP_BONUS_RANGE = (7.0, 9.0)
SLEEP_BONUS_XP = 5
EXERCISE_BONUS_MIN_MINUTES = 30
EXERCISE_BONUS_MIN_EFFORT = 6
EXERCISE_BONUS_XP = 10
MOOD_BONUS_MIN = 7
MOOD_BONUS_XP = 5


def _sleep_bonus(entry: DailyEntry) -> bool:
    if entry.sleep_hours is None:
        return False
    low, high = SLEEP_BONUS_RANGE
    return low <= entry.sleep_hours <= high


def _exercise_bonus(entry: DailyEntry) -> bool:
    if entry.exercise_minutes is None or entry.exercise_effort is None:
        return False
    return (
        entry.exercise_minutes >= EXERCISE_BONUS_MIN_MINUTES
        and entry.exercise_effort >= EXERCISE_BONUS_MIN_EFFORT
    )


def _mood_bonus(entry: DailyEntry) -> bool:
    return entry.mood is not None and entry.mood >= MOOD_BONUS_MIN


def compute_skill_gains(entry: DailyEntry) -> dict[str, int]:
    """엔트리 1건의 스킬 XP 획득량."""
    gains = dict(BASE_SKILL_GAINS)
    if _sleep_bonus(entry):
        gains["Energy"] += SLEEP_BONUS_XP
    if _exercise_bonus(entry):
        gains["Strength"] += EXERCISE_BONUS_XP
    if _mood_bonus(entry):
        gains["Emotional Balance"] += MOOD_BONUS_XP
    return gains


def describe_bonus_gains(entry: DailyEntry) -> list[tuple[str, int, str]]:
    """획득한 보너스 목록: (스킬, XP, 사유). 리캡 화면용."""
    reasons: list[tuple[str, int, str]] = []
    if _sleep_bonus(entry):
        reasons.append(("Energy", SLEEP_BONUS_XP, "Slept 7-9 hours"))
    if _exercise_bonus(entry):
        reasons.append(
            ("Strength", EXERCISE_BONUS_XP, "Exercised 30+ minutes at effort 6+")
        )
    if _mood_bonus(entry):
        reasons.append(("Emotional Balance", MOOD_BONUS_XP, "Mood 7 or higher"))
    return reasons


def aggregate_skill_xp(ordered_entries: Iterable[DailyEntry]) -> dict[str, int]:
    """전체 엔트리의 스킬 XP 합계."""
    totals: dict[str, int] = {}
    for entry in ordered_entries:
        for skill, xp in compute_skill_gains(entry).items():
            totals[skill] = totals.get(skill, 0) + xp
    return totals


def aggregate_attribute_xp(skill_xp: dict[str, int]) -> dict[str, int]:
    """속성 → 매핑 스킬 XP 합. 기록 없는 스킬은 0."""
    return {
        attribute: sum(skill_xp.get(skill, 0) for skill in skills)
        for attribute, skills in ATTRIBUTE_SKILLS.items()
    }


def compute_base_overall_xp(ordered_entries: Iterable[DailyEntry]) -> int:
    """일일 완료 XP 합. 어떤 필드를 채웠는지와 무관."""
    return sum(DAILY_COMPLETION_XP for _ in ordered_entries)
