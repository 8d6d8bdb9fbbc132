"""Shared test fixtures."""

from datetime import date

import pytest

from liferpg.core.models import ActivityLevel, Gender, Profile
from liferpg.services.state_store import StateStore

# 2026-03-02 = 월요일
MONDAY = date(2026, 3, 2)


@pytest.fixture()
def monday() -> date:
    """ISO 주 시작일 기준점."""
    return MONDAY


@pytest.fixture()
def complete_profile() -> Profile:
    """BMR 1780, TDEE 2759, maintain 범위 2483~3035."""
    return Profile(
        age=30,
        height_cm=180,
        weight_kg=80,
        gender=Gender.MALE,
        activity_level=ActivityLevel.MODERATE,
    )


@pytest.fixture()
def store(tmp_path) -> StateStore:
    """임시 디렉터리의 JSON 상태 저장소."""
    return StateStore(tmp_path / "state.json")
