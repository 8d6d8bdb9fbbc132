"""적응형 TDEE 테스트

완전 프로필 베이스라인 TDEE = 2759.
"""

from datetime import date, timedelta

import pytest

from liferpg.core.metabolic.dynamic_tdee import (
    DYNAMIC_TDEE_MAX_DELTA_RATIO,
    compute_activity_load_ratio,
    compute_calorie_deviation_ratios,
    compute_dynamic_tdee,
    describe_tdee_delta,
)
from liferpg.core.models import DailyEntry, Profile

D0 = date(2026, 3, 2)
BASELINE = 2759


def _entries(count: int, **fields) -> list[DailyEntry]:
    return [DailyEntry(date=D0 + timedelta(days=i), **fields) for i in range(count)]


class TestActivityLoadRatio:
    def test_no_signal_is_neutral(self):
        assert compute_activity_load_ratio(_entries(5, calories=2000)) == 1.0
        assert compute_activity_load_ratio([]) == 1.0

    def test_reference_levels_give_one(self):
        entries = _entries(3, exercise_minutes=45, exercise_effort=6, steps=8000)
        assert compute_activity_load_ratio(entries) == pytest.approx(1.0)

    def test_missing_signal_excluded(self):
        entries = _entries(3, exercise_minutes=90, exercise_effort=6)
        assert compute_activity_load_ratio(entries) == pytest.approx(1.5)


class TestDeviationRatios:
    def test_skips_missing_calories(self):
        entries = [
            DailyEntry(date=D0, calories=2200),
            DailyEntry(date=D0 + timedelta(days=1)),
            DailyEntry(date=D0 + timedelta(days=2), calories=1650),
        ]
        assert compute_calorie_deviation_ratios(entries, 2000) == pytest.approx([0.1, -0.175])


class TestComputeDynamicTdee:
    def test_incomplete_profile(self):
        result = compute_dynamic_tdee(Profile(age=30), _entries(5, calories=2000))
        assert result.baseline_tdee is None
        assert result.dynamic_tdee is None
        assert "Complete all profile fields" in result.interpretation

    def test_no_entries_equals_baseline(self, complete_profile):
        result = compute_dynamic_tdee(complete_profile, [])
        assert result.baseline_tdee == BASELINE
        assert result.dynamic_tdee == BASELINE
        assert result.delta == 0
        assert result.interpretation.startswith("Dynamic TDEE is stable")

    def test_flat_baseline_window_has_zero_delta(self, complete_profile):
        result = compute_dynamic_tdee(complete_profile, _entries(14, calories=BASELINE))
        assert result.dynamic_tdee == BASELINE
        assert result.delta_ratio == pytest.approx(0)

    def test_extreme_low_is_capped(self, complete_profile):
        entries = _entries(14, calories=0, exercise_minutes=0, steps=0)
        result = compute_dynamic_tdee(complete_profile, entries)
        assert result.capped_delta_ratio == pytest.approx(-DYNAMIC_TDEE_MAX_DELTA_RATIO)
        assert result.delta_ratio == pytest.approx(-0.072)
        assert result.dynamic_tdee == 2560
        assert "reduced" in result.interpretation

    def test_extreme_high_is_capped(self, complete_profile):
        entries = _entries(
            14, calories=8000, exercise_minutes=240, exercise_effort=10, steps=40000
        )
        result = compute_dynamic_tdee(complete_profile, entries)
        assert result.activity_delta_ratio == pytest.approx(0.10)
        assert result.intake_delta_ratio == pytest.approx(0.08)
        assert result.capped_delta_ratio == pytest.approx(DYNAMIC_TDEE_MAX_DELTA_RATIO)
        assert result.dynamic_tdee == 2958
        assert "elevated" in result.interpretation

    def test_activity_only(self, complete_profile):
        entries = _entries(14, exercise_minutes=90, exercise_effort=6)
        result = compute_dynamic_tdee(complete_profile, entries)
        assert result.activity_delta_ratio == pytest.approx(0.04)
        assert result.intake_delta_ratio == 0
        assert result.dynamic_tdee == 2825

    def test_erratic_intake_dampens_delta(self, complete_profile):
        entries = [
            DailyEntry(
                date=D0 + timedelta(days=i),
                exercise_minutes=90,
                exercise_effort=6,
                calories=BASELINE * (1.2 if i % 2 == 0 else 0.8),
            )
            for i in range(14)
        ]
        result = compute_dynamic_tdee(complete_profile, entries)
        assert result.intake_variance_ratio == pytest.approx(0.05)
        assert result.dynamic_tdee == BASELINE

    def test_only_recent_window_used(self, complete_profile):
        old = _entries(20, calories=0, exercise_minutes=0, steps=0)
        recent = [
            DailyEntry(date=D0 + timedelta(days=20 + i), calories=BASELINE) for i in range(14)
        ]
        result = compute_dynamic_tdee(complete_profile, old + recent)
        assert result.dynamic_tdee == BASELINE

    def test_window_days_parameter(self, complete_profile):
        entries = _entries(10, calories=0, exercise_minutes=0, steps=0) + [
            DailyEntry(date=D0 + timedelta(days=10 + i), calories=BASELINE) for i in range(3)
        ]
        assert compute_dynamic_tdee(complete_profile, entries, window_days=3).dynamic_tdee == BASELINE
        assert compute_dynamic_tdee(complete_profile, entries, window_days=13).dynamic_tdee < BASELINE

    def test_bounded_by_cap(self, complete_profile):
        for calories in (0, 1000, 5000, 20000):
            result = compute_dynamic_tdee(complete_profile, _entries(14, calories=calories))
            assert abs(result.dynamic_tdee - BASELINE) <= BASELINE * 0.072 + 1


class TestDescribeDelta:
    def test_thresholds(self):
        assert "stable" in describe_tdee_delta(0.009)
        assert "elevated" in describe_tdee_delta(0.02)
        assert "reduced" in describe_tdee_delta(-0.02)
