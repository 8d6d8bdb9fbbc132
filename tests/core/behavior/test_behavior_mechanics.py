"""행동 메커니즘 통합 테스트"""

from datetime import date, timedelta

import pytest

from liferpg.core.behavior.config import BEHAVIOR_CONFIG, BehaviorConfig, stepped_rate
from liferpg.core.behavior.mechanics import (
    apply_behavior_xp_adjustments,
    empty_behavior_summary,
    evaluate_behavior_mechanics,
)
from liferpg.core.models import DailyEntry

D0 = date(2026, 3, 2)


def _entry(offset: int, **fields) -> DailyEntry:
    return DailyEntry(date=D0 + timedelta(days=offset), **fields)


class TestSteppedRate:
    def test_below_trigger(self):
        assert stepped_rate(2, 3, 0.01, 0.08) == 0

    def test_at_trigger(self):
        assert stepped_rate(3, 3, 0.01, 0.08) == pytest.approx(0.01)

    def test_capped(self):
        assert stepped_rate(100, 3, 0.01, 0.08) == 0.08


class TestEvaluateBehaviorMechanics:
    def test_empty(self):
        summary = evaluate_behavior_mechanics([], reference_date=D0)
        assert summary == empty_behavior_summary()
        assert summary.penalty_rate == 0
        assert summary.recovery_rate == 0
        assert summary.rest_day.eligible is False

    def test_single_missed_day(self):
        entries = [_entry(0), _entry(1), _entry(3)]
        summary = evaluate_behavior_mechanics(entries, reference_date=D0 + timedelta(days=3))
        assert summary.total_missed_days == 1
        assert summary.missed_day_penalty_rate == pytest.approx(0.02)
        assert summary.penalty_rate == pytest.approx(0.02)
        assert summary.current_streak == 1
        assert summary.comeback_streak == 1
        assert summary.recovery_rate == 0

    def test_unsorted_input(self):
        entries = [_entry(3), _entry(0), _entry(1)]
        summary = evaluate_behavior_mechanics(entries, reference_date=D0 + timedelta(days=3))
        assert summary.total_missed_days == 1

    def test_missed_day_penalty_cap(self):
        entries = [_entry(2 * i) for i in range(30)]
        summary = evaluate_behavior_mechanics(entries, reference_date=D0)
        assert summary.total_missed_days == 29
        assert summary.missed_day_penalty_rate == 0.25

    def test_total_penalty_cap(self, complete_profile):
        entries = [_entry(2 * i, calories=9000) for i in range(101)]
        summary = evaluate_behavior_mechanics(
            entries, complete_profile, reference_date=D0 + timedelta(days=200)
        )
        assert summary.missed_day_penalty_rate == 0.25
        assert summary.calorie_penalty_rate == pytest.approx(0.105)
        assert summary.penalty_rate == 0.30

    def test_streak_recovery_capped(self):
        entries = [_entry(0)] + [_entry(i) for i in range(5, 15)]
        summary = evaluate_behavior_mechanics(entries, reference_date=D0 + timedelta(days=14))
        assert summary.comeback_streak == 10
        assert summary.streak_recovery_rate == pytest.approx(0.08)

    def test_combined_recovery(self, complete_profile):
        entries = [_entry(i, calories=2700) for i in range(10)]
        summary = evaluate_behavior_mechanics(
            entries, complete_profile, reference_date=D0 + timedelta(days=9)
        )
        assert summary.streak_recovery_rate == pytest.approx(0.08)
        assert summary.calorie_recovery_rate == pytest.approx(0.025)
        assert summary.recovery_rate == pytest.approx(0.105)
        assert summary.recovery_rate <= BEHAVIOR_CONFIG.total_recovery_max_rate

    def test_rates_bounded_under_custom_config(self):
        config = BehaviorConfig(SOFT_PENALTY_PER_MISSED_DAY=1.0, TOTAL_PENALTY_MAX_RATE=0.2)
        entries = [_entry(0), _entry(10)]
        summary = evaluate_behavior_mechanics(entries, reference_date=D0, config=config)
        assert summary.missed_day_penalty_rate == config.SOFT_PENALTY_MAX_RATE
        assert summary.penalty_rate == 0.2

    def test_to_dict_keys(self):
        data = evaluate_behavior_mechanics([_entry(0)], reference_date=D0).to_dict()
        assert data["restDay"]["eligible"] is False
        assert data["calorieAdherence"]["enabled"] is False
        assert data["currentStreak"] == 1


class TestApplyXpAdjustments:
    def test_penalty_rounds_half_up(self):
        adjustment = apply_behavior_xp_adjustments(10, 0.25, 0)
        assert adjustment.penalty_xp == 3  # 2.5 → 3
        assert adjustment.adjusted_overall_xp == 7

    def test_recovery(self):
        adjustment = apply_behavior_xp_adjustments(200, 0.0, 0.105)
        assert adjustment.recovery_xp == 21
        assert adjustment.adjusted_overall_xp == 221

    def test_never_negative(self):
        adjustment = apply_behavior_xp_adjustments(0, 0.3, 0)
        assert adjustment.adjusted_overall_xp == 0

    def test_zero_rates_identity(self):
        assert apply_behavior_xp_adjustments(140, 0, 0).adjusted_overall_xp == 140


class TestDailyLog:
    @pytest.mark.parametrize("days", [1, 2, 7, 30])
    def test_daily_log_has_no_missed_penalty(self, days):
        entries = [_entry(i) for i in range(days)]
        summary = evaluate_behavior_mechanics(
            entries, reference_date=D0 + timedelta(days=days - 1)
        )
        assert summary.missed_day_penalty_rate == 0
        assert summary.current_streak == days
