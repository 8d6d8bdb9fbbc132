"""진행도 스냅샷 통합 테스트"""

from datetime import date, timedelta

import pytest

from liferpg.core.models import DailyEntry
from liferpg.core.progression.quests import QUESTS
from liferpg.core.progression.snapshot import compute_progression

MONDAY = date(2026, 3, 2)


def _entry(offset: int, **fields) -> DailyEntry:
    return DailyEntry(date=MONDAY + timedelta(days=offset), **fields)


class TestComputeProgression:
    def test_empty_log(self):
        snapshot = compute_progression([], {}, None, reference_date=MONDAY)
        assert snapshot.overall_xp == 0
        assert snapshot.base_overall_xp == 0
        assert snapshot.skill_xp == {}
        assert snapshot.attribute_xp == {"Body": 0, "Mind": 0, "Soul": 0}
        assert snapshot.behavior.penalty_rate == 0
        assert snapshot.behavior.recovery_rate == 0
        assert snapshot.behavior.rest_day.eligible is False
        assert snapshot.ordered_entries == ()

    def test_entries_are_sorted(self):
        entries = [_entry(3), _entry(0), _entry(1)]
        snapshot = compute_progression(entries, reference_date=MONDAY + timedelta(days=3))
        assert [e.date for e in snapshot.ordered_entries] == [
            MONDAY,
            MONDAY + timedelta(days=1),
            MONDAY + timedelta(days=3),
        ]

    def test_penalty_applied_to_overall_xp(self):
        entries = [_entry(0), _entry(1), _entry(3)]
        snapshot = compute_progression(entries, reference_date=MONDAY + timedelta(days=3))
        assert snapshot.base_overall_xp == 60
        assert snapshot.behavior.penalty_rate == pytest.approx(0.02)
        assert snapshot.behavior.penalty_xp == 1  # 60 * 0.02 = 1.2
        assert snapshot.overall_xp == 59

    def test_recovery_applied_to_overall_xp(self):
        entries = [_entry(i) for i in range(5)]
        snapshot = compute_progression(entries, reference_date=MONDAY + timedelta(days=4))
        assert snapshot.behavior.recovery_rate == pytest.approx(0.03)
        assert snapshot.behavior.recovery_xp == 3
        assert snapshot.overall_xp == 103

    def test_quests_gated_by_acceptance(self):
        entries = [_entry(i, exercise_minutes=45, exercise_effort=7) for i in range(7)]
        snapshot = compute_progression(entries, {}, reference_date=MONDAY + timedelta(days=6))
        assert all(q.current == 0 for q in snapshot.quests.values())

        accepted = {quest_id: True for quest_id in QUESTS}
        snapshot = compute_progression(
            entries, accepted, reference_date=MONDAY + timedelta(days=6)
        )
        assert snapshot.quests["dailyLog30"].current == 7
        assert snapshot.quests["exercise10"].current == 7
        assert snapshot.quests["weekly7"].current == 7

    def test_recompute_is_deterministic(self, complete_profile):
        entries = [
            _entry(0, calories=2600, sleep_hours=8, mood=7),
            _entry(1, calories=3500, exercise_minutes=40, exercise_effort=7),
            _entry(4, calories=None, steps=9000),
            _entry(5, calories=2700),
        ]
        accepted = {"dailyLog30": True}
        reference = MONDAY + timedelta(days=5)
        first = compute_progression(entries, accepted, complete_profile, reference)
        second = compute_progression(
            list(reversed(entries)), dict(accepted), complete_profile, reference
        )
        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_to_dict_contract(self):
        snapshot = compute_progression(
            [_entry(0, calories=2000)], {"weekly7": True}, reference_date=MONDAY
        )
        data = snapshot.to_dict()
        assert set(data) >= {
            "overallXp",
            "skillXp",
            "attributeXp",
            "quests",
            "behavior",
            "orderedEntries",
        }
        assert data["quests"]["weekly7"] == {"current": 1, "target": 7, "accepted": True}
        assert set(data["behavior"]) >= {
            "penaltyRate",
            "recoveryRate",
            "missedDayPenaltyRate",
            "caloriePenaltyRate",
            "calorieRecoveryRate",
            "restDay",
        }
        assert data["orderedEntries"][0]["date"] == "2026-03-02"
        assert data["orderedEntries"][0]["calories"] == 2000
        assert data["orderedEntries"][0]["sleepHours"] is None
