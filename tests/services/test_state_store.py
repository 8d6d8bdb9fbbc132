"""JSON 상태 저장소 테스트"""

import json
from datetime import date

from liferpg.core.models import AppState, DailyEntry
from liferpg.services.state_store import StateStore


class TestStateStore:
    def test_missing_file_gives_default(self, store):
        state = store.load()
        assert state.entries == {}
        assert state.accepted_quests == {
            "dailyLog30": False,
            "exercise10": False,
            "weekly7": False,
        }

    def test_corrupt_file_gives_default(self, store):
        store.path.write_text("{not json", encoding="utf-8")
        assert store.load().entries == {}

    def test_save_then_load(self, store, complete_profile):
        entry = DailyEntry(date=date(2026, 3, 2), sleep_hours=7.5, mood=8)
        store.save(
            AppState(
                entries={entry.date: entry},
                profile=complete_profile,
                accepted_quests={"dailyLog30": True},
            )
        )
        loaded = store.load()
        assert loaded.entries[entry.date].sleep_hours == 7.5
        assert loaded.profile.age == 30
        assert loaded.accepted_quests["dailyLog30"] is True

    def test_saved_file_is_camel_case(self, store):
        entry = DailyEntry(date=date(2026, 3, 2), exercise_minutes=30, exercise_effort=6)
        store.save(AppState(entries={entry.date: entry}))
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert set(raw) == {"entries", "reviews", "acceptedQuests", "profile"}
        assert raw["entries"]["2026-03-02"]["exerciseMinutes"] == 30
        assert not store.path.with_suffix(".json.tmp").exists()

    def test_legacy_payload(self, store):
        store.path.write_text(
            json.dumps(
                {
                    "entries": {"2026-03-02": {"mood": "7"}, "bad-key": {"mood": 3}},
                    "profile": {"tdee": 2300},
                }
            ),
            encoding="utf-8",
        )
        state = store.load()
        assert list(state.entries) == [date(2026, 3, 2)]
        assert state.entries[date(2026, 3, 2)].mood == 7
        assert state.profile.baseline_tdee == 2300

    def test_reset(self, store):
        entry = DailyEntry(date=date(2026, 3, 2), mood=5)
        store.save(AppState(entries={entry.date: entry}))
        state = store.reset()
        assert state.entries == {}
        assert store.load().entries == {}

    def test_creates_parent_directory(self, tmp_path):
        nested = StateStore(tmp_path / "a" / "b" / "state.json")
        nested.save(AppState())
        assert nested.path.exists()

    def test_entry_records_carry_date(self, store):
        entry = DailyEntry(date=date(2026, 3, 2), mood=6)
        store.save(AppState(entries={entry.date: entry}))
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert raw["entries"]["2026-03-02"]["date"] == "2026-03-02"


class TestRoundTrip:
    """load → save 한 바퀴 후에도 blob이 유지되는지"""

    BLOB = {
        "entries": {"2026-03-02": {"date": "2026-03-02", "mood": 7, "steps": 8000}},
        "reviews": {
            "weekly": {"2026-03-02": {"wins": "Slept 8h", "updatedAt": "2026-03-08T10:00:00Z"}},
            "monthly": {"2026-02-01": {"text": "legacy note"}},
        },
        "acceptedQuests": {"weekly7": True},
        "profile": {"age": 30},
        "settings": {"theme": "dark", "units": "metric"},
        "goals": {"targetWeightKg": 75},
        "onboardingComplete": True,
    }

    def test_unknown_top_level_keys_survive(self, store):
        store.path.write_text(json.dumps(self.BLOB), encoding="utf-8")
        store.save(store.load())

        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert raw["settings"] == {"theme": "dark", "units": "metric"}
        assert raw["goals"] == {"targetWeightKg": 75}
        assert raw["onboardingComplete"] is True

    def test_reviews_survive(self, store):
        store.path.write_text(json.dumps(self.BLOB), encoding="utf-8")
        store.save(store.load())

        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert raw["reviews"] == self.BLOB["reviews"]
        assert raw["entries"]["2026-03-02"]["date"] == "2026-03-02"
        assert raw["entries"]["2026-03-02"]["mood"] == 7
        assert raw["acceptedQuests"]["weekly7"] is True

    def test_loaded_state_exposes_reviews(self, store):
        store.path.write_text(json.dumps(self.BLOB), encoding="utf-8")
        state = store.load()
        assert state.reviews["weekly"]["2026-03-02"]["wins"] == "Slept 8h"
        assert state.reviews["monthly"]["2026-02-01"] == {"text": "legacy note"}
        assert state.extras["onboardingComplete"] is True
        assert "entries" not in state.extras
