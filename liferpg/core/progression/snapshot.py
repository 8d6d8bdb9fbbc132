"""진행도 스냅샷: 엔트리 전체로부터 매번 새로 계산

증분 상태 없음. 같은 입력이면 항상 같은 스냅샷.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Optional

from liferpg.core.behavior.mechanics import (
    apply_behavior_xp_adjustments,
    evaluate_behavior_mechanics,
)
from liferpg.core.behavior.models import BehaviorSummary
from liferpg.core.dates import to_iso_day, today
from liferpg.core.models import DAILY_FIELD_ALIASES, DailyEntry, Profile
from liferpg.core.progression.quests import QuestProgress, compute_quest_progress
from liferpg.core.progression.skills import (
    aggregate_attribute_xp,
    aggregate_skill_xp,
    compute_base_overall_xp,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressionSnapshot:
    overall_xp: int  # 행동 보정 후
    base_overall_xp: int
    skill_xp: dict[str, int]
    attribute_xp: dict[str, int]
    quests: dict[str, QuestProgress]
    behavior: BehaviorSummary
    ordered_entries: tuple[DailyEntry, ...]

    def to_dict(self) -> dict[str, Any]:
        """표현 계층용 camelCase 딕셔너리."""
        return {
            "overallXp": self.overall_xp,
            "baseOverallXp": self.base_overall_xp,
            "skillXp": dict(self.skill_xp),
            "attributeXp": dict(self.attribute_xp),
            "quests": {
                quest_id: {
                    "current": progress.current,
                    "target": progress.target,
                    "accepted": progress.accepted,
                }
                for quest_id, progress in self.quests.items()
            },
            "behavior": self.behavior.to_dict(),
            "orderedEntries": [entry_to_dict(e) for e in self.ordered_entries],
        }


def entry_to_dict(entry: DailyEntry) -> dict[str, Any]:
    data: dict[str, Any] = {"date": to_iso_day(entry.date)}
    for field_name, alias in DAILY_FIELD_ALIASES.items():
        data[alias] = getattr(entry, field_name)
    data["createdAt"] = entry.created_at
    data["updatedAt"] = entry.updated_at
    data["isAnomalous"] = entry.is_anomalous
    data["anomalyNotes"] = list(entry.anomaly_notes)
    return data


def compute_progression(
    entries: Iterable[DailyEntry],
    accepted_quests: Optional[dict[str, bool]] = None,
    profile: Optional[Profile] = None,
    reference_date: Optional[date] = None,
) -> ProgressionSnapshot:
    """엔트리 → 정렬 → 스킬/행동/퀘스트 각각 독립 계산 → 스냅샷 병합."""
    reference = reference_date or today()
    ordered = tuple(sorted(entries, key=lambda e: e.date))

    skill_xp = aggregate_skill_xp(ordered)
    attribute_xp = aggregate_attribute_xp(skill_xp)
    quests = compute_quest_progress(ordered, accepted_quests, reference)
    behavior = evaluate_behavior_mechanics(ordered, profile, reference)

    base_overall_xp = compute_base_overall_xp(ordered)
    adjustment = apply_behavior_xp_adjustments(
        base_overall_xp, behavior.penalty_rate, behavior.recovery_rate
    )
    behavior = dataclasses.replace(
        behavior,
        penalty_xp=adjustment.penalty_xp,
        recovery_xp=adjustment.recovery_xp,
    )

    logger.debug(
        "Progression recomputed: entries=%d base_xp=%d adjusted_xp=%d",
        len(ordered),
        base_overall_xp,
        adjustment.adjusted_overall_xp,
    )

    return ProgressionSnapshot(
        overall_xp=adjustment.adjusted_overall_xp,
        base_overall_xp=base_overall_xp,
        skill_xp=skill_xp,
        attribute_xp=attribute_xp,
        quests=quests,
        behavior=behavior,
        ordered_entries=ordered,
    )
