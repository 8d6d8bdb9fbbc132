"""퀘스트 진행도: 카운터 기반, 수락 전에는 항상 0"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Optional, Sequence

from liferpg.core.dates import shift_days, today, week_start
from liferpg.core.models import DailyEntry

logger = logging.getLogger(__name__)


class QuestType(str, Enum):
    LONG = "long"
    WEEKLY = "weekly"


@dataclass(frozen=True)
class QuestDefinition:
    """정적 퀘스트 카탈로그 항목"""

    label: str
    type: QuestType
    target: int


@dataclass(frozen=True)
class QuestProgress:
    quest_id: str
    current: int
    target: int
    accepted: bool

    @property
    def completion_rate(self) -> float:
        if self.target <= 0:
            return 0.0
        return min(1.0, self.current / self.target)


QUESTS: dict[str, QuestDefinition] = {
    "dailyLog30": QuestDefinition("Complete 30 daily logs", QuestType.LONG, 30),
    "exercise10": QuestDefinition("Complete 10 exercise sessions", QuestType.LONG, 10),
    "weekly7": QuestDefinition("Log all 7 days this week", QuestType.WEEKLY, 7),
}


def _count_logs(entries: Sequence[DailyEntry], reference: date) -> int:
    return len(entries)


def _count_exercise_sessions(entries: Sequence[DailyEntry], reference: date) -> int:
    return sum(
        1
        for e in entries
        if e.exercise_minutes is not None and e.exercise_minutes > 0
    )


def _count_this_week(entries: Sequence[DailyEntry], reference: date) -> int:
    start = week_start(reference)
    end = shift_days(start, 6)
    return sum(1 for e in entries if start <= e.date <= end)


QUEST_COUNTERS: dict[str, Callable[[Sequence[DailyEntry], date], int]] = {
    "dailyLog30": _count_logs,
    "exercise10": _count_exercise_sessions,
    "weekly7": _count_this_week,
}


def compute_quest_progress(
    ordered_entries: Sequence[DailyEntry],
    accepted_quests: Optional[dict[str, bool]] = None,
    reference_date: Optional[date] = None,
) -> dict[str, QuestProgress]:
    """퀘스트별 진행도.

    accepted_quests[id]가 정확히 True일 때만 카운터 값 사용.
    주간 퀘스트는 reference_date 기준 ISO 주(월요일 시작)로 매번 재계산되므로
    별도 리셋 없음.
    """
    accepted_quests = accepted_quests or {}
    reference = reference_date or today()

    progress: dict[str, QuestProgress] = {}
    for quest_id, definition in QUESTS.items():
        accepted = accepted_quests.get(quest_id) is True
        current = QUEST_COUNTERS[quest_id](ordered_entries, reference) if accepted else 0
        progress[quest_id] = QuestProgress(
            quest_id=quest_id,
            current=current,
            target=definition.target,
            accepted=accepted,
        )
    logger.debug(
        "Quest progress: %s",
        {qid: (p.current, p.target) for qid, p in progress.items()},
    )
    return progress
