"""진행도 Core 패키지: 레벨 곡선, 스킬/속성 집계, 퀘스트, 스냅샷"""

from liferpg.core.progression.leveling import (
    LevelInfo,
    cumulative_xp_for_level,
    level_from_xp,
    xp_to_next_level,
)
from liferpg.core.progression.quests import (
    QUESTS,
    QuestDefinition,
    QuestProgress,
    QuestType,
    compute_quest_progress,
)
from liferpg.core.progression.skills import (
    ATTRIBUTE_SKILLS,
    DAILY_COMPLETION_XP,
    aggregate_attribute_xp,
    aggregate_skill_xp,
    compute_base_overall_xp,
    compute_skill_gains,
    describe_bonus_gains,
)
from liferpg.core.progression.snapshot import (
    ProgressionSnapshot,
    compute_progression,
    entry_to_dict,
)

__all__ = [
    # leveling
    "LevelInfo",
    "xp_to_next_level",
    "level_from_xp",
    "cumulative_xp_for_level",
    # skills
    "ATTRIBUTE_SKILLS",
    "DAILY_COMPLETION_XP",
    "compute_skill_gains",
    "describe_bonus_gains",
    "aggregate_skill_xp",
    "aggregate_attribute_xp",
    "compute_base_overall_xp",
    # quests
    "QUESTS",
    "QuestType",
    "QuestDefinition",
    "QuestProgress",
    "compute_quest_progress",
    # snapshot
    "ProgressionSnapshot",
    "compute_progression",
    "entry_to_dict",
]
