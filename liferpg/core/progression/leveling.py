"""레벨 곡선: 누적 XP ↔ (레벨, 레벨 내 진행도)"""

from dataclasses import dataclass

from liferpg.core.mathutil import round_half_up

BASE_LEVEL_XP = 100
LEVEL_GROWTH = 1.25


@dataclass(frozen=True)
class LevelInfo:
    level: int
    in_level_xp: int
    next_threshold: int


def xp_to_next_level(level: int) -> int:
    """level → level+1 에 필요한 XP. 지수 1.25 성장."""
    return round_half_up(BASE_LEVEL_XP * LEVEL_GROWTH ** (level - 1))


def level_from_xp(xp: int) -> LevelInfo:
    """누적 XP를 레벨과 진행도로 변환.

    임계값이 기하급수로 커지므로 반복 횟수는 log(xp)에 비례한다.
    음수 XP는 레벨 1로 취급.
    """
    level = 1
    remaining = xp
    threshold = xp_to_next_level(level)
    while remaining >= threshold:
        remaining -= threshold
        level += 1
        threshold = xp_to_next_level(level)
    return LevelInfo(level=level, in_level_xp=remaining, next_threshold=threshold)


def cumulative_xp_for_level(level: int) -> int:
    """레벨 level 시작 시점의 누적 XP."""
    return sum(xp_to_next_level(lv) for lv in range(1, level))
