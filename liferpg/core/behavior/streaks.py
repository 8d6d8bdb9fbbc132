"""누락일 / 연속 기록 계산

입력은 정렬된 고유 날짜 목록. 연속된 두 기록 사이 간격(gap)만으로 판단한다.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from liferpg.core.dates import day_gap


def iter_gaps(dates: Sequence[date]) -> list[int]:
    """인접 기록 쌍의 간격 목록 (len = len(dates) - 1)."""
    return [day_gap(dates[i - 1], dates[i]) for i in range(1, len(dates))]


def count_missed_days(dates: Sequence[date]) -> int:
    """기록 사이에 빠진 날 수. 3일 간격 → 2일 누락."""
    return sum(max(0, gap - 1) for gap in iter_gaps(dates))


def count_current_streak(dates: Sequence[date]) -> int:
    """마지막 기록에서 거꾸로 gap == 1 이 이어지는 길이."""
    if not dates:
        return 0
    streak = 1
    for gap in reversed(iter_gaps(dates)):
        if gap != 1:
            break
        streak += 1
    return streak


def count_comeback_streak(dates: Sequence[date]) -> int:
    """가장 최근 gap > 1 이후의 기록 수. 공백이 없으면 전체 길이."""
    if not dates:
        return 0
    gaps = iter_gaps(dates)
    for index in range(len(gaps) - 1, -1, -1):
        if gaps[index] > 1:
            # gaps[index]는 dates[index] → dates[index + 1]
            return len(dates) - (index + 1)
    return len(dates)


def count_longest_streak(dates: Sequence[date]) -> int:
    if not dates:
        return 0
    longest = current = 1
    for gap in iter_gaps(dates):
        current = current + 1 if gap == 1 else 1
        longest = max(longest, current)
    return longest


def count_single_day_gaps_in_window(dates: Sequence[date], window_days: int) -> int:
    """최신 기록으로 끝나는 window_days 창 안의 1일 공백(gap == 2) 수.

    공백 뒤 기록이 창 안에 있으면 창 안으로 본다.
    """
    if len(dates) < 2:
        return 0
    window_start = dates[-1].toordinal() - window_days + 1
    total = 0
    for index in range(1, len(dates)):
        if dates[index].toordinal() < window_start:
            continue
        if day_gap(dates[index - 1], dates[index]) == 2:
            total += 1
    return total
