"""지표 윈도우 분석

차트 연속성을 위해 빠진 날도 건너뛰지 않고 None으로 채운다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from liferpg.core.dates import WEEKDAY_ORDER, date_range_ending, today, weekday_name
from liferpg.core.mathutil import is_finite_number, mean_or_none
from liferpg.core.models import DailyEntry

DEFAULT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class MetricPoint:
    date: date
    value: Optional[float]


@dataclass(frozen=True)
class WeekdayValue:
    day: str
    value: float


def safe_window_days(days: object, default: int = DEFAULT_WINDOW_DAYS) -> int:
    """양의 정수가 아니면 default. 실수는 내림."""
    if not is_finite_number(days) or days < 1:
        return default
    return int(days)


def get_metric_window(
    entries: Iterable[DailyEntry],
    metric_key: str,
    days: object = DEFAULT_WINDOW_DAYS,
    reference_date: Optional[date] = None,
) -> list[MetricPoint]:
    """최신 기록일(없으면 오늘)로 끝나는 정확히 days개 지점."""
    window_days = safe_window_days(days)
    by_date = {e.date: e for e in entries}
    latest = max(by_date) if by_date else (reference_date or today())

    points: list[MetricPoint] = []
    for day in date_range_ending(latest, window_days):
        entry = by_date.get(day)
        value = entry.metric(metric_key) if entry is not None else None
        points.append(MetricPoint(date=day, value=None if value is None else float(value)))
    return points


def compute_metric_average(window: Sequence[MetricPoint]) -> Optional[float]:
    """None 제외 평균. 값이 하나도 없으면 None."""
    return mean_or_none(point.value for point in window)


def compute_weekday_averages(
    window: Sequence[MetricPoint],
) -> dict[str, Optional[float]]:
    """월~일 요일별 평균. 표본 없는 요일은 None."""
    buckets: dict[str, list[float]] = {day: [] for day in WEEKDAY_ORDER}
    for point in window:
        if not is_finite_number(point.value):
            continue
        buckets[weekday_name(point.date)].append(point.value)
    return {
        day: (sum(values) / len(values) if values else None)
        for day, values in buckets.items()
    }


def find_highest_lowest_weekday(
    weekday_averages: dict[str, Optional[float]],
) -> tuple[Optional[WeekdayValue], Optional[WeekdayValue]]:
    """(최고, 최저) 요일. None 요일은 제외, 동률이면 앞선 요일."""
    ranked = [
        WeekdayValue(day=day, value=weekday_averages[day])
        for day in WEEKDAY_ORDER
        if is_finite_number(weekday_averages.get(day))
    ]
    if not ranked:
        return None, None

    highest = lowest = ranked[0]
    for item in ranked[1:]:
        if item.value > highest.value:
            highest = item
        if item.value < lowest.value:
            lowest = item
    return highest, lowest
