"""날짜 / 윈도우 유틸리티

모든 날짜는 datetime.date (타임존 없는 달력 일자).
ISO 문자열 파싱은 정규화 계층에서만 수행하고, 엔진 내부는 date 객체만 다룬다.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from liferpg.config import settings

_ISO_DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

WEEKDAY_ORDER: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def parse_iso_day(value: str) -> date:
    """YYYY-MM-DD 문자열 → date.

    형식이 다르거나 존재하지 않는 날짜면 ValueError.
    """
    if not isinstance(value, str) or not _ISO_DAY_PATTERN.match(value):
        raise ValueError(f"Malformed ISO day: {value!r}")
    return date.fromisoformat(value)


def is_iso_day(value: object) -> bool:
    """parse_iso_day가 성공하는 문자열인지."""
    try:
        parse_iso_day(value)  # type: ignore[arg-type]
    except ValueError:
        return False
    return True


def to_iso_day(value: date) -> str:
    return value.isoformat()


def today(tz_name: Optional[str] = None) -> date:
    """설정된 타임존 기준 오늘 날짜."""
    return local_now(tz_name).date()


def local_now(tz_name: Optional[str] = None) -> datetime:
    """설정된 타임존의 현재 벽시계 시각 (naive)."""
    tz = ZoneInfo(tz_name or settings.TIMEZONE)
    return datetime.now(tz).replace(tzinfo=None)


def to_local_naive(value: datetime, tz_name: Optional[str] = None) -> datetime:
    """aware datetime은 설정 타임존으로 변환 후 tzinfo 제거. naive는 그대로."""
    if value.tzinfo is None:
        return value
    tz = ZoneInfo(tz_name or settings.TIMEZONE)
    return value.astimezone(tz).replace(tzinfo=None)


def day_gap(previous: date, current: date) -> int:
    """두 달력 일자 사이의 일수 (current - previous)."""
    return (current - previous).days


def shift_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def iso_weekday_index(value: date) -> int:
    """월요일 0 ~ 일요일 6."""
    return value.weekday()


def weekday_name(value: date) -> str:
    return WEEKDAY_ORDER[iso_weekday_index(value)]


def week_start(value: date) -> date:
    """value가 속한 ISO 주의 월요일."""
    return shift_days(value, -iso_weekday_index(value))


def date_range_ending(end: date, days: int) -> list[date]:
    """end로 끝나는 days일 길이의 오름차순 날짜 목록."""
    return [shift_days(end, -(days - offset - 1)) for offset in range(days)]
