"""보호 휴식일 자격 판정

휴식일은 별도로 기록되지 않는다. 최근 창 안의 1일 공백(gap == 2)을 사용 이력으로 본다.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from liferpg.core.behavior.config import BEHAVIOR_CONFIG, BehaviorConfig
from liferpg.core.behavior.models import RestDayState
from liferpg.core.behavior.streaks import count_single_day_gaps_in_window
from liferpg.core.dates import day_gap


def empty_rest_day_state(config: BehaviorConfig = BEHAVIOR_CONFIG) -> RestDayState:
    return RestDayState(
        eligible=False,
        remaining_this_window=config.REST_DAY_MAX_USES_PER_WINDOW,
        message=(
            "Log a few days first, then a rest day can be treated as "
            "intentional recovery."
        ),
    )


def evaluate_rest_day_eligibility(
    dates: Sequence[date],
    current_streak: int,
    reference_date: date,
    config: BehaviorConfig = BEHAVIOR_CONFIG,
) -> RestDayState:
    """자격 조건: 마지막 기록이 오늘/어제, 연속 3일 이상, 창 내 사용 횟수 여유."""
    if not dates:
        return empty_rest_day_state(config)

    window_days = config.REST_DAY_WINDOW_DAYS
    min_streak = config.REST_DAY_MIN_STREAK

    streak_is_active = day_gap(dates[-1], reference_date) <= 1
    used = count_single_day_gaps_in_window(dates, window_days)
    remaining = max(0, config.REST_DAY_MAX_USES_PER_WINDOW - used)

    if not streak_is_active:
        return RestDayState(
            eligible=False,
            remaining_this_window=remaining,
            message=(
                "No stress. Log one day to reactivate momentum before taking "
                "a protected rest day."
            ),
        )

    if current_streak < min_streak:
        return RestDayState(
            eligible=False,
            remaining_this_window=remaining,
            message=(
                f"Build to a {min_streak}-day streak first; then one planned "
                "rest day is protected."
            ),
        )

    if remaining <= 0:
        return RestDayState(
            eligible=False,
            remaining_this_window=remaining,
            message=(
                "Rest-day protection was already used in the last "
                f"{window_days} days. It refreshes automatically."
            ),
        )

    plural = "day" if remaining == 1 else "days"
    return RestDayState(
        eligible=True,
        remaining_this_window=remaining,
        message=(
            f"You can take {remaining} protected rest {plural} in the current "
            f"{window_days}-day window."
        ),
    )
