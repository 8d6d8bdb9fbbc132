"""영역별 분석기: 일일 지표, 행동, 퀘스트

모두 같은 MetricAnalysisEnvelope를 반환한다.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from liferpg.core.analytics.envelope import (
    EmptyState,
    MetricAnalysisEnvelope,
    build_analysis_envelope,
)
from liferpg.core.analytics.metric_window import (
    DEFAULT_WINDOW_DAYS,
    compute_metric_average,
    compute_weekday_averages,
    find_highest_lowest_weekday,
    get_metric_window,
    safe_window_days,
)
from liferpg.core.behavior.streaks import count_current_streak, count_longest_streak
from liferpg.core.dates import to_iso_day, today
from liferpg.core.models import (
    DAILY_FIELDS,
    REVIEW_STRUCTURED_FIELDS,
    REVIEW_TYPES,
    AppState,
)
from liferpg.core.progression.quests import QUESTS
from liferpg.core.progression.snapshot import compute_progression

logger = logging.getLogger(__name__)

DAILY_METRIC_MIN_POINTS = 5
BEHAVIOR_MIN_POINTS = 1
QUEST_MIN_POINTS = 1
REVIEW_MIN_POINTS = 1

DAILY_ANALYTICS_META: dict[str, dict[str, Any]] = {
    "calories": {"label": "Calories", "unitLabel": "kcal", "averageDecimals": 0},
    "sleep_hours": {"label": "Sleep", "unitLabel": "h", "averageDecimals": 1},
    "mood": {"label": "Mood", "unitLabel": "/10", "averageDecimals": 1},
    "steps": {"label": "Steps", "unitLabel": "steps", "averageDecimals": 0},
    "exercise_minutes": {"label": "Exercise", "unitLabel": "min", "averageDecimals": 0},
    "exercise_effort": {
        "label": "Exercise Effort",
        "unitLabel": "/10",
        "averageDecimals": 1,
    },
}


def _weekday_value_dict(item) -> Optional[dict[str, Any]]:
    if item is None:
        return None
    return {"day": item.day, "value": item.value}


def analyze_daily_metric(
    state: AppState,
    metric_key: str,
    window_days: object = DEFAULT_WINDOW_DAYS,
    reference_date: Optional[date] = None,
) -> MetricAnalysisEnvelope:
    """일일 지표 분석: 시계열, 평균/최소/최대, 요일 분포."""
    days = safe_window_days(window_days)
    meta = DAILY_ANALYTICS_META.get(
        metric_key,
        {"label": metric_key, "unitLabel": "", "averageDecimals": 1},
    )

    if metric_key not in DAILY_FIELDS:
        logger.warning("Unsupported daily metric requested: %s", metric_key)
        envelope = build_analysis_envelope("daily", days, meta["label"], 1, 0)
        envelope.empty_state = EmptyState(
            is_empty=True,
            reason="Unsupported metric requested.",
            min_points=1,
            actual_points=0,
            suggestion="Select a supported daily metric.",
        )
        return envelope

    ordered = state.ordered_entries()
    window = get_metric_window(ordered, metric_key, days, reference_date)
    window_values = [p.value for p in window if p.value is not None]
    logged_values = [
        e.metric(metric_key) for e in ordered if e.metric(metric_key) is not None
    ]
    weekday_averages = compute_weekday_averages(window)
    highest, lowest = find_highest_lowest_weekday(weekday_averages)

    envelope = build_analysis_envelope(
        "daily", days, meta["label"], DAILY_METRIC_MIN_POINTS, len(window_values)
    )
    envelope.metadata = {**envelope.metadata, **meta, "metricKey": metric_key}
    envelope.series = [{"date": to_iso_day(p.date), "value": p.value} for p in window]
    envelope.aggregates = {
        "latest": logged_values[-1] if logged_values else None,
        "average": compute_metric_average(window),
        "min": min(logged_values) if logged_values else None,
        "max": max(logged_values) if logged_values else None,
        "sampleSize": len(window_values),
        "totalLogs": len(logged_values),
    }
    envelope.distributions = {
        "weekdayAverages": weekday_averages,
        "weekdayExtremes": {
            "highest": _weekday_value_dict(highest),
            "lowest": _weekday_value_dict(lowest),
        },
    }
    return envelope


def analyze_behavior(
    state: AppState,
    window_days: object = DEFAULT_WINDOW_DAYS,
    reference_date: Optional[date] = None,
) -> MetricAnalysisEnvelope:
    """연속 기록, 페널티/회복 비율, 휴식일 상태."""
    days = safe_window_days(window_days)
    reference = reference_date or today()
    snapshot = compute_progression(
        state.entries.values(), state.accepted_quests, state.profile, reference
    )
    ordered = list(snapshot.ordered_entries)
    recent = ordered[-days:]
    dates = [e.date for e in ordered]
    behavior = snapshot.behavior

    envelope = build_analysis_envelope(
        "behavior", days, "Behavior Mechanics", BEHAVIOR_MIN_POINTS, len(recent)
    )
    envelope.series = [
        {
            "date": to_iso_day(e.date),
            "value": e.calories,
            "flags": {
                "hasCalories": e.calories is not None,
                "hasExercise": e.exercise_minutes is not None and e.exercise_minutes > 0,
            },
        }
        for e in recent
    ]
    envelope.aggregates = {
        "currentStreak": count_current_streak(dates),
        "longestStreak": count_longest_streak(dates),
        "missedDayPenaltyRate": behavior.missed_day_penalty_rate,
        "caloriePenaltyRate": behavior.calorie_penalty_rate,
        "recoveryRate": behavior.recovery_rate,
        "calorieRecoveryRate": behavior.calorie_recovery_rate,
        "penaltyRate": behavior.penalty_rate,
        "restDayEligible": behavior.rest_day.eligible,
        "restDayMessage": behavior.rest_day.message,
    }
    envelope.distributions = {
        "logging": {
            "loggedDays": len(recent),
            "missingDays": max(0, days - len(recent)),
        },
    }
    return envelope


def analyze_quests(
    state: AppState,
    window_days: object = DEFAULT_WINDOW_DAYS,
    reference_date: Optional[date] = None,
) -> MetricAnalysisEnvelope:
    """수락/진행/완료 현황."""
    days = safe_window_days(window_days)
    snapshot = compute_progression(
        state.entries.values(),
        state.accepted_quests,
        state.profile,
        reference_date or today(),
    )

    rows: list[dict[str, Any]] = []
    for quest_id, definition in QUESTS.items():
        progress = snapshot.quests[quest_id]
        rows.append(
            {
                "questId": quest_id,
                "label": definition.label,
                "type": definition.type.value,
                "accepted": progress.accepted,
                "current": progress.current,
                "target": progress.target,
                "completionRate": progress.completion_rate,
            }
        )

    total = len(rows)
    accepted_count = sum(1 for r in rows if r["accepted"])
    completed_count = sum(1 for r in rows if r["completionRate"] >= 1)

    by_type: dict[str, dict[str, int]] = {}
    for row in rows:
        bucket = by_type.setdefault(row["type"], {"total": 0, "accepted": 0, "completed": 0})
        bucket["total"] += 1
        if row["accepted"]:
            bucket["accepted"] += 1
        if row["completionRate"] >= 1:
            bucket["completed"] += 1

    envelope = build_analysis_envelope("quests", days, "Quest Progress", QUEST_MIN_POINTS, total)
    envelope.series = [{"label": r["label"], "value": r["current"], "meta": r} for r in rows]
    envelope.aggregates = {
        "totalQuests": total,
        "acceptedCount": accepted_count,
        "completedCount": completed_count,
        "acceptanceRate": accepted_count / total if total else 0,
        "completionRate": completed_count / total if total else 0,
    }
    envelope.distributions = {"byType": by_type}
    return envelope


def _has_text(payload: dict[str, Any], key: str) -> bool:
    value = payload.get(key)
    return isinstance(value, str) and bool(value.strip())


def _review_meta(review_type: str, period: str, payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": review_type,
        "period": period,
        "hasStructuredFields": any(
            _has_text(payload, key) for key in REVIEW_STRUCTURED_FIELDS
        ),
        "hasLegacyText": _has_text(payload, "text"),
    }


def analyze_reviews(
    state: AppState,
    window_days: object = DEFAULT_WINDOW_DAYS,
) -> MetricAnalysisEnvelope:
    """주간/월간 회고 현황. 최신 기간부터, series는 window_days개까지.

    구조화 필드와 구버전 text 필드를 따로 센다.
    """
    days = safe_window_days(window_days)

    by_type: dict[str, list[tuple[str, dict[str, Any]]]] = {}
    for review_type in REVIEW_TYPES:
        items = state.reviews.get(review_type, {})
        by_type[review_type] = sorted(items.items(), key=lambda kv: kv[0], reverse=True)

    # 기간 키 내림차순, 같은 키면 weekly 먼저
    rows = [
        (review_type, period, payload)
        for review_type in REVIEW_TYPES
        for period, payload in by_type[review_type]
    ]
    rows.sort(key=lambda row: row[1], reverse=True)

    metas = [_review_meta(*row) for row in rows]

    envelope = build_analysis_envelope(
        "reviews", days, "Review Reflections", REVIEW_MIN_POINTS, len(rows)
    )
    envelope.series = [
        {"label": f"{meta['type']}:{meta['period']}", "value": 1, "meta": meta}
        for meta in metas[:days]
    ]
    envelope.aggregates = {
        "weeklyCount": len(by_type["weekly"]),
        "monthlyCount": len(by_type["monthly"]),
        "totalCount": len(rows),
        "structuredCount": sum(1 for m in metas if m["hasStructuredFields"]),
        "legacyTextCount": sum(1 for m in metas if m["hasLegacyText"]),
    }
    envelope.distributions = {
        "byType": {review_type: len(by_type[review_type]) for review_type in REVIEW_TYPES},
    }
    return envelope
