"""분석 결과 공통 봉투: 표현 계층이 분석기 종류를 몰라도 되도록"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EmptyState:
    is_empty: bool
    reason: str
    min_points: int
    actual_points: int
    suggestion: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "isEmpty": self.is_empty,
            "reason": self.reason,
            "minPoints": self.min_points,
            "actualPoints": self.actual_points,
            "suggestion": self.suggestion,
        }


@dataclass
class MetricAnalysisEnvelope:
    area_key: str
    area_label: str
    window_days: int
    metadata: dict[str, Any]
    empty_state: EmptyState
    series: list[dict[str, Any]] = field(default_factory=list)
    aggregates: dict[str, Any] = field(default_factory=dict)
    distributions: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "areaKey": self.area_key,
            "areaLabel": self.area_label,
            "windowDays": self.window_days,
            "metadata": dict(self.metadata),
            "series": list(self.series),
            "aggregates": dict(self.aggregates),
            "distributions": dict(self.distributions),
            "emptyState": self.empty_state.to_dict(),
        }


ANALYTICS_AREA_META: dict[str, dict[str, str]] = {
    "daily": {"label": "Daily Metrics", "unitLabel": ""},
    "behavior": {"label": "Behavior", "unitLabel": "%"},
    "quests": {"label": "Quests", "unitLabel": "progress"},
    "reviews": {"label": "Reviews", "unitLabel": "entries"},
}


def build_empty_state(
    actual_points: int, min_points: int, label: str, window_days: int
) -> EmptyState:
    """표본 부족은 오류가 아니라 안내 문구가 붙은 빈 상태."""
    lowered = label.lower()
    if actual_points:
        reason = f"Not enough {lowered} data in the last {window_days} days."
    else:
        reason = f"No {lowered} data available yet."
    return EmptyState(
        is_empty=actual_points < min_points,
        reason=reason,
        min_points=min_points,
        actual_points=actual_points,
        suggestion=(
            f"Log at least {min_points} data points over {window_days} days "
            "to unlock deeper insights."
        ),
    )


def build_analysis_envelope(
    area_key: str,
    window_days: int,
    label: str,
    min_points: int,
    points_count: int,
) -> MetricAnalysisEnvelope:
    area_meta = ANALYTICS_AREA_META.get(area_key, {"label": area_key, "unitLabel": ""})
    return MetricAnalysisEnvelope(
        area_key=area_key,
        area_label=area_meta["label"],
        window_days=window_days,
        metadata={"label": label, "unitLabel": area_meta["unitLabel"]},
        empty_state=build_empty_state(points_count, min_points, label, window_days),
    )
