"""지표 분석 Core 패키지"""

from liferpg.core.analytics.analyzers import (
    DAILY_ANALYTICS_META,
    analyze_behavior,
    analyze_daily_metric,
    analyze_quests,
    analyze_reviews,
)
from liferpg.core.analytics.envelope import (
    ANALYTICS_AREA_META,
    EmptyState,
    MetricAnalysisEnvelope,
    build_analysis_envelope,
    build_empty_state,
)
from liferpg.core.analytics.metric_window import (
    DEFAULT_WINDOW_DAYS,
    MetricPoint,
    WeekdayValue,
    compute_metric_average,
    compute_weekday_averages,
    find_highest_lowest_weekday,
    get_metric_window,
)

__all__ = [
    # metric_window
    "DEFAULT_WINDOW_DAYS",
    "MetricPoint",
    "WeekdayValue",
    "get_metric_window",
    "compute_metric_average",
    "compute_weekday_averages",
    "find_highest_lowest_weekday",
    # envelope
    "ANALYTICS_AREA_META",
    "EmptyState",
    "MetricAnalysisEnvelope",
    "build_empty_state",
    "build_analysis_envelope",
    # analyzers
    "DAILY_ANALYTICS_META",
    "analyze_daily_metric",
    "analyze_behavior",
    "analyze_quests",
    "analyze_reviews",
]
