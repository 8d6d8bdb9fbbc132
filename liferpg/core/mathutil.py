"""수치 보조 함수

전부 순수 함수. None은 "기록 없음"을 뜻하므로 평균/표준편차 계산에서 제외한다.
"""

import math
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    """0.5는 항상 +∞ 방향으로 반올림.

    내장 round()는 banker's rounding이라 2.5 → 2가 된다.
    XP/TDEE 값은 기존 저장 데이터와 같은 결과를 내야 하므로 floor(x + 0.5) 사용.
    """
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """low ~ high 클램프."""
    return max(low, min(high, value))


def finite_values(values: Iterable[Optional[float]]) -> list[float]:
    """None/NaN/inf 제거."""
    return [float(v) for v in values if is_finite_number(v)]


def mean_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    """유효값 평균. 유효값이 없으면 None."""
    finite = finite_values(values)
    if not finite:
        return None
    return sum(finite) / len(finite)


def mean_or_default(values: Iterable[Optional[float]], default: float = 0.0) -> float:
    """유효값 평균. 유효값이 없으면 default."""
    result = mean_or_none(values)
    return default if result is None else result


def population_std_dev(values: Iterable[Optional[float]]) -> float:
    """모표준편차. 표본 2개 미만이면 0."""
    finite = finite_values(values)
    if len(finite) < 2:
        return 0.0
    mean = sum(finite) / len(finite)
    variance = sum((v - mean) ** 2 for v in finite) / len(finite)
    return math.sqrt(variance)


def is_finite_number(value: object) -> bool:
    """None/bool/NaN/inf가 아닌 숫자인지."""
    if value is None or isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)
