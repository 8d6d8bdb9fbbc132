"""수치 보조 함수 테스트"""

import math

import pytest

from liferpg.core.mathutil import (
    clamp,
    is_finite_number,
    mean_or_default,
    mean_or_none,
    population_std_dev,
    round_half_up,
)


class TestRoundHalfUp:
    def test_half_goes_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round(2.5) == 2  # 내장 round와 다름

    def test_negative_half(self):
        assert round_half_up(-2.5) == -2

    def test_plain(self):
        assert round_half_up(2.4) == 2
        assert round_half_up(2559.9) == 2560


class TestStats:
    def test_mean_skips_none_and_nan(self):
        assert mean_or_none([1, None, 3, math.nan]) == 2.0
        assert mean_or_none([None]) is None
        assert mean_or_default([], default=1.0) == 1.0

    def test_population_std_dev(self):
        assert population_std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)
        assert population_std_dev([5]) == 0.0

    def test_clamp(self):
        assert clamp(5, 0, 1) == 1
        assert clamp(-5, 0, 1) == 0

    def test_is_finite_number(self):
        assert is_finite_number(0)
        assert not is_finite_number(True)
        assert not is_finite_number(math.inf)
        assert not is_finite_number("3")
