"""
Тесты для обратных тригонометрических и гиперболических функций

Проверяемые инварианты:
1. Совпадение с cmath на главных ветвях вне разрезов
2. f(f^-1(z)) ≈ z
3. Точки ветвления atan(±i) дают бесконечность без исключений
"""

import cmath
import math

import pytest

from src.complexkit.domain import I, ZERO, ComplexNumber
from src.complexkit.functions.elementary import cos, cosh, sin, sinh, tan, tanh
from src.complexkit.functions.inverse import acos, acosh, asin, asinh, atan, atanh

# Точки вне разрезов всех шести функций
SAMPLE_POINTS = [
    (0.5, 0.3),
    (0.2, -1.5),
    (1.5, 0.5),
    (-0.8, 0.6),
    (2.0, -1.0),
]

# acosh(z) = log(z + sqrt(z^2 - 1)) совпадает с cmath только при re > 0
RIGHT_HALF_PLANE_POINTS = [(re, im) for re, im in SAMPLE_POINTS if re > 0]


def assert_matches(result: ComplexNumber, expected: complex) -> None:
    """Сравнение с эталонным complex по компонентам"""
    assert math.isclose(result.re, expected.real, rel_tol=1e-10, abs_tol=1e-12)
    assert math.isclose(result.im, expected.imag, rel_tol=1e-10, abs_tol=1e-12)


# =============================================================================
# ТЕСТЫ: обратные тригонометрические
# =============================================================================


class TestAsin:
    """Тесты asin"""

    def test_asin_zero(self) -> None:
        result = asin(ZERO)
        assert (result.re, result.im) == (0.0, 0.0)

    def test_asin_one(self) -> None:
        result = asin(ComplexNumber(1.0, 0.0))
        assert result.re == pytest.approx(math.pi / 2)
        assert result.im == 0.0

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_matches_cmath(self, re: float, im: float) -> None:
        assert_matches(asin(ComplexNumber(re, im)), cmath.asin(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_round_trip(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(sin(asin(z)), 1e-10)


class TestAcos:
    """Тесты acos"""

    def test_acos_one(self) -> None:
        result = acos(ComplexNumber(1.0, 0.0))
        assert result.re == 0.0
        assert result.im == 0.0

    def test_acos_zero(self) -> None:
        result = acos(ZERO)
        assert result.re == pytest.approx(math.pi / 2)
        assert result.im == 0.0

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_matches_cmath(self, re: float, im: float) -> None:
        assert_matches(acos(ComplexNumber(re, im)), cmath.acos(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_round_trip(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(cos(acos(z)), 1e-10)

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_asin_plus_acos_is_half_pi(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        total = asin(z).add(acos(z))
        assert total.equals_with_tolerance(ComplexNumber(math.pi / 2, 0.0), 1e-10)


class TestAtan:
    """Тесты atan"""

    def test_atan_one(self) -> None:
        result = atan(ComplexNumber(1.0, 0.0))
        assert result.re == pytest.approx(math.pi / 4)
        assert result.im == pytest.approx(0.0, abs=1e-15)

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_matches_cmath(self, re: float, im: float) -> None:
        assert_matches(atan(ComplexNumber(re, im)), cmath.atan(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_round_trip(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(tan(atan(z)), 1e-10)

    def test_branch_point_plus_i(self) -> None:
        """atan(i) = +i∞ без исключений"""
        result = atan(I)
        assert result.is_infinite()
        assert result.im == math.inf

    def test_branch_point_minus_i(self) -> None:
        result = atan(ComplexNumber(0.0, -1.0))
        assert result.is_infinite()
        assert result.im == -math.inf


# =============================================================================
# ТЕСТЫ: обратные гиперболические
# =============================================================================


class TestAsinh:
    """Тесты asinh"""

    def test_asinh_one(self) -> None:
        result = asinh(ComplexNumber(1.0, 0.0))
        assert result.re == pytest.approx(math.asinh(1.0))
        assert result.im == 0.0

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_matches_cmath(self, re: float, im: float) -> None:
        assert_matches(asinh(ComplexNumber(re, im)), cmath.asinh(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_round_trip(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(sinh(asinh(z)), 1e-10)

    def test_large_argument_below_square_overflow(self) -> None:
        """z^2 ещё конечен: результат точный"""
        assert_matches(asinh(ComplexNumber(1e150, 0.0)), cmath.asinh(complex(1e150, 0.0)))

    def test_large_argument_beyond_square_overflow(self) -> None:
        """z^2 переполняется: бесконечный результат без исключений"""
        result = asinh(ComplexNumber(1e200, 0.0))
        assert result.is_infinite()
        assert result.im == 0.0


class TestAcosh:
    """Тесты acosh"""

    def test_acosh_two(self) -> None:
        result = acosh(ComplexNumber(2.0, 0.0))
        assert result.re == pytest.approx(math.acosh(2.0))
        assert result.im == 0.0

    def test_acosh_zero(self) -> None:
        result = acosh(ZERO)
        assert result.re == pytest.approx(0.0, abs=1e-15)
        assert result.im == pytest.approx(math.pi / 2)

    @pytest.mark.parametrize("re, im", RIGHT_HALF_PLANE_POINTS)
    def test_matches_cmath_in_right_half_plane(self, re: float, im: float) -> None:
        assert_matches(acosh(ComplexNumber(re, im)), cmath.acosh(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS + [(-2.0, 0.0)])
    def test_round_trip(self, re: float, im: float) -> None:
        """cosh(acosh(z)) = z и в левой полуплоскости"""
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(cosh(acosh(z)), 1e-10)


class TestAtanh:
    """Тесты atanh"""

    def test_atanh_half(self) -> None:
        result = atanh(ComplexNumber(0.5, 0.0))
        assert result.re == pytest.approx(math.atanh(0.5))
        assert result.im == 0.0

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_matches_cmath(self, re: float, im: float) -> None:
        assert_matches(atanh(ComplexNumber(re, im)), cmath.atanh(complex(re, im)))

    @pytest.mark.parametrize("re, im", SAMPLE_POINTS)
    def test_round_trip(self, re: float, im: float) -> None:
        z = ComplexNumber(re, im)
        assert z.equals_with_tolerance(tanh(atanh(z)), 1e-10)

    def test_branch_point_is_infinite(self) -> None:
        """atanh(1) = +∞ без исключений"""
        result = atanh(ComplexNumber(1.0, 0.0))
        assert result.re == math.inf
