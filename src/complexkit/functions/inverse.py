"""
Inverse Functions — обратные тригонометрические и гиперболические функции

Главные значения через замкнутые формулы:
    asin(z)  = -i * log(iz + sqrt(1 - z^2))
    acos(z)  = -i * log(z + i*sqrt(1 - z^2))
    atan(z)  = (i/2) * log((i + z) / (i - z))
    asinh(z) = log(z + sqrt(z^2 + 1))
    acosh(z) = log(z + sqrt(z^2 - 1))
    atanh(z) = (1/2) * log((1 + z) / (1 - z))

Все формулы собираются из sqrt, log и деления по Смиту, а не из
раскрытых вручную компонент: устойчивость к переполнению наследуется
от этих примитивов.

Ограничение: asin, acos, asinh и acosh вычисляют z^2, который переполняется
при |z| > ~1e154. Дальше результат бесконечен (asinh(1e200) = +Inf + 0i
вместо 461.2); исключений нет. atan и atanh z^2 не используют.

Умножение на ±i выполняется перестановкой компонент:
    i * (a + ib)  = (-b, a)
    -i * (a + ib) = (b, -a)
"""

from src.complexkit.domain.complex_number import ONE, ComplexNumber
from src.complexkit.functions.elementary import log, sqrt


def _times_minus_i(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(z.im, -z.re)


def _times_i(z: ComplexNumber) -> ComplexNumber:
    return ComplexNumber(-z.im, z.re)


# =============================================================================
# ОБРАТНЫЕ ТРИГОНОМЕТРИЧЕСКИЕ
# =============================================================================


def asin(z: ComplexNumber) -> ComplexNumber:
    """
    Арксинус: -i * log(iz + sqrt(1 - z^2)).

    Examples:
        >>> asin(ComplexNumber(0.0, 0.0))
        ComplexNumber(re=0.0, im=-0.0)
    """
    root = sqrt(ONE.subtract(z.square()))
    return _times_minus_i(log(_times_i(z).add(root)))


def acos(z: ComplexNumber) -> ComplexNumber:
    """Арккосинус: -i * log(z + i*sqrt(1 - z^2))."""
    root = sqrt(ONE.subtract(z.square()))
    return _times_minus_i(log(z.add(_times_i(root))))


def atan(z: ComplexNumber) -> ComplexNumber:
    """
    Арктангенс: (i/2) * log((i + z) / (i - z)).

    Вычисляется как (arg(w) / 2, -ln|w| / 2) для w = (i - z) / (i + z),
    без явного множителя i/2.

    atan(±i) — точки ветвления: результат содержит бесконечную мнимую часть.
    """
    w = log(ComplexNumber(-z.re, 1.0 - z.im).divide(ComplexNumber(z.re, 1.0 + z.im)))
    return ComplexNumber(0.5 * w.im, -0.5 * w.re)


# =============================================================================
# ОБРАТНЫЕ ГИПЕРБОЛИЧЕСКИЕ
# =============================================================================


def asinh(z: ComplexNumber) -> ComplexNumber:
    """Ареасинус: log(z + sqrt(z^2 + 1))."""
    return log(z.add(sqrt(z.square().add(1.0))))


def acosh(z: ComplexNumber) -> ComplexNumber:
    """
    Ареакосинус: log(z + sqrt(z^2 - 1)).

    Для re(z) < 0 формула даёт значение с отрицательной действительной
    частью (другая ветвь, чем у cmath.acosh); cosh от результата всё равно
    равен z.
    """
    return log(z.add(sqrt(z.square().subtract(1.0))))


def atanh(z: ComplexNumber) -> ComplexNumber:
    """Ареатангенс: (1/2) * log((1 + z) / (1 - z))."""
    w = log(ONE.add(z).divide(ONE.subtract(z)))
    return ComplexNumber(0.5 * w.re, 0.5 * w.im)
