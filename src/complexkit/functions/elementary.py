"""
Elementary Functions — exp, log, sqrt, pow, тригонометрия и гиперболические

Модуль реализует элементарные трансцендентные функции комплексного
аргумента поверх арифметики ComplexNumber:
- exp по формуле Эйлера: e^re * (cos(im) + i*sin(im))
- log на главной ветви: (ln|z|, arg(z))
- sqrt через устойчивую конструкцию половинного угла (без pow(z, 0.5))
- pow как exp(exponent * log(base)) с вещественными частными случаями
- sin, cos, tan, sinh, cosh, tanh через пару e^(±iz) / e^(±z)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключений: ±Inf/NaN пропагируют по IEEE-754
2. sqrt всегда возвращает значение с re >= 0 (главная ветвь)
3. Тригонометрические и гиперболические функции вычисляют одну пару
   вещественных exp и одну пару cos/sin, без вызова комплексного exp
4. 0 в степени с неположительной действительной частью показателя → NaN + NaN i
"""

import math

from src.complexkit.domain.complex_number import ZERO, ComplexNumber
from src.complexkit.math.numerical_safeguards import (
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_sin,
    ieee_sqrt,
    is_valid_float,
)

_REAL_TYPES = (int, float)


# =============================================================================
# EXP / LOG
# =============================================================================


def _exp_parts(re: float, im: float) -> ComplexNumber:
    """e^(re + i*im) из вещественных компонент показателя."""
    scalar = ieee_exp(re)
    if im == 0:
        # Вещественный показатель: без Inf * 0 = NaN в мнимой части
        return ComplexNumber(scalar, im)
    return ComplexNumber(scalar * ieee_cos(im), scalar * ieee_sin(im))


def exp(z: ComplexNumber) -> ComplexNumber:
    """
    Комплексная экспонента e^z = e^re * (cos(im) + i*sin(im)).

    Examples:
        >>> exp(ComplexNumber(0.0, 0.0))
        ComplexNumber(re=1.0, im=0.0)
    """
    return _exp_parts(z.re, z.im)


def log(z: ComplexNumber) -> ComplexNumber:
    """
    Натуральный логарифм на главной ветви: (ln|z|, arg(z)).

    Мнимая часть в (-π, π]; log(0) = -Inf + 0i.

    Examples:
        >>> log(ComplexNumber(1.0, 0.0))
        ComplexNumber(re=0.0, im=0.0)
        >>> log(ComplexNumber(0.0, 0.0))
        ComplexNumber(re=-inf, im=0.0)
    """
    return ComplexNumber(ieee_log(z.magnitude()), z.argument())


# =============================================================================
# SQRT
# =============================================================================


def sqrt(z: ComplexNumber) -> ComplexNumber:
    """
    Квадратный корень на главной ветви (re >= 0).

    Конструкция половинного угла:
        m = |z|
        m == 0   → 0
        re >= 0  → t = sqrt((m + re) / 2),  результат (t, im / (2t))
        re <  0  → t = sqrt((m - re) / 2),  t = -t при im < 0,
                   результат (im / (2t), t)

    Под корнем всегда сумма неотрицательных величин, поэтому нет
    катастрофического сокращения вблизи разреза по отрицательной полуоси.

    Args:
        z: Аргумент

    Returns:
        Главное значение sqrt(z)

    Examples:
        >>> sqrt(ComplexNumber(-1.0, 0.0))
        ComplexNumber(re=0.0, im=1.0)
        >>> sqrt(ComplexNumber(4.0, 0.0))
        ComplexNumber(re=2.0, im=0.0)
    """
    m = z.magnitude()

    if m == 0:
        return ComplexNumber(0.0, 0.0)

    if z.re >= 0:
        t = ieee_sqrt(0.5 * (m + z.re))
        return ComplexNumber(t, ieee_divide(0.5 * z.im, t))

    t = ieee_sqrt(0.5 * (m - z.re))
    if z.im < 0:
        t = -t
    return ComplexNumber(ieee_divide(0.5 * z.im, t), t)


# =============================================================================
# POW
# =============================================================================


def _is_zero(value: "ComplexNumber | float") -> bool:
    if isinstance(value, ComplexNumber):
        return value.re == 0 and value.im == 0
    return value == 0


def _real_part(value: "ComplexNumber | float") -> float:
    if isinstance(value, ComplexNumber):
        return value.re
    return value


def _real_pow(base: float, exponent: float) -> ComplexNumber:
    """
    Вещественная степень, когда результат заведомо вещественный.

    Используется для base > 0 и для base < 0 с целым показателем.
    """
    try:
        return ComplexNumber.from_real(math.pow(base, exponent))
    except OverflowError:
        negative = base < 0 and math.fmod(exponent, 2.0) != 0
        return ComplexNumber.from_real(-math.inf if negative else math.inf)


def pow(
    base: "ComplexNumber | float",
    exponent: "ComplexNumber | float",
) -> ComplexNumber:
    """
    Главное значение base ** exponent = exp(exponent * log(base)).

    Поддерживаются все сочетания complex/real для base и exponent.

    Частные случаи:
    - real ** real при base > 0 или целом exponent → вещественный результат
      (без паразитной мнимой части порядка 1e-16)
    - 0 ** w при re(w) <= 0 → NaN + NaN i (не определено)
    - 0 ** w при re(w) > 0 → 0

    Args:
        base: Основание (ComplexNumber или вещественное)
        exponent: Показатель (ComplexNumber или вещественное)

    Returns:
        Главное значение степени

    Examples:
        >>> pow(2.0, 10.0)
        ComplexNumber(re=1024.0, im=0.0)
        >>> pow(-8.0, 2.0)
        ComplexNumber(re=64.0, im=0.0)
        >>> pow(0.0, 0.0).is_nan()
        True
    """
    if _is_zero(base):
        exponent_re = _real_part(exponent)
        if math.isnan(exponent_re) or exponent_re <= 0:
            return ComplexNumber(math.nan, math.nan)
        return ZERO

    base_is_real = isinstance(base, _REAL_TYPES)
    exponent_is_real = isinstance(exponent, _REAL_TYPES)

    if base_is_real and exponent_is_real:
        if base > 0 or float(exponent).is_integer():
            return _real_pow(base, exponent)

    # ln(base) = (ln|base|, arg(base))
    if base_is_real:
        ln_r = ieee_log(abs(base))
        theta = math.atan2(0.0, base)
    else:
        ln_r = ieee_log(base.magnitude())
        theta = base.argument()

    if exponent_is_real:
        return _exp_parts(exponent * ln_r, exponent * theta)

    if theta == 0:
        # Положительное вещественное основание: без Inf * 0 в перекрёстных членах
        return _exp_parts(ln_r * exponent.re, ln_r * exponent.im)

    return _exp_parts(
        ln_r * exponent.re - theta * exponent.im,
        ln_r * exponent.im + theta * exponent.re,
    )


# =============================================================================
# ТРИГОНОМЕТРИЧЕСКИЕ И ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def _exp_pair(
    x: float, y: float, shift: float = 0.0
) -> tuple[float, float, float, float]:
    """
    Компоненты e^(x + iy) и e^(-x - iy), умноженные на e^(-shift).

    Две вещественные экспоненты и одна пара cos/sin; cos(-y) = cos(y),
    sin(-y) = -sin(y).

    Returns:
        (re_pos, im_pos, re_neg, im_neg)
    """
    scalar_pos = ieee_exp(x - shift)
    scalar_neg = ieee_exp(-x - shift)
    cos_y = ieee_cos(y)
    sin_y = ieee_sin(y)

    if sin_y == 0:
        # Вещественный аргумент: мнимые части нулевые даже при переполнении exp
        return (scalar_pos * cos_y, sin_y, scalar_neg * cos_y, -sin_y)

    return (
        scalar_pos * cos_y,
        scalar_pos * sin_y,
        scalar_neg * cos_y,
        -scalar_neg * sin_y,
    )


def sin(z: ComplexNumber) -> ComplexNumber:
    """
    sin(z) = (e^(iz) - e^(-iz)) / (2i).

    iz = (-im, re); деление на 2i: (a + ib) / (2i) = (b/2, -a/2).
    """
    re1, im1, re2, im2 = _exp_pair(-z.im, z.re)
    return ComplexNumber(0.5 * (im1 - im2), -0.5 * (re1 - re2))


def cos(z: ComplexNumber) -> ComplexNumber:
    """cos(z) = (e^(iz) + e^(-iz)) / 2."""
    re1, im1, re2, im2 = _exp_pair(-z.im, z.re)
    return ComplexNumber(0.5 * (re1 + re2), 0.5 * (im1 + im2))


def _quotient_shift(x: float) -> float:
    """
    Общий множитель e^(-|x|) для отношений tan/tanh.

    После сдвига обе экспоненты лежат в [0, 1] и не переполняются;
    отношение от общего множителя не зависит.
    """
    if is_valid_float(x):
        return abs(x)
    return 0.0


def tan(z: ComplexNumber) -> ComplexNumber:
    """
    tan(z) = sin(z) / cos(z).

    Одна пара e^(±iz) используется и для числителя, и для знаменателя;
    деление по алгоритму Смита. Обе экспоненты масштабируются на
    e^(-|im|), поэтому при больших |im| результат стремится к ±i без
    переполнения: tan(800i) = i.
    """
    x = -z.im
    re1, im1, re2, im2 = _exp_pair(x, z.re, _quotient_shift(x))
    numerator = ComplexNumber(0.5 * (im1 - im2), -0.5 * (re1 - re2))
    denominator = ComplexNumber(0.5 * (re1 + re2), 0.5 * (im1 + im2))
    return numerator.divide(denominator)


def sinh(z: ComplexNumber) -> ComplexNumber:
    """sinh(z) = (e^z - e^(-z)) / 2."""
    re1, im1, re2, im2 = _exp_pair(z.re, z.im)
    return ComplexNumber(0.5 * (re1 - re2), 0.5 * (im1 - im2))


def cosh(z: ComplexNumber) -> ComplexNumber:
    """cosh(z) = (e^z + e^(-z)) / 2."""
    re1, im1, re2, im2 = _exp_pair(z.re, z.im)
    return ComplexNumber(0.5 * (re1 + re2), 0.5 * (im1 + im2))


def tanh(z: ComplexNumber) -> ComplexNumber:
    """
    tanh(z) = (e^z - e^(-z)) / (e^z + e^(-z)).

    Экспоненты масштабируются на e^(-|re|): tanh(±800) = ±1.
    """
    re1, im1, re2, im2 = _exp_pair(z.re, z.im, _quotient_shift(z.re))
    numerator = ComplexNumber(re1 - re2, im1 - im2)
    return numerator.divide(ComplexNumber(re1 + re2, im1 + im2))


def polar(r: float, theta: float) -> ComplexNumber:
    """Комплексное число из модуля и угла (см. ComplexNumber.from_polar)."""
    return ComplexNumber.from_polar(r, theta)
