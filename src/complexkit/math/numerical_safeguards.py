"""
Numerical Safeguards — IEEE-754 Total Real Primitives

Модуль предоставляет вещественные примитивы, на которых построена вся
комплексная арифметика пакета:
- Деление, exp, log, sqrt, sin, cos и fmod, которые никогда не бросают
  исключений и ведут себя по правилам IEEE-754 (±Inf/NaN вместо
  ZeroDivisionError/OverflowError/ValueError модуля math)
- Epsilon-параметры для сравнения комплексных значений
- Классификация float (finite / NaN / Inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключений на float-входах
2. NaN всегда пропагирует (в отличие от санитизации, значение не заменяется)
3. Знак бесконечности при делении на ±0.0 определяется по правилам IEEE-754
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения комплексных чисел по умолчанию
# Масштабируется модулем первого операнда: |Δ| <= tol * |z1|
EPS_COMPLEX_EQUALITY_REL: Final[float] = 1e-13

# Абсолютный порог для сравнения комплексных чисел
# Нужен для сравнения с точным нулём, где относительный порог вырождается в 0
EPS_COMPLEX_EQUALITY_ABS: Final[float] = 1e-15

# Полный оборот в радианах (для редукции углов в полярной форме)
TWO_PI: Final[float] = 2.0 * math.pi


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754 без ZeroDivisionError.

    Python бросает ZeroDivisionError при делении float на ноль; здесь
    результат совпадает с аппаратным делением:
    - x / ±0.0 при x != 0 → ±Inf (знак = sign(x) * sign(denominator))
    - 0 / 0 и NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель (может быть ±0.0)

    Returns:
        Частное по правилам IEEE-754

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if math.isnan(numerator) or numerator == 0:
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)


# =============================================================================
# IEEE-754 ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
# =============================================================================


def ieee_exp(value: float) -> float:
    """
    Экспонента с переполнением в +Inf вместо OverflowError.

    Examples:
        >>> ieee_exp(0.0)
        1.0
        >>> ieee_exp(1000.0)
        inf
        >>> ieee_exp(float('-inf'))
        0.0
    """
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм по правилам IEEE-754.

    - log(±0.0) → -Inf
    - log(x < 0) → NaN
    - log(+Inf) → +Inf
    - log(NaN) → NaN

    Examples:
        >>> ieee_log(1.0)
        0.0
        >>> ieee_log(0.0)
        -inf
    """
    if math.isnan(value):
        return math.nan
    if value == 0:
        return -math.inf
    if value < 0:
        return math.nan
    return math.log(value)


def ieee_sqrt(value: float) -> float:
    """
    Квадратный корень: NaN для отрицательного аргумента вместо ValueError.

    Знак нуля сохраняется (sqrt(-0.0) = -0.0), как в IEEE-754.
    """
    if value < 0:
        return math.nan
    return math.sqrt(value)


def ieee_sin(value: float) -> float:
    """Синус: NaN для ±Inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.sin(value)


def ieee_cos(value: float) -> float:
    """Косинус: NaN для ±Inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def ieee_fmod(value: float, divisor: float) -> float:
    """
    Остаток от деления со знаком делимого (C fmod).

    fmod(±Inf, y) и fmod(x, 0) дают NaN вместо ValueError.

    Examples:
        >>> ieee_fmod(7.0, 3.0)
        1.0
        >>> ieee_fmod(-7.0, 3.0)
        -1.0
    """
    if math.isinf(value) or divisor == 0:
        return math.nan
    return math.fmod(value, divisor)
