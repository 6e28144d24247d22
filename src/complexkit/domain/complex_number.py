"""
ComplexNumber — Immutable модель комплексного числа

Immutable Pydantic модель (re, im) с базовой арифметикой, метриками,
сравнением и текстовым представлением.

Численно устойчивые алгоритмы:
- Модуль через масштабирование: big * sqrt(1 + (small/big)^2), без переполнения
  при компонентах порядка 1e300
- Деление и обратное значение по алгоритму Смита (Smith's algorithm)
- Деление на 0+0i не бросает исключений: результат — комплексная
  бесконечность в направлении делимого

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр никогда не изменяется после создания (frozen=True)
2. Ни одна арифметическая операция не бросает исключений на float-компонентах
3. Предикаты is_nan/is_infinite следуют IEEE-754
4. Равенство (==) толерантное и асимметричное: масштаб берётся по модулю
   первого операнда; поэтому экземпляры не хешируются
5. Упорядочивание (<, <=, >, >=) — только по модулю (предпорядок)
"""

import math

from pydantic import BaseModel, Field

from src.complexkit.math.numerical_safeguards import (
    EPS_COMPLEX_EQUALITY_ABS,
    EPS_COMPLEX_EQUALITY_REL,
    TWO_PI,
    ieee_cos,
    ieee_divide,
    ieee_fmod,
    ieee_sin,
    is_valid_float,
)

# Операнды, которые арифметика принимает наравне с ComplexNumber
_REAL_TYPES = (int, float)


# =============================================================================
# COMPLEX NUMBER MODEL
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Комплексное число re + i*im.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Компоненты могут быть конечными, ±Inf или NaN независимо друг от друга.

    Examples:
        >>> ComplexNumber(3.0, 4.0).magnitude()
        5.0
        >>> str(ComplexNumber(1.0, -2.0))
        '(1.0 - i 2.0)'
    """

    re: float = Field(0.0, description="Действительная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    # Толерантное равенство не транзитивно: хеш не может быть согласован с ==
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, re: float = 0.0, im: float = 0.0) -> None:
        super().__init__(re=re, im=im)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_real(cls, re: float) -> "ComplexNumber":
        """Комплексное число с нулевой мнимой частью."""
        return cls(re, 0.0)

    @classmethod
    def from_parts(cls, re: float, im: float) -> "ComplexNumber":
        """Комплексное число из действительной и мнимой частей."""
        return cls(re, im)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "ComplexNumber":
        """
        Комплексное число из полярной формы r * e^(i*theta).

        Нормализует вход без исключений:
        - r < 0 → угол поворачивается на π, r берётся по модулю
        - угол редуцируется через fmod(theta, 2π)

        Args:
            r: Модуль (может быть отрицательным)
            theta: Угол в радианах

        Returns:
            Комплексное число в прямоугольной форме

        Examples:
            >>> ComplexNumber.from_polar(2.0, 0.0)
            ComplexNumber(re=2.0, im=0.0)
            >>> z = ComplexNumber.from_polar(-1.0, 0.0)
            >>> z.re
            -1.0
        """
        if r < 0:
            theta += math.pi
            r = -r

        theta = ieee_fmod(theta, TWO_PI)

        return cls(r * ieee_cos(theta), r * ieee_sin(theta))

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexNumber":
        """Конверсия из встроенного complex."""
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        """Конверсия во встроенный complex."""
        return complex(self.re, self.im)

    def with_re(self, re: float) -> "ComplexNumber":
        """Копия с заменённой действительной частью."""
        return ComplexNumber(re, self.im)

    def with_im(self, im: float) -> "ComplexNumber":
        """Копия с заменённой мнимой частью."""
        return ComplexNumber(self.re, im)

    # =========================================================================
    # ПРЕДИКАТЫ IEEE-754
    # =========================================================================

    def is_nan(self) -> bool:
        """True если хотя бы одна компонента NaN."""
        return math.isnan(self.re) or math.isnan(self.im)

    def is_infinite(self) -> bool:
        """
        True если хотя бы одна компонента бесконечна и ни одна не NaN.
        """
        if self.is_nan():
            return False
        return math.isinf(self.re) or math.isinf(self.im)

    def is_finite(self) -> bool:
        """True если обе компоненты конечны."""
        return is_valid_float(self.re) and is_valid_float(self.im)

    # =========================================================================
    # МЕТРИКИ
    # =========================================================================

    def magnitude(self) -> float:
        """
        Модуль |z| без переполнения промежуточных значений.

        Алгоритм:
            a = |re|, b = |im|
            big, small = max(a, b), min(a, b)
            |z| = big * sqrt(1 + (small / big)^2)

        Прямая формула sqrt(re^2 + im^2) переполняется уже при компонентах
        порядка 1e155.

        Returns:
            |z| >= 0; +Inf если любая компонента бесконечна (даже при NaN
            во второй), NaN если любая компонента NaN

        Examples:
            >>> ComplexNumber(3.0, 4.0).magnitude()
            5.0
            >>> ComplexNumber(1e300, 1e300).magnitude()
            1.4142135623730952e+300
        """
        a = abs(self.re)
        b = abs(self.im)

        if math.isinf(a) or math.isinf(b):
            return math.inf
        if math.isnan(a) or math.isnan(b):
            return math.nan
        if a == 0 and b == 0:
            return 0.0

        if a >= b:
            big, small = a, b
        else:
            big, small = b, a

        d = small / big
        return big * math.sqrt(1.0 + d * d)

    def square_magnitude(self) -> float:
        """
        Квадрат модуля re^2 + im^2 (без извлечения корня).

        Может переполниться в +Inf там, где magnitude() конечен.
        """
        return self.re * self.re + self.im * self.im

    def argument(self) -> float:
        """
        Главное значение аргумента atan2(im, re) в радианах.

        Диапазон (-π, π]; arg(0) = 0. Для im = -0.0 и re < 0 возвращается -π
        (знаковый ноль IEEE-754).
        """
        return math.atan2(self.im, self.re)

    # Исторические имена
    norm = square_magnitude
    arg = argument
    phase = argument

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "ComplexNumber | float") -> "ComplexNumber":
        """Сумма с комплексным числом или вещественным скаляром."""
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.re + other.re, self.im + other.im)
        return ComplexNumber(self.re + other, self.im)

    def subtract(self, other: "ComplexNumber | float") -> "ComplexNumber":
        """Разность с комплексным числом или вещественным скаляром."""
        if isinstance(other, ComplexNumber):
            return ComplexNumber(self.re - other.re, self.im - other.im)
        return ComplexNumber(self.re - other, self.im)

    def multiply(self, other: "ComplexNumber | float") -> "ComplexNumber":
        """
        Произведение с комплексным числом или вещественным скаляром.

        Скаляр масштабирует компоненты независимо, поэтому
        (Inf + 0i) * 2 = Inf + 0i, а не Inf + NaN i.
        """
        if isinstance(other, ComplexNumber):
            return ComplexNumber(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        return ComplexNumber(self.re * other, self.im * other)

    def divide(self, other: "ComplexNumber | float") -> "ComplexNumber":
        """
        Частное по алгоритму Смита.

        Учебная формула (ac + bd) / (c^2 + d^2) переполняется при больших
        c, d. Алгоритм Смита делит на большую по модулю компоненту делителя
        и использует один масштабный множитель:

            |c| >= |d|:  r = d / c,  s = 1 / (c + d*r)
                         re = s * (a + b*r),  im = s * (b - a*r)
            |c| <  |d|:  r = c / d,  s = 1 / (c*r + d)
                         re = s * (a*r + b),  im = s * (b*r - a)

        Если делитель субнормальный и 1 / (c + d*r) переполняется, компоненты
        делятся напрямую: (1+i) / (1e-310+1e-310i) = Inf + 0i, а не Inf + NaN i.

        Деление на ноль (комплексный 0+0i или скаляр ±0.0) не бросает
        исключений: ненулевые компоненты делимого становятся ±Inf, нулевые
        остаются 0, а 0 / 0 даёт NaN + NaN i.

        Args:
            other: Делитель (ComplexNumber или вещественный скаляр)

        Returns:
            Частное self / other

        Examples:
            >>> ComplexNumber(1.0, 0.0).divide(ComplexNumber(0.0, 1.0))
            ComplexNumber(re=0.0, im=-1.0)
            >>> ComplexNumber(1.0, 0.0).divide(ComplexNumber(0.0, 0.0))
            ComplexNumber(re=inf, im=0.0)
        """
        if not isinstance(other, ComplexNumber):
            if other == 0:
                return self._divide_by_zero(other)
            return ComplexNumber(
                ieee_divide(self.re, other), ieee_divide(self.im, other)
            )

        c = other.re
        d = other.im

        if c == 0 and d == 0:
            return self._divide_by_zero(c)

        if abs(c) >= abs(d):
            ratio = ieee_divide(d, c)
            return _smith_quotient(
                self.re + self.im * ratio,
                self.im - self.re * ratio,
                c + d * ratio,
            )

        ratio = ieee_divide(c, d)
        return _smith_quotient(
            self.re * ratio + self.im,
            self.im * ratio - self.re,
            c * ratio + d,
        )

    def _divide_by_zero(self, zero: float) -> "ComplexNumber":
        # Комплексная бесконечность в направлении делимого
        if self.re == 0 and self.im == 0:
            return ComplexNumber(math.nan, math.nan)
        re = 0.0 if self.re == 0 else ieee_divide(self.re, zero)
        im = 0.0 if self.im == 0 else ieee_divide(self.im, zero)
        return ComplexNumber(re, im)

    def reciprocal(self) -> "ComplexNumber":
        """
        Обратное значение 1 / z по алгоритму Смита.

        1 / (0 + 0i) = +Inf + 0i (знак бесконечности по знаку нуля re).
        """
        x = self.re
        y = self.im

        if x == 0 and y == 0:
            return ComplexNumber(ieee_divide(1.0, x), 0.0)

        if abs(x) >= abs(y):
            ratio = ieee_divide(y, x)
            scalar = ieee_divide(1.0, x + y * ratio)
            return ComplexNumber(scalar, -scalar * ratio)

        ratio = ieee_divide(x, y)
        scalar = ieee_divide(1.0, x * ratio + y)
        return ComplexNumber(scalar * ratio, -scalar)

    def negate(self) -> "ComplexNumber":
        return ComplexNumber(-self.re, -self.im)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self.re, -self.im)

    def square(self) -> "ComplexNumber":
        """z * z в замкнутой форме (re^2 - im^2, 2 * re * im)."""
        return ComplexNumber(
            self.re * self.re - self.im * self.im, 2.0 * (self.re * self.im)
        )

    # =========================================================================
    # ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ (делегирование в src.complexkit.functions)
    # =========================================================================

    def exp(self) -> "ComplexNumber":
        from src.complexkit.functions import elementary

        return elementary.exp(self)

    def log(self) -> "ComplexNumber":
        from src.complexkit.functions import elementary

        return elementary.log(self)

    def sqrt(self) -> "ComplexNumber":
        from src.complexkit.functions import elementary

        return elementary.sqrt(self)

    def pow(self, exponent: "ComplexNumber | float") -> "ComplexNumber":
        """Главное значение self ** exponent (см. elementary.pow)."""
        from src.complexkit.functions import elementary

        return elementary.pow(self, exponent)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals_with_tolerance(
        self,
        other: "ComplexNumber",
        tol: float = EPS_COMPLEX_EQUALITY_REL,
        *,
        symmetric: bool = False,
    ) -> bool:
        """
        Толерантное сравнение с относительным порогом.

        Алгоритм:
            scale = |self|                        (symmetric=False)
            scale = max(|self|, |other|)          (symmetric=True)
            limit = max(|tol| * scale, EPS_COMPLEX_EQUALITY_ABS)
            equal = |Δre| <= limit and |Δim| <= limit

        По умолчанию сравнение асимметрично: a.equals_with_tolerance(b)
        может отличаться от b.equals_with_tolerance(a), так как масштаб
        берётся только по первому операнду. Отрицательный tol
        интерпретируется как |tol|.

        Неконечные значения сравниваются покомпонентно точно; NaN не равен
        ничему.

        Args:
            other: Второй операнд
            tol: Относительная толерантность (default: 1e-13)
            symmetric: Масштабировать по большему из двух модулей

        Returns:
            True если значения равны в пределах толерантности

        Examples:
            >>> ComplexNumber(0.0, 0.0).equals_with_tolerance(ComplexNumber(1e-16, 1e-16))
            True
            >>> ComplexNumber(1.0, 0.0).equals_with_tolerance(ComplexNumber(1.1, 0.0))
            False
        """
        if not (self.is_finite() and other.is_finite()):
            return self.re == other.re and self.im == other.im

        scale = self.magnitude()
        if symmetric:
            scale = max(scale, other.magnitude())

        limit = max(abs(tol) * scale, EPS_COMPLEX_EQUALITY_ABS)

        return abs(self.re - other.re) <= limit and abs(self.im - other.im) <= limit

    def compare_by_magnitude(self, other: "ComplexNumber") -> int:
        """
        Сравнение по модулю: sign(|self| - |other|).

        Это предпорядок, а не порядок: различные числа с равным модулем
        (например, 1 и i) сравниваются как 0. Результат 0 не означает
        равенства значений.

        Returns:
            -1 если |self| < |other|, 0 если модули равны, иначе +1
        """
        this_value = self.magnitude()
        other_value = other.magnitude()

        if this_value < other_value:
            return -1
        elif this_value == other_value:
            return 0
        else:
            return 1

    # =========================================================================
    # ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        if self.im < 0:
            return f"({self.re} - i {-self.im})"
        if self.im == 0 and math.copysign(1.0, self.im) < 0:
            # -0.0 отображается как положительный ноль
            return f"({self.re} + i {0.0})"
        return f"({self.re} + i {self.im})"

    # =========================================================================
    # ОПЕРАТОРЫ PYTHON
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.equals_with_tolerance(operand)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: "ComplexNumber") -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.magnitude() < other.magnitude()

    def __le__(self, other: "ComplexNumber") -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.magnitude() <= other.magnitude()

    def __gt__(self, other: "ComplexNumber") -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.magnitude() > other.magnitude()

    def __ge__(self, other: "ComplexNumber") -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.magnitude() >= other.magnitude()

    def __add__(self, other: object) -> "ComplexNumber":
        if isinstance(other, _REAL_TYPES):
            return self.add(other)
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: object) -> "ComplexNumber":
        if isinstance(other, _REAL_TYPES):
            return self.subtract(other)
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> "ComplexNumber":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> "ComplexNumber":
        if isinstance(other, _REAL_TYPES):
            return self.multiply(other)
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "ComplexNumber":
        if isinstance(other, _REAL_TYPES):
            return self.divide(other)
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: object) -> "ComplexNumber":
        operand = _coerce(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __pow__(self, exponent: object) -> "ComplexNumber":
        if isinstance(exponent, _REAL_TYPES):
            return self.pow(exponent)
        operand = _coerce(exponent)
        if operand is None:
            return NotImplemented
        return self.pow(operand)

    def __rpow__(self, base: object) -> "ComplexNumber":
        from src.complexkit.functions import elementary

        if isinstance(base, _REAL_TYPES):
            return elementary.pow(base, self)
        operand = _coerce(base)
        if operand is None:
            return NotImplemented
        return elementary.pow(operand, self)

    def __neg__(self) -> "ComplexNumber":
        return self.negate()

    def __pos__(self) -> "ComplexNumber":
        return self

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return self.to_complex()

    def __float__(self) -> float:
        """Действительная часть; мнимая часть отбрасывается."""
        return self.re

    def __bool__(self) -> bool:
        return self.re != 0 or self.im != 0


# =============================================================================
# HELPERS
# =============================================================================


def _smith_quotient(
    numerator_re: float, numerator_im: float, denominator: float
) -> ComplexNumber:
    """
    Последний шаг алгоритма Смита: (numerator_re, numerator_im) / denominator.

    Обычно деление заменяется одним умножением на 1 / denominator. При
    субнормальном делителе 1 / denominator переполняется в Inf, и нулевая
    компонента числителя дала бы Inf * 0 = NaN; тогда обе компоненты
    делятся напрямую.
    """
    scalar = ieee_divide(1.0, denominator)
    if math.isinf(scalar):
        return ComplexNumber(
            ieee_divide(numerator_re, denominator),
            ieee_divide(numerator_im, denominator),
        )
    return ComplexNumber(scalar * numerator_re, scalar * numerator_im)


def _coerce(value: object) -> "ComplexNumber | None":
    """Приведение операнда к ComplexNumber; None если тип не поддерживается."""
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, _REAL_TYPES):
        return ComplexNumber.from_real(value)
    if isinstance(value, complex):
        return ComplexNumber.from_complex(value)
    return None


def compare_by_magnitude(a: ComplexNumber, b: ComplexNumber) -> int:
    """
    Сравнение двух чисел по модулю (см. ComplexNumber.compare_by_magnitude).

    Подходит для functools.cmp_to_key.
    """
    return a.compare_by_magnitude(b)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = ComplexNumber(0.0, 0.0)
ONE = ComplexNumber(1.0, 0.0)
I = ComplexNumber(0.0, 1.0)  # noqa: E741

# Исторические имена
UNITY = ONE
J = I
