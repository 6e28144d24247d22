"""
complexkit — complex-number arithmetic and elementary functions.

Immutable complex value type with numerically stable arithmetic (scaled
magnitude, Smith division, half-angle square root) and principal-branch
transcendental functions. Every operation is total over IEEE-754: NaN and
infinities propagate instead of raising.
"""

from src.complexkit.math import (
    EPS_COMPLEX_EQUALITY_ABS,
    EPS_COMPLEX_EQUALITY_REL,
)
from src.complexkit.domain import (
    I,
    J,
    ONE,
    UNITY,
    ZERO,
    ComplexNumber,
    compare_by_magnitude,
)
from src.complexkit.functions import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atanh,
    cos,
    cosh,
    exp,
    log,
    polar,
    pow,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

__all__ = [
    # Tolerances
    "EPS_COMPLEX_EQUALITY_ABS",
    "EPS_COMPLEX_EQUALITY_REL",
    # Value type
    "ComplexNumber",
    "compare_by_magnitude",
    "ZERO",
    "ONE",
    "UNITY",
    "I",
    "J",
    # Elementary functions
    "exp",
    "log",
    "sqrt",
    "pow",
    "polar",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    # Inverse functions
    "asin",
    "acos",
    "atan",
    "asinh",
    "acosh",
    "atanh",
]
