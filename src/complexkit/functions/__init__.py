"""
Трансцендентные функции комплексного аргумента.

Элементарные функции (exp, log, sqrt, pow, тригонометрия, гиперболические)
и обратные к ним на главных ветвях.
"""

# Elementary functions
from src.complexkit.functions.elementary import (
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

# Inverse functions
from src.complexkit.functions.inverse import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atanh,
)

__all__ = [
    # Elementary — Exponential / logarithmic
    "exp",
    "log",
    "sqrt",
    "pow",
    "polar",
    # Elementary — Trigonometric / hyperbolic
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    # Inverse
    "asin",
    "acos",
    "atan",
    "asinh",
    "acosh",
    "atanh",
]
