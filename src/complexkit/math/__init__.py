"""
Core math modules для complexkit

Вещественные примитивы IEEE-754 и epsilon-параметры, на которых построена
комплексная арифметика.
"""

# Numerical Safeguards
from src.complexkit.math.numerical_safeguards import (
    # Epsilon constants
    EPS_COMPLEX_EQUALITY_ABS,
    EPS_COMPLEX_EQUALITY_REL,
    TWO_PI,
    # Classification
    is_valid_float,
    # IEEE-754 total primitives
    ieee_cos,
    ieee_divide,
    ieee_exp,
    ieee_fmod,
    ieee_log,
    ieee_sin,
    ieee_sqrt,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_COMPLEX_EQUALITY_ABS",
    "EPS_COMPLEX_EQUALITY_REL",
    "TWO_PI",
    # Numerical Safeguards — Classification
    "is_valid_float",
    # Numerical Safeguards — IEEE-754 total primitives
    "ieee_cos",
    "ieee_divide",
    "ieee_exp",
    "ieee_fmod",
    "ieee_log",
    "ieee_sin",
    "ieee_sqrt",
]
