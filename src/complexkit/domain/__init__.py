"""
Domain models and value objects.

Contains the immutable ComplexNumber value type and its named constants.
"""

from src.complexkit.domain.complex_number import (
    I,
    J,
    ONE,
    UNITY,
    ZERO,
    ComplexNumber,
    compare_by_magnitude,
)

__all__ = [
    # ComplexNumber model
    "ComplexNumber",
    "compare_by_magnitude",
    # Constants
    "ZERO",
    "ONE",
    "UNITY",
    "I",
    "J",
]
