"""
===============================================================================
QUATALG - Numeric Capability Layer
===============================================================================
The quaternion type is generic over its component type. Plain arithmetic
(+, -, *, unary -) is delegated to the components themselves; everything
that depends on WHICH numeric family a component belongs to lives here:

    - comparison strategy    exact (==) for rationals, tolerance for floats
    - constant conversion    0.5 becomes Fraction(1, 2), np.float32(0.5), ...
    - square root            keeps numpy float width, exact types go via float64
    - division               silent inf/nan for floats, exact for rationals

Numeric families
----------------
    exact   : numbers.Rational  (int, fractions.Fraction, numpy integers)
    inexact : everything else   (float, np.float32, np.float64, ...)
===============================================================================
"""

import numbers
from fractions import Fraction
from typing import Optional, Union

import numpy as np

from quatalg.config import get_config

Scalar = Union[int, float, Fraction, np.number]


def is_exact(value) -> bool:
    """True if the value belongs to an exact (rational) numeric family."""
    return isinstance(value, numbers.Rational)


def is_scalar(value) -> bool:
    """True if the value is accepted as a real scalar operand."""
    return isinstance(value, numbers.Real)


def _as_inexact(value):
    # numpy floats keep their width, everything else becomes a Python float
    if isinstance(value, np.floating):
        return value
    return float(value)


def from_float(literal: float, like: Scalar) -> Scalar:
    """
    Convert a float constant into the numeric family of ``like``.

    Parameters
    ----------
    literal : float
        Constant to convert (e.g. 0.5). Must be exactly representable for
        exact families to receive the intended value.
    like : scalar
        A component whose type decides the result family.

    Returns
    -------
    scalar
        ``Fraction(literal)`` for exact families, ``type(like)(literal)`` for
        numpy floats and ``float(literal)`` otherwise.
    """
    if isinstance(like, np.floating):
        return type(like)(literal)
    if is_exact(like):
        return Fraction(literal)
    return float(literal)


def sqrt(value: Scalar) -> Scalar:
    """
    Square root. numpy floats keep their width; other inputs yield float.

    Exact inputs are converted to a Python float first, so integers beyond
    the float range (about 1.8e308) raise OverflowError. Arbitrary-precision
    roots are out of scope.
    """
    if isinstance(value, np.floating):
        return np.sqrt(value)
    return float(np.sqrt(float(value)))


def divide(numerator: Scalar, denominator: Scalar) -> Scalar:
    """
    Divide two scalars following the family's failure semantics.

    Exact / exact stays exact (Fraction) and raises ZeroDivisionError on a
    zero denominator. If either side is inexact, the division is done with
    numpy under suppressed floating-point warnings, so a zero denominator
    yields inf or nan instead of raising.
    """
    if is_exact(numerator) and is_exact(denominator):
        return Fraction(numerator) / Fraction(denominator)

    n = _as_inexact(numerator)
    d = _as_inexact(denominator)
    with np.errstate(divide='ignore', invalid='ignore'):
        result = np.divide(n, d)

    if isinstance(n, np.floating) or isinstance(d, np.floating):
        return result
    return float(result)


def isclose(a: Scalar, b: Scalar,
            rel_tol: Optional[float] = None,
            abs_tol: Optional[float] = None) -> bool:
    """
    Compare two scalars using the strategy of their numeric family.

    Exact pairs compare with ==. Any inexact operand switches to a
    tolerance comparison; tolerances default to the active ToleranceConfig.
    """
    if is_exact(a) and is_exact(b):
        return a == b

    config = get_config()
    rtol = config.rel_tol if rel_tol is None else rel_tol
    atol = config.abs_tol if abs_tol is None else abs_tol
    return bool(np.isclose(_as_inexact(a), _as_inexact(b), rtol=rtol, atol=atol))


def is_zero(value: Scalar, abs_tol: Optional[float] = None) -> bool:
    """True if the value is the additive identity under its family's strategy."""
    return isclose(value, 0, rel_tol=0.0, abs_tol=abs_tol)


def is_negligible(value: Scalar, scale: Scalar,
                  rel_tol: Optional[float] = None) -> bool:
    """
    True if the value is zero relative to the magnitude ``scale``.

    Exact values must equal 0. Inexact values pass when
    |value| <= rel_tol * |scale|, so the test tracks the size of the
    operands that produced the value rather than a fixed absolute floor.
    rel_tol defaults to the active configuration.
    """
    if is_exact(value):
        return value == 0

    rtol = get_config().rel_tol if rel_tol is None else rel_tol
    return bool(abs(_as_inexact(value)) <= rtol * abs(_as_inexact(scale)))
