"""
===============================================================================
QUATALG - Quaternion Algebra
===============================================================================

A quaternion value type generic over its component type. Any numeric type
supporting copy, negation, addition, subtraction and multiplication can be
used for the components: int, fractions.Fraction, float, or numpy floating
scalars of any width. Operations that need more (square root, the 0.5
constant of the commutator, division) go through quatalg.numeric, which
keeps results inside the components' numeric family wherever possible.

Convention
----------
Scalar-first, Hamilton's original formulation:

    q = (real, imag_x, imag_y, imag_z) = real + imag_x*i + imag_y*j + imag_z*k

with the basis relations i^2 = j^2 = k^2 = ijk = -1.

Value semantics
---------------
Quaternions are immutable. Every operation returns a new instance; no
operation normalizes implicitly, and any four values form a valid
quaternion. Equality (==) is exact componentwise; use isclose() for
tolerance-aware comparison of floating-point quaternions.

Known edge cases
----------------
    - unit() of the zero quaternion divides by a zero magnitude. For float
      components the result is nan in every component (no exception).
    - divide_elementwise(s) divides by abs(s): a negative divisor does NOT
      flip the sign of the result.

References
----------
    [1] Hamilton, "On Quaternions", Philosophical Magazine, 1844.
    [2] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
===============================================================================
"""

import logging
from functools import total_ordering
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from quatalg import numeric
from quatalg.config import get_config
from quatalg.constants import COMPONENT_COUNT, HALF, IMAG_COMPONENT_COUNT
from quatalg.numeric import Scalar

logger = logging.getLogger(__name__)


@total_ordering
class Quaternion:
    """
    Quaternion a + bi + cj + dk with components of a homogeneous numeric type.

    Attributes
    ----------
    real : scalar
        Scalar (real) part.
    imag_x : scalar
        First imaginary component (i-axis).
    imag_y : scalar
        Second imaginary component (j-axis).
    imag_z : scalar
        Third imaginary component (k-axis).

    Examples
    --------
    >>> q1 = Quaternion(1.0, 2.0, 3.0, 4.0)
    >>> q2 = Quaternion(-1.0, -2.0, -3.0, -4.0)
    >>> print(q1 * q2)
    (28.0, -4.0, -6.0, -8.0)
    >>> Quaternion(1, 1, 1, 1).abs()
    2.0
    """

    __slots__ = ["_q"]

    # Make numpy scalars defer to __rmul__ instead of broadcasting over q
    __array_ufunc__ = None

    def __init__(self, real: Scalar, imag_x: Scalar, imag_y: Scalar,
                 imag_z: Scalar) -> None:
        """
        Create a quaternion from its four components.

        No validation and no normalization is performed.
        """
        self._q = (real, imag_x, imag_y, imag_z)

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def real(self) -> Scalar:
        """Scalar (real) part of the quaternion."""
        return self._q[0]

    @property
    def imag_x(self) -> Scalar:
        """First imaginary component (i-axis)."""
        return self._q[1]

    @property
    def imag_y(self) -> Scalar:
        """Second imaginary component (j-axis)."""
        return self._q[2]

    @property
    def imag_z(self) -> Scalar:
        """Third imaginary component (k-axis)."""
        return self._q[3]

    @property
    def imag(self) -> Tuple[Scalar, Scalar, Scalar]:
        """
        Imaginary part as an ordered 3-tuple (imag_x, imag_y, imag_z).

        Returns
        -------
        tuple
            Always of length 3.
        """
        return self._q[1:]

    @property
    def components(self) -> Tuple[Scalar, Scalar, Scalar, Scalar]:
        """All four components (real, imag_x, imag_y, imag_z)."""
        return self._q

    # =========================================================================
    # STATIC FACTORY METHODS
    # =========================================================================

    @staticmethod
    def zero() -> 'Quaternion':
        """The additive identity (0, 0, 0, 0)."""
        return Quaternion(0, 0, 0, 0)

    @staticmethod
    def identity() -> 'Quaternion':
        """The multiplicative identity (1, 0, 0, 0)."""
        return Quaternion(1, 0, 0, 0)

    @staticmethod
    def from_scalar(value: Scalar) -> 'Quaternion':
        """Embed a real number as (value, 0, 0, 0) in the same numeric family."""
        zero = value * 0
        return Quaternion(value, zero, zero, zero)

    @staticmethod
    def from_vector(v: Sequence[Scalar]) -> 'Quaternion':
        """
        Embed a 3-vector as the pure quaternion (0, v_x, v_y, v_z).

        For pure quaternions the commutator product equals the vector cross
        product: Quaternion.cross_product(from_vector(a), from_vector(b))
        has imaginary part a x b.

        Parameters
        ----------
        v : sequence of scalar
            Three components. numpy arrays are accepted.

        Raises
        ------
        ValueError
            If v does not have exactly three components.
        """
        values = list(v)
        if len(values) != IMAG_COMPONENT_COUNT:
            raise ValueError(
                f"Vector must have {IMAG_COMPONENT_COUNT} components, "
                f"got {len(values)}"
            )
        return Quaternion(values[0] * 0, values[0], values[1], values[2])

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def conj(self) -> 'Quaternion':
        """
        Return the quaternion conjugate.

        For q = (r, x, y, z) the conjugate is (r, -x, -y, -z). Conjugation is
        an involution: q.conj().conj() == q.
        """
        r, x, y, z = self._q
        return Quaternion(r, -x, -y, -z)

    @staticmethod
    def grassman_product(a: 'Quaternion', b: 'Quaternion') -> 'Quaternion':
        """
        Hamilton (Grassman) product a * b.

        Quaternion multiplication is associative and distributes over
        addition, but it is NOT commutative: in general a * b != b * a.

            (a1 + b1*i + c1*j + d1*k) * (a2 + b2*i + c2*j + d2*k) =

            (a1*a2 - b1*b2 - c1*c2 - d1*d2) +
            (a1*b2 + b1*a2 + c1*d2 - d1*c2) i +
            (a1*c2 - b1*d2 + c1*a2 + d1*b2) j +
            (a1*d2 + b1*c2 - c1*b2 + d1*a2) k

        Parameters
        ----------
        a : Quaternion
            Left-hand factor.
        b : Quaternion
            Right-hand factor.

        Returns
        -------
        Quaternion
            The product a * b.
        """
        a1, b1, c1, d1 = a._q
        a2, b2, c2, d2 = b._q

        w = a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2
        x = a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2
        y = a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2
        z = a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2

        return Quaternion(w, x, y, z)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """Hamilton product self * other."""
        return Quaternion.grassman_product(self, other)

    @staticmethod
    def cross_product(a: 'Quaternion', b: 'Quaternion') -> 'Quaternion':
        """
        Half commutator 0.5 * (a*b - b*a).

        For two pure quaternions this is the 3D vector cross product of
        their imaginary parts, embedded as a pure quaternion. It vanishes
        exactly when a and b commute, which is what exchangeable() tests.

        The factor 0.5 is converted into the numeric family of the
        commutator, so integer and Fraction inputs yield exact Fraction
        results and numpy float32 inputs stay float32.
        """
        commutator = (Quaternion.grassman_product(a, b)
                      - Quaternion.grassman_product(b, a))
        half = numeric.from_float(HALF, commutator.real)
        return commutator._scale(half)

    def exchangeable(self, other: 'Quaternion',
                     rel_tol: Optional[float] = None) -> bool:
        """
        True if self and other commute under the Hamilton product.

        Tests whether cross_product(self, other) is the zero quaternion.
        Exact components (int/Fraction) must be exactly zero. Float
        components count as zero when no larger than rel_tol * |self| * |other|,
        the scale of the products the commutator was computed from.

        Parameters
        ----------
        other : Quaternion
            Quaternion to test against.
        rel_tol : float, optional
            Relative tolerance for float components. Defaults to the active
            configuration's rel_tol.
        """
        cross = Quaternion.cross_product(self, other)
        if all(numeric.is_exact(c) for c in cross):
            return all(c == 0 for c in cross)

        scale = self.abs() * other.abs()
        return all(numeric.is_negligible(c, scale, rel_tol=rel_tol) for c in cross)

    def norm_squared(self) -> Scalar:
        """Sum of squared components r^2 + x^2 + y^2 + z^2 (exact for exact types)."""
        r, x, y, z = self._q
        return r * r + x * x + y * y + z * z

    def abs(self) -> Scalar:
        """
        Euclidean norm (magnitude) sqrt(r^2 + x^2 + y^2 + z^2).

        Returns
        -------
        scalar
            A float for Python and exact component types; numpy float
            components keep their width.

        Raises
        ------
        OverflowError
            If exact components are too large to convert to float
            (e.g. Quaternion(10**200, 0, 0, 0)); arbitrary precision is not
            supported.
        """
        return numeric.sqrt(self.norm_squared())

    def divide_elementwise(self, scalar: Scalar) -> 'Quaternion':
        """
        Divide every component by abs(scalar).

        The absolute value of the divisor is taken first, so a negative
        divisor scales the magnitude without flipping any sign:

            Quaternion(2, -4, 6, 8).divide_elementwise(-2) == (1, -2, 3, 4)

        A zero divisor produces inf/nan components for float quaternions and
        raises ZeroDivisionError when both quaternion and divisor are exact.
        """
        if scalar < 0:
            logger.debug("Negative divisor %s: dividing by its absolute value", scalar)
        divisor = abs(scalar)

        if divisor == 0 and not numeric.is_exact(divisor):
            logger.warning(
                "Elementwise division of %s by zero; components become inf/nan",
                self,
            )

        return Quaternion(*(numeric.divide(c, divisor) for c in self._q))

    def unit(self) -> 'Quaternion':
        """
        Return the quaternion scaled to unit magnitude.

        The zero quaternion has no direction; normalizing it yields nan
        components rather than raising.
        """
        return self.divide_elementwise(self.abs())

    def inverse(self) -> 'Quaternion':
        """
        Multiplicative inverse q^-1 = conj(q) / |q|^2.

        q * q.inverse() is the identity for any non-zero q. Exact component
        types give an exact inverse.
        """
        return self.conj().divide_elementwise(self.norm_squared())

    def _scale(self, scalar: Scalar) -> 'Quaternion':
        return Quaternion(*(c * scalar for c in self._q))

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: Union['Quaternion', Scalar]) -> 'Quaternion':
        """
        Multiplication operator.

        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar     -> component-wise scaling
        """
        if isinstance(other, Quaternion):
            return Quaternion.grassman_product(self, other)
        elif numeric.is_scalar(other):
            return self._scale(other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> 'Quaternion':
        """Right-multiplication by a scalar: scalar * Quaternion."""
        if numeric.is_scalar(other):
            return Quaternion(*(other * c for c in self._q))
        return NotImplemented

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise addition of two quaternions."""
        if isinstance(other, Quaternion):
            return Quaternion(*(a + b for a, b in zip(self._q, other._q)))
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        """Component-wise subtraction of two quaternions."""
        if isinstance(other, Quaternion):
            return Quaternion(*(a - b for a, b in zip(self._q, other._q)))
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        """Negate all components."""
        return Quaternion(*(-c for c in self._q))

    def __abs__(self) -> Scalar:
        """Builtin abs(q): the Euclidean norm."""
        return self.abs()

    def __eq__(self, other: object) -> bool:
        """
        Exact componentwise equality.

        Floating-point round-off makes this fragile for computed float
        quaternions; isclose() is the tolerance-aware alternative.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self._q == other._q

    def __lt__(self, other: 'Quaternion') -> bool:
        """Lexicographic ordering on (real, imag_x, imag_y, imag_z)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self._q < other._q

    def __hash__(self) -> int:
        return hash(self._q)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._q)

    def __len__(self) -> int:
        return COMPONENT_COUNT

    def __repr__(self) -> str:
        """
        Unambiguous string representation for debugging.

        Format: Quaternion(real=..., imag_x=..., imag_y=..., imag_z=...)
        """
        r, x, y, z = self._q
        return (f"Quaternion(real={r!r}, imag_x={x!r}, "
                f"imag_y={y!r}, imag_z={z!r})")

    def __str__(self) -> str:
        """Human-readable tuple form (real, x, y, z)."""
        r, x, y, z = self._q
        return f"({r}, {x}, {y}, {z})"

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def is_zero(self, abs_tol: Optional[float] = None) -> bool:
        """True if every component is zero under its type's comparison strategy."""
        return all(numeric.is_zero(c, abs_tol=abs_tol) for c in self._q)

    def isclose(self, other: 'Quaternion',
                rel_tol: Optional[float] = None,
                abs_tol: Optional[float] = None) -> bool:
        """
        Componentwise comparison using each component type's strategy.

        Exact components must match exactly; float components are compared
        with the given tolerances, defaulting to the active ToleranceConfig.

        Parameters
        ----------
        other : Quaternion
            Quaternion to compare against.
        rel_tol : float, optional
            Relative tolerance for inexact components.
        abs_tol : float, optional
            Absolute tolerance for inexact components.

        Returns
        -------
        bool
            True if all four component pairs compare close.
        """
        if not isinstance(other, Quaternion):
            raise TypeError(
                f"Cannot compare Quaternion with {type(other).__name__}"
            )
        return all(numeric.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
                   for a, b in zip(self._q, other._q))

    def is_unit(self, tolerance: Optional[float] = None) -> bool:
        """
        Check if this quaternion has unit norm.

        Parameters
        ----------
        tolerance : float, optional
            Acceptable deviation from 1.0. Defaults to the active
            configuration's unit_tolerance.
        """
        if tolerance is None:
            tolerance = get_config().unit_tolerance
        return bool(abs(float(self.abs()) - 1.0) <= tolerance)

    def to_array(self, dtype=None) -> np.ndarray:
        """Components as a 4-element numpy array [real, imag_x, imag_y, imag_z]."""
        return np.array(self._q, dtype=dtype)

    def copy(self) -> 'Quaternion':
        """Return a copy of this quaternion."""
        return Quaternion(*self._q)
