"""Cayley and Klein octonions via Cayley-Dickson doubling of quaternions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import ClassVar
from typing import Self

import numpy as np
import quaternion

from octo.coordinates import cartesian_to_hyperspherical
from octo.coordinates import hyperspherical_to_cartesian
from octo.render import format_octonion

logger = logging.getLogger(__name__)

# Type alias for real dilation (float, int, np.float64, etc.)
Scalar = float | int | np.number

# Absolute tolerance used by isclose(); == is always exact.
DEFAULT_TOLERANCE = 1e-8

CAYLEY_SYMBOLS = ("", "i", "j", "k", "m", "n", "p", "q")
KLEIN_SYMBOLS = ("", "i", "j", "k", "s", "t", "u", "v")


class ZeroDivisorError(ValueError):
    """Inversion or division by the zero octonion."""


def _quat_copy(q: quaternion.quaternion) -> quaternion.quaternion:
    """Independent copy of a quaternion."""
    return quaternion.quaternion(*quaternion.as_float_array(q))


def _signed_inf(sign: int) -> float:
    return np.inf if sign >= 0 else -np.inf


def _quat_inf(a: int, b: int, c: int, d: int) -> quaternion.quaternion:
    """Quaternion whose components are infinities with the given signs."""
    return quaternion.quaternion(_signed_inf(a), _signed_inf(b), _signed_inf(c), _signed_inf(d))


def _quat_nan() -> quaternion.quaternion:
    return quaternion.quaternion(np.nan, np.nan, np.nan, np.nan)


class _DoubledOctonion:
    """Ordered pair (p, q) of quaternions read as p + q*e.

    The doubling sign _EPSILON fixes the algebra: +1 gives the classical
    (Cayley) octonions, -1 the split (Klein) octonions. All values are
    immutable; every operation returns a new instance of the receiver's class.
    """

    __slots__ = ("_p", "_q")

    _EPSILON: ClassVar[int]
    _SYMBOLS: ClassVar[tuple[str, ...]]

    def __init__(
        self,
        a: float = 0.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 0.0,
        e: float = 0.0,
        f: float = 0.0,
        g: float = 0.0,
        h: float = 0.0,
    ) -> None:
        """Build from eight real coordinates, split into two quaternion halves."""
        self._p = quaternion.quaternion(float(a), float(b), float(c), float(d))
        self._q = quaternion.quaternion(float(e), float(f), float(g), float(h))

    @classmethod
    def _from_halves(cls, p: quaternion.quaternion, q: quaternion.quaternion) -> Self:
        value = cls.__new__(cls)
        value._p = _quat_copy(p)
        value._q = _quat_copy(q)
        return value

    @classmethod
    def from_coordinates(
        cls,
        a: float,
        b: float,
        c: float,
        d: float,
        e: float,
        f: float,
        g: float,
        h: float,
    ) -> Self:
        """Build from eight real coordinates."""
        return cls(a, b, c, d, e, f, g, h)

    new = from_coordinates

    @classmethod
    def from_array(cls, array: Iterable[float] | np.ndarray) -> Self:
        """Build from any 8-element array-like."""
        array = np.asarray(array, dtype=np.float64).ravel()
        if array.size != 8:
            error_message = f"Array must be of size 8; got {array.size}."
            raise ValueError(error_message)
        return cls(*array)

    @classmethod
    def zero(cls) -> Self:
        """Additive identity."""
        return cls()

    @classmethod
    def unit(cls) -> Self:
        """Multiplicative identity (1, 0, 0, 0, 0, 0, 0, 0)."""
        return cls(1.0)

    @classmethod
    def basis(cls, index: int) -> Self:
        """Basis unit number `index`, where 0 is the real unit."""
        if not 0 <= index < 8:
            error_message = f"Basis index must be in [0, 7]; got {index}."
            raise IndexError(error_message)
        components = np.zeros(8, dtype=np.float64)
        components[index] = 1.0
        return cls(*components)

    @classmethod
    def infinity(cls, a: int, b: int, c: int, d: int, e: int, f: int, g: int, h: int) -> Self:
        """Octonionic infinity; each sign >= 0 gives +inf, otherwise -inf."""
        return cls._from_halves(_quat_inf(a, b, c, d), _quat_inf(e, f, g, h))

    @classmethod
    def nan(cls) -> Self:
        """Octonionic NaN."""
        return cls._from_halves(_quat_nan(), _quat_nan())

    @classmethod
    def from_hyperspherical(cls, radius: float, *angles: float) -> Self:
        """Build from a radius and seven hyperspherical angles."""
        if len(angles) != 7:
            error_message = f"Expected 7 angles; got {len(angles)}."
            raise ValueError(error_message)
        return cls.from_array(hyperspherical_to_cartesian(radius, angles))

    @property
    def halves(self) -> tuple[quaternion.quaternion, quaternion.quaternion]:
        """Copies of the two quaternion halves (p, q)."""
        return _quat_copy(self._p), _quat_copy(self._q)

    @property
    def real(self) -> float:
        """Real component."""
        return float(self._p.w)

    @property
    def coordinates(self) -> tuple[float, ...]:
        """The eight real coordinates."""
        return tuple(float(x) for x in self.to_array())

    def to_array(self) -> np.ndarray:
        """Return the octonion as an (8,) array."""
        return np.concatenate(
            [quaternion.as_float_array(self._p), quaternion.as_float_array(self._q)],
        )

    def to_hyperspherical(self) -> tuple[float, ...]:
        """Radius followed by seven angles; see octo.coordinates."""
        return tuple(float(x) for x in cartesian_to_hyperspherical(self.to_array()))

    def _check_compatible(self, other: _DoubledOctonion) -> None:
        if type(other) is not type(self):
            error_message = (
                f"Cannot combine {type(self).__name__} with {type(other).__name__}."
            )
            raise TypeError(error_message)

    def equals(self, other: Self) -> bool:
        """Exact coordinate-wise equality."""
        self._check_compatible(other)
        return bool(self._p == other._p) and bool(self._q == other._q)

    def isclose(self, other: Self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Equality up to an absolute tolerance on every coordinate."""
        self._check_compatible(other)
        return bool(np.allclose(self.to_array(), other.to_array(), rtol=0.0, atol=tolerance))

    def copy(self) -> Self:
        """Return a copy of this octonion."""
        return self._from_halves(self._p, self._q)

    def is_inf(self) -> bool:
        """True if any component is infinite."""
        return bool(self._p.isinf() or self._q.isinf())

    def is_nan(self) -> bool:
        """True if any component is NaN and none is infinite."""
        if self.is_inf():
            return False
        return bool(self._p.isnan() or self._q.isnan())

    def add(self, other: Self) -> Self:
        """Add another octonion to this octonion."""
        self._check_compatible(other)
        return self._from_halves(self._p + other._p, self._q + other._q)

    def sub(self, other: Self) -> Self:
        """Subtract another octonion from this octonion."""
        self._check_compatible(other)
        return self._from_halves(self._p - other._p, self._q - other._q)

    def dilate(self, a: Scalar) -> Self:
        """Multiply every coordinate by the real `a`."""
        a = float(a)
        return self._from_halves(self._p * a, self._q * a)

    def neg(self) -> Self:
        """Return the negation of this octonion."""
        return self.dilate(-1)

    def scale_right(self, a: quaternion.quaternion) -> Self:
        """Multiply both halves by the quaternion `a` on the right."""
        return self._from_halves(self._p * a, self._q * a)

    def scale_left(self, a: quaternion.quaternion) -> Self:
        """Multiply both halves by the quaternion `a` on the left."""
        return self._from_halves(a * self._p, a * self._q)

    def conjugate(self) -> Self:
        """Return (conj(p), -q)."""
        return self._from_halves(self._p.conjugate(), -self._q)

    def multiply(self, other: Self) -> Self:
        """Noncommutative, nonassociative product.

        (p, q)(r, s) = (pr - eps * conj(s) q, sp + q conj(r))
        """
        self._check_compatible(other)
        p, q = _quat_copy(self._p), _quat_copy(self._q)
        r, s = _quat_copy(other._p), _quat_copy(other._q)
        first = p * r - (s.conjugate() * q) * float(self._EPSILON)
        second = s * p + q * r.conjugate()
        return self._from_halves(first, second)

    def commutator(self, other: Self) -> Self:
        """[x, y] = xy - yx."""
        return self.multiply(other).sub(other.multiply(self))

    def associator(self, x: Self, y: Self) -> Self:
        """(w, x, y) = (wx)y - w(xy) with w = self."""
        return self.multiply(x).multiply(y).sub(self.multiply(x.multiply(y)))

    def quadrance(self) -> float:
        """Norm form Quad(p) + eps * Quad(q)."""
        return float(self._p.norm() + self._EPSILON * self._q.norm())

    def _reciprocal_quadrance(self) -> float:
        quad = self.quadrance()
        if quad == 0.0:
            logger.warning("Quadrance of %s is zero (isotropic); result is not finite.", self)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0) / np.float64(quad))

    def inverse(self) -> Self:
        """Return the inverse. Raises ZeroDivisorError for the zero octonion."""
        if self.equals(self.zero()):
            error_message = "inverse of zero"
            logger.error(error_message)
            raise ZeroDivisorError(error_message)
        return self.conjugate().dilate(self._reciprocal_quadrance())

    def quotient(self, other: Self) -> Self:
        """Return self * conj(other) / quadrance(other)."""
        self._check_compatible(other)
        if other.equals(other.zero()):
            error_message = "denominator is zero"
            logger.error(error_message)
            raise ZeroDivisorError(error_message)
        return self.multiply(other.conjugate()).dilate(other._reciprocal_quadrance())

    def render(self) -> str:
        """Text form, e.g. "(1+2i+3j+4k+5m+6n+7p+8q)"."""
        return format_octonion(self.coordinates, self._SYMBOLS)

    def __str__(self) -> str:
        """Return the text form of this octonion."""
        return self.render()

    def __repr__(self) -> str:
        """Representation of the octonion."""
        args = ", ".join(repr(x) for x in self.coordinates)
        return f"{type(self).__name__}({args})"

    def __eq__(self, other: object) -> bool:
        """Exact equality with another octonion of the same flavour."""
        if type(other) is not type(self):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other: Self) -> Self:
        """Add this octonion to another octonion."""
        if not isinstance(other, _DoubledOctonion):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        """Subtract another octonion from this octonion."""
        if not isinstance(other, _DoubledOctonion):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Self:
        """Return the negation of this octonion."""
        return self.neg()

    def __mul__(self, other: Scalar | quaternion.quaternion | Self) -> Self:
        """Octonion product, right quaternion scaling, or real dilation."""
        if isinstance(other, _DoubledOctonion):
            return self.multiply(other)
        if isinstance(other, quaternion.quaternion):
            return self.scale_right(other)
        if isinstance(other, (float, int, np.number)):
            return self.dilate(other)
        return NotImplemented

    def __rmul__(self, other: Scalar | quaternion.quaternion) -> Self:
        """Left quaternion scaling or real dilation."""
        if isinstance(other, quaternion.quaternion):
            return self.scale_left(other)
        if isinstance(other, (float, int, np.number)):
            return self.dilate(other)
        return NotImplemented

    def __truediv__(self, other: Scalar | Self) -> Self:
        """Octonion quotient or division by a real."""
        if isinstance(other, _DoubledOctonion):
            return self.quotient(other)
        if isinstance(other, (float, int, np.number)):
            with np.errstate(divide="ignore"):
                reciprocal = np.float64(1.0) / np.float64(other)
            return self.dilate(reciprocal)
        return NotImplemented


class Cayley(_DoubledOctonion):
    """Cayley octonion (classical octonion), positive-definite quadrance."""

    __slots__ = ()

    _EPSILON = 1
    _SYMBOLS = CAYLEY_SYMBOLS


class Klein(_DoubledOctonion):
    """Klein octonion (split-octonion), indefinite quadrance.

    Nonzero isotropic values (quadrance 0) exist. Inverting or dividing by one
    is not an error: the result carries Inf/NaN coordinates.
    """

    __slots__ = ()

    _EPSILON = -1
    _SYMBOLS = KLEIN_SYMBOLS


def commutator(x: _DoubledOctonion, y: _DoubledOctonion) -> _DoubledOctonion:
    """Commutator [x, y] = x*y - y*x."""
    return x.commutator(y)


def associator(
    w: _DoubledOctonion,
    x: _DoubledOctonion,
    y: _DoubledOctonion,
) -> _DoubledOctonion:
    """Associator (w, x, y) = (w*x)*y - w*(x*y)."""
    return w.associator(x, y)
