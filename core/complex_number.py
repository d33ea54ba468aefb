"""
core/complex_number.py

Immutable complex value type.

Every operation returns a new Complex; nothing is modified in place.
Complex implements __complex__, so values can be handed straight to the
FFT engine (which stores sequences as numpy complex128 arrays).
"""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Complex:
    re: float
    im: float = 0.0

    # numpy scalars and arrays on the left defer to __radd__ / __rmul__
    __array_ufunc__ = None

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        z = complex(z)
        return cls(z.real, z.imag)

    @property
    def real(self) -> float:
        return self.re

    @property
    def imag(self) -> float:
        return self.im

    @property
    def magnitude(self) -> float:
        return math.hypot(self.re, self.im)

    @property
    def phase(self) -> float:
        return math.atan2(self.im, self.re)

    def plus(self, other: "Complex") -> "Complex":
        return Complex(self.re + other.re, self.im + other.im)

    def minus(self, other: "Complex") -> "Complex":
        return Complex(self.re - other.re, self.im - other.im)

    def times(self, other: "Complex") -> "Complex":
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        a, b = self.re, self.im
        c, d = other.re, other.im
        return Complex(a * c - b * d, a * d + b * c)

    def conjugate(self) -> "Complex":
        return Complex(self.re, -self.im)

    def scale(self, k: Number) -> "Complex":
        return Complex(k * self.re, k * self.im)

    def __add__(self, other):
        return self.plus(_coerce(other))

    __radd__ = __add__

    def __sub__(self, other):
        return self.minus(_coerce(other))

    def __rsub__(self, other):
        return _coerce(other).minus(self)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return self.scale(other)
        return self.times(_coerce(other))

    __rmul__ = __mul__

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        if self.im == 0:
            return f"{self.re}"
        if self.re == 0:
            return f"{self.im}i"
        if self.im < 0:
            return f"{self.re} - {-self.im}i"
        return f"{self.re} + {self.im}i"


def _coerce(value) -> Complex:
    if isinstance(value, Complex):
        return value
    return Complex.from_builtin(value)


# --- functional forms ---
def add(a: Complex, b: Complex) -> Complex:
    return a.plus(b)


def sub(a: Complex, b: Complex) -> Complex:
    return a.minus(b)


def mul(a: Complex, b: Complex) -> Complex:
    return a.times(b)


def conjugate(a: Complex) -> Complex:
    return a.conjugate()


def scale(a: Complex, k: Number) -> Complex:
    return a.scale(k)


def magnitude(a: Complex) -> float:
    return a.magnitude
