"""Immutable complex values and the arithmetic used by the root solver."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """Complex number ``re + i*im`` identified with the plane point ``(re, im)``."""

    re: float
    im: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    @classmethod
    def from_complex(cls, value: complex) -> "Complex":
        value = complex(value)
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.re, self.im)

    def __add__(self, other: "Complex") -> "Complex":
        return add(self, other)

    def __sub__(self, other: "Complex") -> "Complex":
        return sub(self, other)

    def __mul__(self, other: "Complex") -> "Complex":
        return mul(self, other)

    def __abs__(self) -> float:
        return magnitude(self)

    def __repr__(self) -> str:
        return f"Complex(re={self.re!r}, im={self.im!r})"


ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)


def make(re: float, im: float = 0.0) -> Complex:
    return Complex(re, im)


def add(a: Complex, b: Complex) -> Complex:
    return Complex(a.re + b.re, a.im + b.im)


def sub(a: Complex, b: Complex) -> Complex:
    return Complex(a.re - b.re, a.im - b.im)


def mul(a: Complex, b: Complex) -> Complex:
    return Complex(a.re * b.re - a.im * b.im, a.re * b.im + a.im * b.re)


def scale(a: Complex, s: float) -> Complex:
    """Multiply ``a`` by the real factor ``s``."""

    return Complex(a.re * s, a.im * s)


def magnitude(a: Complex) -> float:
    # hypot avoids overflow/underflow of re**2 + im**2
    return math.hypot(a.re, a.im)


def conjugate(a: Complex) -> Complex:
    return Complex(a.re, -a.im)


def div(a: Complex, b: Complex, *, floor: float = 0.0) -> Complex:
    """Return ``a / b`` computed as ``a * conj(b) / max(|b|**2, floor)``.

    With the default ``floor`` of zero this is plain complex division and
    yields ``nan`` components for an exactly zero divisor instead of raising.
    """

    denom = max(b.re * b.re + b.im * b.im, floor)
    if denom == 0.0:
        return Complex(math.nan, math.nan)
    num = mul(a, conjugate(b))
    return Complex(num.re / denom, num.im / denom)


__all__ = [
    "Complex",
    "ONE",
    "ZERO",
    "add",
    "conjugate",
    "div",
    "magnitude",
    "make",
    "mul",
    "scale",
    "sub",
]
