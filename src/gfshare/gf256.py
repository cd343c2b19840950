# SPDX-FileCopyrightText: 2025 gfshare contributors
# SPDX-License-Identifier: MIT

"""Arithmetic over GF(256) with the AES field polynomial.

Elements are plain integers in ``[0, 255]`` read as polynomials over GF(2)
modulo ``x^8 + x^4 + x^3 + x + 1`` (``0x11b``). Multiplication and division go
through log/exp tables generated from the primitive element ``0x03``; the
tables are built once at import and never modified.

Polynomials are byte sequences where index ``i`` holds the coefficient of
``x^i``.
"""
from __future__ import annotations

from typing import Callable, Sequence, Tuple

from .errors import DivisionByZero

POLYNOMIAL = 0x11B
GENERATOR = 0x03
ORDER = 255  # size of the multiplicative group

RandomSource = Callable[[int], bytes]
Point = Tuple[int, int]


def _build_tables() -> tuple[bytes, bytes]:
    exp = bytearray(256)
    log = bytearray(256)
    x = 1
    for i in range(ORDER):
        exp[i] = x
        log[x] = i
        # x * 3 == x * 2 + x, reduced modulo the field polynomial
        doubled = x << 1
        if doubled & 0x100:
            doubled ^= POLYNOMIAL
        x = doubled ^ x
    exp[ORDER] = exp[0]
    return bytes(exp), bytes(log)


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
    return a ^ b


def sub(a: int, b: int) -> int:
    # characteristic 2: subtraction is addition
    return a ^ b


def mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP[(LOG[a] + LOG[b]) % ORDER]


def div(a: int, b: int) -> int:
    """Divide ``a`` by ``b``; raises :class:`DivisionByZero` when ``b`` is zero."""

    if b == 0:
        raise DivisionByZero("Division by the zero element of GF(256)")
    if a == 0:
        return 0
    return EXP[(LOG[a] - LOG[b] + ORDER) % ORDER]


def inverse(a: int) -> int:
    return div(1, a)


def power(a: int, e: int) -> int:
    """Raise ``a`` to the non-negative integer power ``e``."""

    if e < 0:
        raise ValueError("Exponent must be non-negative")
    if e == 0:
        return 1
    if a == 0:
        return 0
    return EXP[(LOG[a] * e) % ORDER]


def degree(poly: Sequence[int]) -> int:
    """Return the index of the highest nonzero coefficient (0 for the zero polynomial)."""

    for i in range(len(poly) - 1, 0, -1):
        if poly[i] != 0:
            return i
    return 0


def evaluate(poly: Sequence[int], x: int) -> int:
    """Evaluate ``poly`` at ``x`` using Horner's method."""

    result = 0
    for coefficient in reversed(poly):
        result = mul(result, x) ^ coefficient
    return result


def generate(random: RandomSource, degree: int, constant: int) -> bytearray:
    """Return a random polynomial of exactly ``degree`` with ``constant`` at x^0.

    Coefficients ``1..degree`` come from ``random``; the leading one is drawn
    again until it is nonzero.
    """

    if degree < 0:
        raise ValueError("Degree must be non-negative")
    if not 0 <= constant <= 255:
        raise ValueError(f"{constant} is not an element of GF(256)")
    poly = bytearray(degree + 1)
    poly[0] = constant
    if degree == 0:
        return poly
    drawn = random(degree)
    if len(drawn) != degree:
        raise ValueError(f"Randomness source returned {len(drawn)} bytes, expected {degree}")
    poly[1:] = drawn
    while poly[degree] == 0:
        poly[degree] = random(1)[0]
    return poly


def interpolate(points: Sequence[Point]) -> int:
    """Return the value at x=0 of the polynomial passing through ``points``.

    The x values must be pairwise distinct; a repeated x divides by zero.
    """

    result = 0
    for i, (xi, yi) in enumerate(points):
        weight = 1
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            weight = mul(weight, div(xj, xj ^ xi))
        result ^= mul(yi, weight)
    return result


__all__ = [
    "EXP",
    "LOG",
    "POLYNOMIAL",
    "GENERATOR",
    "add",
    "sub",
    "mul",
    "div",
    "inverse",
    "power",
    "degree",
    "evaluate",
    "generate",
    "interpolate",
]
