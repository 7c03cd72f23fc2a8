"""Random sampling, integer encoding, modular helpers and hashing to Z_q."""

from __future__ import annotations

import hashlib
import random
from collections.abc import Sequence

from dssms.curve import CURVE_ORDER, G1Point, G2Point, g1_generator, g2_generator

SMALL_RANDOM_BOUND = 100_000_000
"""Upper bound (inclusive) of the values drawn by rand_small."""

_SEPARATOR = "-" * 50
_BIG_BYTES = 48
_SCALAR_HEX_DIGITS = 64
_DIGEST_PAD = bytes(_BIG_BYTES - hashlib.sha256().digest_size)

_system_rng = random.SystemRandom()


def _rng(rng: random.Random | None) -> random.Random:
    return _system_rng if rng is None else rng


def rand_scalar(rng: random.Random | None = None) -> int:
    """Uniform scalar in [0, CURVE_ORDER)."""
    return _rng(rng).randrange(CURVE_ORDER)


def rand_g1(rng: random.Random | None = None) -> G1Point:
    """Random point of G1, a random multiple of the generator."""
    return g1_generator() * rand_scalar(rng)


def rand_g2(rng: random.Random | None = None) -> G2Point:
    """Random point of G2, a random multiple of the generator."""
    return g2_generator() * rand_scalar(rng)


def rand_below_order(rng: random.Random | None = None) -> int:
    """Uniform integer in [1, CURVE_ORDER]."""
    return _rng(rng).randrange(CURVE_ORDER) + 1


def rand_small(rng: random.Random | None = None) -> int:
    """Uniform integer in [1, SMALL_RANDOM_BOUND]."""
    return _rng(rng).randrange(SMALL_RANDOM_BOUND) + 1


def int_to_bytes(n: int) -> bytes:
    """Minimal big-endian encoding of |n|; zero encodes as empty bytes."""
    n = abs(n)
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def bytes_to_int(data: bytes) -> int:
    """Big-endian bytes to a non-negative int; empty input gives zero."""
    return int.from_bytes(bytes(data), "big")


def invert(a: int, m: int) -> int:
    """Inverse of a modulo |m|, or 0 if it does not exist."""
    modulus = abs(m)
    if modulus == 0:
        raise ZeroDivisionError("modulus must not be zero")
    try:
        return pow(a, -1, modulus)
    except ValueError:
        return 0


def lagrange_coefficients(x: Sequence[int], y: Sequence[int], modulus: int) -> list[int]:
    """Coefficients, constant term first, of the polynomial through (x_i, y_i) mod modulus.

    Trailing zero coefficients are dropped, keeping at least one.
    Raises ValueError for mismatched or empty input, or repeated x values.
    """
    if len(x) != len(y) or not x:
        raise ValueError("x and y must be non-empty and of equal length")
    result = [0] * len(x)
    for i, (xi, yi) in enumerate(zip(x, y)):
        basis = [1]
        denom = 1
        for j, xj in enumerate(x):
            if i == j:
                continue
            # Multiply basis by (X - xj).
            shifted = [0] + basis
            scaled = [-c * xj for c in basis] + [0]
            basis = [(s + t) % modulus for s, t in zip(shifted, scaled)]
            denom = denom * (xi - xj) % modulus
        denom_inv = invert(denom, modulus)
        if denom == 0 or denom_inv == 0 and modulus != 1:
            raise ValueError("modular inverse does not exist")
        factor = yi * denom_inv % modulus
        for k, coeff in enumerate(basis):
            result[k] = (result[k] + coeff * factor) % modulus
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result


def eval_poly(poly: Sequence[int], x: int, modulus: int) -> int:
    """Value at x, modulo modulus, of the polynomial with coefficients poly (constant first)."""
    result = 0
    for coeff in reversed(poly):
        result = (result * x + coeff) % modulus
    return result


def lagrange_basis(x: Sequence[int], q: int) -> list[int]:
    """Values at zero of the Lagrange basis polynomials for points x, modulo q.

    A basis whose denominator has no inverse modulo q yields 0.
    """
    lambdas = []
    for i, xi in enumerate(x):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(x):
            if i != j:
                numerator = numerator * -xj % q
                denominator = denominator * ((xi - xj) % q) % q
        lambdas.append(numerator * invert(denominator, q) % q)
    return lambdas


def _to_big(value: int) -> int:
    """Scalar as loaded into a 256-bit slot: the leading 64 hex digits are kept."""
    if value < 0:
        raise ValueError("value must be non-negative")
    digits = format(value, "x").rjust(_SCALAR_HEX_DIGITS, "0")
    return int(digits[:_SCALAR_HEX_DIGITS], 16)


def hash_to_zp(data: bytes, q: int) -> int:
    """SHA-256 of data read as the top 32 of 48 big-endian bytes, reduced mod q."""
    digest = hashlib.sha256(bytes(data)).digest()
    return int.from_bytes(digest + _DIGEST_PAD, "big") % q


def hash_int_to_zp(value: int, q: int) -> int:
    """Hash a non-negative integer, encoded in 48 bytes, to Z_q."""
    encoded = _to_big(value).to_bytes(_BIG_BYTES, "big")
    return hash_to_zp(encoded, _to_big(q))


def hash_to_point(value: int, q: int) -> G1Point:
    """Hash a non-negative integer to a point of G1."""
    return g1_generator() * hash_int_to_zp(value, q)


def format_separator(text: str) -> str:
    """Separator line used in diagnostic output."""
    return f"{_SEPARATOR}\t {text} \t{_SEPARATOR}"