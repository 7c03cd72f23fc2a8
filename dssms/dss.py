"""Sanitizable signatures with multiple sanitizers (DSS-MS) over BLS12-381 G1.

The signer signs a message pair (m0, m) where m0 is fixed and m is bound
through a chameleon hash under the sanitizers' shared public key.  Each of
the k sanitizers holds a modulus n_i; the public value u_s is built by the
Chinese remainder theorem so that u_s mod n_i recovers the shared
chameleon-hash trapdoor.  Any sanitizer can then swap m for a new message
without invalidating the signature.
"""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass
from functools import reduce
from operator import mul

from dssms.curve import CURVE_ORDER, G1Point, g1_generator
from dssms.tools import (
    format_separator,
    hash_to_zp,
    int_to_bytes,
    invert,
    rand_below_order,
    rand_g1,
)

DEFAULT_SANITIZERS = 5
DEFAULT_BITS = 256
_SANITIZER_SLACK_BITS = 5


@dataclass(frozen=True)
class Params:
    """Public parameters: group order q, generator P and the CRT value u_s."""

    q: int
    p: G1Point
    u_s: int = 0


@dataclass(frozen=True)
class KeyPair:
    """A secret scalar and its public point sk * P."""

    sk: int
    pk: G1Point


@dataclass(frozen=True)
class Signature:
    """Signature on the fixed part m0 and the sanitizable part m."""

    m0: int
    m: int
    r: G1Point
    t: G1Point
    z: int
    s: int


def _rng(rng: random.Random | None) -> random.Random:
    return random.SystemRandom() if rng is None else rng


def are_coprime(a: int, b: int) -> bool:
    """True when gcd(a, b) == 1."""
    return math.gcd(a, b) == 1


def setup() -> Params:
    """Public parameters with the standard G1 generator and the curve order."""
    return Params(q=CURVE_ORDER, p=g1_generator(), u_s=0)


def _draw_modulus(rng: random.Random, bits: int) -> int:
    while True:
        n = rng.getrandbits(bits)
        if n.bit_length() >= bits - _SANITIZER_SLACK_BITS:
            return n | 1


def keygen(
    params: Params,
    k: int = DEFAULT_SANITIZERS,
    bits: int = DEFAULT_BITS,
    rng: random.Random | None = None,
) -> tuple[Params, KeyPair, list[int]]:
    """Generate the sanitizers' keys.

    Returns the parameters updated with u_s, the shared chameleon-hash key
    pair, and the k pairwise coprime odd moduli handed to the sanitizers.
    """
    if k < 0:
        raise ValueError("the number of sanitizers must not be negative")
    if bits <= _SANITIZER_SLACK_BITS:
        raise ValueError(f"bits must exceed {_SANITIZER_SLACK_BITS}")
    rng = _rng(rng)

    moduli: list[int] = []
    while len(moduli) < k:
        n = _draw_modulus(rng, bits)
        if all(are_coprime(n, other) for other in moduli):
            moduli.append(n)

    product = reduce(mul, moduli, 1)
    sk = rng.getrandbits(bits - _SANITIZER_SLACK_BITS)
    keypair = KeyPair(sk=sk, pk=g1_generator() * sk)

    u = 0
    for n in moduli:
        m_i = product // n
        u += invert(m_i, n) * m_i

    updated = Params(q=params.q, p=params.p, u_s=sk * u)
    return updated, keypair, moduli


def h_ch(m: int, t: G1Point) -> int:
    """Chameleon-hash challenge H_ch(m, T) in Z_q."""
    return hash_to_zp(int_to_bytes(m) + t.to_bytes(True), CURVE_ORDER)


def h(m0: int, r: G1Point, ch: G1Point) -> int:
    """Signature challenge H(m0, R, CH) in Z_q."""
    data = int_to_bytes(m0) + r.to_bytes(True) + ch.to_bytes(True)
    return hash_to_zp(data, CURVE_ORDER)


def _chameleon_hash(params: Params, m: int, t: G1Point, s: int, pk_s: G1Point) -> G1Point:
    return pk_s * h_ch(m, t) + params.p * s + t


def sign(
    params: Params,
    sk: int,
    pk_s: G1Point,
    rng: random.Random | None = None,
) -> Signature:
    """Sign a fresh random message pair (m0, m) with the signer's key sk."""
    rng = _rng(rng)
    r = rand_below_order(rng)
    s = rand_below_order(rng)
    t = rand_g1(rng)
    big_r = g1_generator() * r
    m0 = rand_below_order(rng)
    m = rand_below_order(rng)

    ch = _chameleon_hash(params, m, t, s, pk_s)
    c = h(m0, big_r, ch)
    z = (r + sk * c) % params.q
    return Signature(m0=m0, m=m, r=big_r, t=t, z=z, s=s)


def sanitize(
    params: Params,
    sigma: Signature,
    sk_i: int,
    pk_s: G1Point,
    rng: random.Random | None = None,
) -> Signature:
    """Replace the sanitizable message with a fresh one using modulus sk_i."""
    if sk_i == 0:
        raise ZeroDivisionError("sanitizer modulus must not be zero")
    rng = _rng(rng)
    sk_s = params.u_s % sk_i
    ch = _chameleon_hash(params, sigma.m, sigma.t, sigma.s, pk_s)

    m_p = rand_below_order(rng)
    k = rand_below_order(rng)
    t_p = ch - params.p * k

    e_p = h_ch(m_p, t_p)
    s_p = params.q - (e_p * sk_s) % params.q
    s_p = (k + s_p) % params.q
    return Signature(m0=sigma.m0, m=m_p, r=sigma.r, t=t_p, z=sigma.z, s=s_p)


def verify(params: Params, sigma: Signature, pk_s: G1Point, pk: G1Point) -> bool:
    """Check an original or sanitized signature against both public keys."""
    ch = _chameleon_hash(params, sigma.m, sigma.t, sigma.s, pk_s)
    c = h(sigma.m0, sigma.r, ch)
    left = params.p * sigma.z
    right = pk * c + sigma.r
    return left == right


def _format_point(point: G1Point) -> str:
    if point.is_infinity():
        return "infinity"
    return f"({point.x:096x},{point.y:096x})"


def format_params(params: Params) -> str:
    """Human-readable dump of the public parameters."""
    return "\n".join(
        [
            format_separator("showParams"),
            f"pp.P = {_format_point(params.p)}",
            f"pp.q = {params.q:x}",
            f"pp.u_s = {params.u_s:x}",
        ]
    )


def format_signature(sigma: Signature) -> str:
    """Human-readable dump of a signature."""
    return "\n".join(
        [
            format_separator("showSigma"),
            f"sigma.m0 = {sigma.m0:x}",
            f"sigma.m = {sigma.m:x}",
            f"sigma.R = {_format_point(sigma.r)}",
            f"sigma.z = {sigma.z:x}",
            f"sigma.s = {sigma.s:x}",
            f"sigma.T = {_format_point(sigma.t)}",
        ]
    )


def run_demo(
    k: int = DEFAULT_SANITIZERS,
    bits: int = DEFAULT_BITS,
    rng: random.Random | None = None,
) -> str:
    """Set up, sign, verify, and let every sanitizer sanitize; return the report."""
    rng = _rng(rng)
    params, san_keys, moduli = keygen(setup(), k, bits, rng)
    lines = [format_params(params)]

    signer_sk = rand_below_order(rng)
    signer = KeyPair(sk=signer_sk, pk=params.p * signer_sk)
    sigma = sign(params, signer.sk, san_keys.pk, rng)
    lines.append(format_signature(sigma))
    lines.append(str(int(verify(params, sigma, san_keys.pk, signer.pk))))

    lines.append(format_separator("Sanitizing"))
    for modulus in moduli:
        sanitized = sanitize(params, sigma, modulus, san_keys.pk, rng)
        lines.append(str(int(verify(params, sanitized, san_keys.pk, signer.pk))))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: run the demonstration and print its report."""
    parser = argparse.ArgumentParser(
        prog="dssms",
        description="Sign, verify and sanitize with the DSS-MS scheme.",
    )
    parser.add_argument("--sanitizers", type=int, default=DEFAULT_SANITIZERS,
                        help="number of sanitizers (default: %(default)s)")
    parser.add_argument("--bits", type=int, default=DEFAULT_BITS,
                        help="bit length of each sanitizer modulus (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for a reproducible, non-secure run")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        report = run_demo(args.sanitizers, args.bits, rng)
    except ValueError as exc:
        parser.error(str(exc))
    print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())