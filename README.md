# dssms

A sanitizable signature scheme with multiple sanitizers, built on the
BLS12-381 elliptic curve. A signer signs a message made of a fixed part
`m0` and a modifiable part `m`. The modifiable part is bound through a
chameleon hash under the sanitizers' shared public key. Each of the `k`
sanitizers holds an odd modulus `n_i`; the public value `u_s` is built
with the Chinese remainder theorem so that `u_s mod n_i` gives back the
shared chameleon-hash trapdoor. Any sanitizer can therefore swap `m` for
a new message, and the signature still verifies against the signer's
public key.

Everything is plain Python with no dependencies outside the standard
library: the extension fields, G1/G2 points, the optimal ate pairing,
hashing to Z_q and the scheme itself. The code is written to be
readable, not fast, and it is not constant-time. Use it for experiments
and teaching, not in production.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Command line

```
dssms
```

This runs the whole flow and prints what it computes: the public
parameters (`pp.P`, `pp.q`, `pp.u_s`), a signature (`sigma.m0`,
`sigma.m`, `sigma.R`, `sigma.z`, `sigma.s`, `sigma.T`), then `1` or `0`
for the verification of the original signature and, after a
`Sanitizing` separator, one `1` or `0` per sanitizer for the
verification of its sanitized signature. Numbers are printed in
hexadecimal.

Options:

- `--sanitizers N`: number of sanitizers (default 5).
- `--bits B`: bit length of each sanitizer modulus (default 256; must be
  greater than 5).
- `--seed S`: seed a `random.Random` for a reproducible run. Such a run
  is not secure; without a seed the system's secure generator is used.

## Library use

```python
import random

from dssms.dss import keygen, sanitize, setup, sign, verify
from dssms.tools import rand_below_order

rng = random.SystemRandom()

params, sanitizer, moduli = keygen(setup(), 5, 256, rng)

signer_sk = rand_below_order(rng)
signer_pk = params.p * signer_sk

sigma = sign(params, signer_sk, sanitizer.pk, rng)
assert verify(params, sigma, sanitizer.pk, signer_pk)

for n_i in moduli:
    sigma_p = sanitize(params, sigma, n_i, sanitizer.pk, rng)
    assert verify(params, sigma_p, sanitizer.pk, signer_pk)
```

`keygen` does not change the `Params` it is given. It returns new
parameters holding `u_s`, the sanitizers' shared `KeyPair`, and the list
of pairwise coprime moduli. Every function that draws random values
takes an optional `rng` (any `random.Random`). When it is left out, the
system's secure generator is used.

### Modules

- `dssms.fields`: the extension fields `Fp2`, `Fp6` and `Fp12` with
  arithmetic operators, `inverse`, `conjugate`, `frobenius`, `is_zero`
  and (for `Fp12`) `is_one`.
- `dssms.curve`: `G1Point` and `G2Point` (addition, negation, scalar
  multiplication, `is_infinity`), the generators `g1_generator()` and
  `g2_generator()`, and `G1Point.to_bytes` / `G1Point.from_bytes` for
  compressed or uncompressed encoding.
- `dssms.pairing`: `pairing(p, q)`, the reduced optimal ate pairing. It
  raises `ValueError` for a degenerate result.
- `dssms.tools`: helpers.
  - Random values: `rand_scalar`, `rand_g1`, `rand_g2`,
    `rand_below_order`, `rand_small`.
  - Integer and byte conversion: `int_to_bytes`, `bytes_to_int`.
  - Modular inverse returning 0 when none exists: `invert`.
  - Lagrange interpolation: `lagrange_coefficients`, `eval_poly`,
    `lagrange_basis`.
  - SHA-256 hashing into Z_q and onto G1: `hash_to_zp`,
    `hash_int_to_zp`, `hash_to_point`.
  - `format_separator` for the separator lines in the report.
- `dssms.dss`: the scheme.
  - Data classes: `Params`, `KeyPair`, `Signature`.
  - Functions: `are_coprime`, `setup`, `keygen`, `h_ch`, `h`, `sign`,
    `sanitize`, `verify`.
  - Report helpers: `format_params`, `format_signature`, `run_demo`.
  - `main`, the command-line entry point.

## What it does not do

- `sign` and `sanitize` draw their messages at random. There is no way
  to sign or substitute a message of your own choosing.
- Keys, parameters and signatures are not saved or loaded. Only G1
  points have a byte encoding; there is no serialization for whole
  signatures or key sets.
- The command line only runs the demonstration above. It has no
  separate commands for key generation, signing or verification.
- The pairing and the G2 helpers are provided but the scheme does not
  use them.

## Tests

```
pytest
```