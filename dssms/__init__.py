"""Sanitizable signatures with multiple sanitizers over BLS12-381.

Submodules: fields (Fp2/Fp6/Fp12), curve (G1 and G2 points), pairing
(optimal ate pairing), tools (sampling, hashing, interpolation) and dss
(the scheme and its command-line entry point).
"""

__version__ = "0.1.0"
__all__ = ["fields", "curve", "pairing", "tools", "dss"]