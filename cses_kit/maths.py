"""Modular arithmetic helpers."""

MOD = 1_000_000_007


def modpow(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` modulo 1e9+7.

    Zero to the power zero is taken to be 1. Negative exponents are rejected.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, MOD)