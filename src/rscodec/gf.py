# rscodec/gf.py
from __future__ import annotations

from typing import Tuple

import numpy as np


# GF(256) with primitive polynomial 0x11D (x^8 + x^4 + x^3 + x^2 + 1).
# Not a parameter: changing it changes every ECC byte we emit.
PRIM = 0x11D


def _build_tables(prim: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Exponent table (512 entries) and log table (256 entries).

    The exponent table is doubled so that log[a] + log[b] (each < 255) can index
    it directly, without a modulo on the multiply path.
    """
    exp = np.zeros(512, dtype=np.int32)
    log = np.zeros(256, dtype=np.int32)

    x = 1
    for i in range(255):
        exp[i] = x
        x <<= 1
        if x & 0x100:
            x ^= prim
    exp[255:510] = exp[:255]
    exp[510:] = exp[:2]
    log[exp[:255]] = np.arange(255, dtype=np.int32)

    exp.flags.writeable = False
    log.flags.writeable = False
    return exp, log


GF_EXP, GF_LOG = _build_tables(PRIM)

# plain-int views for the scalar hot path
_EXP: Tuple[int, ...] = tuple(GF_EXP.tolist())
_LOG: Tuple[int, ...] = tuple(GF_LOG.tolist())


def add(x: int, y: int) -> int:
    return x ^ y


def multiply(x: int, y: int) -> int:
    if x == 0 or y == 0:
        return 0
    return _EXP[_LOG[x] + _LOG[y]]


def divide(x: int, y: int) -> int:
    if y == 0:
        raise ZeroDivisionError("GF division by zero")
    if x == 0:
        return 0
    return _EXP[_LOG[x] + 255 - _LOG[y] % 255]


def power(x: int, n: int) -> int:
    """
    x**n in GF(256). Negative exponents are allowed (x != 0).
    """
    if x == 0:
        if n < 0:
            raise ZeroDivisionError("GF negative power of zero")
        return 1 if n == 0 else 0
    return _EXP[(_LOG[x] * n) % 255]


def inverse(x: int) -> int:
    if x == 0:
        raise ZeroDivisionError("GF inverse of zero")
    return _EXP[255 - _LOG[x]]
