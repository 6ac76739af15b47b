# rscodec/poly.py
from __future__ import annotations

from typing import List, Sequence

from rscodec import gf
from rscodec.gf import _EXP, _LOG


# Polynomials are lists of GF(256) coefficients, highest degree FIRST:
#   [a0, a1, ..., aN] = a0*x^N + a1*x^(N-1) + ... + aN
# Leading zeros are kept; callers trim when the degree matters.


def add(p: Sequence[int], q: Sequence[int]) -> List[int]:
    r = [0] * max(len(p), len(q))
    # align right
    off = len(r) - len(p)
    for i, c in enumerate(p):
        r[i + off] = c
    off = len(r) - len(q)
    for i, c in enumerate(q):
        r[i + off] ^= c
    return r


def multiply(p: Sequence[int], q: Sequence[int]) -> List[int]:
    r = [0] * (len(p) + len(q) - 1)
    log_q = [_LOG[c] for c in q]
    for i, a in enumerate(p):
        if a == 0:
            continue
        log_a = _LOG[a]
        for j, b in enumerate(q):
            if b == 0:
                continue
            r[i + j] ^= _EXP[log_a + log_q[j]]
    return r


def scale(p: Sequence[int], x: int) -> List[int]:
    return [gf.multiply(c, x) for c in p]


def evaluate(poly: Sequence[int], x: int) -> int:
    """Horner evaluation of `poly` at `x`."""
    if len(poly) == 0:
        raise ValueError("cannot evaluate an empty polynomial")
    y = poly[0]
    for c in poly[1:]:
        y = gf.multiply(y, x) ^ c
    return y
