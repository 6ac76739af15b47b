from __future__ import annotations

import random
from typing import Iterable


def random_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(256) for _ in range(n))


def corrupt_bytes(rng: random.Random, cw: bytes, positions: Iterable[int]) -> bytes:
    """
    Return a copy of `cw` with every byte in `positions` changed.
    The xor delta is never zero, so each position really is corrupt.
    """
    out = bytearray(cw)
    for p in positions:
        out[p] ^= rng.randrange(1, 256)
    return bytes(out)


def bump_bytes(cw: bytes, positions: Iterable[int]) -> bytes:
    """Increment each byte at `positions` (mod 256)."""
    out = bytearray(cw)
    for p in positions:
        out[p] = (out[p] + 1) & 0xFF
    return bytes(out)
