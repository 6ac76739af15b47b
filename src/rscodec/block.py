# rscodec/block.py
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from rscodec import gf, poly
from rscodec.errors import (
    CouldNotCorrect,
    CouldNotFindMagnitude,
    CouldNotLocateError,
    DataTooLong,
    DataTooShort,
    ErasureOutOfRange,
    InvalidSymbolCount,
    TooManyErasures,
    TooManyErrors,
)


BLOCK_SIZE = 255

# --------------------------------------------------------------------------------------
# Conventions:
#   - Generator roots: alpha^0 .. alpha^(nsym-1), alpha = 2
#   - A block is read as a descending polynomial: block[0] is the highest degree
#   - Syndromes are stored behind a leading zero: synd[i] = r(alpha^(i-1)), i=1..nsym
# --------------------------------------------------------------------------------------


def rs_generator_poly(nsym: int) -> List[int]:
    """Generator polynomial prod_{i<nsym} (x - alpha^i); length nsym + 1."""
    g = [1]
    for i in range(nsym):
        g = poly.multiply(g, [1, gf.power(2, i)])
    return g


def rs_encode(msg: bytes, *, nsym: int) -> bytes:
    """
    Systematic RS encode: codeword = msg || parity (nsym bytes).
    Requires len(msg) + nsym <= 255.
    """
    _check_nsym(nsym)
    if len(msg) + nsym > BLOCK_SIZE:
        raise DataTooLong(f"data is too long: max is {BLOCK_SIZE - nsym} bytes for nsym={nsym}")

    gen = rs_generator_poly(nsym)
    res = list(msg) + [0] * nsym

    # Synthetic division; the generator is monic so gen[0] is skipped.
    for i in range(len(msg)):
        coef = res[i]
        if coef != 0:
            for j in range(1, len(gen)):
                res[i + j] ^= gf.multiply(gen[j], coef)

    # res holds quotient || remainder; put the message back in front.
    res[:len(msg)] = msg
    return bytes(res)


def rs_check(codeword: bytes, *, nsym: int) -> bool:
    """True if `codeword` is consistent (all syndromes zero)."""
    _check_nsym(nsym)
    _check_block_len(len(codeword), nsym)
    return max(_syndromes(list(codeword), nsym)) == 0


def rs_decode(codeword: bytes, *, nsym: int, erase_pos: Sequence[int] = ()) -> bytes:
    """
    Decode a codeword (msg||parity), repairing errors and erasures.
    Returns the corrected message bytes (parity stripped).

    `erase_pos` lists known-corrupt byte positions; each costs one parity byte,
    each error at an unknown position costs two.

    Raises RSDefect subclasses on bad arguments and RSError subclasses when the
    block cannot be repaired.
    """
    _check_nsym(nsym)
    _check_block_len(len(codeword), nsym)
    erase_pos = list(erase_pos)
    if len(erase_pos) > nsym:
        raise TooManyErasures(f"too many erasures to correct: {len(erase_pos)} > nsym={nsym}")
    for p in erase_pos:
        if not 0 <= p < len(codeword):
            raise ErasureOutOfRange(f"erasure position {p} outside block of length {len(codeword)}")

    cw = list(codeword)
    # Zeroed erasures make the remaining math simpler.
    for p in erase_pos:
        cw[p] = 0

    synd = _syndromes(cw, nsym)
    if max(synd) != 0:
        fsynd = _forney_syndromes(synd, erase_pos, len(cw))
        err_loc = _error_locator(fsynd, nsym, erase_count=len(erase_pos))
        err_pos = _find_errors(err_loc[::-1], len(cw))
        if not err_pos and not erase_pos:
            raise CouldNotLocateError("could not locate error")

        cw = _correct_errata(cw, synd, erase_pos + err_pos)

        synd = _syndromes(cw, nsym)
        if max(synd) != 0:
            raise CouldNotCorrect("could not correct message")

    return bytes(cw[:len(cw) - nsym])


def _check_nsym(nsym: int) -> None:
    if not isinstance(nsym, int) or isinstance(nsym, bool):
        raise InvalidSymbolCount("nsym must be int")
    if not (1 <= nsym < BLOCK_SIZE):
        raise InvalidSymbolCount(f"nsym must be in [1,{BLOCK_SIZE - 1}], got {nsym}")


def _check_block_len(n: int, nsym: int) -> None:
    if n > BLOCK_SIZE:
        raise DataTooLong(f"codeword is too long: {n} > {BLOCK_SIZE}")
    if n < nsym:
        raise DataTooShort(f"codeword of {n} bytes is shorter than nsym={nsym}")


def _syndromes(cw: List[int], nsym: int) -> List[int]:
    """
    synd[i] = cw(alpha^(i-1)) for i = 1..nsym, all evaluations at once.

    Each non-zero byte c at degree d contributes alpha^(log c + (i-1)*d) to
    synd[i]; the contributions are xor-reduced per row.
    synd[0] stays zero; it keeps the evaluator aligned in _correct_errata.
    """
    synd = [0] * (nsym + 1)
    c = np.asarray(cw, dtype=np.int32)
    nz = np.flatnonzero(c)
    if nz.size == 0:
        return synd

    deg = len(cw) - 1 - nz
    rows = np.arange(nsym, dtype=np.int32)[:, None]
    idx = gf.GF_LOG[c[nz]][None, :] + (rows * deg[None, :]) % 255
    synd[1:] = np.bitwise_xor.reduce(gf.GF_EXP[idx], axis=1).tolist()
    return synd


def _forney_syndromes(synd: List[int], erase_pos: Sequence[int], n: int) -> List[int]:
    """Syndromes with the (zeroed) erasures folded out, so BM only sees unknown errors."""
    fsynd = synd[1:]
    for p in erase_pos:
        x = gf.power(2, n - 1 - p)
        for j in range(len(fsynd) - 1):
            fsynd[j] = gf.multiply(fsynd[j], x) ^ fsynd[j + 1]
    return fsynd


def _error_locator(synd: List[int], nsym: int, *, erase_count: int) -> List[int]:
    """Berlekamp-Massey: minimal error locator for the unknown-position errors."""
    err_loc = [1]
    old_loc = [1]

    shift = len(synd) - nsym if len(synd) > nsym else 0
    for i in range(nsym - erase_count):
        k = i + shift
        delta = synd[k]
        for j in range(1, len(err_loc)):
            delta ^= gf.multiply(err_loc[-(j + 1)], synd[k - j])

        old_loc.append(0)

        if delta != 0:
            if len(old_loc) > len(err_loc):
                new_loc = poly.scale(old_loc, delta)
                old_loc = poly.scale(err_loc, gf.inverse(delta))
                err_loc = new_loc
            err_loc = poly.add(err_loc, poly.scale(old_loc, delta))

    lead = 0
    while lead < len(err_loc) - 1 and err_loc[lead] == 0:
        lead += 1
    err_loc = err_loc[lead:]

    errs = len(err_loc) - 1
    if 2 * errs - erase_count > nsym:
        raise TooManyErrors(f"too many errors to correct: {errs} errors, {erase_count} erasures, nsym={nsym}")
    return err_loc


def _find_errors(err_loc_rev: List[int], n: int) -> List[int]:
    # Brute force over every position: a root at alpha^i is byte n-1-i.
    err_pos: List[int] = []
    for i in range(n):
        if poly.evaluate(err_loc_rev, gf.power(2, i)) == 0:
            err_pos.append(n - 1 - i)
    return err_pos


def _errata_locator(coef_pos: Sequence[int]) -> List[int]:
    loc = [1]
    for p in coef_pos:
        loc = poly.multiply(loc, poly.add([1], [gf.power(2, p), 0]))
    return loc


def _error_evaluator(synd: List[int], err_loc: List[int], nsym: int) -> List[int]:
    prod = poly.multiply(synd, err_loc)
    return prod[len(prod) - 1 - nsym:]


def _correct_errata(cw: List[int], synd: List[int], err_pos: Sequence[int]) -> List[int]:
    """Forney algorithm: compute magnitudes at `err_pos` and xor them into `cw`."""
    coef_pos = [len(cw) - 1 - p for p in err_pos]
    err_loc = _errata_locator(coef_pos)
    err_eval = _error_evaluator(synd[::-1], err_loc, len(err_loc) - 1)

    X = [gf.power(2, p - 255) for p in coef_pos]

    e = [0] * len(cw)
    for i, xi in enumerate(X):
        xi_inv = gf.inverse(xi)

        # formal derivative of the errata locator, evaluated at xi_inv
        loc_prime = 1
        for j, xj in enumerate(X):
            if j != i:
                loc_prime = gf.multiply(loc_prime, 1 ^ gf.multiply(xi_inv, xj))
        if loc_prime == 0:
            raise CouldNotFindMagnitude("could not find error magnitude")

        y = gf.multiply(xi, poly.evaluate(err_eval, xi_inv))
        e[err_pos[i]] = gf.divide(y, loc_prime)

    return poly.add(cw, e)
