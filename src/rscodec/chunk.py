# rscodec/chunk.py
from __future__ import annotations

import logging
from typing import List, Sequence, Union

from rscodec.block import BLOCK_SIZE, _check_nsym, rs_decode, rs_encode
from rscodec.errors import ErasureOutOfRange, RSError

log = logging.getLogger(__name__)


def chunk_count(length: int, *, nsym: int) -> int:
    """Number of RS blocks needed to carry `length` message bytes."""
    _check_nsym(nsym)
    k = BLOCK_SIZE - nsym
    return (length + k - 1) // k


def encoded_length(length: int, *, nsym: int) -> int:
    return length + nsym * chunk_count(length, nsym=nsym)


def encode(data: Union[bytes, bytearray, str], *, nsym: int, encoding: str = "utf-8") -> bytes:
    """
    Encode arbitrary-length data into concatenated RS blocks.

    Each block carries up to 255 - nsym message bytes followed by nsym parity
    bytes; only the final block may be shorter. No padding, no length header:
    the caller keeps track of nsym.
    """
    if isinstance(data, str):
        data = data.encode(encoding)
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("encode: data must be bytes-like or str")

    _check_nsym(nsym)
    k = BLOCK_SIZE - nsym

    b = bytes(data)
    out = bytearray()
    for i in range(0, len(b), k):
        out += rs_encode(b[i:i + k], nsym=nsym)

    log.debug("encoded %d bytes into %d blocks (nsym=%d)", len(b), chunk_count(len(b), nsym=nsym), nsym)
    return bytes(out)


def decode(data: Union[bytes, bytearray], *, nsym: int, erase_pos: Sequence[int] = ()) -> bytes:
    """
    Decode concatenated RS blocks (255 bytes each, last one possibly shorter).

    `erase_pos` holds erasure positions relative to the whole of `data`; each
    block receives the ones falling inside it.
    Raises an RSError subclass if any block is uncorrectable.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("decode: data must be bytes-like")

    _check_nsym(nsym)
    b = bytes(data)
    for p in erase_pos:
        if not 0 <= p < len(b):
            raise ErasureOutOfRange(f"erasure position {p} outside data of length {len(b)}")

    out = bytearray()
    for idx, start in enumerate(range(0, len(b), BLOCK_SIZE)):
        block = b[start:start + BLOCK_SIZE]
        local = _local_erasures(erase_pos, start, len(block))
        try:
            out += rs_decode(block, nsym=nsym, erase_pos=local)
        except RSError as e:
            log.debug("block %d (offset %d) uncorrectable: %s", idx, start, e)
            raise

    log.debug("decoded %d bytes into %d message bytes (nsym=%d)", len(b), len(out), nsym)
    return bytes(out)


def decode_to_string(
    data: Union[bytes, bytearray],
    *,
    nsym: int,
    erase_pos: Sequence[int] = (),
    encoding: str = "utf-8",
) -> str:
    """Same as decode(), returning the repaired message as text."""
    return decode(data, nsym=nsym, erase_pos=erase_pos).decode(encoding)


def _local_erasures(erase_pos: Sequence[int], start: int, size: int) -> List[int]:
    return [p - start for p in erase_pos if start <= p < start + size]
