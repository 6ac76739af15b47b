from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from rscodec import chunk


@dataclass(frozen=True)
class Config:
    """
    RS(255, 255-nsym) block code operating on bytes.

    nsym: parity bytes per block. Corrects up to nsym//2 unknown byte errors per
          block, or up to nsym erasures, or any mix with 2*errors + erasures <= nsym.
    k: message bytes per block = 255 - nsym (the last block may be shorter)
    """
    nsym: int = 32


def tx(data: bytes, *, cfg: Any) -> bytes:
    """
    Encode arbitrary-length data into concatenated RS codewords.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")

    nsym = _get_nsym(cfg)
    return chunk.encode(bytes(data), nsym=nsym)


def encoded_length(length: int, *, cfg: Any) -> int:
    return chunk.encoded_length(length, nsym=_get_nsym(cfg))


def rx(data: bytes, *, cfg: Any, erase_pos: Sequence[int] = ()) -> bytes:
    """
    Decode concatenated RS codewords back into message bytes.
    Raises rscodec.errors.RSError if any block is uncorrectable.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")

    nsym = _get_nsym(cfg)
    return chunk.decode(bytes(data), nsym=nsym, erase_pos=erase_pos)


def _get_nsym(cfg: Any) -> int:
    nsym = getattr(cfg, "nsym", None)
    if nsym is None:
        raise AttributeError("cfg missing required attribute: nsym")
    if not isinstance(nsym, int) or isinstance(nsym, bool):
        raise TypeError("cfg.nsym must be int")
    if not (1 <= nsym <= 254):
        raise ValueError("cfg.nsym must be in [1,254]")
    return nsym
