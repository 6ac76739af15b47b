"""
Reed-Solomon error correction over GF(2^8) (primitive polynomial 0x11D).

High level: encode/decode payloads of any length, split into 255-byte blocks.
Low level: rs_encode/rs_decode work on a single block.
"""
from __future__ import annotations

from rscodec.block import rs_check, rs_decode, rs_encode
from rscodec.chunk import decode, decode_to_string, encode
from rscodec.errors import (
    CouldNotCorrect,
    CouldNotFindMagnitude,
    CouldNotLocateError,
    DataTooLong,
    DataTooShort,
    ErasureOutOfRange,
    InvalidSymbolCount,
    RSDefect,
    RSError,
    TooManyErasures,
    TooManyErrors,
)

__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "decode_to_string",
    "rs_encode",
    "rs_decode",
    "rs_check",
    "RSDefect",
    "RSError",
    "InvalidSymbolCount",
    "DataTooLong",
    "DataTooShort",
    "TooManyErasures",
    "ErasureOutOfRange",
    "TooManyErrors",
    "CouldNotLocateError",
    "CouldNotCorrect",
    "CouldNotFindMagnitude",
]
