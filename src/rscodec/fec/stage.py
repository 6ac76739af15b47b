from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence
import importlib
import pkgutil


_REQUIRED = ("Config", "tx", "rx", "encoded_length")


@dataclass(frozen=True)
class Config:
    """
    FEC stage config.

    module: name of a module under rscodec/fec/modules (e.g. "rs255")
    module_cfg: that module's Config instance, or None for its defaults
    """
    module: str = "rs255"
    module_cfg: Any = None


def available_modules() -> list[str]:
    pkg = importlib.import_module(f"{__package__}.modules")
    return sorted(m.name for m in pkgutil.iter_modules(pkg.__path__) if not m.name.startswith("_"))


def _resolve(cfg: Config):
    name = getattr(cfg, "module", None)
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    mod = importlib.import_module(f"{__package__}.modules.{name}")

    missing = [attr for attr in _REQUIRED if not hasattr(mod, attr)]
    if missing:
        raise AttributeError(f"fec module '{name}' missing {', '.join(missing)}")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


def encoded_length(length: int, *, cfg: Config) -> int:
    """Size of tx() output for a payload of `length` bytes."""
    mod, module_cfg = _resolve(cfg)
    return mod.encoded_length(length, cfg=module_cfg)


def tx(data: bytes, *, cfg: Config) -> bytes:
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("tx: data must be bytes-like")
    mod, module_cfg = _resolve(cfg)
    return mod.tx(bytes(data), cfg=module_cfg)


def rx(data: bytes, *, cfg: Config, erase_pos: Sequence[int] = ()) -> bytes:
    """
    Inverse of tx(). erase_pos are known-bad byte offsets into `data`.
    Raises rscodec.errors.RSError when the damage exceeds the parity budget.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("rx: data must be bytes-like")
    mod, module_cfg = _resolve(cfg)
    return mod.rx(bytes(data), cfg=module_cfg, erase_pos=erase_pos)
