from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None  # None keeps the compact one-line form
    sort_keys: bool = False
    ensure_ascii: bool = False


DEFAULT_CODEC_CONFIG = CodecConfig()
