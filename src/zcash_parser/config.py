"""
Codec configuration.

Resolution order for the decimal point count:
  explicit override > $ZCASH_PARSER_DECIMAL_POINT > JSON config file > default (8)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .core.constants import DEFAULT_DECIMAL_POINT
from .core.exc import ConfigError

ENV_DECIMAL_POINT = "ZCASH_PARSER_DECIMAL_POINT"


@dataclass(frozen=True)
class CodecConfig:
    decimal_point: int = DEFAULT_DECIMAL_POINT


def _as_decimal_point(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"decimal_point from {source} must be an integer, got {value!r}")
    try:
        d = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"decimal_point from {source} must be an integer, got {value!r}")
    if d < 0:
        raise ConfigError(f"decimal_point from {source} must be >= 0, got {d}")
    return d


def load_codec_config(
    path: Optional[Union[str, Path]] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    decimal_point: Optional[int] = None,
) -> CodecConfig:
    """Build a CodecConfig from an override, the environment and an optional JSON file."""
    if decimal_point is not None:
        return CodecConfig(_as_decimal_point(decimal_point, "override"))

    env = os.environ if env is None else env
    raw_env = env.get(ENV_DECIMAL_POINT)
    if raw_env:
        return CodecConfig(_as_decimal_point(raw_env, ENV_DECIMAL_POINT))

    if path is not None:
        cfg_path = Path(path)
        try:
            payload = json.loads(cfg_path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ConfigError(f"config file not found: {cfg_path}")
        except json.JSONDecodeError as exc:
            raise ConfigError(f"config file is not valid JSON: {cfg_path} ({exc})")
        if not isinstance(payload, dict):
            raise ConfigError(f"config file must hold a JSON object: {cfg_path}")
        if "decimal_point" in payload:
            return CodecConfig(_as_decimal_point(payload["decimal_point"], str(cfg_path)))

    return CodecConfig()


__all__ = [
    "ENV_DECIMAL_POINT",
    "CodecConfig",
    "load_codec_config",
]
