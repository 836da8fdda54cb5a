from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError


logger = logging.getLogger(__name__)

ENV_EXTENDED_SPAN_JOINING = "SPANNED_EXTENDED_SPAN_JOINING"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class Settings:
    """Build-wide resolver settings.

    extended_span_joining: fold every token's span into the result. When off,
    a node resolves to the span of its first token only.
    """

    extended_span_joining: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        raw = env.get(ENV_EXTENDED_SPAN_JOINING)
        if raw is None:
            return cls()
        return cls(extended_span_joining=_parse_bool(ENV_EXTENDED_SPAN_JOINING, raw))


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{name}: expected one of on/off, true/false, yes/no, 1/0; got {raw!r}")


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings; read from the environment on first use, then fixed."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
        logger.debug("loaded settings from environment: %s", _SETTINGS)
    return _SETTINGS


def configure(settings: Settings) -> None:
    """Fix the process-wide settings. Must happen before the first resolution."""
    global _SETTINGS
    if _SETTINGS is not None and _SETTINGS != settings:
        raise ConfigError(f"settings are already fixed to {_SETTINGS}; cannot change to {settings}")
    _SETTINGS = settings


def reset_settings() -> None:
    global _SETTINGS
    _SETTINGS = None
