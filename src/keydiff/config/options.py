from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from ..core.equality import ValueEquality, json_equal

ENV_DETECT_RENAMES = "KEYDIFF_DETECT_RENAMES"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_flag(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUTHY:
            return True
        if normalized in _FALSY:
            return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class DiffOptions:
    detect_renames: bool = True
    equality: ValueEquality = field(default=json_equal, repr=False)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any] | None) -> DiffOptions:
        """Build options from a settings block such as ``settings["diff"]``."""

        if not config:
            return cls()
        raw = config.get("detect_renames")
        if raw is None:
            return cls()
        return cls(detect_renames=_parse_flag(raw, name="detect_renames"))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DiffOptions:
        env = os.environ if environ is None else environ
        raw = env.get(ENV_DETECT_RENAMES)
        if raw is None or not raw.strip():
            return cls()
        return cls(detect_renames=_parse_flag(raw, name=ENV_DETECT_RENAMES))


__all__ = ["DiffOptions", "ENV_DETECT_RENAMES"]
