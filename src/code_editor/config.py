"""Editor configuration, optionally read from ``CODE_EDITOR_*`` variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from code_editor.modes.base_mode import EditorMode

ENV_PREFIX = "CODE_EDITOR_"

_ENV_FIELDS = {
    "TAB_WIDTH": "tab_width",
    "PAGE_SIZE": "page_size",
    "HISTORY_LIMIT": "history_limit",
    "LANGUAGE": "language",
    "MODE": "initial_mode",
}
_POSITIVE = ("tab_width", "page_size", "history_limit")


def _coerce_mode(value: Any) -> EditorMode:
    if isinstance(value, EditorMode):
        return value
    try:
        return EditorMode(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown editor mode '{value}'") from None


@dataclass(frozen=True)
class EditorConfig:
    """Settings applied when a :class:`~code_editor.CodeEditor` is built.

    ``show_line_numbers`` is not read by the core; it is carried for renderers.
    """

    tab_width: int = 4
    page_size: int = 20
    history_limit: int = 100
    language: str = "julia"
    initial_mode: EditorMode = EditorMode.INSERT
    show_line_numbers: bool = True

    def __post_init__(self) -> None:
        for name in _POSITIVE:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        object.__setattr__(self, "initial_mode", _coerce_mode(self.initial_mode))
        object.__setattr__(self, "language", str(self.language).strip().lower())

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for suffix, name in _ENV_FIELDS.items():
            raw = env.get(f"{ENV_PREFIX}{suffix}")
            if raw is None or not raw.strip():
                continue
            if name in _POSITIVE:
                try:
                    values[name] = int(raw)
                except ValueError:
                    raise ValueError(f"{ENV_PREFIX}{suffix} must be an integer, got {raw!r}") from None
            else:
                values[name] = raw
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "EditorConfig":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(unknown)}")
        return replace(self, **overrides)


__all__ = ["ENV_PREFIX", "EditorConfig"]
