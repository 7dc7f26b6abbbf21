"""Dataclass-driven configuration for the mdview renderer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

__all__ = [
    "RenderOptions",
    "ViewConfig",
]

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class RenderOptions:
    """Switches that deviate from the reference dialect. Both default off.

    escape_html: escape ``&``, ``<`` and ``>`` in the source before rules run.
    protect_code: keep fenced and inline code bodies out of later rules.
    """

    escape_html: bool = False
    protect_code: bool = False

    @classmethod
    def from_env(cls) -> "RenderOptions":
        return cls(
            escape_html=_env_bool("MDVIEW_ESCAPE_HTML"),
            protect_code=_env_bool("MDVIEW_PROTECT_CODE"),
        )


@dataclass
class ViewConfig:
    """Primary configuration entry point for the CLI and preview page."""

    render: RenderOptions = field(default_factory=RenderOptions.from_env)
    theme: str = field(default_factory=lambda: os.getenv("MDVIEW_THEME", "dark"))
    highlight_code: bool = field(
        default_factory=lambda: _env_bool("MDVIEW_HIGHLIGHT_CODE")
    )
    compact: bool = field(default_factory=lambda: _env_bool("MDVIEW_COMPACT"))
    encoding: str = "utf-8"

    def with_overrides(
        self,
        *,
        escape_html: bool | None = None,
        protect_code: bool | None = None,
        theme: str | None = None,
        highlight_code: bool | None = None,
        compact: bool | None = None,
    ) -> "ViewConfig":
        """Return a copy where every non-None argument replaces the current value."""
        render = replace(
            self.render,
            escape_html=self.render.escape_html if escape_html is None else escape_html,
            protect_code=self.render.protect_code if protect_code is None else protect_code,
        )
        return replace(
            self,
            render=render,
            theme=theme or self.theme,
            highlight_code=self.highlight_code if highlight_code is None else highlight_code,
            compact=self.compact if compact is None else compact,
        )
