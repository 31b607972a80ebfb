"""Program metadata for the envy CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppMeta:
    """Static program metadata."""

    app_id: str
    purpose: str
    version: str
    display_name: Optional[str] = None  # defaults to app_id
    example_cmd: Optional[str] = None

    @property
    def version_string(self) -> str:
        return f"{self.display_name or self.app_id} {self.version}"


_META = AppMeta(
    app_id="envy",
    purpose="Environment Variable Exporter",
    version="1.0.0",
    example_cmd='eval "$(envy)"',
)

APP_ID = _META.app_id
PURPOSE = _META.purpose
VERSION = _META.version
VERSION_STRING = _META.version_string
EXAMPLE_CMD = _META.example_cmd
