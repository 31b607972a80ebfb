"""Render config entries as shell export statements.

Values are interpolated literally between double quotes. Nothing is
escaped, so a value containing `"`, `$` or a backtick is emitted as-is.
"""
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping

from .errors import ParseError

LOG = logging.getLogger(__name__)

PATH_SEPARATOR = ":"


@dataclass(frozen=True)
class ExportLine:
    name: str
    value: str

    def render(self) -> str:
        return f'export {self.name}="{self.value}"'


def _scalar_to_str(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (int, float, datetime.date)):
        return str(value)
    # mappings, nested lists, !!set, !!omap pairs, !!binary
    raise ParseError(
        f"unsupported value for {name}: {type(value).__name__} values cannot be exported",
        hint="Use a string or a list of strings",
    )


def coerce_value(name: str, value: Any) -> str:
    """Collapse a config value into a single string.

    Lists are joined with ':' in order; scalars are stringified.
    """
    if isinstance(value, list):
        return PATH_SEPARATOR.join(_scalar_to_str(name, item) for item in value)
    return _scalar_to_str(name, value)


def build_export_lines(mapping: Mapping[Any, Any]) -> List[ExportLine]:
    lines: List[ExportLine] = []
    for key, value in mapping.items():
        if not isinstance(key, str):
            LOG.warning("skipping non-string variable name: %r", key)
            continue
        lines.append(ExportLine(name=key, value=coerce_value(key, value)))
    return lines


def render_exports(mapping: Mapping[Any, Any]) -> str:
    """Return all export statements, one per line."""
    lines = [line.render() for line in build_export_lines(mapping)]
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
