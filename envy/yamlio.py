"""YAML read helpers for the envy config file."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from yaml.constructor import ConstructorError

from .errors import FileReadError, ParseError

__all__ = ["CoreSchemaLoader", "read_text", "parse_mapping", "load_env_config"]

LOG = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"

# YAML 1.1 implicit types that the 1.2 core schema does not share.
_DROPPED_IMPLICIT_TAGS = {
    _BOOL_TAG,
    _INT_TAG,
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
    "tag:yaml.org,2002:value",
}


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader that resolves plain scalars by the YAML 1.2 core schema.

    Only true/false (in any of the three core spellings) are booleans, and
    ~/null are null. Numeric-looking plain scalars keep the text written in
    the file, so `yes`, `on`, `5:30` and `0755` all load as strings.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _DROPPED_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _construct_core_int(loader: CoreSchemaLoader, node: yaml.ScalarNode) -> int:
    # explicit !!int: decimal unless 0o/0x prefixed, no base-60
    text = loader.construct_scalar(node)
    try:
        if text[:2].lower() in ("0o", "0x"):
            return int(text, 0)
        return int(text, 10)
    except ValueError:
        raise ConstructorError(
            None, None, f"invalid integer {text!r}", node.start_mark
        ) from None


CoreSchemaLoader.add_constructor(_INT_TAG, _construct_core_int)


def read_text(path: Union[str, Path]) -> str:
    """Read a config file as UTF-8 text."""
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileReadError(
            f"config file not found: {p}",
            hint=f"Create {p} or pass another path",
        ) from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(f"config file is not valid UTF-8: {p}") from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise FileReadError(f"couldn't read config file {p}: {reason}") from exc


def parse_mapping(text: str, source: str = "<string>") -> Dict[str, Any]:
    """Parse YAML text into an insertion-ordered dict.

    Only the first document is used. Empty or null documents give {}.
    """
    try:
        docs = list(yaml.load_all(text, Loader=CoreSchemaLoader))
    except yaml.YAMLError as exc:
        raise ParseError(f"invalid YAML in {source}: {exc}") from exc
    if not docs:
        return {}
    if len(docs) > 1:
        LOG.debug("%s: ignoring %d extra YAML document(s)", source, len(docs) - 1)
    data = docs[0]
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(
            f"invalid configuration file: {source}",
            hint="The top level must be a mapping of NAME: value",
        )
    return data


def load_env_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and parse the config file at `path`."""
    data = parse_mapping(read_text(path), source=str(path))
    LOG.debug("loaded %d entries from %s", len(data), path)
    return data
