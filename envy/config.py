"""Config file path resolution."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigNotFound

LOG = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".envyrc.yaml"
CONFIG_ENV_VAR = "ENVY_CONFIG"


def home_directory() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigNotFound(
            "couldn't determine home directory from environment",
            hint=f"Pass a config path or set {CONFIG_ENV_VAR}",
        ) from exc


def default_config_path() -> Path:
    """Return ~/.envyrc.yaml."""
    return home_directory() / DEFAULT_CONFIG_NAME


def resolve_config_path(
    config_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the config path: explicit argument, then $ENVY_CONFIG, then home.

    Only computes the path; the file is not checked for existence here.
    """
    if config_file:
        LOG.debug("using config path from argument: %s", config_file)
        return Path(os.path.expanduser(config_file))
    env = os.environ if environ is None else environ
    env_path = env.get(CONFIG_ENV_VAR)
    if env_path:
        LOG.debug("using config path from %s: %s", CONFIG_ENV_VAR, env_path)
        return Path(os.path.expanduser(env_path))
    path = default_config_path()
    LOG.debug("using default config path: %s", path)
    return path
