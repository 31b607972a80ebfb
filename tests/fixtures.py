"""Shared test fixtures and utilities."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import tempfile
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence, Tuple

REPO_ROOT = Path(__file__).resolve().parents[1]


# -----------------------------------------------------------------------------
# Path helpers
# -----------------------------------------------------------------------------


def repo_root() -> Path:
    return REPO_ROOT


def bin_path(name: str) -> Path:
    return REPO_ROOT / "bin" / name


def run(
    cmd: Sequence[str],
    cwd: Optional[str] = None,
    env: Optional[Dict[str, str]] = None,
):
    return subprocess.run(cmd, cwd=cwd, env=env, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)  # noqa: S603


def run_envy(*args: str, env: Optional[Dict[str, str]] = None):
    """Run `python -m envy` from the repo root."""
    full_env = dict(os.environ)
    full_env.pop("ENVY_CONFIG", None)
    full_env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(REPO_ROOT), full_env.get("PYTHONPATH", "")) if p
    )
    if env:
        full_env.update(env)
    return run([sys.executable, "-m", "envy", *args], cwd=str(REPO_ROOT), env=full_env)


# -----------------------------------------------------------------------------
# YAML config helpers
# -----------------------------------------------------------------------------


@contextmanager
def temp_config(text: str, filename: str = ".envyrc.yaml") -> Iterator[Path]:
    """Yield the path of a temporary config file holding `text`."""
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / filename
        path.write_text(text, encoding="utf-8")
        yield path


# -----------------------------------------------------------------------------
# Output capture helpers
# -----------------------------------------------------------------------------


@contextmanager
def capture_stdout():
    """Context manager that captures stdout and yields a StringIO buffer."""
    buf = io.StringIO()
    with redirect_stdout(buf):
        yield buf


@contextmanager
def capture_output() -> Iterator[Tuple[io.StringIO, io.StringIO]]:
    """Capture stdout and stderr; yields (out, err) buffers."""
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        yield out, err
