"""Export pipeline: request, processor, producer."""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, TextIO

from .config import resolve_config_path
from .errors import EnvyError, ExitCode, report_error
from .exporter import ExportLine, build_export_lines
from .yamlio import load_env_config


@dataclass
class ExportRequest:
    config_path: Optional[str] = None
    environ: Optional[Mapping[str, str]] = None


@dataclass
class ExportResult:
    path: Path
    lines: List[ExportLine] = field(default_factory=list)


@dataclass
class ResultEnvelope:
    """Outcome of one export run: a result or the error that stopped it."""
    payload: Optional[ExportResult] = None
    error: Optional[EnvyError] = None

    def ok(self) -> bool:
        return self.error is None


class ExportProcessor:
    """Resolve, load and convert the config. Writes nothing."""

    def process(self, payload: ExportRequest) -> ResultEnvelope:
        try:
            path = resolve_config_path(payload.config_path, environ=payload.environ)
            lines = build_export_lines(load_env_config(path))
        except EnvyError as exc:
            return ResultEnvelope(error=exc)
        return ResultEnvelope(payload=ExportResult(path=path, lines=lines))


class ExportProducer:
    """Print export lines to stdout, or the error to stderr."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    def produce(self, result: ResultEnvelope) -> None:
        if result.error is not None:
            report_error(result.error.message, result.error.hint)
            return
        out = self._out or sys.stdout
        for line in result.payload.lines:  # type: ignore[union-attr]
            print(line.render(), file=out)


def run_pipeline(request: ExportRequest, out: Optional[TextIO] = None) -> int:
    """Process the request, produce output and return the exit code."""
    envelope = ExportProcessor().process(request)
    ExportProducer(out).produce(envelope)
    if envelope.ok():
        return int(ExitCode.SUCCESS)
    return int(envelope.error.code)  # type: ignore[union-attr]
