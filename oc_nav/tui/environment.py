"""Cluster context lookups against the wrapped CLI."""
from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

UNKNOWN_CONTEXT = "Unknown"
DEFAULT_PROJECT = "default"


class EnvironmentUnavailableError(RuntimeError):
    """The wrapped command-line tool cannot be found."""


def require_binary(binary: str) -> str:
    """Resolve ``binary`` on PATH.

    Raises:
        EnvironmentUnavailableError: If it is not installed
    """
    path = shutil.which(binary)
    if path is None:
        raise EnvironmentUnavailableError(binary)
    return path


def _query(argv: list[str], fallback: str) -> str:
    try:
        proc = subprocess.run(argv, capture_output=True, text=True, check=False)
    except OSError as e:
        logger.warning("%s failed: %s", " ".join(argv), e)
        return fallback
    if proc.returncode != 0:
        logger.info("%s exited %d; using %r", " ".join(argv), proc.returncode, fallback)
        return fallback
    return proc.stdout.strip() or fallback


def current_context(binary: str = "oc") -> str:
    return _query([binary, "config", "current-context"], UNKNOWN_CONTEXT)


def current_project(binary: str = "oc") -> str:
    return _query([binary, "project", "-q"], DEFAULT_PROJECT)


@dataclass
class ClusterContext:
    """Read-only view of where commands will run."""

    context: str = UNKNOWN_CONTEXT
    project: str = DEFAULT_PROJECT

    @classmethod
    def detect(cls, binary: str = "oc") -> ClusterContext:
        return cls(context=current_context(binary), project=current_project(binary))

    def refresh(self, binary: str = "oc") -> None:
        self.context = current_context(binary)
        self.project = current_project(binary)
