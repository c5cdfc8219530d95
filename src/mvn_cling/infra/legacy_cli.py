"""Infrastructure: delegation to the legacy command line.

The legacy CLI is a separate executable.  This module locates it on the
system PATH (or via the ``MVN_CLING_LEGACY`` environment variable) and
runs it with the forwarded argument vector, inheriting stdin, stdout and
stderr.

Rules
-----
* Detection via :func:`shutil.which` only.
* The child's exit status is returned untouched.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from mvn_cling.exceptions import LegacyCliNotFoundError

logger = logging.getLogger(__name__)

LEGACY_ENV: str = "MVN_CLING_LEGACY"
DEFAULT_LEGACY_EXECUTABLE: str = "mvn"


def find_legacy_executable(environ: Mapping[str, str] | None = None) -> Path:
    """Locate the legacy CLI executable.

    Raises
    ------
    LegacyCliNotFoundError
        When the configured (or default) executable is not on PATH.
    """
    env = os.environ if environ is None else environ
    name = env.get(LEGACY_ENV) or DEFAULT_LEGACY_EXECUTABLE
    found = shutil.which(name)
    if found is None:
        raise LegacyCliNotFoundError(
            f"Legacy CLI executable {name!r} was not found.",
            hint=f"Put it on PATH or point {LEGACY_ENV} at it.",
        )
    return Path(found)


class SubprocessLegacyCli:
    """Runs the legacy CLI as a child process."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def run(self, args: Sequence[str]) -> int:
        executable = find_legacy_executable(self._environ)
        logger.debug("Delegating to legacy CLI %s with %s", executable, list(args))
        completed = subprocess.run([str(executable), *args], check=False)
        return completed.returncode
