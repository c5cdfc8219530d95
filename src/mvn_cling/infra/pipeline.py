"""Infrastructure: the modern build pipeline.

Only the placeholder exists for now: it resolves the configuration
basedirs (so misconfigured roots fail fast), greets, and reports
success.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from mvn_cling.core.models import OptionSet
from mvn_cling.infra.locations import resolve_installation_basedir, resolve_user_basedir

logger = logging.getLogger(__name__)

GREETING: str = "Hello World!"


class PlaceholderPipeline:
    """Stand-in for the build engine."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._cwd = cwd

    def execute(self, options: OptionSet) -> int:
        cwd = self._cwd if self._cwd is not None else Path.cwd()
        installation = resolve_installation_basedir(options, self._environ, cwd=cwd)
        user = resolve_user_basedir(options, cwd=cwd)

        if installation is not None:
            logger.debug("Installation settings: %s", installation.settings_xml())
            logger.debug("Installation toolchains: %s", installation.toolchains_xml())
        logger.debug("User settings: %s", user.settings_xml())
        logger.debug("User toolchains: %s", user.toolchains_xml())
        logger.debug("Goals: %s", " ".join(options.goals))

        print(GREETING)
        return 0
