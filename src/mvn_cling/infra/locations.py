"""Infrastructure: derive the installation and user basedirs for a run.

Roots are taken from ``-D`` user properties first, then from the
environment, then from platform defaults.  Command-line overrides
(``-s``, ``-t``, ``-is``, ``-it`` and the deprecated ``-gs`` / ``-gt``)
become basedir overrides.

Relative paths are anchored at *cwd* so that later consumers do not
depend on the working directory at the time they open a file.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from mvn_cling.core.models import OptionSet
from mvn_cling.infra.basedir import (
    Basedir,
    BasedirOverrides,
    installation_basedir,
    user_basedir,
)

logger = logging.getLogger(__name__)

MAVEN_HOME_PROPERTY: str = "maven.home"
MAVEN_HOME_ENV: str = "MAVEN_HOME"
USER_HOME_PROPERTY: str = "user.home"
USER_CONF_PROPERTY: str = "maven.user.conf"


def _anchor(path: Path | None, cwd: Path) -> Path | None:
    if path is None or path.is_absolute():
        return path
    return cwd / path


def _first(*candidates: Path | None) -> Path | None:
    return next((candidate for candidate in candidates if candidate is not None), None)


def resolve_installation_basedir(
    options: OptionSet,
    environ: Mapping[str, str],
    *,
    cwd: Path,
) -> Basedir | None:
    """Return the installation basedir, or ``None`` when no root is known.

    Raises
    ------
    InvalidBasedirError
        When the root or an override has the wrong file type.
    """
    properties = options.user_property_map()
    raw_root = properties.get(MAVEN_HOME_PROPERTY) or environ.get(MAVEN_HOME_ENV)
    if not raw_root:
        logger.debug("No installation root configured")
        return None

    overrides = BasedirOverrides()
    overrides.settings_xml = _anchor(
        _first(options.alt_installation_settings, options.alt_global_settings), cwd,
    )
    overrides.toolchains_xml = _anchor(
        _first(options.alt_installation_toolchains, options.alt_global_toolchains), cwd,
    )
    return installation_basedir(_anchor(Path(raw_root), cwd), overrides)


def resolve_user_basedir(options: OptionSet, *, cwd: Path) -> Basedir:
    """Return the user basedir for *options*.

    The root defaults to :meth:`pathlib.Path.home` unless the
    ``user.home`` property is defined.

    Raises
    ------
    InvalidBasedirError
        When the root or an override has the wrong file type.
    """
    properties = options.user_property_map()
    raw_root = properties.get(USER_HOME_PROPERTY)
    root = Path(raw_root) if raw_root else Path.home()

    overrides = BasedirOverrides()
    raw_conf = properties.get(USER_CONF_PROPERTY)
    if raw_conf:
        overrides.conf = _anchor(Path(raw_conf), cwd)
    overrides.settings_xml = _anchor(options.alt_user_settings, cwd)
    overrides.toolchains_xml = _anchor(options.alt_user_toolchains, cwd)
    return user_basedir(_anchor(root, cwd), overrides)
