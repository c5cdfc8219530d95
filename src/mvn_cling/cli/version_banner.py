"""Version banners for ``-v`` / ``-V``.

The minimal banner is a single line; the full banner adds the runtime
and platform details, in the spirit of ``mvn -v``.
"""

from __future__ import annotations

import locale
import os
import platform
from collections.abc import Mapping

from mvn_cling.infra.locations import MAVEN_HOME_ENV
from mvn_cling.version import __version__

PRODUCT_NAME: str = "mvn-cling"


def _locale_name() -> str:
    try:
        name, _encoding = locale.getlocale()
    except ValueError:
        return "unknown"
    return name or "unknown"


def _os_line() -> str:
    system = platform.system().lower() or "unknown"
    return (
        f'OS name: "{system}", version: "{platform.release()}", '
        f'arch: "{platform.machine()}"'
    )


def show_version_minimal() -> str:
    """Return the one-line banner, e.g. ``mvn-cling 0.1.0``."""
    return f"{PRODUCT_NAME} {__version__}"


def show_version(environ: Mapping[str, str] | None = None) -> str:
    """Return the multi-line banner."""
    env = os.environ if environ is None else environ
    home = env.get(MAVEN_HOME_ENV) or "not set"
    lines = [
        show_version_minimal(),
        f"Installation home: {home}",
        f"Python version: {platform.python_version()}, "
        f"implementation: {platform.python_implementation()}",
        f"Default locale: {_locale_name()}, "
        f"platform encoding: {locale.getpreferredencoding(False)}",
        _os_line(),
    ]
    return "\n".join(lines)
