"""Infrastructure layer — filesystem and process integration.

This layer owns every interaction with the operating system: basedir
validation, locating and spawning the legacy CLI, and the modern
pipeline adapter.

Rules
-----
* No imports from ``cli``.
* No Rich rendering; the placeholder pipeline's greeting is its only
  output.
"""

from mvn_cling.infra.basedir import (
    Basedir,
    BasedirKind,
    BasedirOverrides,
    create_basedir,
    installation_basedir,
    user_basedir,
    validate_directory,
    validate_file,
)
from mvn_cling.infra.legacy_cli import SubprocessLegacyCli, find_legacy_executable
from mvn_cling.infra.locations import resolve_installation_basedir, resolve_user_basedir
from mvn_cling.infra.pipeline import PlaceholderPipeline

__all__: list[str] = [
    "Basedir",
    "BasedirKind",
    "BasedirOverrides",
    "PlaceholderPipeline",
    "SubprocessLegacyCli",
    "create_basedir",
    "find_legacy_executable",
    "installation_basedir",
    "resolve_installation_basedir",
    "resolve_user_basedir",
    "user_basedir",
    "validate_directory",
    "validate_file",
]
