"""Domain models for mvn-cling.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and are produced
exclusively by :func:`mvn_cling.core.options.parse_options`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


# ---------------------------------------------------------------------------
# Enumerated option values
# ---------------------------------------------------------------------------

class ColorMode(str, Enum):
    """Color mode of the console output (``--color``)."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class FailOnSeverity(str, Enum):
    """Log severity that fails the build (``-fos``)."""

    WARN = "warn"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Parsed invocation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class OptionSet:
    """Validated result of parsing one command-line invocation.

    Optional scalar values are ``None`` when the option was absent; list
    valued options are empty tuples.  ``raw_args`` keeps the original
    vector so that it can be forwarded verbatim to the legacy CLI.
    """

    command_name: str
    raw_args: tuple[str, ...]
    goals: tuple[str, ...] = ()
    """Phases and/or goals, in invocation order."""

    help: bool = False
    alternate_pom_file: Path | None = None
    user_properties: tuple[str, ...] = ()
    """``-D`` definitions, each in ``key=value`` (or bare ``key``) form."""

    offline: bool = False
    show_version_and_exit: bool = False
    quiet: bool = False
    verbose: bool = False
    errors: bool = False
    non_recursive: bool = False
    update_snapshots: bool = False
    activated_profiles: tuple[str, ...] = ()
    """Profile ids; ``!`` (exclude) and ``?`` (optional) prefixes preserved."""

    non_interactive: bool = False
    force_interactive: bool = False
    suppress_snapshot_updates: bool = False
    strict_checksums: bool = False
    relaxed_checksums: bool = False

    alt_user_settings: Path | None = None
    alt_project_settings: Path | None = None
    alt_global_settings: Path | None = None
    alt_installation_settings: Path | None = None
    alt_user_toolchains: Path | None = None
    alt_global_toolchains: Path | None = None
    alt_installation_toolchains: Path | None = None

    fail_on_severity: FailOnSeverity | None = None
    fail_fast: bool = False
    fail_at_end: bool = False
    fail_never: bool = False

    resume: bool = False
    resume_from: str | None = None
    projects: tuple[str, ...] = ()
    also_make: tuple[str, ...] = ()
    also_make_dependents: bool = False

    log_file: Path | None = None
    show_version: bool = False
    threads: str | None = None
    builder: str | None = None
    no_transfer_progress: bool = False
    color: ColorMode = ColorMode.AUTO
    cache_artifact_not_found: bool = True
    strict_artifact_descriptor_policy: bool = False
    ignore_transitive_repositories: bool = False

    legacy_cli: bool = False

    def user_property_map(self) -> dict[str, str]:
        """Return the ``-D`` definitions as a mapping.

        A definition without ``=`` maps to ``"true"``; when a key is
        defined more than once the last definition wins.
        """
        result: dict[str, str] = {}
        for definition in self.user_properties:
            key, sep, value = definition.partition("=")
            result[key] = value if sep else "true"
        return result
