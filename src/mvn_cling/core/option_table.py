"""Declarative grammar of the command line.

Every flag the launcher understands is described exactly once, as an
:class:`OptionSpec` record in :data:`OPTIONS`.  The parser and the usage
text are both generated from this table, so they cannot drift apart.

Rules
-----
* Pure data — no parsing logic lives here.
* ``dest`` must name a field of :class:`~mvn_cling.core.models.OptionSet`.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mvn_cling.core.models import ColorMode, FailOnSeverity


class Arity(Enum):
    """How many values an option consumes per occurrence."""

    FLAG = "0"
    """No value; presence sets the field to ``True``."""

    VALUE = "1"
    """Exactly one value; the last occurrence wins."""

    OPTIONAL_BOOL = "0..1"
    """An optional ``true``/``false`` value; bare presence means ``True``."""

    REPEATABLE = "1, repeatable"
    """Exactly one value per occurrence; all occurrences are kept."""

    LIST = "1, comma-split"
    """One comma-delimited value per occurrence; items accumulate."""


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One declared option."""

    dest: str
    names: tuple[str, ...]
    arity: Arity
    description: str
    label: str | None = None
    convert: Callable[[str], object] = str
    choices: tuple[str, ...] | None = None
    default: object = None
    deprecated: bool = False


@dataclass(frozen=True, slots=True)
class PositionalSpec:
    """The positional parameter list (zero or more values)."""

    dest: str
    label: str
    description: str


# ---------------------------------------------------------------------------
# Value converters
# ---------------------------------------------------------------------------

_THREADS_PATTERN = re.compile(r"^(?:[1-9]\d*|(?:\d+(?:\.\d+)?)C)$")


def thread_count(value: str) -> str:
    """Validate a ``-T`` value such as ``4``, ``2C`` or ``2.5C``.

    Both forms must be positive, so ``0`` and ``0C`` are rejected alike.
    The value is returned unchanged; interpreting the core multiplier is
    the build engine's job.
    """
    if not _THREADS_PATTERN.match(value) or (value.endswith("C") and float(value[:-1]) == 0):
        raise ValueError(
            f"invalid thread count {value!r}: expected a positive integer (e.g. 4) "
            "or a positive core multiplier (e.g. 2C, 2.5C)"
        )
    return value


# ---------------------------------------------------------------------------
# The grammar
# ---------------------------------------------------------------------------

_SEVERITIES: tuple[str, ...] = tuple(member.value for member in FailOnSeverity)
_COLORS: tuple[str, ...] = tuple(member.value for member in ColorMode)

OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("help", ("-h", "--help"), Arity.FLAG, "Display help information"),
    OptionSpec(
        "alternate_pom_file", ("-f", "--file"), Arity.VALUE,
        "Force the use of an alternate POM file (or directory with pom.xml)",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "user_properties", ("-D", "--define"), Arity.REPEATABLE,
        "Define a user property in form of key=value, if no value set it becomes 'true'",
        label="<property>",
    ),
    OptionSpec("offline", ("-o", "--offline"), Arity.FLAG, "Work offline"),
    OptionSpec(
        "show_version_and_exit", ("-v", "--version"), Arity.FLAG,
        "Display version information and exit",
    ),
    OptionSpec(
        "quiet", ("-q", "--quiet"), Arity.FLAG,
        "Quiet execution output - only show errors",
    ),
    OptionSpec("verbose", ("-X", "--verbose"), Arity.FLAG, "Verbose execution output"),
    OptionSpec(
        "errors", ("-e", "--errors"), Arity.FLAG,
        "Produce execution error messages and stack traces",
    ),
    OptionSpec(
        "non_recursive", ("-N", "--non-recursive"), Arity.FLAG,
        "Do not recurse into sub-projects. When used together with -pl, "
        "do not recurse into sub-projects of selected aggregators",
    ),
    OptionSpec(
        "update_snapshots", ("-U", "--update-snapshots"), Arity.FLAG,
        "Forces a check for missing releases and updated snapshots on remote repositories",
    ),
    OptionSpec(
        "activated_profiles", ("-P", "--activate-profiles"), Arity.LIST,
        "Comma-delimited list of profiles to activate. Prefixing a profile "
        "with ! excludes it, and ? marks it as optional",
        label="<profile>",
    ),
    OptionSpec(
        "non_interactive", ("-B", "--batch-mode", "--non-interactive"), Arity.FLAG,
        "Run in non-interactive (batch) mode",
    ),
    OptionSpec(
        "force_interactive", ("--force-interactive",), Arity.FLAG,
        "Run in interactive mode. Overrides, if applicable, the CI environment "
        "variable and --non-interactive/--batch-mode options",
    ),
    OptionSpec(
        "suppress_snapshot_updates", ("-nsu", "--no-snapshot-updates"), Arity.FLAG,
        "Suppress SNAPSHOT updates",
    ),
    OptionSpec(
        "strict_checksums", ("-C", "--strict-checksums"), Arity.FLAG,
        "Fail the build if checksums don't match",
    ),
    OptionSpec(
        "relaxed_checksums", ("-c", "--lax-checksums"), Arity.FLAG,
        "Warn if checksums don't match",
    ),
    OptionSpec(
        "alt_user_settings", ("-s", "--settings"), Arity.VALUE,
        "Alternate path for the user settings file",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "alt_project_settings", ("-ps", "--project-settings"), Arity.VALUE,
        "Alternate path for the project settings file",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "alt_global_settings", ("-gs", "--global-settings"), Arity.VALUE,
        "Alternate path for the global settings file",
        label="<file>", convert=Path, deprecated=True,
    ),
    OptionSpec(
        "alt_installation_settings", ("-is", "--install-settings"), Arity.VALUE,
        "Alternate path for the installation settings file",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "alt_user_toolchains", ("-t", "--toolchains"), Arity.VALUE,
        "Alternate path for the user toolchains file",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "alt_global_toolchains", ("-gt", "--global-toolchains"), Arity.VALUE,
        "Alternate path for the global toolchains file",
        label="<file>", convert=Path, deprecated=True,
    ),
    OptionSpec(
        "alt_installation_toolchains", ("-it", "--install-toolchains"), Arity.VALUE,
        "Alternate path for the installation toolchains file",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "fail_on_severity", ("-fos", "--fail-on-severity"), Arity.VALUE,
        "Configure which severity of logging should cause the build to fail. "
        "Supported values are 'warn' and 'error'",
        label="<severity>", convert=FailOnSeverity, choices=_SEVERITIES,
    ),
    OptionSpec("fail_fast", ("-ff", "--fail-fast"), Arity.FLAG, "Stop at first failure in build"),
    OptionSpec(
        "fail_at_end", ("-fae", "--fail-at-end"), Arity.FLAG,
        "Only fail the build afterwards; allow all non-impacted builds to continue",
    ),
    OptionSpec(
        "fail_never", ("-fn", "--fail-never"), Arity.FLAG,
        "Never fail the build, regardless of project result",
    ),
    OptionSpec(
        "resume", ("-r", "--resume"), Arity.FLAG,
        "Resume reactor from the last failed project, using the "
        "resume.properties file in the build directory",
    ),
    OptionSpec(
        "resume_from", ("-rf", "--resume-from"), Arity.VALUE,
        "Resume reactor from specified project",
        label="<project>",
    ),
    OptionSpec(
        "projects", ("-pl", "--projects"), Arity.LIST,
        "Comma-delimited list of specified reactor projects to build instead "
        "of all projects. A project can be specified by [groupId]:artifactId "
        "or by its relative path. Prefixing a project with ! excludes it, "
        "and ? marks it as optional",
        label="<project>",
    ),
    OptionSpec(
        "also_make", ("-am", "--also-make"), Arity.LIST,
        "If project list is specified, also build projects required by this list",
        label="<project>",
    ),
    OptionSpec(
        "also_make_dependents", ("-amd", "--also-make-dependents"), Arity.FLAG,
        "If project list is specified, also build projects that depend on "
        "projects on the list",
    ),
    OptionSpec(
        "log_file", ("-l", "--log-file"), Arity.VALUE,
        "Log file where all build output will go (disables output color)",
        label="<file>", convert=Path,
    ),
    OptionSpec(
        "show_version", ("-V", "--show-version"), Arity.FLAG,
        "Display version information without exiting",
    ),
    OptionSpec(
        "threads", ("-T", "--threads"), Arity.VALUE,
        "Thread count, for instance 4 (int) or 2C/2.5C (int/float) where C "
        "is core multiplied",
        label="<threads>", convert=thread_count,
    ),
    OptionSpec(
        "builder", ("-b", "--builder"), Arity.VALUE,
        "The id of the build strategy to use",
        label="<id>",
    ),
    OptionSpec(
        "no_transfer_progress", ("-ntp", "--no-transfer-progress"), Arity.FLAG,
        "Do not display transfer progress when downloading or uploading",
    ),
    OptionSpec(
        "color", ("--color",), Arity.VALUE,
        "Defines the color mode of the output. Supported are 'auto', 'always', 'never'",
        label="<mode>", convert=ColorMode, choices=_COLORS, default=ColorMode.AUTO,
    ),
    OptionSpec(
        "cache_artifact_not_found", ("-canf", "--cache-artifact-not-found"),
        Arity.OPTIONAL_BOOL,
        "Defines caching behaviour for 'not found' artifacts. Supported values "
        "are 'true' (default), 'false'",
        label="<bool>", default=True,
    ),
    OptionSpec(
        "strict_artifact_descriptor_policy",
        ("-sadp", "--strict-artifact-descriptor-policy"),
        Arity.OPTIONAL_BOOL,
        "Defines 'strict' artifact descriptor policy. Supported values are "
        "'true', 'false' (default)",
        label="<bool>", default=False,
    ),
    OptionSpec(
        "ignore_transitive_repositories", ("-itr", "--ignore-transitive-repositories"),
        Arity.FLAG,
        "If set, Maven will ignore remote repositories introduced by transitive dependencies",
    ),
    OptionSpec("legacy_cli", ("--legacy-cli",), Arity.FLAG, "Use legacy CLI"),
)

GOALS = PositionalSpec("goals", "GOALS", "List of phases and/or goals")

LEGACY_CLI_FLAG: str = "--legacy-cli"
"""The escape-hatch token stripped before delegating to the legacy CLI."""
