"""CLI application entry point and launcher state machine for mvn-cling.

This module is the **sole error boundary** for the entire application.
It catches :class:`~mvn_cling.exceptions.ClingError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Dispatch
--------
Every invocation walks the same states::

    parse ─┬─ failed ──────────────► diagnostic + usage, 1
           └─ ok ─┬─ --legacy-cli ─► legacy CLI, its status
                  ├─ --help ───────► usage, 0
                  ├─ --version ────► banner, 0
                  ├─ no goals ─────► error + usage, 1
                  └─ otherwise ────► build pipeline, its status

Architecture notes
------------------
* No business logic lives here — parsing is delegated to ``core`` and all
  process and filesystem work to ``infra``.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from mvn_cling.cli import exit_codes
from mvn_cling.cli.console import console, output_session
from mvn_cling.cli.logging_setup import configure_logging
from mvn_cling.cli.version_banner import show_version, show_version_minimal
from mvn_cling.core.models import ColorMode, OptionSet
from mvn_cling.core.option_table import LEGACY_CLI_FLAG
from mvn_cling.core.options import (
    DEFAULT_COMMAND_NAME,
    deprecated_options_used,
    parse_options,
    render_usage,
)
from mvn_cling.core.protocols import BuildPipeline, LegacyCli
from mvn_cling.exceptions import ClingError, NoGoalsError, ParseError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def strip_legacy_flag(args: Sequence[str]) -> list[str]:
    """Return *args* without any token exactly equal to ``--legacy-cli``."""
    return [arg for arg in args if arg != LEGACY_CLI_FLAG]


def require_goals(options: OptionSet) -> None:
    """Raise :class:`NoGoalsError` when *options* names no goals."""
    if not options.goals:
        raise NoGoalsError("No goals specified!")


def _print_usage(command_name: str) -> None:
    print(render_usage(command_name), end="")


def _report(exc: ClingError) -> None:
    console.print(f"Error: {exc}", markup=False, style="bold red")
    if exc.hint:
        console.print(f"Hint: {exc.hint}", markup=False, style="yellow")


# ---------------------------------------------------------------------------
# Launcher
# ---------------------------------------------------------------------------

class Launcher:
    """Parses one invocation and dispatches it.

    Parameters
    ----------
    legacy:
        Legacy CLI collaborator.  Defaults to
        :class:`~mvn_cling.infra.legacy_cli.SubprocessLegacyCli`.
    pipeline:
        Build pipeline collaborator.  Defaults to
        :class:`~mvn_cling.infra.pipeline.PlaceholderPipeline`.
    command_name:
        Program name used in usage text and diagnostics.
    """

    def __init__(
        self,
        *,
        legacy: LegacyCli | None = None,
        pipeline: BuildPipeline | None = None,
        command_name: str = DEFAULT_COMMAND_NAME,
    ) -> None:
        self._legacy = legacy
        self._pipeline = pipeline
        self.command_name = command_name

    def run(self, args: Sequence[str]) -> int:
        """Parse *args* and dispatch; return the process exit status."""
        try:
            options = parse_options(self.command_name, args)
        except ParseError as exc:
            console.print(f"Bad CLI arguments: {exc}", markup=False, style="bold red")
            _print_usage(self.command_name)
            return exit_codes.GENERAL_ERROR
        return self.dispatch(options)

    def dispatch(self, options: OptionSet) -> int:
        """Route a successfully parsed invocation."""
        if options.legacy_cli:
            return self._legacy_cli().run(strip_legacy_flag(options.raw_args))

        if options.help:
            _print_usage(self.command_name)
            return exit_codes.SUCCESS

        if options.show_version_and_exit:
            print(show_version_minimal() if options.quiet else show_version())
            return exit_codes.SUCCESS

        try:
            require_goals(options)
        except NoGoalsError as exc:
            console.print(str(exc), markup=False, style="bold red")
            _print_usage(self.command_name)
            return exit_codes.GENERAL_ERROR

        return self.execute(options)

    def execute(self, options: OptionSet) -> int:
        """Run the build pipeline inside an output session."""
        configure_logging(options)
        for name in deprecated_options_used(options):
            logger.warning("Option %s is deprecated and may be removed in a future version", name)

        color = ColorMode.NEVER if options.log_file is not None else options.color
        with output_session(color):
            if options.show_version:
                print(show_version())
            try:
                return self._build_pipeline().execute(options)
            except ClingError as exc:
                _report(exc)
                return exit_codes.GENERAL_ERROR
            except Exception as exc:  # noqa: BLE001
                console.print(
                    f"Build failed: {type(exc).__name__}: {exc}",
                    markup=False,
                    style="bold red",
                )
                if options.errors:
                    logger.error("Build failure details", exc_info=exc)
                return exit_codes.GENERAL_ERROR

    # -- collaborators ----------------------------------------------------

    def _legacy_cli(self) -> LegacyCli:
        if self._legacy is None:
            from mvn_cling.infra.legacy_cli import SubprocessLegacyCli

            self._legacy = SubprocessLegacyCli()
        return self._legacy

    def _build_pipeline(self) -> BuildPipeline:
        if self._pipeline is None:
            from mvn_cling.infra.pipeline import PlaceholderPipeline

            self._pipeline = PlaceholderPipeline()
        return self._pipeline


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    legacy: LegacyCli | None = None,
    pipeline: BuildPipeline | None = None,
) -> int:
    """Run the mvn-cling launcher.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    legacy, pipeline:
        Optional collaborator overrides (see :class:`Launcher`).

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    return Launcher(legacy=legacy, pipeline=pipeline).run(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ClingError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.GENERAL_ERROR)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            markup=True,
        )
        sys.exit(exit_codes.GENERAL_ERROR)
