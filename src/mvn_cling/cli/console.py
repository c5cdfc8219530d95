"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.

It also owns the process-wide output session: the color mode chosen on
the command line is installed before the build runs and removed on
every exit path.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from mvn_cling.core.models import ColorMode
from mvn_cling.exceptions import ClingError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``ClingError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise ClingError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def _color_arguments(color: ColorMode | None) -> dict[str, Any]:
    if color is ColorMode.ALWAYS:
        return {"force_terminal": True}
    if color is ColorMode.NEVER:
        return {"color_system": None}
    return {}


def get_rich_console(color: ColorMode | None = None) -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, **_color_arguments(color))


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self) -> None:
        self._color: ColorMode | None = None

    @property
    def color(self) -> ColorMode | None:
        """The installed color mode, or ``None`` outside a session."""
        return self._color

    def install(self, color: ColorMode) -> None:
        if self._color is not None:
            raise RuntimeError("An output session is already installed")
        self._color = color

    def uninstall(self) -> None:
        self._color = None

    def print(self, *objects: object, markup: bool = True, style: str | None = None) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console(self._color)
        except ClingError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects, markup=markup, style=style, highlight=False)


console = _ConsoleProxy()


@contextmanager
def output_session(color: ColorMode) -> Iterator[None]:
    """Install *color* on the shared console for the duration of the block.

    At most one session may be active; the color state is removed even
    when the block raises.
    """
    console.install(color)
    try:
        yield
    finally:
        console.uninstall()
