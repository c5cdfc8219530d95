"""Shared pytest fixtures and configuration for the mvn-cling test suite.

Guidelines
----------
* No network access and no real subprocesses in any test.
* The legacy CLI and the build pipeline are replaced by recording fakes.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import pytest

from mvn_cling.cli.console import console
from mvn_cling.cli.logging_setup import HANDLER_NAME, PACKAGE_LOGGER
from mvn_cling.core.models import ColorMode, OptionSet


class RecordingLegacyCli:
    """Legacy CLI fake that records forwarded argument vectors."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: list[list[str]] = []

    def run(self, args: Sequence[str]) -> int:
        self.calls.append(list(args))
        return self.status


class RecordingPipeline:
    """Build pipeline fake that records options and the active color mode."""

    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.error: BaseException | None = None
        self.calls: list[OptionSet] = []
        self.colors: list[ColorMode | None] = []

    def execute(self, options: OptionSet) -> int:
        self.calls.append(options)
        self.colors.append(console.color)
        if self.error is not None:
            raise self.error
        return self.status


@pytest.fixture
def legacy() -> RecordingLegacyCli:
    return RecordingLegacyCli()


@pytest.fixture
def pipeline() -> RecordingPipeline:
    return RecordingPipeline()


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Drop the launcher's log handler and any leaked output session."""
    yield
    console.uninstall()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
