"""Protocols (interfaces) for the launcher's external collaborators.

These define the contracts that infrastructure adapters must satisfy.
The launcher depends ONLY on these protocols — never on concrete
implementations — so tests can substitute recording fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from mvn_cling.core.models import OptionSet


class LegacyCli(Protocol):
    """Contract for the legacy execution path.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally.
    """

    def run(self, args: Sequence[str]) -> int:
        """Run the legacy CLI with *args* and return its exit status.

        The status is propagated verbatim by the launcher; it is never
        reinterpreted.

        Raises
        ------
        LegacyCliNotFoundError
            When the legacy entry point cannot be located.
        """
        ...  # pragma: no cover


class BuildPipeline(Protocol):
    """Contract for the modern build pipeline."""

    def execute(self, options: OptionSet) -> int:
        """Run the build described by *options* and return an exit status.

        Any exception escaping this method is reported by the launcher
        and mapped to a failure status.
        """
        ...  # pragma: no cover
