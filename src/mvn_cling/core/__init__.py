"""Core layer — option model and collaborator contracts.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from mvn_cling.core.models import ColorMode, FailOnSeverity, OptionSet
from mvn_cling.core.options import parse_options, render_usage
from mvn_cling.core.protocols import BuildPipeline, LegacyCli

__all__: list[str] = [
    "BuildPipeline",
    "ColorMode",
    "FailOnSeverity",
    "LegacyCli",
    "OptionSet",
    "parse_options",
    "render_usage",
]
