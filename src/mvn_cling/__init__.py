"""mvn-cling — next-generation command-line front-end for the build tool.

Parses the invocation into an immutable option set, resolves the
installation and user configuration base directories, and dispatches
to the legacy CLI or the modern pipeline.
"""

from mvn_cling.version import __version__

__all__: list[str] = ["__version__"]
