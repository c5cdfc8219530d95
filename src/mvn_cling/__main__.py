"""Allow ``python -m mvn_cling`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m mvn_cling`` behaves identically to the ``mvn-cling``
console script.
"""

from __future__ import annotations

from mvn_cling.cli.app import cli

if __name__ == "__main__":
    cli()
