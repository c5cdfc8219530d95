"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
legacy CLI and the build pipeline may return other values; those are
propagated untouched.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — goals ran, or an informational command completed."""

GENERAL_ERROR: int = 1
"""Bad arguments, no goals, or a failure reported by the launcher."""
