"""Infrastructure: installation and user base directories.

A *basedir* is the root of a layered configuration area — the tool
installation ("maven home") or the per-user area ("user home") — plus
optional overrides for the well-known files beneath it.

Rules
-----
* The filesystem is touched only while constructing a :class:`Basedir`
  (stat-style existence and type checks).
* Derived getters are pure functions of the root and the overrides.
* Paths are computed, never created.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mvn_cling.exceptions import InvalidBasedirError


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_directory(path: Path | None) -> Path | None:
    """Return *path* if it is unset, missing, or an existing directory.

    Symlinks are followed, so a link pointing at a directory is valid.

    Raises
    ------
    InvalidBasedirError
        When *path* exists but is not a directory.
    """
    if path is not None and path.exists() and not path.is_dir():
        raise InvalidBasedirError(f"The path exists but is not a directory: {path}")
    return path


def validate_file(path: Path | None) -> Path | None:
    """Return *path* if it is unset, missing, or an existing regular file.

    Raises
    ------
    InvalidBasedirError
        When *path* exists but is not a regular file.
    """
    if path is not None and path.exists() and not path.is_file():
        raise InvalidBasedirError(f"The path exists but is not a file: {path}")
    return path


# ---------------------------------------------------------------------------
# Basedir model
# ---------------------------------------------------------------------------

class BasedirKind(Enum):
    """The closed set of base directory roles."""

    INSTALLATION = "installation"
    USER = "user"


@dataclass(slots=True)
class BasedirOverrides:
    """Optional overrides, populated field by field before construction.

    ``conf`` and ``maven_properties`` only apply to user basedirs.  The
    struct is a builder: :class:`Basedir` copies its values into frozen
    fields and never keeps a reference to it.
    """

    conf: Path | None = None
    settings_xml: Path | None = None
    toolchains_xml: Path | None = None
    extensions_xml: Path | None = None
    maven_properties: Path | None = None


_USER_ONLY_OVERRIDES: tuple[str, ...] = ("conf", "maven_properties")


@dataclass(frozen=True, slots=True)
class Basedir:
    """A validated base directory.

    Every construction path validates the root and the overrides in
    ``__post_init__``, so an instance always describes a well-typed
    layout.  :func:`create_basedir` and its shorthands are the usual way
    in.

    Raises
    ------
    InvalidBasedirError
        When the root is unset, the root or a directory override exists
        but is not a directory, a file override exists but is not a
        regular file, or an override does not apply to *kind*.
    """

    kind: BasedirKind
    root: Path
    conf_override: Path | None = None
    settings_xml_override: Path | None = None
    toolchains_xml_override: Path | None = None
    extensions_xml_override: Path | None = None
    maven_properties_override: Path | None = None

    def __post_init__(self) -> None:
        if self.root is None:
            raise InvalidBasedirError(f"The {self.kind.value} basedir root must be set")
        validate_directory(self.root)

        if self.kind is BasedirKind.INSTALLATION:
            misplaced = [
                name
                for name in _USER_ONLY_OVERRIDES
                if getattr(self, f"{name}_override") is not None
            ]
            if misplaced:
                raise InvalidBasedirError(
                    f"Overrides not supported for installation basedirs: {', '.join(misplaced)}",
                )

        validate_directory(self.conf_override)
        validate_file(self.settings_xml_override)
        validate_file(self.toolchains_xml_override)
        validate_file(self.extensions_xml_override)
        validate_file(self.maven_properties_override)

    # -- shared ---------------------------------------------------------

    def conf(self) -> Path:
        if self.kind is BasedirKind.INSTALLATION:
            return self.root / "conf"
        if self.conf_override is not None:
            return self.conf_override
        return self.root / ".m2"

    def settings_xml(self) -> Path:
        return self._file_or_default(self.settings_xml_override, "settings.xml")

    def toolchains_xml(self) -> Path:
        return self._file_or_default(self.toolchains_xml_override, "toolchains.xml")

    def extensions_xml(self) -> Path:
        return self._file_or_default(self.extensions_xml_override, "extensions.xml")

    # -- installation only ----------------------------------------------

    def bin(self) -> Path:
        return self._installation_root("bin") / "bin"

    def boot(self) -> Path:
        return self._installation_root("boot") / "boot"

    def lib(self) -> Path:
        return self._installation_root("lib") / "lib"

    def lib_ext(self) -> Path:
        return self.lib() / "ext"

    # -- user only ------------------------------------------------------

    def maven_properties(self) -> Path:
        if self.kind is not BasedirKind.USER:
            raise ValueError("maven_properties() is only defined for user basedirs")
        return self._file_or_default(self.maven_properties_override, "maven.properties")

    # -- helpers --------------------------------------------------------

    def _file_or_default(self, override: Path | None, name: str) -> Path:
        if override is not None:
            return override
        return self.conf() / name

    def _installation_root(self, getter: str) -> Path:
        if self.kind is not BasedirKind.INSTALLATION:
            raise ValueError(f"{getter}() is only defined for installation basedirs")
        return self.root


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def create_basedir(
    kind: BasedirKind,
    root: Path,
    overrides: BasedirOverrides | None = None,
) -> Basedir:
    """Validate *root* and *overrides* and return an immutable Basedir.

    The values of *overrides* are copied; later changes to the struct do
    not affect the returned instance.

    Raises
    ------
    InvalidBasedirError
        See :class:`Basedir`.
    """
    given = overrides if overrides is not None else BasedirOverrides()
    return Basedir(
        kind=kind,
        root=root,
        conf_override=given.conf,
        settings_xml_override=given.settings_xml,
        toolchains_xml_override=given.toolchains_xml,
        extensions_xml_override=given.extensions_xml,
        maven_properties_override=given.maven_properties,
    )


def installation_basedir(root: Path, overrides: BasedirOverrides | None = None) -> Basedir:
    """Shorthand for ``create_basedir(BasedirKind.INSTALLATION, ...)``."""
    return create_basedir(BasedirKind.INSTALLATION, root, overrides)


def user_basedir(root: Path, overrides: BasedirOverrides | None = None) -> Basedir:
    """Shorthand for ``create_basedir(BasedirKind.USER, ...)``."""
    return create_basedir(BasedirKind.USER, root, overrides)
