"""Tests for base directories (infra/basedir.py).

All filesystem fixtures live under ``tmp_path``.

Coverage:
* ``validate_directory`` / ``validate_file`` accept unset and missing paths.
* Construction fails fast on a wrong-typed root or override.
* Installation and user default resolution.
* Overrides win over defaults and are returned verbatim.
* Getters are pure after construction.
"""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest

from mvn_cling.exceptions import InvalidBasedirError
from mvn_cling.infra.basedir import (
    Basedir,
    BasedirKind,
    BasedirOverrides,
    create_basedir,
    installation_basedir,
    user_basedir,
    validate_directory,
    validate_file,
)


def _file(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<settings/>", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

class TestValidateDirectory:
    def test_none_is_valid(self) -> None:
        assert validate_directory(None) is None

    def test_missing_is_valid(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"
        assert validate_directory(missing) == missing

    def test_existing_directory_is_valid(self, tmp_path: Path) -> None:
        assert validate_directory(tmp_path) == tmp_path

    def test_existing_file_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidBasedirError, match="not a directory"):
            validate_directory(_file(tmp_path / "plain"))

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_symlink_to_directory_is_valid(self, tmp_path: Path) -> None:
        target = tmp_path / "real"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)
        assert validate_directory(link) == link


class TestValidateFile:
    def test_none_is_valid(self) -> None:
        assert validate_file(None) is None

    def test_missing_is_valid(self, tmp_path: Path) -> None:
        missing = tmp_path / "settings.xml"
        assert validate_file(missing) == missing

    def test_existing_file_is_valid(self, tmp_path: Path) -> None:
        path = _file(tmp_path / "settings.xml")
        assert validate_file(path) == path

    def test_directory_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidBasedirError, match="not a file"):
            validate_file(tmp_path)

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_dangling_symlink_is_valid(self, tmp_path: Path) -> None:
        link = tmp_path / "dangling.xml"
        link.symlink_to(tmp_path / "gone.xml")
        assert validate_file(link) == link


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    @pytest.mark.parametrize("kind", list(BasedirKind))
    def test_file_root_fails(self, tmp_path: Path, kind: BasedirKind) -> None:
        with pytest.raises(InvalidBasedirError):
            create_basedir(kind, _file(tmp_path / "root"))

    @pytest.mark.parametrize("kind", list(BasedirKind))
    def test_missing_root_succeeds(self, tmp_path: Path, kind: BasedirKind) -> None:
        basedir = create_basedir(kind, tmp_path / "later")
        assert basedir.root == tmp_path / "later"
        assert basedir.kind is kind

    def test_none_root_fails(self) -> None:
        with pytest.raises(InvalidBasedirError):
            create_basedir(BasedirKind.USER, None)  # type: ignore[arg-type]

    def test_directory_as_file_override_fails(self, tmp_path: Path) -> None:
        overrides = BasedirOverrides(settings_xml=tmp_path)
        with pytest.raises(InvalidBasedirError):
            user_basedir(tmp_path / "home", overrides)

    def test_file_as_conf_override_fails(self, tmp_path: Path) -> None:
        overrides = BasedirOverrides(conf=_file(tmp_path / "conf"))
        with pytest.raises(InvalidBasedirError):
            user_basedir(tmp_path / "home", overrides)

    @pytest.mark.parametrize("field", ["conf", "maven_properties"])
    def test_user_only_overrides_rejected_for_installation(
        self, tmp_path: Path, field: str,
    ) -> None:
        overrides = BasedirOverrides(**{field: tmp_path / "x"})
        with pytest.raises(InvalidBasedirError, match=field):
            installation_basedir(tmp_path, overrides)

    def test_caller_overrides_are_copied(self, tmp_path: Path) -> None:
        overrides = BasedirOverrides(settings_xml=tmp_path / "a.xml")
        basedir = user_basedir(tmp_path, overrides)
        overrides.settings_xml = tmp_path / "b.xml"
        assert basedir.settings_xml() == tmp_path / "a.xml"

    def test_frozen(self, tmp_path: Path) -> None:
        basedir = user_basedir(tmp_path)
        with pytest.raises(dataclasses.FrozenInstanceError):
            basedir.root = Path("/elsewhere")  # type: ignore[misc]

    def test_stored_overrides_are_frozen(self, tmp_path: Path) -> None:
        basedir = user_basedir(tmp_path / "home")
        with pytest.raises(dataclasses.FrozenInstanceError):
            basedir.settings_xml_override = tmp_path  # type: ignore[misc]
        assert basedir.settings_xml() == tmp_path / "home" / ".m2" / "settings.xml"

    @pytest.mark.parametrize("kind", list(BasedirKind))
    def test_direct_construction_validates_root(self, tmp_path: Path, kind: BasedirKind) -> None:
        with pytest.raises(InvalidBasedirError, match="not a directory"):
            Basedir(kind, _file(tmp_path / "root"))

    def test_direct_construction_validates_overrides(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidBasedirError, match="not a file"):
            Basedir(BasedirKind.USER, tmp_path / "home", settings_xml_override=tmp_path)

    def test_direct_construction_rejects_user_only_override(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidBasedirError, match="conf"):
            Basedir(BasedirKind.INSTALLATION, tmp_path, conf_override=tmp_path / "conf")


# ---------------------------------------------------------------------------
# Installation basedir
# ---------------------------------------------------------------------------

class TestInstallationBasedir:
    def test_layout(self) -> None:
        root = Path("/opt/maven")
        basedir = installation_basedir(root)
        assert basedir.bin() == root / "bin"
        assert basedir.boot() == root / "boot"
        assert basedir.conf() == root / "conf"
        assert basedir.lib() == root / "lib"
        assert basedir.lib_ext() == root / "lib" / "ext"

    def test_default_files(self) -> None:
        root = Path("/opt/maven")
        basedir = installation_basedir(root)
        assert basedir.settings_xml() == root / "conf" / "settings.xml"
        assert basedir.toolchains_xml() == root / "conf" / "toolchains.xml"
        assert basedir.extensions_xml() == root / "conf" / "extensions.xml"

    def test_overrides(self, tmp_path: Path) -> None:
        settings = _file(tmp_path / "custom" / "s.xml")
        overrides = BasedirOverrides(
            settings_xml=settings,
            toolchains_xml=tmp_path / "t.xml",
            extensions_xml=tmp_path / "e.xml",
        )
        basedir = installation_basedir(tmp_path / "maven", overrides)
        assert basedir.settings_xml() == settings
        assert basedir.toolchains_xml() == tmp_path / "t.xml"
        assert basedir.extensions_xml() == tmp_path / "e.xml"

    def test_maven_properties_is_user_only(self) -> None:
        with pytest.raises(ValueError):
            installation_basedir(Path("/opt/maven")).maven_properties()


# ---------------------------------------------------------------------------
# User basedir
# ---------------------------------------------------------------------------

class TestUserBasedir:
    def test_defaults(self) -> None:
        root = Path("/home/u")
        basedir = user_basedir(root)
        assert basedir.conf() == Path("/home/u/.m2")
        assert basedir.settings_xml() == Path("/home/u/.m2/settings.xml")
        assert basedir.toolchains_xml() == Path("/home/u/.m2/toolchains.xml")
        assert basedir.extensions_xml() == Path("/home/u/.m2/extensions.xml")
        assert basedir.maven_properties() == Path("/home/u/.m2/maven.properties")

    def test_conf_override_moves_defaults(self, tmp_path: Path) -> None:
        conf = tmp_path / "conf"
        basedir = user_basedir(tmp_path / "home", BasedirOverrides(conf=conf))
        assert basedir.conf() == conf
        assert basedir.settings_xml() == conf / "settings.xml"
        assert basedir.maven_properties() == conf / "maven.properties"

    def test_settings_override_wins_regardless_of_conf(self, tmp_path: Path) -> None:
        settings = tmp_path / "elsewhere" / "my-settings.xml"
        overrides = BasedirOverrides(conf=tmp_path / "conf", settings_xml=settings)
        basedir = user_basedir(tmp_path / "home", overrides)
        assert basedir.settings_xml() == settings
        assert basedir.toolchains_xml() == tmp_path / "conf" / "toolchains.xml"

    def test_properties_override(self, tmp_path: Path) -> None:
        props = _file(tmp_path / "maven.properties")
        basedir = user_basedir(tmp_path, BasedirOverrides(maven_properties=props))
        assert basedir.maven_properties() == props

    @pytest.mark.parametrize("getter", ["bin", "boot", "lib", "lib_ext"])
    def test_installation_getters_rejected(self, getter: str) -> None:
        with pytest.raises(ValueError):
            getattr(user_basedir(Path("/home/u")), getter)()


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------

class TestPurity:
    def test_getters_do_not_touch_filesystem(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        basedir = user_basedir(tmp_path)

        def _boom(self: Path, *args: object, **kwargs: object) -> bool:
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr(Path, "exists", _boom)
        monkeypatch.setattr(Path, "is_dir", _boom)
        monkeypatch.setattr(Path, "is_file", _boom)
        assert basedir.settings_xml() == tmp_path / ".m2" / "settings.xml"
        assert basedir.maven_properties() == tmp_path / ".m2" / "maven.properties"

    def test_repeated_calls_are_equal(self) -> None:
        basedir = installation_basedir(Path("/opt/maven"))
        assert basedir.settings_xml() == basedir.settings_xml()
        assert basedir.lib_ext() == basedir.lib_ext()
