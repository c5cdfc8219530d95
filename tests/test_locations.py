"""Tests for basedir resolution from options (infra/locations.py).

Coverage:
* Installation root precedence: ``-Dmaven.home`` > ``MAVEN_HOME`` > none.
* Installation overrides prefer ``-is``/``-it`` over deprecated ``-gs``/``-gt``.
* User root precedence: ``-Duser.home`` > ``Path.home()``.
* Relative overrides are anchored at the working directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from mvn_cling.core.options import parse_options
from mvn_cling.exceptions import InvalidBasedirError
from mvn_cling.infra.locations import resolve_installation_basedir, resolve_user_basedir


def _options(*args: str):
    return parse_options("mvn", list(args))


# ---------------------------------------------------------------------------
# Installation
# ---------------------------------------------------------------------------

class TestInstallationResolution:
    def test_no_root_yields_none(self, tmp_path: Path) -> None:
        assert resolve_installation_basedir(_options(), {}, cwd=tmp_path) is None

    def test_root_from_environment(self, tmp_path: Path) -> None:
        home = tmp_path / "maven"
        basedir = resolve_installation_basedir(_options(), {"MAVEN_HOME": str(home)}, cwd=tmp_path)
        assert basedir is not None
        assert basedir.root == home
        assert basedir.settings_xml() == home / "conf" / "settings.xml"

    def test_property_beats_environment(self, tmp_path: Path) -> None:
        options = _options(f"-Dmaven.home={tmp_path / 'prop'}")
        basedir = resolve_installation_basedir(
            options, {"MAVEN_HOME": str(tmp_path / "env")}, cwd=tmp_path,
        )
        assert basedir is not None
        assert basedir.root == tmp_path / "prop"

    def test_install_settings_preferred_over_global(self, tmp_path: Path) -> None:
        options = _options("-is", "install.xml", "-gs", "global.xml")
        basedir = resolve_installation_basedir(
            options, {"MAVEN_HOME": str(tmp_path / "m")}, cwd=tmp_path,
        )
        assert basedir is not None
        assert basedir.settings_xml() == tmp_path / "install.xml"

    def test_global_aliases_used_as_fallback(self, tmp_path: Path) -> None:
        options = _options("-gs", "global.xml", "-gt", "global-tc.xml")
        basedir = resolve_installation_basedir(
            options, {"MAVEN_HOME": str(tmp_path / "m")}, cwd=tmp_path,
        )
        assert basedir is not None
        assert basedir.settings_xml() == tmp_path / "global.xml"
        assert basedir.toolchains_xml() == tmp_path / "global-tc.xml"

    def test_file_root_fails(self, tmp_path: Path) -> None:
        root = tmp_path / "maven"
        root.write_text("", encoding="utf-8")
        with pytest.raises(InvalidBasedirError):
            resolve_installation_basedir(_options(), {"MAVEN_HOME": str(root)}, cwd=tmp_path)


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

class TestUserResolution:
    def test_defaults_to_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        basedir = resolve_user_basedir(_options(), cwd=tmp_path)
        assert basedir.root == tmp_path
        assert basedir.settings_xml() == tmp_path / ".m2" / "settings.xml"

    def test_user_home_property(self, tmp_path: Path) -> None:
        basedir = resolve_user_basedir(_options(f"-Duser.home={tmp_path / 'u'}"), cwd=tmp_path)
        assert basedir.conf() == tmp_path / "u" / ".m2"

    def test_conf_property(self, tmp_path: Path) -> None:
        options = _options(f"-Duser.home={tmp_path}", "-Dmaven.user.conf=cfg")
        basedir = resolve_user_basedir(options, cwd=tmp_path)
        assert basedir.conf() == tmp_path / "cfg"
        assert basedir.maven_properties() == tmp_path / "cfg" / "maven.properties"

    def test_relative_overrides_anchor_at_cwd(self, tmp_path: Path) -> None:
        options = _options(f"-Duser.home={tmp_path}", "-s", "my/settings.xml", "-t", "tc.xml")
        basedir = resolve_user_basedir(options, cwd=tmp_path / "work")
        assert basedir.settings_xml() == tmp_path / "work" / "my" / "settings.xml"
        assert basedir.toolchains_xml() == tmp_path / "work" / "tc.xml"

    def test_absolute_override_kept(self, tmp_path: Path) -> None:
        settings = tmp_path / "abs.xml"
        options = _options(f"-Duser.home={tmp_path}", "-s", str(settings))
        basedir = resolve_user_basedir(options, cwd=tmp_path / "work")
        assert basedir.settings_xml() == settings

    def test_directory_settings_override_fails(self, tmp_path: Path) -> None:
        options = _options(f"-Duser.home={tmp_path}", "-s", str(tmp_path))
        with pytest.raises(InvalidBasedirError):
            resolve_user_basedir(options, cwd=tmp_path)
