"""Tests for home-directory expansion and the config layout."""

import os
from unittest.mock import patch

import pytest

from wtf.config.errors import HomeDirUnavailable, InvalidPathFormat
from wtf.config.paths import (
    ConfigLayout,
    current_home_dir,
    expand_home_dir,
)


def alice() -> str:
    return "/home/alice"


@pytest.mark.skipif(os.name == "nt", reason="POSIX paths")
class TestExpandHomeDir:
    """Tests for expand_home_dir."""

    def test_empty_path_unchanged(self):
        """Empty path is returned as-is."""
        assert expand_home_dir("", home=alice) == ""

    @pytest.mark.parametrize(
        "path", ["/etc/wtf/config.yml", "relative/config.yml", "./x", "a~b"]
    )
    def test_paths_without_marker_unchanged(self, path: str):
        """Paths that don't start with ~ are returned as-is."""
        assert expand_home_dir(path, home=alice) == path

    def test_paths_without_marker_skip_home_lookup(self):
        """No home lookup happens for paths without ~."""

        def failing_home() -> str:
            raise AssertionError("home looked up")

        assert expand_home_dir("/tmp/x", home=failing_home) == "/tmp/x"

    def test_expands_config_dir(self):
        """~/.config/wtf/ expands under the home directory, keeping the slash."""
        assert expand_home_dir("~/.config/wtf/", home=alice) == "/home/alice/.config/wtf/"

    def test_expands_file_path(self):
        """~/.wtf/config.yml expands to an absolute file path."""
        assert expand_home_dir("~/.wtf/config.yml", home=alice) == "/home/alice/.wtf/config.yml"

    @pytest.mark.parametrize("home", ["/home/alice", "/root", "/var/lib/users/bob"])
    @pytest.mark.parametrize("suffix", ["config.yml", ".config/wtf", "a/b/c.txt"])
    def test_home_plus_suffix(self, home: str, suffix: str):
        """~/suffix resolves to home/suffix for any home directory."""
        assert expand_home_dir(f"~/{suffix}", home=lambda: home) == f"{home}/{suffix}"

    def test_bare_marker(self):
        """~ on its own is the home directory."""
        assert expand_home_dir("~", home=alice) == "/home/alice"

    def test_backslash_separator_accepted(self):
        """~\\ is treated like ~/."""
        assert expand_home_dir("~\\", home=alice) == "/home/alice/"

    def test_normalizes_result(self):
        """Redundant segments are collapsed."""
        assert expand_home_dir("~/a/../b//c", home=alice) == "/home/alice/b/c"

    @pytest.mark.parametrize("path", ["~//x", "~///x", "~\\\\/x"])
    def test_repeated_separators_stay_under_home(self, path: str):
        """Extra separators after ~ never escape the home directory."""
        assert expand_home_dir(path, home=alice) == "/home/alice/x"

    @pytest.mark.parametrize("path", ["~alice", "~alice/.config", "~.wtf"])
    def test_user_shorthand_rejected(self, path: str):
        """~ followed by a non-separator raises InvalidPathFormat."""
        with pytest.raises(InvalidPathFormat):
            expand_home_dir(path, home=alice)

    def test_empty_home_rejected(self):
        """An empty home directory raises HomeDirUnavailable."""
        with pytest.raises(HomeDirUnavailable):
            expand_home_dir("~/x", home=lambda: "")

    def test_defaults_to_current_home_dir(self):
        """Without a lookup, the current user's record is used."""
        with patch("wtf.config.paths.current_home_dir", return_value="/home/carol"):
            assert expand_home_dir("~/x") == "/home/carol/x"


@pytest.mark.skipif(os.name == "nt", reason="uses the pwd module")
class TestCurrentHomeDir:
    """Tests for current_home_dir."""

    def test_reads_user_record(self):
        """Returns pw_dir from the password database."""
        with patch("pwd.getpwuid") as getpwuid:
            getpwuid.return_value.pw_dir = "/home/dave"
            assert current_home_dir() == "/home/dave"

    def test_missing_user_record(self):
        """A missing user record raises HomeDirUnavailable."""
        with patch("pwd.getpwuid", side_effect=KeyError("uid not found")):
            with pytest.raises(HomeDirUnavailable):
                current_home_dir()

    def test_empty_home_in_record(self):
        """An empty pw_dir raises HomeDirUnavailable."""
        with patch("pwd.getpwuid") as getpwuid:
            getpwuid.return_value.pw_dir = ""
            with pytest.raises(HomeDirUnavailable):
                current_home_dir()


@pytest.mark.skipif(os.name == "nt", reason="POSIX paths")
class TestConfigLayout:
    """Tests for ConfigLayout."""

    def test_default_locations(self):
        """Default layout uses the XDG and legacy locations."""
        layout = ConfigLayout(home=alice)

        assert layout.config_dir == "~/.config/wtf/"
        assert str(layout.resolve_base_dir()) == "/home/alice/.config"
        assert str(layout.resolve_config_dir()) == "/home/alice/.config/wtf"
        assert str(layout.resolve_legacy_dir()) == "/home/alice/.wtf"

    def test_resolve_file(self):
        """Managed files live inside the config directory."""
        layout = ConfigLayout(home=alice)

        assert str(layout.resolve_file("secrets.yml")) == "/home/alice/.config/wtf/secrets.yml"

    def test_absolute_base_dir(self, tmp_path):
        """An absolute base directory is used without a home lookup."""
        layout = ConfigLayout(xdg_config_dir=str(tmp_path))

        assert layout.resolve_config_dir() == tmp_path / "wtf"

    def test_is_immutable(self):
        """Layouts can't be modified after construction."""
        layout = ConfigLayout()

        with pytest.raises(AttributeError):
            layout.app_name = "other"  # type: ignore[misc]
