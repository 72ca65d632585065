"""Tests for target path resolution."""

from pathlib import Path

from obsidian_skill.paths import resolve_path, resolve_target


class TestResolvePath:
    def test_absolute_path_unchanged(self, tmp_path):
        assert resolve_path("/absolute/path", tmp_path) == Path("/absolute/path")

    def test_relative_path_uses_base_dir(self, tmp_path):
        assert resolve_path("relative/dir", tmp_path) == tmp_path / "relative/dir"

    def test_no_base_dir_returns_as_is(self):
        assert resolve_path("relative/dir", None) == Path("relative/dir")


class TestResolveTarget:
    def test_tilde_expands_to_home(self, tmp_path, monkeypatch):
        """A leading ~ resolves the same as the explicit home directory."""
        home = tmp_path / "home" / "u"
        home.mkdir(parents=True)
        monkeypatch.setenv("HOME", str(home))

        assert resolve_target("~/proj2") == home / "proj2"
        assert resolve_target("~/proj2") == resolve_target(str(home / "proj2"))

    def test_relative_to_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_target("proj") == Path.cwd() / "proj"

    def test_relative_to_explicit_base(self, tmp_path):
        assert resolve_target("proj", base_dir=tmp_path) == tmp_path / "proj"

    def test_surrounding_whitespace_is_ignored(self, tmp_path):
        assert resolve_target("  proj \n", base_dir=tmp_path) == tmp_path / "proj"

    def test_blank_input_means_base_dir(self, tmp_path):
        assert resolve_target("", base_dir=tmp_path) == tmp_path
        assert resolve_target("   ", base_dir=tmp_path) == tmp_path
