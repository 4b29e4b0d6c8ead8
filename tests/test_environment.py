"""
Tests for environment.py module.

Tests cover:
- OSEnvironment: real process cwd and variables
- ShellEnvironment: private cwd and variables
"""

import os

import pytest
from minish.environment import OSEnvironment, ShellEnvironment
from minish.exceptions import DirectoryNotFoundError, FileSystemError


class TestOSEnvironment:
    """Tests for the process-backed environment."""

    def test_get_current_dir(self, tmp_path, monkeypatch):
        """Test reading the real working directory."""
        monkeypatch.chdir(tmp_path)
        assert OSEnvironment().get_current_dir() == os.getcwd()

    def test_set_current_dir(self, tmp_path, monkeypatch):
        """Test changing the real working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "sub").mkdir()
        env = OSEnvironment()
        env.set_current_dir("sub")
        assert os.getcwd() == str((tmp_path / "sub").resolve())

    def test_set_current_dir_missing(self, tmp_path, monkeypatch):
        """Test a failed change leaves the cwd alone."""
        monkeypatch.chdir(tmp_path)
        before = os.getcwd()
        with pytest.raises(DirectoryNotFoundError) as exc_info:
            OSEnvironment().set_current_dir("/definitely/missing/path")
        assert os.getcwd() == before
        assert str(exc_info.value) == "/definitely/missing/path: No such file or directory"

    def test_get_env(self, monkeypatch):
        """Test reading variables from os.environ."""
        monkeypatch.setenv("MINISH_TEST_VAR", "value")
        monkeypatch.delenv("MINISH_UNSET_VAR", raising=False)
        env = OSEnvironment()
        assert env.get_env("MINISH_TEST_VAR") == "value"
        assert env.get_env("MINISH_UNSET_VAR") is None

    def test_as_dict_is_a_copy(self, monkeypatch):
        """Test the snapshot does not write through to os.environ."""
        monkeypatch.setenv("MINISH_TEST_VAR", "value")
        snapshot = OSEnvironment().as_dict()
        snapshot["MINISH_TEST_VAR"] = "changed"
        assert os.environ["MINISH_TEST_VAR"] == "value"


class TestShellEnvironment:
    """Tests for the in-process environment."""

    def test_initial_state(self, tmp_path):
        """Test cwd and variables come from the constructor."""
        env = ShellEnvironment(cwd=str(tmp_path), env={'PATH': '/bin'})
        assert env.get_current_dir() == str(tmp_path)
        assert env.get_env('PATH') == '/bin'
        assert env.get_env('HOME') is None

    def test_defaults_to_process_state(self, monkeypatch):
        """Test defaults copy the real cwd and variables."""
        monkeypatch.setenv("MINISH_TEST_VAR", "value")
        env = ShellEnvironment()
        assert env.get_current_dir() == os.getcwd()
        assert env.get_env("MINISH_TEST_VAR") == "value"

    def test_set_relative_dir(self, tmp_path):
        """Test relative changes resolve against the tracked cwd."""
        (tmp_path / "a" / "b").mkdir(parents=True)
        env = ShellEnvironment(cwd=str(tmp_path))
        env.set_current_dir("a")
        env.set_current_dir("b")
        assert env.get_current_dir() == str(tmp_path / "a" / "b")
        env.set_current_dir("..")
        assert env.get_current_dir() == str(tmp_path / "a")

    def test_does_not_touch_process_cwd(self, tmp_path):
        """Test the real cwd is untouched."""
        before = os.getcwd()
        env = ShellEnvironment(cwd="/")
        env.set_current_dir(str(tmp_path))
        assert os.getcwd() == before

    def test_set_missing_dir(self, tmp_path):
        """Test a missing target raises and keeps the cwd."""
        env = ShellEnvironment(cwd=str(tmp_path))
        with pytest.raises(FileSystemError):
            env.set_current_dir("nope")
        assert env.get_current_dir() == str(tmp_path)

    def test_set_file_as_dir(self, tmp_path):
        """Test a regular file is not a valid target."""
        (tmp_path / "file.txt").write_text("x")
        env = ShellEnvironment(cwd=str(tmp_path))
        with pytest.raises(DirectoryNotFoundError):
            env.set_current_dir("file.txt")

    def test_set_unsearchable_dir(self, tmp_path, monkeypatch):
        """Test a directory without search permission is rejected."""
        locked = tmp_path / "locked"
        locked.mkdir()
        real_access = os.access
        monkeypatch.setattr(
            os, "access",
            lambda path, mode: False if path == str(locked) else real_access(path, mode),
        )
        env = ShellEnvironment(cwd=str(tmp_path))
        with pytest.raises(DirectoryNotFoundError):
            env.set_current_dir("locked")
        assert env.get_current_dir() == str(tmp_path)

    @pytest.mark.skipif(os.geteuid() == 0, reason="root can enter any directory")
    def test_unsearchable_dir_matches_os_environment(self, tmp_path, monkeypatch):
        """Test both environments refuse the same directory."""
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o600)
        try:
            monkeypatch.chdir(tmp_path)
            with pytest.raises(DirectoryNotFoundError):
                OSEnvironment().set_current_dir("locked")
            with pytest.raises(DirectoryNotFoundError):
                ShellEnvironment(cwd=str(tmp_path)).set_current_dir("locked")
        finally:
            locked.chmod(0o700)

    def test_variables_are_private(self, monkeypatch):
        """Test changes to the copy do not leak into os.environ."""
        monkeypatch.delenv("MINISH_PRIVATE", raising=False)
        env = ShellEnvironment()
        env.env["MINISH_PRIVATE"] = "1"
        assert "MINISH_PRIVATE" not in os.environ
        assert env.as_dict()["MINISH_PRIVATE"] == "1"

    def test_repr(self, tmp_path):
        """Test representation mentions the cwd."""
        env = ShellEnvironment(cwd=str(tmp_path), env={})
        assert str(tmp_path) in repr(env)
