"""
Tests for launcher.py module.

Child processes write straight to the inherited file descriptors, so output
is observed with capfd.
"""

import os
import sys

import pytest
from minish.exceptions import SpawnError
from minish.launcher import ProcessLauncher

SCRIPT = """#!/bin/sh
echo "argv0=$0"
echo "args=$*"
echo "cwd=$(pwd)"
echo "var=$MINISH_CHILD_VAR"
exit 3
"""


@pytest.fixture
def script(make_file):
    return make_file("bin", "report", content=SCRIPT)


class TestProcessLauncher:
    """Tests for ProcessLauncher.launch()."""

    def test_returns_child_status(self, script, capfd):
        """Test the child's exit status is returned."""
        assert ProcessLauncher().launch(script, []) == 3

    def test_passes_arguments(self, script, capfd):
        """Test arguments reach the child unchanged."""
        ProcessLauncher().launch(script, ["one", "two  three"])
        out, _ = capfd.readouterr()
        assert "args=one two  three" in out

    def test_argv0_defaults_to_path(self, script, capfd):
        """Test argv[0] is the path when no name is given."""
        ProcessLauncher().launch(script, [])
        out, _ = capfd.readouterr()
        assert f"argv0={script}" in out

    @pytest.mark.skipif(sys.version_info < (3, 10), reason="sys.orig_argv needs Python 3.10")
    def test_custom_argv0(self, capfd):
        """Test argv[0] can be the typed command name."""
        # A #! script always sees its own path as $0, so use a binary
        ProcessLauncher().launch(
            sys.executable,
            ["-c", "import sys; print(sys.orig_argv[0])"],
            argv0="custom",
        )
        out, _ = capfd.readouterr()
        assert out == "custom\n"

    def test_cwd_and_env(self, script, tmp_path, capfd):
        """Test the child runs in the given directory with the given variables."""
        workdir = tmp_path / "work"
        workdir.mkdir()
        env = dict(os.environ, MINISH_CHILD_VAR="hello")

        ProcessLauncher().launch(script, [], cwd=str(workdir), env=env)

        out, _ = capfd.readouterr()
        assert f"cwd={workdir.resolve()}" in out
        assert "var=hello" in out

    def test_missing_file_raises_spawn_error(self, tmp_path):
        """Test a vanished executable is a SpawnError."""
        missing = str(tmp_path / "gone")
        with pytest.raises(SpawnError) as exc_info:
            ProcessLauncher().launch(missing, [], argv0="gone")
        assert exc_info.value.command == "gone"
        assert "No such file or directory" in str(exc_info.value)

    def test_bad_interpreter_raises_spawn_error(self, make_file):
        """Test an unrunnable file is a SpawnError, not a crash."""
        path = make_file("bin", "broken", content="#!/definitely/missing/interpreter\n")
        with pytest.raises(SpawnError):
            ProcessLauncher().launch(path, [])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
