"""
Pytest configuration and shared fixtures for minish tests.

This module provides reusable test fixtures for:
- Captured output streams
- In-process environments that never touch the real cwd
- Executable and non-executable files on a temporary search path
"""

import os

import pytest
from unittest.mock import Mock


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides buffer-backed streams for capturing builtin output.

    Returns:
        tuple: (stdout, stderr) OutputStream/ErrorStream objects

    Example:
        def test_command_output(capture_output):
            stdout, stderr = capture_output
            process = Process('echo', ['hi'], stdout=stdout, stderr=stderr)
            # ... run command ...
            assert stdout.get_value() == "hi\\n"
    """
    from minish.streams import OutputStream, ErrorStream

    return OutputStream.to_buffer(), ErrorStream.to_buffer()


@pytest.fixture
def make_file(tmp_path):
    """
    Provides a factory that creates files in temporary directories.

    Example:
        def test_lookup(make_file):
            path = make_file('bin1', 'foo', executable=True)
    """
    def factory(directory: str, name: str, executable: bool = True,
                content: str = "#!/bin/sh\nexit 0\n") -> str:
        target_dir = tmp_path / directory
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(content)
        mode = 0o755 if executable else 0o644
        os.chmod(path, mode)
        return str(path)

    return factory


@pytest.fixture
def shell_env(tmp_path):
    """
    Provides an in-process environment rooted at a temporary directory.

    PATH points at tmp_path/bin (created empty) and HOME at tmp_path/home.
    """
    from minish.environment import ShellEnvironment

    (tmp_path / "bin").mkdir(exist_ok=True)
    (tmp_path / "home").mkdir(exist_ok=True)

    return ShellEnvironment(
        cwd=str(tmp_path),
        env={
            'PATH': str(tmp_path / "bin"),
            'HOME': str(tmp_path / "home"),
        },
    )


@pytest.fixture
def mock_launcher():
    """Provides a launcher double that records calls and reports status 0"""
    from minish.launcher import ProcessLauncher

    launcher = Mock(spec=ProcessLauncher)
    launcher.launch.return_value = 0
    return launcher


@pytest.fixture
def dispatcher(shell_env, capture_output, mock_launcher):
    """Provides a Dispatcher wired to captured streams and a mock launcher"""
    from minish.dispatcher import Dispatcher

    stdout, stderr = capture_output
    return Dispatcher(shell_env, stdout=stdout, stderr=stderr, launcher=mock_launcher)


@pytest.fixture
def run_builtin(shell_env, capture_output):
    """
    Provides a helper that runs one builtin and returns (status, stdout, stderr).

    Example:
        def test_echo(run_builtin):
            status, out, err = run_builtin('echo', ['hi'])
            assert out == 'hi\\n'
    """
    from minish.builtins import classify, get_builtin
    from minish.context import CommandContext
    from minish.process import Process

    stdout, stderr = capture_output

    def runner(name, args):
        process = Process(
            command=name,
            args=list(args),
            stdout=stdout,
            stderr=stderr,
            executor=get_builtin(classify(name)),
            context=CommandContext(shell_env),
        )
        status = process.execute()
        return status, stdout.get_value(), stderr.get_value()

    return runner
