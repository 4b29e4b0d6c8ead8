"""
Stream wrappers for builtin input and output.

Builtins write through these wrappers so the same handler can print to the
terminal or into an in-memory buffer. External programs never see them:
child processes inherit the interpreter's real file descriptors.
"""

import io
import sys
from typing import Optional, TextIO


class InputStream:
    """Line-oriented reader over a text stream"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    @classmethod
    def from_stdin(cls) -> 'InputStream':
        return cls(sys.stdin)

    @classmethod
    def from_text(cls, text: str) -> 'InputStream':
        """Create an input stream over a fixed string (useful for testing)"""
        return cls(io.StringIO(text))

    def readline(self) -> str:
        """
        Read one line.

        Returns:
            The line including its terminator, or '' at end of input
        """
        return self.stream.readline()


class OutputStream:
    """Text writer used for builtin output"""

    def __init__(self, stream: TextIO):
        self.stream = stream

    @classmethod
    def from_stdout(cls) -> 'OutputStream':
        return cls(sys.stdout)

    @classmethod
    def to_buffer(cls) -> 'OutputStream':
        """Create a stream that collects everything written to it"""
        return cls(io.StringIO())

    def write(self, data: str) -> int:
        return self.stream.write(data)

    def flush(self):
        self.stream.flush()

    def get_value(self) -> Optional[str]:
        """
        Get everything written so far.

        Returns:
            Buffered text, or None when the stream is not an in-memory buffer
        """
        getvalue = getattr(self.stream, 'getvalue', None)
        return getvalue() if getvalue is not None else None


class ErrorStream(OutputStream):
    """Text writer used for diagnostics"""

    @classmethod
    def from_stderr(cls) -> 'ErrorStream':
        return cls(sys.stderr)
