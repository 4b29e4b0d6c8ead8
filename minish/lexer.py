"""
Quote-aware tokenizer for minish command lines.

A line is split into words on unquoted whitespace. Single quotes toggle a
quoted region and are never part of a word; whitespace inside a quoted
region is kept exactly as typed. The first word is the command name and the
rest are its arguments.
"""

from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from loguru import logger

from .exceptions import UnmatchedQuoteError

QUOTE_CHAR = "'"


class QuoteTracker:
    """
    Tracks whether the scanner is inside a single-quoted region.

    Example:
        >>> tracker = QuoteTracker()
        >>> tracker.process_char("'")
        True
        >>> tracker.is_quoted()
        True
    """

    def __init__(self):
        self.in_quote = False
        self.open_position: Optional[int] = None

    def process_char(self, char: str, position: int = 0) -> bool:
        """
        Feed one character to the tracker.

        Args:
            char: Character being scanned
            position: Offset of the character in the line

        Returns:
            True if the character was a quote delimiter (and must not be emitted)
        """
        if char != QUOTE_CHAR:
            return False

        self.in_quote = not self.in_quote
        self.open_position = position if self.in_quote else None
        return True

    def is_quoted(self) -> bool:
        """Check if currently inside a quoted region"""
        return self.in_quote

    def reset(self):
        """Reset to the unquoted state"""
        self.in_quote = False
        self.open_position = None


class ShellLexer:
    """
    Splits a single command line into words.

    After tokenize() returns, `unclosed_quote` holds an UnmatchedQuoteError
    when the line ended inside a quoted region, otherwise None.
    """

    def __init__(self, line: str):
        self.line = line.strip()
        self.tracker = QuoteTracker()
        self.unclosed_quote: Optional[UnmatchedQuoteError] = None

    def tokenize(self) -> List[str]:
        """
        Scan the line and return its words in order.

        Returns:
            List of words with quote markers removed

        Examples:
            >>> ShellLexer("echo   hello  world").tokenize()
            ['echo', 'hello', 'world']
            >>> ShellLexer("echo 'hello   world'").tokenize()
            ['echo', 'hello   world']
            >>> ShellLexer("echo a'b c'd").tokenize()
            ['echo', 'ab cd']
        """
        self.tracker.reset()
        self.unclosed_quote = None

        words: List[str] = []
        current: List[str] = []
        # A quoted '' still produces a word even though nothing was copied
        in_word = False

        for position, char in enumerate(self.line):
            if self.tracker.process_char(char, position):
                in_word = True
                continue

            if char.isspace() and not self.tracker.is_quoted():
                if in_word:
                    words.append(''.join(current))
                    current = []
                    in_word = False
                continue

            current.append(char)
            in_word = True

        if in_word:
            words.append(''.join(current))

        if self.tracker.is_quoted():
            self.unclosed_quote = UnmatchedQuoteError(
                self.line, QUOTE_CHAR, position=self.tracker.open_position
            )

        return words


@dataclass(frozen=True)
class ParsedCommand:
    """
    A command name and its arguments, ready for dispatch.

    Attributes:
        name: Command name ('' for the no-command sentinel)
        args: Arguments in the order typed
        unclosed_quote: True when the line ended inside a quoted region
    """

    name: str
    args: List[str] = field(default_factory=list)
    unclosed_quote: bool = False

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to run"""
        return not self.name

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"ParsedCommand({self.name} {args_str})"


NO_COMMAND = ParsedCommand('')


def tokenize(line: str, stderr: Optional[TextIO] = None) -> ParsedCommand:
    """
    Turn a raw input line into a ParsedCommand.

    An unclosed quote is not fatal: the diagnostic is written to stderr
    (when given) and the words collected so far are returned as if the
    quote had been closed at the end of the line.

    Args:
        line: Input line, with or without its trailing newline
        stderr: Optional stream for the unclosed quote diagnostic

    Returns:
        ParsedCommand, or NO_COMMAND for a blank line
    """
    lexer = ShellLexer(line)
    words = lexer.tokenize()

    if lexer.unclosed_quote is not None:
        logger.debug("unclosed quote at offset {} in {!r}", lexer.unclosed_quote.position, lexer.line)
        if stderr is not None:
            stderr.write(f"{lexer.unclosed_quote}\n")

    if not words:
        return NO_COMMAND

    return ParsedCommand(
        name=words[0],
        args=words[1:],
        unclosed_quote=lexer.unclosed_quote is not None,
    )
