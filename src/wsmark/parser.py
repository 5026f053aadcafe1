"""Line event parser.

Consumes the token stream from Lexer and builds typed line events.
Produces immutable (frozen) dataclass events.

Architecture:
The lexer has already decided the class of every line; the parser extracts
each payload. Text lines go through `RunScannerMixin`, the only place where
a document can be rejected.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per parse
operation. The resulting events are immutable and safe to share.

"""

from __future__ import annotations

from wsmark.codes import strip_control_codes
from wsmark.events import (
    Comment,
    Heading,
    IgnoredCommand,
    InsertFile,
    LineEvent,
    Modifier,
    PageBreak,
    PageBreakChar,
    SetLeftMargin,
    TextLine,
)
from wsmark.lexer import Lexer
from wsmark.lexer.classifiers.heading import HEADING_LEVELS
from wsmark.parsing import RunScannerMixin
from wsmark.tokens import Token, TokenType


class Parser(RunScannerMixin):
    """Parser for WordStar document text.

    Usage:
            >>> parser = Parser(".h2 Intro\\n\\x02Hello\\x02 world")
            >>> parser.parse()
        [Heading(level=2, text='Intro', ...), TextLine(runs=(Run(...BOLD, 'Hello'), ...)]

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_modifier",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Document text with the file header already removed
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._modifier = Modifier.PLAIN

    def parse(self) -> list[LineEvent]:
        """Parse source into line events, in input order.

        Raises:
            MalformedInputError: If a line matches no classification rule.

        """
        events: list[LineEvent] = []
        for token in Lexer(self._source, self._source_file).tokenize():
            if token.type == TokenType.EOF:
                break
            events.append(self._parse_line(token))
        return events

    def _parse_line(self, token: Token) -> LineEvent:
        """Build the event for one classified line."""
        value = token.value
        location = token.location

        match token.type:
            case TokenType.COMMENT:
                text = strip_control_codes(value[2:]).lstrip(" ")
                return Comment(location, text)
            case TokenType.HEADING:
                return Heading(location, HEADING_LEVELS[value[:3]], value[3:].lstrip(" "))
            case TokenType.INSERT_FILE:
                return InsertFile(location, value[3:].lstrip(" "))
            case TokenType.LEFT_MARGIN:
                argument = value[3:].strip(" ")
                return SetLeftMargin(location, int(argument) if argument else None)
            case TokenType.PAGE_BREAK:
                return PageBreak(location)
            case TokenType.IGNORED_COMMAND:
                return IgnoredCommand(location)
            case TokenType.PAGE_BREAK_CHAR:
                return PageBreakChar(location)
            case TokenType.TEXT_LINE:
                return TextLine(location, self._scan_runs(token))
            case _:
                msg = f"Unexpected token type: {token.type.name}"
                raise ValueError(msg)
