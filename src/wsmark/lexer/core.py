"""Line lexer for WordStar documents.

Implements a window-based approach: find the end of the line, classify the
whole line, then commit. Every iteration advances by at least one line, so
the scan is O(n) with no rewinds.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from wsmark.codes import EOF_MARKER, IGNORED_CODES, LINE_END_CHARS
from wsmark.lexer.classifiers import (
    CommentClassifierMixin,
    DotCommandClassifierMixin,
    HeadingClassifierMixin,
    PageBreakClassifierMixin,
)
from wsmark.tokens import Token, TokenType
from wsmark.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    CommentClassifierMixin,
    HeadingClassifierMixin,
    DotCommandClassifierMixin,
    PageBreakClassifierMixin,
):
    """Line classifier for WordStar document text.

    For each line:
    1. Scan to end of line (newline, carriage return or end-of-file marker)
    2. Classify the line (first match wins: comment, heading, dot command,
       form feed, normal text)
    3. Commit position past the line terminator

    The first end-of-file marker ends the document.

    Usage:
            >>> lexer = Lexer(".he Title\\r\\nBody\\x1a")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(HEADING, '.he Title', 1:1)
        Token(TEXT_LINE, 'Body', 2:1)
        Token(EOF, '', 2:6)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Document text with the file header already removed
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into one token per line.

        Yields:
            Token objects one at a time, ending with exactly one EOF token.
        """
        self._skip_leading_codes()

        source = self._source
        source_len = self._source_len
        while self._pos < source_len and source[self._pos] != EOF_MARKER:
            yield self._scan_line()

        if self._pos < source_len:
            self._skip_eof_markers()

        yield self._make_token_at_current(TokenType.EOF, "")

    def _scan_line(self) -> Token:
        """Classify the line at the current position and commit past it."""
        self._save_location()
        line_start = self._pos
        line_end = self._find_line_end()
        line = self._source[line_start:line_end]

        token = (
            self._try_classify_comment(line, line_start, line_end)
            or self._try_classify_heading(line, line_start, line_end)
            or self._try_classify_dot_command(line, line_start, line_end)
            or self._try_classify_page_break_char(line, line_start, line_end)
            or self._make_token(TokenType.TEXT_LINE, line, line_start, line_end)
        )

        self._commit_to(line_end)
        return token

    # =========================================================================
    # Window navigation helpers
    # =========================================================================

    def _find_line_end(self) -> int:
        """Find the end of the current line.

        Uses str.find per terminator (C implementation) and keeps the nearest.

        Returns:
            Position of the first newline, carriage return or end-of-file
            marker, or end of source.
        """
        end = self._source_len
        for char in LINE_END_CHARS:
            idx = self._source.find(char, self._pos, end)
            if idx != -1:
                end = idx
        return end

    def _commit_to(self, line_end: int) -> None:
        """Commit position to line_end, consuming the newline if present.

        ``\\r\\n`` counts as one terminator. An end-of-file marker is left in
        place for tokenize() to see.

        Args:
            line_end: Position to commit to.
        """
        self._col += line_end - self._pos
        self._pos = line_end
        if self._pos >= self._source_len:
            return

        char = self._source[self._pos]
        if char == "\r":
            self._pos += 1
            if self._pos < self._source_len and self._source[self._pos] == "\n":
                self._pos += 1
        elif char == "\n":
            self._pos += 1
        else:
            return

        self._lineno += 1
        self._col = 1

    def _skip_leading_codes(self) -> None:
        """Drop stray control codes left before the first line.

        Lossy upstream conversion can leave ignored control codes in front of
        the first real line; they would otherwise hide a leading dot command.
        """
        start = self._pos
        while self._pos < self._source_len and self._source[self._pos] in IGNORED_CODES:
            self._pos += 1
        if self._pos > start:
            self._col += self._pos - start
            logger.debug("Skipped %d leading control codes", self._pos - start)

    def _skip_eof_markers(self) -> None:
        """Consume the end-of-file marker run and any padding after it."""
        start = self._pos
        while self._pos < self._source_len and self._source[self._pos] == EOF_MARKER:
            self._pos += 1
        if self._pos < self._source_len:
            logger.debug(
                "Discarding %d characters after end-of-file marker at offset %d",
                self._source_len - self._pos,
                start,
            )
        self._col += self._pos - start
        self._pos = self._source_len

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location for O(1) token location creation.

        Call this at the START of scanning a line, before any position changes.
        """
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        end_pos: int,
    ) -> Token:
        """Create a Token with raw coordinates (lazy SourceLocation).

        Args:
            token_type: The token type.
            value: The raw line content.
            start_pos: Start position in source.
            end_pos: End position in source (terminator excluded).

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=start_pos,
            _end_offset=end_pos,
            _source_file=self._source_file,
        )

    def _make_token_at_current(self, token_type: TokenType, value: str) -> Token:
        """Create a Token at current position (for EOF)."""
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
