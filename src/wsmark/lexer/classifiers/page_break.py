"""Form-feed page break classifier mixin."""

from wsmark.codes import FORM_FEED
from wsmark.tokens import Token, TokenType


class PageBreakClassifierMixin:
    """Mixin providing form-feed line classification."""

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        end_pos: int,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_page_break_char(
        self, line: str, line_start: int, line_end: int
    ) -> Token | None:
        """Classify a line made of exactly one form feed.

        A form feed anywhere else in a normal line is not displayed text and
        is rejected by the run scanner.
        """
        if line != FORM_FEED:
            return None
        return self._make_token(TokenType.PAGE_BREAK_CHAR, line, line_start, line_end)
