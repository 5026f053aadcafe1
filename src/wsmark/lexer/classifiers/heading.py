"""Heading dot-command classifier mixin."""

from wsmark.codes import is_displayed_text
from wsmark.tokens import Token, TokenType

# Command token -> heading level (.he is an alias of .h1)
HEADING_LEVELS: dict[str, int] = {
    ".he": 1,
    ".h1": 1,
    ".h2": 2,
    ".h3": 3,
    ".h4": 4,
    ".h5": 5,
}


class HeadingClassifierMixin:
    """Mixin providing heading classification."""

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        end_pos: int,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_heading(self, line: str, line_start: int, line_end: int) -> Token | None:
        """Try to classify line as a heading.

        Headings are a heading command, one or more spaces, then displayed
        text up to the end of the line. A heading command without a title,
        or with control codes in the title, is not a heading.

        Args:
            line: Line content, terminator excluded
            line_start: Position in source where line starts
            line_end: Position in source where line ends

        Returns:
            Token if valid heading, None otherwise.
        """
        if line[:3] not in HEADING_LEVELS:
            return None

        rest = line[3:]
        title = rest.lstrip(" ")
        # Must be separated from the command by at least one space
        if len(title) == len(rest):
            return None
        if not is_displayed_text(title):
            return None

        return self._make_token(TokenType.HEADING, line, line_start, line_end)
