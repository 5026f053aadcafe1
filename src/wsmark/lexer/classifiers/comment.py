"""Comment line classifier mixin."""

from wsmark.tokens import Token, TokenType

COMMENT_PREFIX = ".."


class CommentClassifierMixin:
    """Mixin providing comment line classification."""

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        end_pos: int,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_comment(self, line: str, line_start: int, line_end: int) -> Token | None:
        """Try to classify line as a comment.

        Any line starting with ``..`` is a comment, whatever follows,
        control codes included.

        Args:
            line: Line content, terminator excluded
            line_start: Position in source where line starts
            line_end: Position in source where line ends

        Returns:
            Token if the line is a comment, None otherwise.
        """
        if not line.startswith(COMMENT_PREFIX):
            return None
        return self._make_token(TokenType.COMMENT, line, line_start, line_end)
