"""Dot-command classifier mixin.

Only four commands are forwarded: insert file, left margin and page break
(headings have their own classifier). A closed set of other recognized
commands is consumed and dropped. Any other line starting with ``.`` is
left for the normal-line rule.
"""

from wsmark.codes import is_displayed_text
from wsmark.tokens import Token, TokenType

INSERT_FILE = ".fi"
LEFT_MARGIN = ".lm"
PAGE_BREAK = ".pa"

# ask-variable, centering, hyphenation, conditionals, justification,
# kerning, line height
IGNORED_COMMANDS = frozenset({".av", ".oc", ".hy", ".if", ".el", ".ei", ".oj", ".kr", ".lh"})

# Footers: .f1 .. .f9 and .fo
FOOTER_SELECTORS = frozenset("0123456789o")


def is_left_margin_argument(rest: str) -> bool:
    """Check the text following ``.lm``: nothing, or spaces and an integer."""
    value = rest.strip(" ")
    if not value:
        return True
    return rest.startswith(" ") and value.isascii() and value.isdigit()


class DotCommandClassifierMixin:
    """Mixin providing non-heading dot-command classification."""

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        start_pos: int,
        end_pos: int,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_dot_command(
        self, line: str, line_start: int, line_end: int
    ) -> Token | None:
        """Try to classify line as an allowed or ignored dot command.

        Args:
            line: Line content, terminator excluded
            line_start: Position in source where line starts
            line_end: Position in source where line ends

        Returns:
            Token if the line is a recognized command, None otherwise.
        """
        if not line.startswith("."):
            return None

        command = line[:3]
        rest = line[3:]

        if command == INSERT_FILE:
            path = rest.lstrip(" ")
            if len(path) < len(rest) and is_displayed_text(path):
                return self._make_token(TokenType.INSERT_FILE, line, line_start, line_end)
            return None

        if command == LEFT_MARGIN:
            if is_left_margin_argument(rest):
                return self._make_token(TokenType.LEFT_MARGIN, line, line_start, line_end)
            return None

        if command == PAGE_BREAK:
            if not rest.strip(" "):
                return self._make_token(TokenType.PAGE_BREAK, line, line_start, line_end)
            return None

        if command in IGNORED_COMMANDS or (
            command[:2] == ".f" and command[2:] and command[2] in FOOTER_SELECTORS
        ):
            return self._make_token(TokenType.IGNORED_COMMAND, line, line_start, line_end)

        return None
