"""Line lexer for the wsmark WordStar recognizer.

The lexer finds line boundaries, classifies each whole line, then commits
its position. Classification never looks across lines.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + navigation)
└── classifiers/         # Line-class mixins
    ├── comment.py       # ..comment
    ├── heading.py       # .he / .h1 .. .h5
    ├── dot_command.py   # .fi .lm .pa and the ignored commands
    └── page_break.py    # lone form feed

Usage:
    >>> from wsmark.lexer import Lexer
    >>> for token in Lexer("..note\\n.pa\\nHello").tokenize():
    ...     print(token)
Token(COMMENT, '..note', 1:1)
Token(PAGE_BREAK, '.pa', 2:1)
Token(TEXT_LINE, 'Hello', 3:1)
Token(EOF, '', 3:6)

"""

from wsmark.lexer.core import Lexer

__all__ = ["Lexer"]
