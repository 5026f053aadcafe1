"""Line classifiers for the wsmark lexer.

Each classifier is a mixin that decides whether a whole line matches one
line class. Classifiers are pure: they never move the lexer position.
"""

from wsmark.lexer.classifiers.comment import CommentClassifierMixin
from wsmark.lexer.classifiers.dot_command import DotCommandClassifierMixin
from wsmark.lexer.classifiers.heading import HeadingClassifierMixin
from wsmark.lexer.classifiers.page_break import PageBreakClassifierMixin

__all__ = [
    "CommentClassifierMixin",
    "DotCommandClassifierMixin",
    "HeadingClassifierMixin",
    "PageBreakClassifierMixin",
]
