"""
wsmark: WordStar document recognizer

Turns WordStar text (in-line control codes plus line-initial dot commands)
into an ordered sequence of typed line events for a renderer to consume.

Quick Start:
    >>> from wsmark import parse
    >>> doc = parse(".he Report\\r\\n\\x02Bold\\x02 and plain\\r\\n\\x1a")
    >>> doc.events[0]
    Heading(location=..., level=1, text='Report')
    >>> doc.events[1].runs
    (Run(modifier=<Modifier.BOLD: 1>, text='Bold'), Run(modifier=<Modifier.PLAIN: 0>, text=' and plain'))

    >>> # From a file on disk (128-byte header skipped)
    >>> from wsmark import parse_file
    >>> doc = parse_file("LETTER.WS")
"""

from wsmark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from wsmark.errors import MalformedInputError, WsmarkError
from wsmark.events import (
    Comment,
    Document,
    DotCommand,
    Event,
    Heading,
    IgnoredCommand,
    InsertFile,
    LineEvent,
    Modifier,
    PageBreak,
    PageBreakChar,
    Run,
    SetLeftMargin,
    TextLine,
)
from wsmark.lexer import Lexer
from wsmark.location import SourceLocation
from wsmark.parser import Parser
from wsmark.reader import parse_bytes, parse_file
from wsmark.serialization import from_dict, from_json, to_dict, to_json
from wsmark.text import extract_document_text, extract_text
from wsmark.tokens import Token, TokenType
from wsmark.unparse import unparse
from wsmark.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse WordStar document text into line events.

    Args:
        source: Document text with the file header already removed
        source_file: Optional source file path for error messages

    Returns:
        Document holding every line event in input order

    Raises:
        MalformedInputError: If a line matches no classification rule.

    Example:
        >>> doc = parse(".h3 Title")
        >>> doc.events[0]
        Heading(location=..., level=3, text='Title')
    """
    events = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    logger.debug("Parsed %d line events from %d characters", len(events), len(source))
    return Document(location=loc, events=tuple(events))


__all__ = [
    # Main API
    "parse",
    "parse_bytes",
    "parse_file",
    "unparse",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Text
    "extract_document_text",
    "extract_text",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Core classes
    "Lexer",
    "Parser",
    "SourceLocation",
    "Token",
    "TokenType",
    # Events
    "Comment",
    "Document",
    "DotCommand",
    "Event",
    "Heading",
    "IgnoredCommand",
    "InsertFile",
    "LineEvent",
    "Modifier",
    "PageBreak",
    "PageBreakChar",
    "Run",
    "SetLeftMargin",
    "TextLine",
    # Errors
    "MalformedInputError",
    "WsmarkError",
]
