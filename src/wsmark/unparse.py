"""Write parsed events back as minimal WordStar source.

Only forwarded constructs survive: comments lose their control codes,
`.he` comes back as `.h1`, and every ignored command comes back as `.oj`
(it carries no payload). Re-parsing the output gives an equal event
sequence.

Example:
    >>> from wsmark import parse, unparse
    >>> unparse(parse(".he Title\\r\\n\\x02Bold\\x02 text"))
    '.h1 Title\\n\\x02Bold\\x02 text\\n'

"""

from collections.abc import Iterable

from wsmark.codes import BOLD, FORM_FEED
from wsmark.events import (
    Comment,
    Document,
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
from wsmark.parsing import MODIFIER_TOGGLES
from wsmark.tokens import TokenType

# Stands in for every ignored command
IGNORED_COMMAND_SOURCE = ".oj"

# A bold toggle pair: closes a run, or keeps a text line from reading as a
# dot command, without changing the modifier state.
TEXT_LINE_GUARD = BOLD * 2


def unparse(events: Document | Iterable[LineEvent]) -> str:
    """Produce minimal WordStar source for a sequence of line events.

    Every line is terminated by ``\\n``. Modifier codes are written only
    where the modifier state changes, plus a bold pair between adjacent runs
    that share a state. The state carries across lines the same way the
    parser tracks it.

    """
    lines: list[str] = []
    modifier = Modifier.PLAIN

    for event in events:
        match event:
            case Comment():
                lines.append(f"..{event.text}")
            case Heading():
                lines.append(f".h{event.level} {event.text}")
            case InsertFile():
                lines.append(f".fi {event.path}")
            case SetLeftMargin():
                lines.append(".lm" if event.value is None else f".lm {event.value}")
            case PageBreak():
                lines.append(".pa")
            case IgnoredCommand():
                lines.append(IGNORED_COMMAND_SOURCE)
            case PageBreakChar():
                lines.append(FORM_FEED)
            case TextLine():
                line, modifier = _unparse_text_line(event, modifier)
                lines.append(line)
            case _:
                msg = f"Cannot unparse {type(event).__name__}"
                raise TypeError(msg)

    return "".join(f"{line}\n" for line in lines)


def _unparse_text_line(event: TextLine, modifier: Modifier) -> tuple[str, Modifier]:
    """Render one text line, returning it and the modifier state after it."""
    parts: list[str] = []
    for index, run in enumerate(event.runs):
        if index and run.modifier == modifier:
            # Runs only split on a modifier code
            parts.append(TEXT_LINE_GUARD)
        for code, flag in MODIFIER_TOGGLES.items():
            if (flag in run.modifier) != (flag in modifier):
                parts.append(code)
        modifier = run.modifier
        parts.append(run.text)

    line = "".join(parts)
    if not _reads_as_text(line):
        line = TEXT_LINE_GUARD + line
    return line, modifier


def _reads_as_text(line: str) -> bool:
    """Check that the lexer would classify line as a normal text line."""
    if not line.startswith("."):
        return True
    token = next(Lexer(line).tokenize())
    return token.type == TokenType.TEXT_LINE
