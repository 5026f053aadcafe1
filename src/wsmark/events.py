"""Typed line events for wsmark.

All events are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Event Hierarchy:
Event (base)
├── Comment
├── Heading
├── DotCommand
│   ├── InsertFile
│   ├── SetLeftMargin
│   ├── PageBreak
│   └── IgnoredCommand
├── PageBreakChar
└── TextLine (holds Runs)

Document wraps the ordered event tuple.

Locations are carried for error messages and debugging but do not take
part in equality: two events with the same payload compare equal no matter
where they were read from.

"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Literal

from wsmark.location import SourceLocation


class Modifier(Flag):
    """Active in-line text attributes.

    Each modifier code flips exactly one bit, so attributes combine:
    bold followed by italics without closing bold is ``BOLD | ITALIC``.

    """

    PLAIN = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINE = auto()


@dataclass(frozen=True, slots=True)
class Run:
    """A span of displayed text under one modifier state."""

    modifier: Modifier
    text: str


# =============================================================================
# Base Event
# =============================================================================


@dataclass(frozen=True, slots=True)
class Event:
    """Base class for all line events."""

    location: SourceLocation = field(compare=False)


@dataclass(frozen=True, slots=True)
class Comment(Event):
    """Annotation line.

    WordStar: ``..text``

    """

    text: str


@dataclass(frozen=True, slots=True)
class Heading(Event):
    """Heading line.

    WordStar: ``.he text`` or ``.h1 text`` through ``.h5 text``

    """

    level: Literal[1, 2, 3, 4, 5]
    text: str


# =============================================================================
# Dot Commands
# =============================================================================


@dataclass(frozen=True, slots=True)
class DotCommand(Event):
    """Base class for dot-command lines that are not headings."""


@dataclass(frozen=True, slots=True)
class InsertFile(DotCommand):
    """Insert an external file at this point.

    WordStar: ``.fi path``

    """

    path: str


@dataclass(frozen=True, slots=True)
class SetLeftMargin(DotCommand):
    """Set the left margin, or reset it when value is None.

    WordStar: ``.lm 4`` or ``.lm``

    """

    value: int | None = None


@dataclass(frozen=True, slots=True)
class PageBreak(DotCommand):
    """Page break command.

    WordStar: ``.pa``

    """


@dataclass(frozen=True, slots=True)
class IgnoredCommand(DotCommand):
    """Recognized dot command with no forwarded meaning.

    Covers footers, conditionals, centering, hyphenation, justification,
    kerning, line height and ask-variable. Any data on the line is dropped.

    """


# =============================================================================
# Other Line Events
# =============================================================================


@dataclass(frozen=True, slots=True)
class PageBreakChar(Event):
    """A line consisting of a single form-feed character."""


@dataclass(frozen=True, slots=True)
class TextLine(Event):
    """Normal content line split into modifier runs.

    A line without displayed text has no runs.

    """

    runs: tuple[Run, ...]


type LineEvent = (
    Comment | Heading | InsertFile | SetLeftMargin | PageBreak | IgnoredCommand | PageBreakChar | TextLine
)


@dataclass(frozen=True, slots=True)
class Document(Event):
    """Ordered, immutable sequence of line events."""

    events: tuple[LineEvent, ...]

    def __iter__(self) -> Iterator[LineEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)


__all__ = [
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
]
