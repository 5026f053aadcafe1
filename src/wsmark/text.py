"""Extract displayed text from wsmark events.

Example:
    >>> from wsmark import parse, extract_text
    >>> doc = parse("\\x02Hello\\x02 World")
    >>> extract_text(doc.events[0])
    'Hello World'
"""

from wsmark.events import (
    Comment,
    Document,
    Event,
    Heading,
    InsertFile,
    TextLine,
)


def extract_text(event: Event) -> str:
    """Extract the displayed payload of one event.

    Comments, headings and insert-file paths contribute their text; text
    lines contribute their runs concatenated. Every other event has no
    displayed payload. A Document is delegated to extract_document_text().

    """
    match event:
        case TextLine():
            return "".join(run.text for run in event.runs)
        case Heading() | Comment():
            return event.text
        case InsertFile():
            return event.path
        case Document():
            return extract_document_text(event)
        case _:
            return ""


def extract_document_text(doc: Document) -> str:
    """Join the displayed payload of every event, one line per event."""
    return "\n".join(extract_text(event) for event in doc.events)
