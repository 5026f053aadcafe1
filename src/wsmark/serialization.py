"""Event serialization: JSON round-trip for wsmark documents.

Converts typed line events to/from JSON-compatible dicts so that a renderer
living in another process (or language) can consume a parsed document.

All output is deterministic (sorted keys).

Example:
    from wsmark import parse
    from wsmark.serialization import to_json, from_json

    doc = parse(".he Hello\\n\\x02World\\x02")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from wsmark.events import (
    Comment,
    Document,
    Event,
    Heading,
    IgnoredCommand,
    InsertFile,
    Modifier,
    PageBreak,
    PageBreakChar,
    Run,
    SetLeftMargin,
    TextLine,
)
from wsmark.location import SourceLocation

# Registry of event type names to classes for deserialization
_EVENT_TYPES: dict[str, type] = {
    "Document": Document,
    "Comment": Comment,
    "Heading": Heading,
    "InsertFile": InsertFile,
    "SetLeftMargin": SetLeftMargin,
    "PageBreak": PageBreak,
    "IgnoredCommand": IgnoredCommand,
    "PageBreakChar": PageBreakChar,
    "TextLine": TextLine,
}

_MODIFIER_FLAGS = (Modifier.BOLD, Modifier.ITALIC, Modifier.UNDERLINE)


def to_dict(event: Event) -> dict[str, Any]:
    """Convert an event (or Document) to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        event: Any wsmark event.

    Returns:
        Dict with ``_type`` and all event fields.

    """
    result: dict[str, Any] = {"_type": type(event).__name__}

    for f in fields(event):
        value = getattr(event, f.name)
        result[f.name] = _serialize_value(value)

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Event):
        return to_dict(value)
    if isinstance(value, Run):
        return {
            "_type": "Run",
            "modifier": _serialize_modifier(value.modifier),
            "text": value.text,
        }
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def _serialize_modifier(modifier: Modifier) -> list[str]:
    """Modifier flags as a sorted list of names; plain is the empty list."""
    return sorted(flag.name for flag in _MODIFIER_FLAGS if flag in modifier)


def _deserialize_modifier(names: list[str]) -> Modifier:
    modifier = Modifier.PLAIN
    for name in names:
        modifier |= Modifier[name]
    return modifier


def from_dict(data: dict[str, Any]) -> Event:
    """Reconstruct a typed event from a dict.

    Args:
        data: Dict with ``_type`` and event fields (as produced by to_dict).

    Returns:
        Typed event (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized event"
        raise ValueError(msg)

    event_cls = _EVENT_TYPES.get(type_name)
    if event_cls is None:
        msg = f"Unknown event type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(event_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    if "location" not in kwargs:
        kwargs["location"] = SourceLocation.unknown()

    return event_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                offset=value.get("offset", 0),
                end_offset=value.get("end_offset", 0),
                source_file=value.get("source_file"),
            )
        if type_name == "Run":
            return Run(_deserialize_modifier(value["modifier"]), value["text"])
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    event = from_dict(raw)
    if not isinstance(event, Document):
        msg = f"Expected Document, got {type(event).__name__}"
        raise ValueError(msg)
    return event
