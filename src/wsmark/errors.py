"""Exception classes for wsmark.

Provides standardized exceptions for error handling throughout wsmark.
"""

from __future__ import annotations


class WsmarkError(Exception):
    """Base exception for all wsmark errors.

    Subclass this for specific error categories.
    """

    pass


class MalformedInputError(WsmarkError):
    """Document bytes matched none of the classification rules.

    There is no recovery: the whole parse fails at the first offending
    character.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        rule: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize malformed input error with its location.

        Args:
            message: Error description
            offset: Offset of the offending input. A byte offset into the
                file (header included) when raised through parse_bytes or
                parse_file, a character index into the text for parse
            rule: Name of the rule set that was exhausted (e.g. "normal_line")
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.rule = rule
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message} (offset {offset})")
