"""Token and TokenType definitions for the wsmark lexer.

The lexer produces one Token per classified line. The parser turns tokens
into typed line events.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wsmark.location import SourceLocation


class TokenType(Enum):
    """Line classes produced by the lexer."""

    # Document structure
    EOF = auto()

    # Annotation
    COMMENT = auto()  # ..text

    # Dot commands
    HEADING = auto()  # .he / .h1 .. .h5
    INSERT_FILE = auto()  # .fi path
    LEFT_MARGIN = auto()  # .lm [n]
    PAGE_BREAK = auto()  # .pa
    IGNORED_COMMAND = auto()  # .av .oc .f1 .hy .if .el .ei .oj .kr .lh ...

    # Form feed on its own line
    PAGE_BREAK_CHAR = auto()

    # Everything else
    TEXT_LINE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified line.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw line content, terminator excluded
        _lineno: Line number (1-indexed)
        _col: Column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from wsmark.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset, 1-indexed (convenience accessor)."""
        return self._col

    @property
    def start_offset(self) -> int:
        """Absolute start position (convenience accessor)."""
        return self._start_offset
