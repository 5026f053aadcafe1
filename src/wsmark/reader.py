"""Reading WordStar files from disk or memory.

A WordStar document starts with a fixed-size binary header that carries no
text. The reader skips it, decodes the rest according to the active
ParseConfig, and hands the text to the parser.

Example:
    >>> from wsmark.reader import parse_file
    >>> doc = parse_file("LETTER.WS")
    >>> doc.events[0]
    Heading(level=1, text='Dear reader', ...)

"""

from __future__ import annotations

import codecs
import os
from pathlib import Path

from wsmark.config import ParseConfig, get_parse_config
from wsmark.errors import MalformedInputError
from wsmark.events import Document
from wsmark.utils.logger import get_logger

logger = get_logger(__name__)


def strip_header(data: bytes, header_size: int) -> bytes:
    """Drop the fixed-size file header.

    Args:
        data: Raw file content
        header_size: Number of header bytes

    Returns:
        The bytes after the header.

    Raises:
        MalformedInputError: If data is shorter than the header.

    """
    if len(data) < header_size:
        msg = f"file is shorter than its {header_size}-byte header"
        raise MalformedInputError(msg, offset=len(data), rule="header")
    logger.debug("Skipping %d-byte file header", header_size)
    return data[header_size:]


def decode(data: bytes, config: ParseConfig | None = None) -> str:
    """Decode document bytes (header already removed) to text.

    With the default "replace" error handler, bytes that do not decode
    become U+FFFD, which is displayed text.

    """
    config = config or get_parse_config()
    return data.decode(config.encoding, errors=config.encoding_errors)


def parse_bytes(data: bytes, *, source_file: str | None = None) -> Document:
    """Parse a complete WordStar file image, header included.

    Args:
        data: Raw file content
        source_file: Optional source file path for error messages

    Returns:
        Parsed Document

    Raises:
        MalformedInputError: If the header is truncated or a line matches
            no classification rule. The error offset is a byte offset into
            ``data``, header included.

    """
    from wsmark import parse

    config = get_parse_config()
    body = strip_header(data, config.header_size)
    try:
        return parse(decode(body, config), source_file=source_file)
    except MalformedInputError as e:
        offset = config.header_size + byte_offset(body, e.offset, config)
        raise MalformedInputError(
            e.message,
            offset=offset,
            rule=e.rule,
            lineno=e.lineno,
            col_offset=e.col_offset,
            source_file=e.source_file,
        ) from e


def byte_offset(data: bytes, char_offset: int, config: ParseConfig | None = None) -> int:
    """Map a character offset in decoded text back to a byte offset in data.

    Decodes incrementally so that multi-byte characters and replaced
    invalid sequences are counted at their real width.

    Args:
        data: Bytes that were decoded
        char_offset: Index into the decoded text
        config: Decoding settings (defaults to the active ParseConfig)

    Returns:
        Offset of the first byte of that character, or ``len(data)`` when
        char_offset is past the end of the text.

    """
    config = config or get_parse_config()
    decoder = codecs.getincrementaldecoder(config.encoding)(errors=config.encoding_errors)
    produced = 0
    pending = 0
    for index in range(len(data)):
        chars = decoder.decode(data[index : index + 1])
        if not chars:
            continue
        if produced + len(chars) > char_offset:
            # Later characters of a multi-character chunk start at this byte
            return pending if char_offset == produced else index
        produced += len(chars)
        pending = index + 1
    return len(data)


def parse_file(path: str | os.PathLike[str]) -> Document:
    """Read and parse a WordStar file.

    Args:
        path: File to read

    Returns:
        Parsed Document with `source_file` set on every location.

    """
    path = Path(path)
    return parse_bytes(path.read_bytes(), source_file=str(path))
