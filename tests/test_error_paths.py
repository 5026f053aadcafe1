"""Error-path and malformed input tests.

The recognizer has a single failure mode: a line that no rule accepts.
These tests pin down where and how that failure is reported.
"""

import pytest

from wsmark import parse
from wsmark.errors import MalformedInputError, WsmarkError

# =========================================================================
# MalformedInputError construction and formatting
# =========================================================================


class TestMalformedInputErrorFormatting:
    """Verify MalformedInputError produces well-formatted messages."""

    def test_message_and_offset(self) -> None:
        err = MalformedInputError("unexpected byte", offset=12, rule="normal_line")
        assert str(err) == "unexpected byte (offset 12)"
        assert err.offset == 12
        assert err.rule == "normal_line"
        assert err.lineno is None

    def test_with_line_and_column(self) -> None:
        err = MalformedInputError("bad", offset=5, rule="normal_line", lineno=2, col_offset=3)
        assert str(err).startswith("2:3 bad")

    def test_with_source_file(self) -> None:
        err = MalformedInputError(
            "bad", offset=0, rule="normal_line", lineno=1, col_offset=1, source_file="a.ws"
        )
        assert str(err).startswith("a.ws:1:1 ")

    def test_is_wsmark_error(self) -> None:
        assert isinstance(MalformedInputError("x", offset=0, rule="header"), WsmarkError)


# =========================================================================
# Rejected input
# =========================================================================


class TestRejectedCharacters:
    """Characters that are neither displayed text nor known control codes."""

    def test_delete_character(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse("ok\nbad\x7fline")
        err = exc_info.value
        assert err.offset == 6
        assert err.lineno == 2
        assert err.col_offset == 4
        assert err.rule == "normal_line"

    def test_form_feed_inside_text_line(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse("a\x0cb")
        assert exc_info.value.offset == 1

    def test_form_feed_with_trailing_text(self) -> None:
        with pytest.raises(MalformedInputError):
            parse("\x0c ")

    @pytest.mark.parametrize("char", ["\x85", "\u00ad", "\u2028", "\ue000", "\u200b"])
    def test_non_displayed_unicode(self, char: str) -> None:
        with pytest.raises(MalformedInputError):
            parse(f"text{char}")

    def test_offset_accounts_for_skipped_leading_codes(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            parse("\x00a\x7f")
        assert exc_info.value.offset == 2
        assert exc_info.value.col_offset == 3

    def test_source_file_in_message(self) -> None:
        with pytest.raises(MalformedInputError, match=r"^doc\.ws:1:2 "):
            parse("a\x7f", source_file="doc.ws")

    def test_no_partial_result(self) -> None:
        """A failure on a late line fails the whole parse."""
        with pytest.raises(MalformedInputError):
            parse(".he Fine\nfine\n\x7f")


class TestAcceptedDespiteOddBytes:
    """Odd bytes that stay inside rules which consume them."""

    def test_comment_swallows_anything(self) -> None:
        assert parse("..\x7f\x0c").events[0].text == "\x7f"

    def test_ignored_command_swallows_anything(self) -> None:
        assert len(parse(".oc \x7f\x85")) == 1

    def test_padding_after_eof_is_not_checked(self) -> None:
        assert len(parse("a\x1a\x7f\x7f")) == 1
