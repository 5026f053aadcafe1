"""Tests for the public parse API: line classification and run decomposition."""

import dataclasses

import pytest

from wsmark import (
    Comment,
    Document,
    DotCommand,
    Heading,
    IgnoredCommand,
    InsertFile,
    Modifier,
    PageBreak,
    PageBreakChar,
    Run,
    SetLeftMargin,
    TextLine,
    parse,
)
from wsmark.location import SourceLocation

_LOC = SourceLocation(lineno=1, col_offset=1)


def _events(source: str) -> tuple:
    return parse(source).events


def _only(source: str):  # type: ignore[no-untyped-def]
    events = _events(source)
    assert len(events) == 1, events
    return events[0]


def _text(*runs: tuple[Modifier, str]) -> TextLine:
    return TextLine(_LOC, tuple(Run(modifier, text) for modifier, text in runs))


class TestComments:
    def test_simple_comment(self) -> None:
        assert _only("..foo") == Comment(_LOC, "foo")

    def test_spaces_after_prefix_dropped(self) -> None:
        assert _only("..   foo bar") == Comment(_LOC, "foo bar")

    def test_control_codes_do_not_make_it_text(self) -> None:
        assert _only("..\x02foo\x13\x00") == Comment(_LOC, "foo")

    def test_empty_comment(self) -> None:
        assert _only("..") == Comment(_LOC, "")

    def test_comment_wins_over_dot_commands(self) -> None:
        assert _only("...pa") == Comment(_LOC, ".pa")


class TestHeadings:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
    def test_numbered_levels(self, level: int) -> None:
        assert _only(f".h{level} Title") == Heading(_LOC, level, "Title")

    def test_he_is_level_one(self) -> None:
        assert _only(".he Title") == _only(".h1 Title") == Heading(_LOC, 1, "Title")

    def test_multiple_spaces_before_title(self) -> None:
        assert _only(".h2    Two words") == Heading(_LOC, 2, "Two words")

    def test_h6_is_not_a_heading(self) -> None:
        assert _only(".h6 Title") == _text((Modifier.PLAIN, ".h6 Title"))

    def test_missing_space_falls_through_to_text(self) -> None:
        assert _only(".h1Title") == _text((Modifier.PLAIN, ".h1Title"))

    def test_missing_title_falls_through_to_text(self) -> None:
        assert _only(".h2") == _text((Modifier.PLAIN, ".h2"))
        assert _only(".h2   ") == _text((Modifier.PLAIN, ".h2   "))

    def test_control_code_in_title_falls_through_to_text(self) -> None:
        assert _only(".h1 \x02T\x02") == _text((Modifier.PLAIN, ".h1 "), (Modifier.BOLD, "T"))


class TestAllowedDotCommands:
    def test_insert_file(self) -> None:
        assert _only(".fi chapter2.ws") == InsertFile(_LOC, "chapter2.ws")

    def test_insert_file_needs_path(self) -> None:
        assert _only(".fi") == _text((Modifier.PLAIN, ".fi"))

    def test_left_margin_with_value(self) -> None:
        assert _only(".lm 4") == SetLeftMargin(_LOC, 4)

    def test_left_margin_reset(self) -> None:
        assert _only(".lm") == SetLeftMargin(_LOC, None)

    def test_left_margin_leading_zeros(self) -> None:
        assert _only(".lm 007") == SetLeftMargin(_LOC, 7)

    def test_left_margin_non_integer_falls_through(self) -> None:
        assert _only(".lm abc") == _text((Modifier.PLAIN, ".lm abc"))

    def test_left_margin_glued_integer_falls_through(self) -> None:
        assert _only(".lm4") == _text((Modifier.PLAIN, ".lm4"))

    def test_page_break(self) -> None:
        assert _only(".pa") == PageBreak(_LOC)

    def test_page_break_with_argument_falls_through(self) -> None:
        assert _only(".pa now") == _text((Modifier.PLAIN, ".pa now"))

    def test_allowed_commands_are_dot_commands(self) -> None:
        for source in (".fi x", ".lm", ".pa", ".oj on"):
            assert isinstance(_only(source), DotCommand)


class TestIgnoredDotCommands:
    @pytest.mark.parametrize(
        "source",
        [
            ".av Name?",
            ".oc on",
            ".f1 Footer text",
            ".f9",
            ".fo Page #",
            ".hy off",
            ".if x = 1",
            ".el",
            ".ei",
            ".oj on",
            ".kr off",
            ".lh 8",
            ".lh",
        ],
    )
    def test_ignored(self, source: str) -> None:
        assert _only(source) == IgnoredCommand(_LOC)

    def test_payload_discarded(self) -> None:
        assert _only(".f1 \x02anything\x7f") == IgnoredCommand(_LOC)

    def test_commands_are_case_sensitive(self) -> None:
        assert _only(".PA") == _text((Modifier.PLAIN, ".PA"))

    def test_unknown_command_is_text(self) -> None:
        assert _only(".xx foo") == _text((Modifier.PLAIN, ".xx foo"))


class TestPageBreaks:
    def test_form_feed_line(self) -> None:
        assert _only("\x0c") == PageBreakChar(_LOC)

    def test_form_feed_and_pa_are_distinct(self) -> None:
        assert _only("\x0c") != _only(".pa")
        assert not isinstance(_only("\x0c"), DotCommand)


class TestTextRuns:
    def test_bold_then_plain(self) -> None:
        assert _only("\x02Bold\x02Plain") == _text(
            (Modifier.BOLD, "Bold"),
            (Modifier.PLAIN, "Plain"),
        )

    def test_italic_and_underline(self) -> None:
        assert _only("a\x19b\x19c\x13d\x13") == _text(
            (Modifier.PLAIN, "a"),
            (Modifier.ITALIC, "b"),
            (Modifier.PLAIN, "c"),
            (Modifier.UNDERLINE, "d"),
        )

    def test_overlapping_modifiers_combine(self) -> None:
        assert _only("\x02a\x19b\x02c\x19") == _text(
            (Modifier.BOLD, "a"),
            (Modifier.BOLD | Modifier.ITALIC, "b"),
            (Modifier.ITALIC, "c"),
        )

    def test_second_toggle_turns_off(self) -> None:
        assert _only("\x02a\x02b") == _text((Modifier.BOLD, "a"), (Modifier.PLAIN, "b"))

    def test_toggle_pair_closes_run(self) -> None:
        assert _only("ab\x02\x02cd") == _text((Modifier.PLAIN, "ab"), (Modifier.PLAIN, "cd"))

    def test_toggle_pair_without_text_before_opens_no_run(self) -> None:
        assert _only("\x02\x02ab") == _text((Modifier.PLAIN, "ab"))

    def test_toggle_after_last_text_adds_no_empty_run(self) -> None:
        assert _only("\x02a\x02\x02b\x02") == _text((Modifier.BOLD, "a"), (Modifier.BOLD, "b"))

    def test_ignored_codes_dropped(self) -> None:
        assert _only("a\tb\x00c\x1fd") == _text((Modifier.PLAIN, "abcd"))

    def test_state_carries_across_lines(self) -> None:
        assert _events("\x02a\nb\x02c") == (
            _text((Modifier.BOLD, "a")),
            _text((Modifier.BOLD, "b"), (Modifier.PLAIN, "c")),
        )

    def test_state_carries_over_other_events(self) -> None:
        assert _events("\x19\n.pa\nx") == (
            _text(),
            PageBreak(_LOC),
            _text((Modifier.ITALIC, "x")),
        )

    def test_blank_line_has_no_runs(self) -> None:
        assert _events("a\n\nb")[1] == _text()

    def test_unicode_text(self) -> None:
        assert _only("Grüße — «ok» €5") == _text((Modifier.PLAIN, "Grüße — «ok» €5"))

    def test_replacement_character_is_displayed(self) -> None:
        assert _only("a\ufffdb") == _text((Modifier.PLAIN, "a\ufffdb"))


class TestLineTermination:
    def test_mixed_newlines(self) -> None:
        events = _events("a\r\nb\rc\nd")
        assert [e.runs[0].text for e in events] == ["a", "b", "c", "d"]

    def test_trailing_newline_adds_no_line(self) -> None:
        assert len(_events("a\n")) == 1
        assert len(_events("a\r\n")) == 1

    def test_eof_marker_terminates_last_line(self) -> None:
        assert _events("a\x1a") == (_text((Modifier.PLAIN, "a")),)

    def test_eof_marker_run(self) -> None:
        assert _events("a\n\x1a\x1a\x1a") == (_text((Modifier.PLAIN, "a")),)

    def test_padding_after_eof_marker_discarded(self) -> None:
        assert _events("a\x1a\x7fjunk\nmore") == (_text((Modifier.PLAIN, "a")),)

    def test_empty_document(self) -> None:
        assert _events("") == ()
        assert _events("\x1a") == ()


class TestLeadingCodes:
    def test_leading_ignored_codes_before_dot_command(self) -> None:
        assert _only("\x00\x01\x1b.he Title") == Heading(_LOC, 1, "Title")

    def test_leading_modifier_is_not_skipped(self) -> None:
        assert _only("\x02.he Title") == _text((Modifier.BOLD, ".he Title"))

    def test_only_first_line_is_tolerant(self) -> None:
        events = _events("x\n\x00.pa")
        assert events[1] == _text((Modifier.PLAIN, ".pa"))


class TestDocument:
    def test_events_preserve_order(self) -> None:
        doc = parse("..c\n.h2 H\n.fi f\n.lm 2\n.pa\n.oj\n\x0c\nt")
        assert [type(e) for e in doc] == [
            Comment,
            Heading,
            InsertFile,
            SetLeftMargin,
            PageBreak,
            IgnoredCommand,
            PageBreakChar,
            TextLine,
        ]
        assert len(doc) == 8

    def test_document_is_immutable(self) -> None:
        doc = parse("a")
        assert isinstance(doc.events, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.events = ()  # type: ignore[misc]

    def test_source_file_recorded(self) -> None:
        doc = parse("a\nb", source_file="LETTER.WS")
        assert isinstance(doc, Document)
        assert doc.location.source_file == "LETTER.WS"
        assert doc.events[1].location.source_file == "LETTER.WS"

    def test_location_excluded_from_equality(self) -> None:
        assert parse("x\n.pa").events[1] == parse(".pa").events[0]
