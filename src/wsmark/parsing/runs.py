"""Run scanning for normal text lines.

Provides mixin that splits a text line into modifier runs.
"""

from wsmark.codes import BOLD, IGNORED_CODES, ITALICS, UNDERLINE, is_displayed
from wsmark.errors import MalformedInputError
from wsmark.events import Modifier, Run
from wsmark.tokens import Token

# Control code -> attribute bit it flips
MODIFIER_TOGGLES: dict[str, Modifier] = {
    BOLD: Modifier.BOLD,
    ITALICS: Modifier.ITALIC,
    UNDERLINE: Modifier.UNDERLINE,
}


class RunScannerMixin:
    """Mixin providing text line decomposition into runs.

    Modifier state is a bitset of independent toggles, not a stack: a second
    bold code turns bold off. State lives on the host and carries over from
    one line to the next, as a WordStar attribute stays on until toggled.

    Required Host Attributes:
        - _modifier: Modifier
        - _source_file: str | None

    """

    _modifier: Modifier
    _source_file: str | None

    def _scan_runs(self, token: Token) -> tuple[Run, ...]:
        """Split a text line into runs of displayed text.

        Every modifier code closes the run in progress, if any, even when a
        later code restores the same state (bold on, bold off).

        Raises:
            MalformedInputError: On a character that is neither a modifier,
                an ignored control code, nor displayed text.
        """
        runs: list[Run] = []
        buffer: list[str] = []
        modifier = self._modifier

        for index, char in enumerate(token.value):
            toggle = MODIFIER_TOGGLES.get(char)
            if toggle is not None:
                if buffer:
                    runs.append(Run(modifier, "".join(buffer)))
                    buffer.clear()
                modifier ^= toggle
            elif char in IGNORED_CODES:
                continue
            elif is_displayed(char):
                buffer.append(char)
            else:
                raise MalformedInputError(
                    f"unexpected character {char!r} in text line",
                    offset=token.start_offset + index,
                    rule="normal_line",
                    lineno=token.lineno,
                    col_offset=token.col + index,
                    source_file=self._source_file,
                )

        if buffer:
            runs.append(Run(modifier, "".join(buffer)))

        self._modifier = modifier
        return tuple(runs)
