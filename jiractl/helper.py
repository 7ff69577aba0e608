"""Helpers shared by the terminal views."""

from __future__ import annotations

import io
import os
import re
import shlex
import subprocess
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Sequence, TextIO

from .models import (
    FIELD_ASSIGNEE,
    FIELD_COMPLETE_DATE,
    FIELD_CREATED,
    FIELD_END_DATE,
    FIELD_ID,
    FIELD_KEY,
    FIELD_NAME,
    FIELD_PRIORITY,
    FIELD_REPORTER,
    FIELD_RESOLUTION,
    FIELD_START_DATE,
    FIELD_STATE,
    FIELD_STATUS,
    FIELD_SUMMARY,
    FIELD_TYPE,
    FIELD_UPDATED,
)

WORD_WRAP = 120
TAB_WIDTH = 8

# Date layouts; fractional seconds in the input are accepted and dropped.
JIRA_RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
RFC3339 = "%Y-%m-%dT%H:%M:%S%z"

FG_GREEN = 32
FG_CYAN = 36
FG_WHITE = 37
BOLD = 1

HELP_TEXT = """USAGE
-----

The layout contains 2 sections, viz: Sidebar and Contents screen.  

You can use up and down arrow keys or 'j' and 'k' letters to navigate through the sidebar.
Press 'w' or Tab to toggle focus between the sidebar and the contents screen.

On contents screen:
  - Use arrow keys or 'j', 'k', 'h', and 'l' letters to navigate through the issue list.
  - Use 'g' and 'SHIFT+G' to quickly navigate to the top and bottom respectively.
  - Press 'v' to view selected issue details.
  - Press 'c' to copy issue URL to the system clipboard.
  - Press 'CTRL+K' to copy issue key to the system clipboard.
  - Hit ENTER to open the selected issue in a browser.

Press 'q' / ESC / CTRL+C to quit."""

_FRACTION = re.compile(r"(:\d{2})\.\d+")
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass
class PreviewItem:
    """An entry of a preview sidebar whose contents are produced on demand."""

    key: str
    menu: str
    contents: Callable[[str], Any]


def valid_issue_columns() -> list[str]:
    """Columns that an issue list can show."""
    return [
        FIELD_TYPE,
        FIELD_KEY,
        FIELD_SUMMARY,
        FIELD_STATUS,
        FIELD_ASSIGNEE,
        FIELD_REPORTER,
        FIELD_PRIORITY,
        FIELD_RESOLUTION,
        FIELD_CREATED,
        FIELD_UPDATED,
    ]


def valid_sprint_columns() -> list[str]:
    """Columns that a sprint list can show."""
    return [
        FIELD_ID,
        FIELD_NAME,
        FIELD_START_DATE,
        FIELD_END_DATE,
        FIELD_COMPLETE_DATE,
        FIELD_STATE,
    ]


def _parse(dt: str, layout: str) -> datetime:
    return datetime.strptime(_FRACTION.sub(r"\1", dt, count=1), layout)


def format_date_time(dt: str, layout: str) -> str:
    """Reformat ``dt`` as ``YYYY-MM-DD HH:MM:SS``; return it unchanged if it does not parse."""
    try:
        parsed = _parse(dt, layout)
    except ValueError:
        return dt
    return parsed.strftime("%Y-%m-%d %H:%M:%S")


def format_date_time_human(dt: str, layout: str) -> str:
    """Reformat ``dt`` as ``Mon, 02 Jan 06``; return it unchanged if it does not parse."""
    try:
        parsed = _parse(dt, layout)
    except ValueError:
        return dt
    return (
        f"{_WEEKDAYS[parsed.weekday()]}, {parsed.day:02d} "
        f"{_MONTHS[parsed.month - 1]} {parsed.year % 100:02d}"
    )


def prepare_title(text: str) -> str:
    """Trim a title and swap square brackets for look-alikes the TUI leaves alone."""
    return text.strip().replace("[", "⦗").replace("]", "⦘")


def key_column_index(cols: Sequence[str]) -> int:
    """Index of the KEY column, or 1 when there is none."""
    try:
        return list(cols).index(FIELD_KEY)
    except ValueError:
        return 1


class _TabWriter:
    """Buffers tab-separated text and aligns its columns with tabs on flush."""

    def __init__(self, output: TextIO, tab_width: int = TAB_WIDTH, padding: int = 1) -> None:
        self._output = output
        self._tab_width = tab_width
        self._padding = padding
        self._buffer = io.StringIO()

    def write(self, text: str) -> int:
        return self._buffer.write(text)

    def flush(self) -> None:
        text = self._buffer.getvalue()
        self._buffer = io.StringIO()
        self._output.write(self._align(text))
        flush = getattr(self._output, "flush", None)
        if flush is not None:
            flush()

    def _align(self, text: str) -> str:
        lines = [line.split("\t") for line in text.split("\n")]
        widths: list[int] = []
        out: list[str] = []
        tab = self._tab_width

        def write_lines(lo: int, hi: int) -> None:
            for cells in lines[lo:hi]:
                parts: list[str] = []
                for j, cell in enumerate(cells):
                    parts.append(cell)
                    if j < len(widths):
                        cell_width = -(-widths[j] // tab) * tab
                        parts.append("\t" * -(-(cell_width - len(cell)) // tab))
                out.append("".join(parts))

        def layout(lo: int, hi: int) -> None:
            column = len(widths)
            this = lo
            while this < hi:
                if column >= len(lines[this]) - 1:
                    this += 1
                    continue
                write_lines(lo, this)
                lo = this
                width = 0
                while this < hi and column < len(lines[this]) - 1:
                    width = max(width, len(lines[this][column]) + self._padding)
                    this += 1
                widths.append(width)
                layout(lo, this)
                widths.pop()
                lo = this
            write_lines(lo, hi)

        layout(0, len(lines))
        return "\n".join(out)


def render_plain(writer: TextIO | _TabWriter, data: Iterable[Sequence[str]]) -> None:
    """Write rows as tab-separated lines, aligning them if the writer aligns."""
    for row in data:
        writer.write("\t".join(row) + "\n")
    if isinstance(writer, _TabWriter):
        writer.flush()


def _pager_out(text: str) -> None:
    """Show text through a pager when stdout is a terminal, else print it."""
    if not text:
        return
    out = sys.stdout
    if not out.isatty():
        out.write(text)
        return
    command = os.environ.get("JIRA_PAGER") or os.environ.get("PAGER") or "less -r"
    try:
        subprocess.run(shlex.split(command), input=text, text=True, check=False)
    except OSError:
        out.write(text)


def _color_enabled() -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty is not None and isatty())


def colored_out(msg: str, *args: int) -> str:
    """Wrap msg in the given SGR attributes when stdout is a colour terminal."""
    if not args or not _color_enabled():
        return msg
    codes = ";".join(str(a) for a in args)
    return f"\x1b[{codes}m{msg}\x1b[0m"


def xterm256() -> bool:
    """Whether TERM names a 256-colour terminal."""
    return "-256color" in os.environ.get("TERM", "")


def gray(msg: str) -> str:
    """Render msg in gray, using the 256-colour palette where available."""
    if xterm256():
        return f"\x1b[38;5;242m{msg}\x1b[m"
    return f"\x1b[0;90m{msg}\x1b[0m"


def shorten_and_pad(msg: str, limit: int) -> str:
    """Cut msg to limit with an ellipsis, or pad it out to limit."""
    if limit >= 3 and len(msg) > limit:
        return msg[: limit - 3] + "..."
    return pad(msg, limit)


def pad(msg: str, limit: int) -> str:
    """Pad msg with spaces to at least limit characters."""
    return msg.ljust(limit)