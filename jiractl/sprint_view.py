"""Views of the sprints on a board."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from .helper import (
    HELP_TEXT,
    RFC3339,
    PreviewItem,
    _pager_out,
    _TabWriter,
    format_date_time,
    format_date_time_human,
    gray,
    prepare_title,
    render_plain,
    valid_issue_columns,
    valid_sprint_columns,
)
from .issue_list import DisplayFormat, _assign_columns
from .models import (
    FIELD_COMPLETE_DATE,
    FIELD_END_DATE,
    FIELD_ID,
    FIELD_NAME,
    FIELD_START_DATE,
    FIELD_STATE,
    Issue,
    Sprint,
)

SprintIssueFunc = Callable[[int, int], list[Issue]]

_COLUMN_VALUES: dict[str, Callable[[Sprint], str]] = {
    FIELD_ID: lambda s: str(s.id),
    FIELD_NAME: lambda s: s.name,
    FIELD_START_DATE: lambda s: format_date_time(s.start_date, RFC3339),
    FIELD_END_DATE: lambda s: format_date_time(s.end_date, RFC3339),
    FIELD_COMPLETE_DATE: lambda s: format_date_time(s.complete_date, RFC3339),
    FIELD_STATE: lambda s: s.status,
}


def _no_issues(board_id: int, sprint_id: int) -> list[Issue]:
    return []


def _tabularize(issues: list[Issue]) -> list[list[str]]:
    columns = valid_issue_columns()
    return [list(columns), *(_assign_columns(columns, issue) for issue in issues)]


@dataclass
class SprintList:
    """Sprints of a board, with a source of the issues in each sprint."""

    project: str = ""
    board: str = ""
    server: str = ""
    sprints: list[Sprint] = field(default_factory=list)
    issues: SprintIssueFunc = _no_issues
    display: DisplayFormat = field(default_factory=DisplayFormat)

    def data(self) -> list[PreviewItem]:
        """Sidebar entries: a help entry, then one per sprint with its issues on demand."""
        items = [PreviewItem(key="help", menu="?", contents=lambda _key: HELP_TEXT)]
        for sprint in self.sprints:
            board_id, sprint_id = sprint.board_id, sprint.id
            start = format_date_time_human(sprint.start_date, RFC3339)
            end = format_date_time_human(sprint.end_date, RFC3339)
            items.append(
                PreviewItem(
                    key=f"{board_id}-{sprint_id}-{sprint.start_date}",
                    menu=f"➤ #{sprint.id} {prepare_title(sprint.name)}: ⦗{start} - {end}⦘",
                    contents=lambda _key, b=board_id, s=sprint_id: _tabularize(
                        self.issues(b, s)
                    ),
                )
            )
        return items

    def _table_header(self) -> list[str]:
        if not self.display.columns:
            return valid_sprint_columns()
        valid = set(valid_sprint_columns())
        return [c for c in (col.upper() for col in self.display.columns) if c in valid]

    def table_data(self) -> list[list[str]]:
        """The sprint table, headers first unless suppressed."""
        headers = self._table_header()
        rows: list[list[str]] = []
        if not (self.display.plain and self.display.no_headers):
            rows.append(list(headers))
        if not headers:
            headers = valid_sprint_columns()
        for sprint in self.sprints:
            rows.append(
                [extract(sprint) for c in headers if (extract := _COLUMN_VALUES.get(c)) is not None]
            )
        return rows

    def render_plain(self, writer: TextIO) -> None:
        render_plain(writer, self.table_data())

    def render(self) -> None:
        """Print the sprint table: aligned on stdout when plain, otherwise paged with a footer."""
        if self.display.plain:
            self.render_plain(_TabWriter(sys.stdout))
            return
        footer = (
            f'Showing {len(self.sprints)} results from board "{self.board}" '
            f'of project "{self.project}"'
        )
        buffer = io.StringIO()
        render_plain(_TabWriter(buffer), self.table_data())
        buffer.write("\n" + gray(footer) + "\n")
        _pager_out(buffer.getvalue())