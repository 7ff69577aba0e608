"""List view of issues."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterable, TextIO

from .helper import (
    JIRA_RFC3339,
    _pager_out,
    _TabWriter,
    format_date_time,
    gray,
    prepare_title,
    render_plain,
    valid_issue_columns,
)
from .models import (
    FIELD_ASSIGNEE,
    FIELD_CREATED,
    FIELD_KEY,
    FIELD_PRIORITY,
    FIELD_REPORTER,
    FIELD_RESOLUTION,
    FIELD_STATUS,
    FIELD_SUMMARY,
    FIELD_TYPE,
    FIELD_UPDATED,
    Issue,
)

_COLUMN_VALUES: dict[str, Callable[[Issue], str]] = {
    FIELD_TYPE: lambda i: i.fields.issue_type,
    FIELD_KEY: lambda i: i.key,
    FIELD_SUMMARY: lambda i: prepare_title(i.fields.summary),
    FIELD_STATUS: lambda i: i.fields.status,
    FIELD_ASSIGNEE: lambda i: i.fields.assignee,
    FIELD_REPORTER: lambda i: i.fields.reporter,
    FIELD_PRIORITY: lambda i: i.fields.priority,
    FIELD_RESOLUTION: lambda i: i.fields.resolution,
    FIELD_CREATED: lambda i: format_date_time(i.fields.created, JIRA_RFC3339),
    FIELD_UPDATED: lambda i: format_date_time(i.fields.updated, JIRA_RFC3339),
}


@dataclass
class DisplayFormat:
    """How a list is displayed."""

    plain: bool = False
    no_headers: bool = False
    no_truncate: bool = False
    columns: list[str] = field(default_factory=list)


def _assign_columns(columns: list[str], issue: Issue) -> list[str]:
    return [extract(issue) for c in columns if (extract := _COLUMN_VALUES.get(c)) is not None]


class IssueList:
    """A list of issues with its display settings."""

    def __init__(
        self,
        total: int = 0,
        project: str = "",
        server: str = "",
        data: Iterable[Issue] | None = None,
        display: DisplayFormat | None = None,
        footer_text: str = "",
    ) -> None:
        self.total = total
        self.project = project
        self.server = server
        self.issues: list[Issue] = list(data) if data is not None else []
        self.display = display if display is not None else DisplayFormat()
        self.footer_text = footer_text

    def __repr__(self) -> str:
        return (
            f"IssueList(total={self.total!r}, project={self.project!r}, "
            f"server={self.server!r}, issues={self.issues!r}, display={self.display!r}, "
            f"footer_text={self.footer_text!r})"
        )

    def header(self) -> list[str]:
        """The columns to show; the KEY column is always included when columns are chosen."""
        if not self.display.columns:
            columns = valid_issue_columns()
            if self.display.no_truncate or not self.display.plain:
                return columns
            return columns[:4]

        valid = set(valid_issue_columns())
        headers: list[str] = []
        has_key = False
        for column in self.display.columns:
            column = column.upper()
            if column in valid:
                headers.append(column)
            if column == FIELD_KEY:
                has_key = True
        if not has_key:
            headers.insert(0, FIELD_KEY)
        return headers

    def data(self) -> list[list[str]]:
        """The table of rows, headers first unless suppressed."""
        headers = self.header()
        rows: list[list[str]] = []
        if not (self.display.plain and self.display.no_headers):
            rows.append(list(headers))
        if not headers:
            headers = valid_issue_columns()
        rows.extend(_assign_columns(headers, issue) for issue in self.issues)
        return rows

    def data_rows(self) -> list[list[str]]:
        """The same table as :meth:`data`."""
        return self.data()

    @property
    def table(self) -> list[list[str]]:
        """The table of rows, headers first unless suppressed."""
        return self.data()

    def render_plain(self, writer: TextIO) -> None:
        render_plain(writer, self.data())

    def render(self) -> None:
        """Print the list: aligned on stdout when plain, otherwise paged with a footer."""
        if self.display.plain:
            self.render_plain(_TabWriter(sys.stdout))
            return

        rows = self.data()
        if not self.footer_text:
            self.footer_text = (
                f'Showing {len(rows) - 1} of {self.total} results for project "{self.project}"'
            )
        buffer = io.StringIO()
        render_plain(_TabWriter(buffer), rows)
        buffer.write("\n" + gray(self.footer_text) + "\n")
        _pager_out(buffer.getvalue())