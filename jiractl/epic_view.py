"""View of epics and the issues in them."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Callable

from .helper import (
    HELP_TEXT,
    PreviewItem,
    _pager_out,
    _TabWriter,
    gray,
    prepare_title,
    render_plain,
    valid_issue_columns,
)
from .issue_list import _assign_columns
from .models import Issue

EpicIssueFunc = Callable[[str], list[Issue]]


def _no_issues(key: str) -> list[Issue]:
    return []


def _tabularize(issues: list[Issue]) -> list[list[str]]:
    columns = valid_issue_columns()
    return [list(columns), *(_assign_columns(columns, issue) for issue in issues)]


@dataclass
class EpicList:
    """Epics of a project, with a source of the issues in each epic."""

    total: int = 0
    project: str = ""
    server: str = ""
    epics: list[Issue] = field(default_factory=list)
    issues: EpicIssueFunc = _no_issues

    def data(self) -> list[PreviewItem]:
        """Sidebar entries: a help entry, then one per epic with its issues on demand."""
        items = [PreviewItem(key="help", menu="?", contents=lambda _key: HELP_TEXT)]
        for epic in self.epics:
            items.append(
                PreviewItem(
                    key=epic.key,
                    menu=f"➤ {epic.key}: {prepare_title(epic.fields.summary)}",
                    contents=lambda key: _tabularize(self.issues(key)),
                )
            )
        return items

    def render(self) -> None:
        """Page every epic followed by an aligned table of its issues."""
        buffer = io.StringIO()
        for item in self.data()[1:]:
            buffer.write(item.menu + "\n\n")
            render_plain(_TabWriter(buffer), item.contents(item.key))
            buffer.write("\n")
        footer = (
            f'Showing {len(self.epics)} of {self.total} results for project "{self.project}"'
        )
        buffer.write(gray(footer) + "\n")
        _pager_out(buffer.getvalue())