"""Detail view of a single issue."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, TextIO

from .adf import ADF, Translator
from .helper import (
    BOLD,
    FG_CYAN,
    FG_GREEN,
    FG_WHITE,
    JIRA_RFC3339,
    _pager_out,
    colored_out,
    format_date_time_human,
    gray,
    pad,
    shorten_and_pad,
)
from .issue_list import DisplayFormat
from .markdown import MarkdownTranslator
from .models import Issue

_SUMMARY_LEN = 73  # includes the three characters of a trailing "..."

_ICON_BUG = "\U0001F41E"
_ICON_STAR = "\u2B50"
_ICON_DONE = "\u2705"
_ICON_WIP = "\U0001F6A7"
_ICON_HOURGLASS = "\u231B"
_ICON_WORKER = "\U0001F477"
_ICON_KEY = "\U0001F511\uFE0F"
_ICON_COMMENTS = "\U0001F4AD"
_ICON_THREAD = "\U0001F9F5"
_ICON_TIMER = "\u23F1\uFE0F"
_ICON_SEARCH = "\U0001F50E"
_ICON_ROCKET = "\U0001F680"
_ICON_PACKAGE = "\U0001F4E6"
_ICON_LABEL = "\U0001F3F7\uFE0F"
_ICON_EYES = "\U0001F440"


@dataclass
class _Fragment:
    body: str
    parse: bool = False


def _blank(n: int) -> _Fragment:
    return _Fragment("\n" * n)


@dataclass
class _IssueComment:
    meta: str
    body: str


@dataclass
class IssueOption:
    """Options for displaying an issue."""

    num_comments: int = 0


def _to_markdown(content: Any) -> str:
    """Render an ADF document (object or mapping) as markdown; other text passes through."""
    if isinstance(content, dict):
        content = ADF.from_dict(content)
    if isinstance(content, ADF):
        return Translator(content, MarkdownTranslator()).translate()
    return str(content)


@dataclass
class IssueView:
    """Details of one issue: header, description, links, comments and footer."""

    server: str = ""
    data: Issue = field(default_factory=Issue)
    display: DisplayFormat = field(default_factory=DisplayFormat)
    options: IssueOption = field(default_factory=IssueOption)

    def render(self) -> None:
        """Print the issue: plain text on stdout, or paged otherwise."""
        if self.display.plain:
            self.render_plain(sys.stdout)
            return
        _pager_out(self.rendered_out())

    def rendered_out(self, renderer: Callable[[str], str] | None = None) -> str:
        """Join the view's fragments, passing markdown fragments through ``renderer``."""
        return "".join(
            renderer(f.body) if f.parse and renderer is not None else f.body
            for f in self._fragments()
        )

    def render_plain(self, writer: TextIO) -> None:
        writer.write(str(self))

    def __str__(self) -> str:
        fields = self.data.fields
        parts = [self._header()]

        desc = self._description()
        if desc:
            parts.append(f"\n\n{self.separator('Description')}\n\n{desc}")
        if fields.issue_links:
            parts.append(f"\n\n{self.separator('Linked Issues')}\n\n{self._linked_issues()}\n")
        total = fields.comment_total
        if total > 0 and self.options.num_comments > 0:
            parts.append(f"\n\n{self.separator(f'{total} Comments')}")
            parts.extend(f"\n\n{c.meta}\n\n{c.body}\n" for c in self._comments())
        parts.append(self._footer())
        return "".join(parts)

    def _fragments(self) -> Iterator[_Fragment]:
        fields = self.data.fields
        yield _Fragment(self._header(), parse=True)

        desc = self._description()
        if desc:
            yield _blank(1)
            yield _Fragment(self.separator("Description"))
            yield _blank(2)
            yield _Fragment(desc, parse=True)

        if fields.issue_links:
            yield _blank(1)
            yield _Fragment(self.separator("Linked Issues"))
            yield _blank(2)
            yield _Fragment(self._linked_issues())
            yield _blank(1)

        if fields.comment_total > 0 and self.options.num_comments > 0:
            yield _blank(1)
            yield _Fragment(self.separator(f"{fields.comment_total} Comments"))
            yield _blank(2)
            for comment in self._comments():
                yield _Fragment(comment.meta)
                yield _blank(1)
                yield _Fragment(comment.body, parse=True)

        yield _blank(1)
        yield _Fragment(self._footer())
        yield _blank(2)

    def separator(self, msg: str) -> str:
        """A horizontal bar, with ``msg`` in the middle when it is not empty."""
        label = f" {msg} " if msg else msg
        if self.display.plain:
            bar = "-" * 24
            return f"{bar}{label}{bar}"
        bar = "—" * 24
        return gray(f"{bar}{label}{bar}")

    def _header(self) -> str:
        issue, fields = self.data, self.data.fields
        assignee = fields.assignee or "Unassigned"
        status = fields.status
        status_icon = _ICON_DONE if status == "Done" else _ICON_WIP
        labels = ", ".join(fields.labels) if fields.labels else "None"
        components = ", ".join(fields.components) if fields.components else "None"
        issue_type = fields.issue_type
        type_icon = _ICON_BUG if issue_type == "Bug" else _ICON_STAR

        watchers = f"{fields.watch_count} watchers"
        if fields.watch_count == 1 and fields.is_watching:
            watchers = "You are watching"
        elif fields.is_watching:
            watchers = f"You + {fields.watch_count - 1} watchers"

        updated = format_date_time_human(fields.updated, JIRA_RFC3339)
        created = format_date_time_human(fields.created, JIRA_RFC3339)
        return (
            f"{type_icon} {issue_type}  {status_icon} {status}  "
            f"{_ICON_HOURGLASS} {updated}  {_ICON_WORKER} {assignee}  "
            f"{_ICON_KEY} {issue.key}  {_ICON_COMMENTS} {fields.comment_total} comments  "
            f"{_ICON_THREAD} {len(fields.issue_links)} linked\n"
            f"# {fields.summary}\n"
            f"{_ICON_TIMER}  {created}  {_ICON_SEARCH} {fields.reporter}  "
            f"{_ICON_ROCKET} {fields.priority}  {_ICON_PACKAGE} {components}  "
            f"{_ICON_LABEL}  {labels}  {_ICON_EYES} {watchers}"
        )

    def _description(self) -> str:
        desc = self.data.fields.description
        if desc is None:
            return ""
        return _to_markdown(desc)

    def _linked_issues(self) -> str:
        links = self.data.fields.issue_links
        if not links:
            return ""

        grouped: dict[str, list[Issue]] = {}
        for link in links:
            if link.inward_issue is not None:
                link_type, linked = link.inward, link.inward_issue
            elif link.outward_issue is not None:
                link_type, linked = link.outward, link.outward_issue
            else:
                continue
            grouped.setdefault(link_type, []).append(linked)

        issues = [i for group in grouped.values() for i in group]
        key_len = max(len(i.key) for i in issues)
        summary_len = min(_SUMMARY_LEN, max(len(i.fields.summary) for i in issues))
        type_len = max(len(i.fields.issue_type) for i in issues)
        status_len = max(len(i.fields.status) for i in issues)
        priority_len = max(len(i.fields.priority) for i in issues)

        out: list[str] = []
        # Sorted to follow the order seen in the web interface.
        for link_type in sorted(grouped):
            out.append(f"\n {colored_out(link_type.upper(), FG_WHITE, BOLD)}\n\n")
            for iss in grouped[link_type]:
                out.append(
                    f"  {colored_out(pad(iss.key, key_len), FG_GREEN, BOLD)} "
                    f"{shorten_and_pad(iss.fields.summary, summary_len)} • "
                    f"{pad(iss.fields.issue_type, type_len)} • "
                    f"{pad(iss.fields.priority, priority_len)} • "
                    f"{pad(iss.fields.status, status_len)}\n"
                )
        return "".join(out)

    def _comments(self) -> list[_IssueComment]:
        fields = self.data.fields
        total = fields.comment_total
        if total == 0:
            return []
        limit = min(self.options.num_comments, total)

        result: list[_IssueComment] = []
        for idx in range(total - 1, total - limit - 1, -1):
            comment = fields.comments[idx]
            created = format_date_time_human(comment.created, JIRA_RFC3339)
            meta = (
                f"\n {colored_out(comment.author.name, FG_WHITE, BOLD)}"
                f" • {colored_out(created, FG_WHITE, BOLD)}"
            )
            if idx == total - 1:
                meta += f" • {colored_out('Latest comment', FG_CYAN, BOLD)}"
            result.append(_IssueComment(meta=meta, body=_to_markdown(comment.body)))
        return result

    def _footer(self) -> str:
        out: list[str] = []
        total = self.data.fields.comment_total
        shown = self.options.num_comments
        if total > 0 and 0 < shown < total:
            if self.display.plain:
                out.append("\n")
            out.append(
                gray("Use --comments <limit> with `jira issue view` to load more comments") + "\n"
            )
        if self.display.plain:
            out.append("\n")
        out.append(gray(f"View this issue on Jira: {self.server}/browse/{self.data.key}"))
        return "".join(out)