"""Query builders for the issue and sprint commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol

SPRINT_STATE_ACTIVE = "active"
SPRINT_STATE_CLOSED = "closed"
SPRINT_STATE_FUTURE = "future"

_DIRECTION_ASCENDING = "ASC"
_DIRECTION_DESCENDING = "DESC"

_RELATIVE_DATES = {
    "today": "startOfDay()",
    "week": "startOfWeek()",
    "month": "startOfMonth()",
    "year": "startOfYear()",
}

_DATE_PATTERN = re.compile(
    r"(?P<year>\d{4})(?P<sep>[-/])(?P<month>\d{2})(?P=sep)(?P<day>\d{2})"
    r"(?: (?P<hour>\d{2}):(?P<minute>\d{2}))?"
)


class FlagParser(Protocol):
    """Source of command-line flag values; lookups raise on failure."""

    def get_bool(self, name: str) -> bool: ...

    def get_string(self, name: str) -> str: ...

    def get_string_array(self, name: str) -> list[str]: ...

    def get_uint(self, name: str) -> int: ...

    def set(self, name: str, value: str) -> None: ...


class _JQL:
    """Accumulates JQL clauses joined with AND, plus an optional ordering."""

    def __init__(self, project: str) -> None:
        self._clauses: list[str] = []
        self._order = ""
        if project:
            self._clauses.append(f'project="{project}"')

    def history(self) -> None:
        self._clauses.append("issue IN issueHistory()")

    def watching(self) -> None:
        self._clauses.append("issue IN watchedIssues()")

    def filter_by(self, name: str, value: str) -> _JQL:
        if value:
            self._clauses.append(f'{name}="{value}"')
        return self

    def in_(self, name: str, *values: str) -> None:
        quoted = ", ".join(f'"{v}"' for v in values)
        self._clauses.append(f"{name} IN ({quoted})")

    def _compare(self, name: str, op: str, value: str, quote: bool) -> None:
        rendered = f'"{value}"' if quote else value
        self._clauses.append(f"{name}{op}{rendered}")

    def gt(self, name: str, value: str, quote: bool) -> None:
        self._compare(name, ">", value, quote)

    def gte(self, name: str, value: str, quote: bool) -> None:
        self._compare(name, ">=", value, quote)

    def lt(self, name: str, value: str, quote: bool) -> None:
        self._compare(name, "<", value, quote)

    def raw(self, text: str) -> None:
        self._clauses.append(text)

    def order_by(self, name: str, direction: str) -> None:
        self._order = f" ORDER BY {name} {direction}"

    def __str__(self) -> str:
        return " AND ".join(self._clauses) + self._order


def _next_day(value: str) -> str | None:
    """The day after a supported date (keeping its format), or None."""
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return None
    hour_text, minute_text = match["hour"], match["minute"]
    hour = int(hour_text) if hour_text is not None else 0
    minute = int(minute_text) if minute_text is not None else 0
    if hour > 12:
        return None
    try:
        dt = datetime(int(match["year"]), int(match["month"]), int(match["day"]), hour, minute)
    except ValueError:
        return None
    dt += timedelta(days=1)
    sep = match["sep"]
    out = f"{dt.year:04d}{sep}{dt.month:02d}{sep}{dt.day:02d}"
    if hour_text is not None:
        out += f" {dt.hour % 12 or 12:02d}:{dt.minute:02d}"
    return out


@dataclass
class IssueParams:
    """Parameters of the issue command."""

    latest: bool = False
    watching: bool = False
    resolution: str = ""
    issue_type: str = ""
    parent: str = ""
    status: str = ""
    priority: str = ""
    reporter: str = ""
    assignee: str = ""
    component: str = ""
    created: str = ""
    updated: str = ""
    created_after: str = ""
    updated_after: str = ""
    created_before: str = ""
    updated_before: str = ""
    jql: str = ""
    labels: list[str] = field(default_factory=list)
    order_by: str = ""
    reverse: bool = False
    limit: int = 0
    debug: bool = False

    _BOOL_FLAGS = {
        "history": "latest",
        "watching": "watching",
        "reverse": "reverse",
        "debug": "debug",
    }
    _STRING_FLAGS = {
        "resolution": "resolution",
        "type": "issue_type",
        "parent": "parent",
        "status": "status",
        "priority": "priority",
        "reporter": "reporter",
        "assignee": "assignee",
        "component": "component",
        "created": "created",
        "created-after": "created_after",
        "created-before": "created_before",
        "updated": "updated",
        "updated-after": "updated_after",
        "updated-before": "updated_before",
        "jql": "jql",
        "order-by": "order_by",
    }

    @classmethod
    def from_flags(cls, flags: FlagParser) -> IssueParams:
        values: dict[str, object] = {}
        for flag, attr in cls._BOOL_FLAGS.items():
            values[attr] = flags.get_bool(flag)
        for flag, attr in cls._STRING_FLAGS.items():
            values[attr] = flags.get_string(flag)
        values["labels"] = list(flags.get_string_array("label") or [])
        values["limit"] = flags.get_uint("limit")
        return cls(**values)  # type: ignore[arg-type]


class IssueQuery:
    """Builds the JQL query for the issue command."""

    def __init__(self, project: str, flags: FlagParser) -> None:
        self.project = project
        self.flags = flags
        self.params = IssueParams.from_flags(flags)

    def get(self) -> str:
        """Return the constructed JQL query."""
        p = self.params
        q = _JQL(self.project)
        order_field = p.order_by
        if (
            order_field == "created"
            and (p.updated or p.updated_before or p.updated_after)
            and not (p.created or p.created_before or p.created_after)
        ):
            order_field = "updated"

        if p.latest:
            q.history()
            order_field = "lastViewed"
        if p.watching:
            q.watching()

        (
            q.filter_by("type", p.issue_type)
            .filter_by("resolution", p.resolution)
            .filter_by("status", p.status)
            .filter_by("priority", p.priority)
            .filter_by("reporter", p.reporter)
            .filter_by("assignee", p.assignee)
            .filter_by("component", p.component)
            .filter_by("parent", p.parent)
        )

        self._range_filters(q, "createdDate", p.created, p.created_after, p.created_before)
        self._range_filters(q, "updatedDate", p.updated, p.updated_after, p.updated_before)

        if p.labels:
            q.in_("labels", *p.labels)

        direction = _DIRECTION_ASCENDING if p.reverse else _DIRECTION_DESCENDING
        q.order_by(order_field, direction)

        if p.debug:
            print(f"JQL: {q}")
        if p.jql:
            q.raw(p.jql)
        return str(q)

    @staticmethod
    def _range_filters(q: _JQL, name: str, exact: str, after: str, before: str) -> None:
        if exact:
            relative = _RELATIVE_DATES.get(exact)
            if relative is not None:
                q.gte(name, relative, False)
                return
            q.gte(name, exact, True)
            next_day = _next_day(exact)
            if next_day is not None:
                q.lt(name, next_day, True)
            return
        if after:
            q.gt(name, after, True)
        if before:
            q.lt(name, before, True)


@dataclass
class SprintParams:
    """Parameters of the sprint command."""

    status: str = ""
    current: bool = False
    prev: bool = False
    next: bool = False
    limit: int = 0
    debug: bool = False

    @classmethod
    def from_flags(cls, flags: FlagParser) -> SprintParams:
        status = flags.get_string("state")
        current = flags.get_bool("current")
        prev = flags.get_bool("prev")
        nxt = flags.get_bool("next")
        limit = flags.get_uint("limit")
        debug = flags.get_bool("debug")
        return cls(status=status, current=current, prev=prev, next=nxt, limit=limit, debug=debug)


class SprintQuery:
    """Builds the state query for the sprint command."""

    def __init__(self, flags: FlagParser) -> None:
        self.flags = flags
        self.params = SprintParams.from_flags(flags)

    def get(self) -> str:
        """Return the constructed query parameters."""
        p = self.params
        if p.status:
            state = f"state={p.status}"
        elif p.current:
            state = f"state={SPRINT_STATE_ACTIVE}"
        elif p.prev:
            state = f"state={SPRINT_STATE_CLOSED}"
        elif p.next:
            state = f"state={SPRINT_STATE_FUTURE}"
        else:
            state = f"state={SPRINT_STATE_ACTIVE},{SPRINT_STATE_CLOSED}"
        if p.debug:
            print(f"JQL: {state}")
        return state