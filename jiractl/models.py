"""Data records shown by the views, and the column names used for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

FIELD_ID = "ID"
FIELD_NAME = "NAME"
FIELD_TYPE = "TYPE"
FIELD_KEY = "KEY"
FIELD_SUMMARY = "SUMMARY"
FIELD_STATUS = "STATUS"
FIELD_STATE = "STATE"
FIELD_ASSIGNEE = "ASSIGNEE"
FIELD_REPORTER = "REPORTER"
FIELD_PRIORITY = "PRIORITY"
FIELD_RESOLUTION = "RESOLUTION"
FIELD_CREATED = "CREATED"
FIELD_UPDATED = "UPDATED"
FIELD_START_DATE = "START"
FIELD_END_DATE = "END"
FIELD_COMPLETE_DATE = "COMPLETE"

PROJECT_TYPE_CLASSIC = "classic"
PROJECT_TYPE_NEXT_GEN = "next-gen"


@dataclass
class User:
    """A user, identified by the name shown to people."""

    name: str = ""


@dataclass
class Comment:
    """A comment on an issue; the body is an ADF document or plain text."""

    id: str = ""
    author: User = field(default_factory=User)
    body: Any = ""
    created: str = ""


@dataclass
class IssueLink:
    """A link from an issue to another issue, in one direction."""

    name: str = ""
    inward: str = ""
    outward: str = ""
    inward_issue: Issue | None = None
    outward_issue: Issue | None = None


@dataclass
class IssueFields:
    """The fields of an issue that the views display."""

    summary: str = ""
    issue_type: str = ""
    resolution: str = ""
    status: str = ""
    priority: str = ""
    reporter: str = ""
    assignee: str = ""
    labels: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    description: Any = None
    comments: list[Comment] = field(default_factory=list)
    comment_total: int = 0
    issue_links: list[IssueLink] = field(default_factory=list)
    is_watching: bool = False
    watch_count: int = 0
    created: str = ""
    updated: str = ""


@dataclass
class Issue:
    """An issue and its fields."""

    key: str = ""
    fields: IssueFields = field(default_factory=IssueFields)


@dataclass
class Board:
    """An agile board."""

    id: int = 0
    name: str = ""
    board_type: str = ""


@dataclass
class Project:
    """A project and its lead."""

    key: str = ""
    name: str = ""
    project_type: str = ""
    lead: str = ""


@dataclass
class Sprint:
    """A sprint on a board."""

    id: int = 0
    name: str = ""
    status: str = ""
    start_date: str = ""
    end_date: str = ""
    complete_date: str = ""
    board_id: int = 0