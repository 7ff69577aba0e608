import io

import pytest

from jiractl.helper import HELP_TEXT
from jiractl.issue_list import DisplayFormat
from jiractl.models import Issue, IssueFields, Sprint
from jiractl.sprint_view import SprintList

ISSUE_HEADER = [
    "TYPE", "KEY", "SUMMARY", "STATUS", "ASSIGNEE", "REPORTER", "PRIORITY", "RESOLUTION",
    "CREATED", "UPDATED",
]
ISSUE1_ROW = [
    "Bug", "ISSUE-1", "This is an issue", "Done", "Person A", "Person Z", "High", "Fixed",
    "2020-12-13 14:05:20", "2020-12-13 14:07:20",
]
ISSUE2_ROW = [
    "Story", "ISSUE-2", "This is another issue", "Open", "", "Person A", "Normal", "",
    "2020-12-13 14:05:20", "2020-12-13 14:07:20",
]


def _issues():
    issue1 = Issue(
        key="ISSUE-1",
        fields=IssueFields(
            summary="This is an issue",
            resolution="Fixed",
            issue_type="Bug",
            assignee="Person A",
            priority="High",
            reporter="Person Z",
            status="Done",
            created="2020-12-13T14:05:20.974+0100",
            updated="2020-12-13T14:07:20.974+0100",
        ),
    )
    issue2 = Issue(
        key="ISSUE-2",
        fields=IssueFields(
            summary="This is another issue",
            issue_type="Story",
            priority="Normal",
            reporter="Person A",
            status="Open",
            created="2020-12-13T14:05:20.974+0100",
            updated="2020-12-13T14:07:20.974+0100",
        ),
    )
    return issue1, issue2


def _sprints():
    return [
        Sprint(
            id=1,
            name="Sprint 1",
            status="closed",
            start_date="2020-12-07T16:12:00.000Z",
            end_date="2020-12-13T16:12:00.000Z",
            complete_date="2020-12-13T16:12:00.000Z",
            board_id=1,
        ),
        Sprint(
            id=2,
            name="Sprint 2",
            status="active",
            start_date="2020-12-13T16:12:00.000Z",
            end_date="2020-12-19T16:12:00.000Z",
            board_id=1,
        ),
    ]


def _list(display=None):
    return SprintList(
        project="TEST",
        board="Test Board",
        server="https://test.local",
        sprints=_sprints(),
        display=display or DisplayFormat(),
    )


def test_preview_layout_data():
    issue1, issue2 = _issues()
    sprints = _sprints()
    sprints[0].complete_date = ""

    def issues(board_id, sprint_id):
        if sprint_id == 1:
            return [issue1]
        return [issue2, issue1]

    sprint_list = SprintList(
        project="TEST",
        board="Test Board",
        server="https://test.local",
        sprints=sprints,
        issues=issues,
    )
    expected = [
        ("help", "?", HELP_TEXT),
        (
            "1-1-2020-12-07T16:12:00.000Z",
            "➤ #1 Sprint 1: ⦗Mon, 07 Dec 20 - Sun, 13 Dec 20⦘",
            [ISSUE_HEADER, ISSUE1_ROW],
        ),
        (
            "1-2-2020-12-13T16:12:00.000Z",
            "➤ #2 Sprint 2: ⦗Sun, 13 Dec 20 - Sat, 19 Dec 20⦘",
            [ISSUE_HEADER, ISSUE2_ROW, ISSUE1_ROW],
        ),
    ]
    items = sprint_list.data()
    assert len(items) == len(expected)
    for item, (key, menu, contents) in zip(items, expected):
        assert item.key == key
        assert item.menu == menu
        assert item.contents(item.key) == contents


def test_table_layout_data():
    assert _list().table_data() == [
        ["ID", "NAME", "START", "END", "COMPLETE", "STATE"],
        ["1", "Sprint 1", "2020-12-07 16:12:00", "2020-12-13 16:12:00", "2020-12-13 16:12:00", "closed"],
        ["2", "Sprint 2", "2020-12-13 16:12:00", "2020-12-19 16:12:00", "", "active"],
    ]


def test_render_in_plain_view():
    out = io.StringIO()
    _list(DisplayFormat(plain=True, no_headers=False)).render_plain(out)
    assert out.getvalue() == (
        "ID\tNAME\tSTART\tEND\tCOMPLETE\tSTATE\n"
        "1\tSprint 1\t2020-12-07 16:12:00\t2020-12-13 16:12:00\t2020-12-13 16:12:00\tclosed\n"
        "2\tSprint 2\t2020-12-13 16:12:00\t2020-12-19 16:12:00\t\tactive\n"
    )


def test_render_in_plain_view_without_headers():
    out = io.StringIO()
    _list(DisplayFormat(plain=True, no_headers=True)).render_plain(out)
    assert out.getvalue() == (
        "1\tSprint 1\t2020-12-07 16:12:00\t2020-12-13 16:12:00\t2020-12-13 16:12:00\tclosed\n"
        "2\tSprint 2\t2020-12-13 16:12:00\t2020-12-19 16:12:00\t\tactive\n"
    )


def test_render_in_plain_view_with_few_columns():
    out = io.StringIO()
    _list(DisplayFormat(plain=True, columns=["name", "start", "end"])).render_plain(out)
    assert out.getvalue() == (
        "NAME\tSTART\tEND\n"
        "Sprint 1\t2020-12-07 16:12:00\t2020-12-13 16:12:00\n"
        "Sprint 2\t2020-12-13 16:12:00\t2020-12-19 16:12:00\n"
    )


@pytest.mark.parametrize("columns", [["bogus"], ["nope", "other"]])
def test_unknown_columns_give_empty_header(columns):
    rows = _list(DisplayFormat(columns=columns)).table_data()
    assert rows[0] == []
    assert rows[1] == ["1", "Sprint 1", "2020-12-07 16:12:00", "2020-12-13 16:12:00",
                       "2020-12-13 16:12:00", "closed"]


def test_render_table_with_footer(capsys):
    _list().render()
    out = capsys.readouterr().out
    assert 'Showing 2 results from board "Test Board" of project "TEST"' in out
    assert "Sprint 2" in out