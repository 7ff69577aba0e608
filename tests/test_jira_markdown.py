import pytest

from jiractl.adf import ADF, Node, NodeType, Translator
from jiractl.jira_markdown import JiraMarkdownTranslator
from jiractl.markdown import MarkdownTranslator

DOC = {
    "version": 1,
    "type": "doc",
    "content": [
        {"type": "heading", "attrs": {"level": 2}, "content": [{"type": "text", "text": "Title"}]},
        {
            "type": "paragraph",
            "content": [{"type": "text", "text": "Body", "marks": [{"type": "em"}]}],
        },
        {
            "type": "bulletList",
            "content": [
                {
                    "type": "listItem",
                    "content": [{"type": "paragraph", "content": [{"type": "text", "text": "item"}]}],
                }
            ],
        },
    ],
}


def test_non_panel_content_matches_plain_markdown():
    jira = Translator(ADF.from_dict(DOC), JiraMarkdownTranslator()).translate()
    plain = Translator(ADF.from_dict(DOC), MarkdownTranslator()).translate()
    assert jira == plain


def test_panel_close():
    assert JiraMarkdownTranslator().close(Node(NodeType.PANEL)) == "{panel}\n"


def test_panel_open_without_attributes():
    assert JiraMarkdownTranslator().open(Node(NodeType.PANEL), 0) == "\n{panel" + "}\n"


@pytest.mark.parametrize(
    "panel_type, color",
    [
        ("info", "#deebff"),
        ("note", "#eae6ff"),
        ("error", "#ffebe6"),
        ("success", "#e3fcef"),
        ("warning", "#fffae6"),
    ],
)
def test_panel_types_map_to_colors(panel_type, color):
    out = JiraMarkdownTranslator().open(Node(NodeType.PANEL, attributes={"panelType": panel_type}), 0)
    assert out.startswith("\n{panel:")
    assert f"bgColor={color}" in out
    assert out.endswith("}\n")


def test_unknown_panel_type_adds_no_color():
    out = JiraMarkdownTranslator().open(Node(NodeType.PANEL, attributes={"panelType": "custom"}), 0)
    assert "bgColor" not in out
    assert out.startswith("\n{panel:")


def test_other_panel_attributes_are_kept():
    out = JiraMarkdownTranslator().open(Node(NodeType.PANEL, attributes={"title": "Notes"}), 0)
    assert "|title=Notes" in out


def test_panel_document():
    doc = ADF.from_dict(
        {
            "version": 1,
            "type": "doc",
            "content": [
                {
                    "type": "panel",
                    "attrs": {"panelType": "info"},
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "Panel paragraph"}]}
                    ],
                }
            ],
        }
    )
    out = Translator(doc, JiraMarkdownTranslator()).translate()
    assert out.startswith("\n{panel:bgColor=#deebff")
    assert "Panel paragraph" in out
    assert out.endswith("{panel}\n")
    assert "---" not in out