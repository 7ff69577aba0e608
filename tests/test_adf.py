import json

import pytest

from jiractl.adf import (
    ADF,
    MarkNode,
    Node,
    NodeType,
    Translator,
    child_nodes,
    get_adf_node_type,
    is_child_node,
    is_parent_node,
    parent_nodes,
)


class Recorder:
    def open(self, node, depth):
        return f"<{node.node_type}:{depth}>"

    def close(self, node):
        return f"</{node.node_type}>"


SAMPLE = {
    "version": 1,
    "type": "doc",
    "content": [
        {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "Prefix: hello", "marks": [{"type": "strong"}]},
                {
                    "type": "text",
                    "text": "Prefix: link",
                    "marks": [{"type": "link", "attrs": {"href": "https://example.com"}}],
                },
            ],
        },
        {
            "type": "heading",
            "attrs": {"level": 1},
            "content": [{"type": "text", "text": "Prefix: title"}],
        },
    ],
}


def test_from_dict_parses_structure():
    doc = ADF.from_dict(SAMPLE)
    assert doc.version == 1
    assert doc.doc_type == "doc"
    assert [n.node_type for n in doc.content] == ["paragraph", "heading"]
    first = doc.content[0].content[0]
    assert first.text == "Prefix: hello"
    assert first.marks == [MarkNode("strong")]
    assert doc.content[1].attributes == {"level": 1}


def test_round_trip_to_dict():
    assert ADF.from_dict(SAMPLE).to_dict() == SAMPLE


def test_round_trip_through_json():
    dump = json.dumps(ADF.from_dict(SAMPLE).to_dict())
    assert ADF.from_dict(json.loads(dump)) == ADF.from_dict(SAMPLE)


def test_replace_all():
    doc = ADF.from_dict(SAMPLE)
    doc.replace_all("Prefix:", "Replaced:")
    dump = json.dumps(doc.to_dict())
    assert "Prefix:" not in dump
    assert "Replaced:" in dump


def test_replace_all_on_empty_document():
    doc = ADF()
    doc.replace_all("a", "b")
    assert doc.content == []


def test_node_type_enum_given_as_member_is_normalised():
    node = Node(NodeType.PARAGRAPH)
    assert node.node_type == "paragraph"
    assert node.to_dict() == {"type": "paragraph"}


@pytest.mark.parametrize("name", ["blockquote", "bulletList", "codeBlock", "heading",
                                  "orderedList", "panel", "paragraph", "table", "media"])
def test_parent_nodes(name):
    assert is_parent_node(name)
    assert not is_child_node(name)
    assert get_adf_node_type(name) == NodeType.PARENT


@pytest.mark.parametrize("name", ["text", "listItem", "tableRow", "tableHeader", "tableCell"])
def test_child_nodes(name):
    assert is_child_node(name)
    assert get_adf_node_type(name) == NodeType.CHILD


@pytest.mark.parametrize("name", ["mention", "hardBreak", "strong", "whatever"])
def test_unknown_nodes(name):
    assert get_adf_node_type(name) == NodeType.UNKNOWN


def test_node_lists_are_disjoint():
    assert set(parent_nodes()).isdisjoint(child_nodes())
    assert len(parent_nodes()) == 9
    assert len(child_nodes()) == 5


def test_translate_walks_with_depth_and_marks():
    doc = ADF(content=[Node("paragraph", content=[Node("text", text="Hi", marks=[MarkNode("strong")])])])
    out = Translator(doc, Recorder()).translate()
    assert out == "<paragraph:0><text:1><strong:1>Hi</strong></text></paragraph>"


def test_translate_closes_marks_in_reverse_order():
    doc = ADF(content=[Node("text", text="Hi", marks=[MarkNode("em"), MarkNode("strong")])])
    out = Translator(doc, Recorder()).translate()
    assert out == "<text:0><em:0><strong:0>Hi</strong></em></text>"


def test_translate_sanitizes_text():
    doc = ADF(content=[Node("text", text="  <b>\n")])
    assert Translator(doc, Recorder()).translate() == "<text:0>❬b❭</text>"


def test_translate_unknown_node_emits_no_text():
    doc = ADF(content=[Node("foo", text="hidden")])
    assert Translator(doc, Recorder()).translate() == "<foo:0></foo>"


def test_translate_empty_and_missing_document():
    assert Translator(ADF(), Recorder()).translate() == ""
    assert Translator(None, Recorder()).translate() == ""