"""Atlassian Document Format (ADF) documents and their translation to other formats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping, Protocol


class NodeType(str, Enum):
    """Known ADF node, inline node and mark types."""

    PARENT = "parent"
    CHILD = "child"
    UNKNOWN = "unknown"

    BLOCKQUOTE = "blockquote"
    BULLET_LIST = "bulletList"
    CODE_BLOCK = "codeBlock"
    HEADING = "heading"
    ORDERED_LIST = "orderedList"
    PANEL = "panel"
    PARAGRAPH = "paragraph"
    TABLE = "table"
    MEDIA = "media"

    TEXT = "text"
    LIST_ITEM = "listItem"
    TABLE_ROW = "tableRow"
    TABLE_HEADER = "tableHeader"
    TABLE_CELL = "tableCell"

    INLINE_CARD = "inlineCard"
    EMOJI = "emoji"
    MENTION = "mention"
    HARD_BREAK = "hardBreak"

    EM = "em"
    LINK = "link"
    CODE = "code"
    STRIKE = "strike"
    STRONG = "strong"


_PARENT_NODES = (
    NodeType.BLOCKQUOTE,
    NodeType.BULLET_LIST,
    NodeType.CODE_BLOCK,
    NodeType.HEADING,
    NodeType.ORDERED_LIST,
    NodeType.PANEL,
    NodeType.PARAGRAPH,
    NodeType.TABLE,
    NodeType.MEDIA,
)

_CHILD_NODES = (
    NodeType.TEXT,
    NodeType.LIST_ITEM,
    NodeType.TABLE_ROW,
    NodeType.TABLE_HEADER,
    NodeType.TABLE_CELL,
)


def _type_name(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class Connector(Protocol):
    """Anything a tag translator can open or close: a node or a mark."""

    node_type: str
    attributes: Any


class TagTranslator(Protocol):
    """Turns nodes into opening and closing tags of some output format."""

    def open(self, node: Connector, depth: int) -> str: ...

    def close(self, node: Connector) -> str: ...


@dataclass
class MarkNode:
    """A text mark such as strong, em or link."""

    node_type: str = ""
    attributes: Any = None

    def __post_init__(self) -> None:
        self.node_type = _type_name(self.node_type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MarkNode:
        return cls(node_type=data.get("type", ""), attributes=data.get("attrs"))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.node_type:
            out["type"] = self.node_type
        if self.attributes is not None:
            out["attrs"] = self.attributes
        return out


@dataclass
class Node:
    """A content node of an ADF document."""

    node_type: str
    content: list[Node] = field(default_factory=list)
    attributes: Any = None
    text: str = ""
    marks: list[MarkNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.node_type = _type_name(self.node_type)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Node:
        return cls(
            node_type=data.get("type", ""),
            content=[cls.from_dict(c) for c in data.get("content") or []],
            attributes=data.get("attrs"),
            text=data.get("text", "") or "",
            marks=[MarkNode.from_dict(m) for m in data.get("marks") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.node_type}
        if self.content:
            out["content"] = [c.to_dict() for c in self.content]
        if self.attributes is not None:
            out["attrs"] = self.attributes
        if self.text:
            out["text"] = self.text
        if self.marks:
            out["marks"] = [m.to_dict() for m in self.marks]
        return out


@dataclass
class ADF:
    """An Atlassian document."""

    version: int = 1
    doc_type: str = "doc"
    content: list[Node] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ADF:
        return cls(
            version=data.get("version", 0),
            doc_type=data.get("type", ""),
            content=[Node.from_dict(c) for c in data.get("content") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "type": self.doc_type,
            "content": [c.to_dict() for c in self.content],
        }

    def replace_all(self, old: str, new: str) -> None:
        """Replace every occurrence of ``old`` with ``new`` in all text nodes."""
        for node in self.content:
            _replace(node, old, new)


def _replace(node: Node, old: str, new: str) -> None:
    for child in node.content:
        _replace(child, old, new)
    if node.node_type == NodeType.TEXT:
        node.text = node.text.replace(old, new)


def parent_nodes() -> list[NodeType]:
    """Supported ADF parent node types."""
    return list(_PARENT_NODES)


def child_nodes() -> list[NodeType]:
    """Supported ADF child node types."""
    return list(_CHILD_NODES)


def is_parent_node(identifier: str) -> bool:
    return identifier in _PARENT_NODES


def is_child_node(identifier: str) -> bool:
    return identifier in _CHILD_NODES


def get_adf_node_type(identifier: str) -> NodeType:
    """Classify a node type as parent, child or unknown."""
    if is_parent_node(identifier):
        return NodeType.PARENT
    if is_child_node(identifier):
        return NodeType.CHILD
    return NodeType.UNKNOWN


def _sanitize(text: str) -> str:
    return text.strip().rstrip("\n").replace("<", "❬").replace(">", "❭")


class Translator:
    """Walks an ADF document and renders it with a tag translator."""

    def __init__(self, doc: ADF | None, translator: TagTranslator) -> None:
        self.doc = doc
        self.translator = translator

    def translate(self) -> str:
        if self.doc is None:
            return ""
        return "".join(
            part for node in self.doc.content for part in self._visit(node, 0)
        )

    def _visit(self, node: Node, depth: int) -> Iterator[str]:
        tsl = self.translator
        yield tsl.open(node, depth)

        for child in node.content:
            yield from self._visit(child, depth + 1)

        if get_adf_node_type(node.node_type) == NodeType.CHILD:
            opened = node.marks if node.node_type == NodeType.TEXT else []
            parts = [tsl.open(mark, depth) for mark in opened]
            parts.append(_sanitize(node.text))
            parts.extend(tsl.close(mark) for mark in reversed(opened))
            yield "".join(parts)

        yield tsl.close(node)