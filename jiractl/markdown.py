"""Markdown rendering of ADF nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .adf import Connector, NodeType

Hook = Callable[[Connector], str]

_VALID_ATTRIBUTES = frozenset({"language", "level", "text"})


@dataclass
class _TableState:
    rows: int = 0
    cols: int = 0
    current_col: int = 0
    separator: bool = False


@dataclass
class _ListState:
    ordered: dict[int, bool] = field(default_factory=dict)
    unordered: dict[int, bool] = field(default_factory=dict)
    depth_ordered: int = 0
    depth_unordered: int = 0
    counter: dict[int, int] = field(default_factory=dict)

    def in_list(self) -> bool:
        return self.unordered.get(self.depth_unordered, False) or self.ordered.get(
            self.depth_ordered, False
        )


class MarkdownTranslator:
    """Renders ADF nodes as markdown tags; hooks override chosen node types."""

    def __init__(
        self,
        open_hooks: Mapping[str, Hook] | None = None,
        close_hooks: Mapping[str, Hook] | None = None,
    ) -> None:
        self.open_hooks: dict[str, Hook] = dict(open_hooks or {})
        self.close_hooks: dict[str, Hook] = dict(close_hooks or {})
        self._table = _TableState()
        self._list = _ListState()

    def open(self, node: Connector, depth: int) -> str:
        node_type, attrs = node.node_type, node.attributes
        hook = self.open_hooks.get(node_type)
        tag = hook(node) if hook is not None else self._open_tag(node_type, attrs)
        return tag + self._open_attributes(attrs)

    def close(self, node: Connector) -> str:
        hook = self.close_hooks.get(node.node_type)
        tag = hook(node) if hook is not None else self._close_tag(node.node_type)
        return tag + self._close_attributes(node.attributes)

    def _open_tag(self, node_type: str, attrs: Any) -> str:
        table, lists = self._table, self._list
        match node_type:
            case NodeType.BLOCKQUOTE:
                return "> "
            case NodeType.CODE_BLOCK:
                has_language = attrs is not None and "language" in attrs
                return "```" if has_language else "```\n"
            case NodeType.PANEL:
                return "---\n"
            case NodeType.TABLE:
                return "\n"
            case NodeType.MEDIA:
                return "\n[attachment]"
            case NodeType.BULLET_LIST:
                lists.depth_unordered += 1
                lists.unordered[lists.depth_unordered] = True
            case NodeType.ORDERED_LIST:
                lists.depth_ordered += 1
                lists.ordered[lists.depth_ordered] = True
            case NodeType.LIST_ITEM:
                if lists.ordered.get(lists.depth_ordered, False):
                    depth = lists.depth_ordered
                    lists.counter[depth] = lists.counter.get(depth, 0) + 1
                    return "\t" * (depth - 1) + f"{lists.counter[depth]}. "
                return "\t" * (lists.depth_unordered - 1) + "- "
            case NodeType.TABLE_HEADER:
                tag = " | " if table.cols != 0 else ""
                table.cols += 1
                return tag
            case NodeType.TABLE_CELL:
                tag = " | " if table.current_col != 0 else ""
                table.current_col += 1
                return tag
            case NodeType.TABLE_ROW:
                table.rows += 1
                if table.rows == 1 and not table.separator:
                    table.separator = True
                table.current_col = 0
            case NodeType.HARD_BREAK:
                return "\n\n"
            case NodeType.MENTION:
                return " @"
            case NodeType.INLINE_CARD:
                return " 📍 "
            case NodeType.STRONG:
                return " **"
            case NodeType.EM:
                return " _"
            case NodeType.CODE:
                return " `"
            case NodeType.STRIKE:
                return " -"
            case NodeType.LINK:
                return " ["
        return ""

    def _close_tag(self, node_type: str) -> str:
        table, lists = self._table, self._list
        match node_type:
            case NodeType.BLOCKQUOTE | NodeType.HEADING:
                return "\n"
            case NodeType.CODE_BLOCK:
                return "\n```\n"
            case NodeType.PANEL:
                return "---\n"
            case NodeType.BULLET_LIST:
                lists.unordered[lists.depth_unordered] = False
                lists.depth_unordered -= 1
            case NodeType.ORDERED_LIST:
                lists.ordered[lists.depth_ordered] = False
                lists.depth_ordered -= 1
            case NodeType.PARAGRAPH:
                if lists.in_list():
                    return "\n"
                if table.rows == 0:
                    return "\n\n"
            case NodeType.TABLE:
                table.rows = 0
                table.cols = 0
                table.separator = False
            case NodeType.TABLE_ROW:
                if table.separator:
                    table.separator = False
                    return "\n" + " | ".join(["---"] * table.cols) + "\n"
                return "\n"
            case NodeType.MENTION | NodeType.EMOJI:
                return " "
            case NodeType.STRONG:
                return "** "
            case NodeType.EM:
                return "_ "
            case NodeType.CODE:
                return "` "
            case NodeType.STRIKE:
                return "- "
            case NodeType.LINK:
                return "]"
        return ""

    @staticmethod
    def _open_attributes(attrs: Any) -> str:
        if attrs is None:
            return ""
        parts: list[str] = []
        newline = False
        for key, value in attrs.items():
            if key in _VALID_ATTRIBUTES:
                if key == "language":
                    parts.append(str(value))
                    newline = True
                elif key == "level":
                    parts.append("#" * int(value) + " ")
                else:
                    parts.append(str(value))
                    newline = False
            if newline:
                parts.append("\n")
        return "".join(parts)

    @staticmethod
    def _close_attributes(attrs: Any) -> str:
        if attrs is None:
            return ""
        if "href" in attrs:
            return f"({attrs['href']}) "
        if "url" in attrs:
            return f"{attrs['url']} "
        return ""