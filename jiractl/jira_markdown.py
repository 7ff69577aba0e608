"""Jira flavoured markdown rendering of ADF nodes."""

from __future__ import annotations

from .adf import Connector, NodeType
from .markdown import MarkdownTranslator

_PANEL_COLORS = {
    "info": "#deebff",
    "note": "#eae6ff",
    "error": "#ffebe6",
    "success": "#e3fcef",
    "warning": "#fffae6",
}

_PANEL_CLOSE_TAG = "{panel}\n"


def _panel_open(node: Connector) -> str:
    attrs = node.attributes
    parts = ["\n{panel"]
    if attrs is not None:
        if attrs:
            parts.append(":")
        for key, value in attrs.items():
            if key == "panelType":
                color = _PANEL_COLORS.get(value)
                if color is not None:
                    parts.append(f"bgColor={color}")
            else:
                parts.append(f"|{key}={value}")
    parts.append("}\n")
    return "".join(parts)


class JiraMarkdownTranslator:
    """Markdown translator that renders panels as Jira panel macros."""

    def __init__(self) -> None:
        self._markdown = MarkdownTranslator(
            open_hooks={NodeType.PANEL: _panel_open},
            close_hooks={NodeType.PANEL: lambda _node: _PANEL_CLOSE_TAG},
        )

    def open(self, node: Connector, depth: int) -> str:
        return self._markdown.open(node, depth)

    def close(self, node: Connector) -> str:
        return self._markdown.close(node)