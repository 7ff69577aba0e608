"""Tabular view of boards."""

from __future__ import annotations

import io
from typing import Iterable, TextIO

from .helper import _pager_out, _TabWriter, prepare_title
from .models import Board

_HEADER = ("ID", "NAME", "TYPE")


class BoardView:
    """Lists boards; writes to the given writer, or aligns and pages by default."""

    def __init__(self, data: Iterable[Board], writer: TextIO | None = None) -> None:
        self.data = list(data)
        self._buffer = io.StringIO()
        self.writer: TextIO | _TabWriter = (
            writer if writer is not None else _TabWriter(self._buffer)
        )

    def render(self) -> None:
        self.writer.write("\t".join(_HEADER) + "\n")
        for board in self.data:
            self.writer.write(f"{board.id}\t{prepare_title(board.name)}\t{board.board_type}\n")
        if isinstance(self.writer, _TabWriter):
            self.writer.flush()
        text = self._buffer.getvalue()
        self._buffer.seek(0)
        self._buffer.truncate()
        _pager_out(text)