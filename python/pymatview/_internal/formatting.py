from __future__ import annotations

import io
from typing import Any, TextIO

import numpy as np

from .cursors import walk


_EDGE_ITEMS: int = 4


def configure(*, edge_items: int | None = None) -> None:
    global _EDGE_ITEMS
    if edge_items is not None:
        if int(edge_items) < 1:
            raise ValueError("edge_items must be at least 1")
        _EDGE_ITEMS = int(edge_items)


def get_edge_items() -> int:
    return _EDGE_ITEMS


def _edge_indices(length: int) -> tuple[list[int], list[int], bool]:
    if length <= _EDGE_ITEMS * 2:
        return list(range(length)), [], False
    head = list(range(_EDGE_ITEMS))
    tail = list(range(length - _EDGE_ITEMS, length))
    return head, tail, True


def _format_value(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def write_matrix(view: Any, stream: TextIO) -> None:
    """Write ``view`` row by row: every element followed by a space, one line per row.

    Rows are read through the bounded row cursors, so any view variant prints
    the same way. A view with zero columns writes nothing.
    """

    columns = view.cols()
    if columns == 0:
        return
    for i in range(view.rows()):
        for value in walk(view.begin(i), view.end(i)):
            stream.write(_format_value(value))
            stream.write(" ")
        stream.write("\n")


def format_matrix(view: Any) -> str:
    buf = io.StringIO()
    write_matrix(view, buf)
    return buf.getvalue()


def _format_matrix_row(
    matrix: Any,
    row_index: int,
    col_head: list[int],
    col_tail: list[int],
    truncated: bool,
) -> str:
    entries: list[str] = []
    for col in col_head:
        entries.append(_format_value(matrix.get(row_index, col)))
    if truncated:
        entries.append("...")
    for col in col_tail:
        entries.append(_format_value(matrix.get(row_index, col)))
    return " ".join(entries)


def matrix_summary(self: Any) -> str:
    """Header plus an edge-truncated preview; only the edge cells are read."""

    rows = self.rows()
    cols = self.cols()

    info = [f"shape=({rows}, {cols})"]
    dtype = getattr(self, "dtype", None)
    if dtype is not None:
        info.append(f"dtype={dtype}")

    header = f"{self.__class__.__name__}({', '.join(info)})"

    if rows == 0 or cols == 0:
        return header + "\n[]"

    row_head, row_tail, rows_truncated = _edge_indices(rows)
    col_head, col_tail, cols_truncated = _edge_indices(cols)

    lines = [header, "["]
    for row_index in row_head:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    if rows_truncated:
        lines.append(" ...")
    for row_index in row_tail:
        row_repr = _format_matrix_row(self, row_index, col_head, col_tail, cols_truncated)
        lines.append(f" [{row_repr}]")
    lines.append("]")
    return "\n".join(lines)


class MatrixMixin:
    def __str__(self) -> str:
        return format_matrix(self)

    def _describe(self) -> str:
        return f"shape={getattr(self, 'shape', None)}"

    def __repr__(self) -> str:
        # Structure only: never touches elements.
        return f"{self.__class__.__name__}({self._describe()})"
