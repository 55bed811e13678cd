"""Traversal cursors shared by every view variant.

A cursor is a (view, position) pair plus a traversal direction. Cursors carry no
identity: two cursors are equal exactly when they sit on the same logical
``(row, column)``, whichever view produced them and whether or not they are
writable. That lets a writable cursor be compared against a const end cursor.
"""
from __future__ import annotations

from typing import Any

from .errors import OutOfBoundsError


class CursorBase:
    __slots__ = ()

    @property
    def position(self) -> tuple[int, int]:
        raise NotImplementedError

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def column(self) -> int:
        return self.position[1]

    def _step(self) -> None:
        raise NotImplementedError

    def advance(self) -> "CursorBase":
        """Move one element forward (the ``++`` of the traversal) and return self."""
        self._step()
        return self

    def __iadd__(self, n: int) -> "CursorBase":
        for _ in range(int(n)):
            self._step()
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CursorBase):
            return self.position == other.position
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position})"


class _ViewCursor(CursorBase):
    __slots__ = ("_view", "_row", "_col")

    def __init__(self, view: Any, row: int, col: int) -> None:
        self._view = view
        self._row = int(row)
        self._col = int(col)

    @property
    def position(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def view(self) -> Any:
        return self._view

    @property
    def value(self) -> Any:
        return self._view.get(self._row, self._col)

    def copy(self) -> "_ViewCursor":
        return type(self)(self._view, self._row, self._col)

    __copy__ = copy


class _WritableViewCursor(_ViewCursor):
    __slots__ = ()

    @property
    def value(self) -> Any:
        return self._view.get(self._row, self._col)

    @value.setter
    def value(self, new_value: Any) -> None:
        self._view.set(self._row, self._col, new_value)


class ConstRowCursor(_ViewCursor):
    """Row-major cursor: column first, wrapping to the next row at ``cols()``."""

    __slots__ = ()

    def _step(self) -> None:
        self._col += 1
        if self._col == self._view.cols():
            self._col = 0
            self._row += 1


class RowCursor(_WritableViewCursor, ConstRowCursor):
    __slots__ = ()


class ConstColumnCursor(_ViewCursor):
    """Column-major cursor: row first, wrapping to the next column at ``rows()``."""

    __slots__ = ()

    def _step(self) -> None:
        if self._row == self._view.rows() - 1:
            self._col += 1
            self._row = 0
        else:
            self._row += 1


class ColumnCursor(_WritableViewCursor, ConstColumnCursor):
    __slots__ = ()


class ConstBufferCursor(CursorBase):
    """Flat cursor over a storage buffer; only the identity view walks raw offsets.

    Zero-width storage has no offsets to tell rows apart, so the cursor also
    carries the logical row it was created on and reports ``(row, 0)`` there.
    """

    __slots__ = ("_storage", "_offset", "_row")

    def __init__(self, storage: Any, offset: int, row: int = 0) -> None:
        self._storage = storage
        self._offset = int(offset)
        self._row = int(row)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def position(self) -> tuple[int, int]:
        cols = self._storage.cols()
        if cols == 0:
            return (self._row, 0)
        r, c = divmod(self._offset, cols)
        return (r, c)

    def _step(self) -> None:
        self._offset += 1

    def _checked_offset(self) -> int:
        if self._offset >= len(self._storage):
            raise OutOfBoundsError(
                f"cursor offset {self._offset} is past the end of a buffer of {len(self._storage)}"
            )
        return self._offset

    @property
    def value(self) -> Any:
        return self._storage.buffer[self._checked_offset()]

    def copy(self) -> "ConstBufferCursor":
        return type(self)(self._storage, self._offset, self._row)

    __copy__ = copy


class BufferCursor(ConstBufferCursor):
    __slots__ = ()

    @property
    def value(self) -> Any:
        return self._storage.buffer[self._checked_offset()]

    @value.setter
    def value(self, new_value: Any) -> None:
        idx = self._checked_offset()
        self._storage.buffer[idx] = self._storage.coerce(new_value)


def walk(begin: CursorBase, end: CursorBase):
    """Yield values from ``begin`` up to (not including) ``end``."""

    cur = begin.copy()  # type: ignore[attr-defined]
    while cur != end:
        yield cur.value
        cur.advance()
