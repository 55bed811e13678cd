from __future__ import annotations

from typing import Any

from ._internal.dtypes import DEFAULT_DTYPE, default_value, scalar_caster
from ._internal.errors import InvalidShapeError, check_coords, check_index


class Storage:
    """Row-major element buffer shared by every view built over it.

    The buffer is a plain list; sharing is by reference, so the storage lives as
    long as the longest-lived view that holds it. The element at ``(r, c)``
    lives at ``r * cols + c``.
    """

    __slots__ = ("_rows", "_cols", "_buffer", "_dtype", "_cast")

    def __init__(self, rows: int = 0, cols: int = 0, *, dtype: str | None = None) -> None:
        rows = check_index(rows, what="rows")
        cols = check_index(cols, what="cols")
        if rows < 0 or cols < 0:
            raise InvalidShapeError("Storage shape must be non-negative")
        self._rows = rows
        self._cols = cols
        self._dtype = DEFAULT_DTYPE if dtype is None else dtype
        self._cast = scalar_caster(self._dtype)
        self._buffer: list[Any] = [default_value(self._dtype)] * (rows * cols)

    @classmethod
    def from_buffer(
        cls, rows: int, cols: int, buffer: list[Any], *, dtype: str | None = None
    ) -> "Storage":
        """Adopt ``buffer`` (not copied) as the backing list of a new storage."""

        if len(buffer) != rows * cols:
            raise InvalidShapeError(
                f"buffer of length {len(buffer)} cannot back a {rows}x{cols} storage"
            )
        storage = cls(0, 0, dtype=dtype)
        storage._rows = int(rows)
        storage._cols = int(cols)
        storage._buffer = buffer
        return storage

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> str:
        return self._dtype

    @property
    def buffer(self) -> list[Any]:
        return self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def offset(self, r: Any, c: Any) -> int:
        i, j = check_coords(self._rows, self._cols, r, c)
        return i * self._cols + j

    def at(self, r: Any, c: Any) -> Any:
        return self._buffer[self.offset(r, c)]

    def set(self, r: Any, c: Any, value: Any) -> None:
        # Coerce before touching the buffer so a failed cast writes nothing.
        idx = self.offset(r, c)
        self._buffer[idx] = self._cast(value)

    def coerce(self, value: Any) -> Any:
        return self._cast(value)

    def __repr__(self) -> str:
        return f"Storage(shape={self.shape}, dtype={self._dtype})"
