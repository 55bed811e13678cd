from __future__ import annotations

import abc
from typing import Any, Iterator

from . import formatting as _formatting
from .cursors import (
    ColumnCursor,
    ConstColumnCursor,
    ConstRowCursor,
    CursorBase,
    RowCursor,
    walk,
)
from .errors import OutOfBoundsError, check_index


MatrixMixin = _formatting.MatrixMixin


class MatrixView(MatrixMixin, metaclass=abc.ABCMeta):
    """Readable matrix: a shape plus a ``get(r, c)`` coordinate mapping.

    Every variant (the dense identity view, transpose, window, diagonal and
    diagonal matrix) implements this contract. Only ``WritableMatrixView``
    subclasses expose ``set``; a view built over a read-only parent is itself
    read-only.
    """

    _row_cursor_cls: type = ConstRowCursor
    _column_cursor_cls: type = ConstColumnCursor

    # --- minimal matrix protocol ---

    @abc.abstractmethod
    def rows(self) -> int: ...

    @abc.abstractmethod
    def cols(self) -> int: ...

    @abc.abstractmethod
    def get(self, r: Any, c: Any) -> Any: ...

    @property
    @abc.abstractmethod
    def storage(self) -> Any:
        """The shared storage this view chain bottoms out at."""

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows(), self.cols())

    @property
    def dtype(self) -> str:
        return self.storage.dtype

    def at(self, r: Any, c: Any) -> Any:
        return self.get(r, c)

    def __getitem__(self, key: Any) -> Any:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        return self.get(i, j)

    def shares_storage(self, other: "MatrixView") -> bool:
        return self.storage is other.storage

    def _snapshot(self) -> "MatrixView":
        # Views are immutable descriptors; holding one is as good as a copy.
        return self

    # --- view factories ---

    def get_transpose(self) -> "MatrixView":
        from .transpose_view import make_transpose

        return make_transpose(self)

    @property
    def T(self) -> "MatrixView":
        return self.get_transpose()

    def get_submatrix(self, row0: int, row1: int, col0: int, col1: int) -> "MatrixView":
        """Window over rows ``[row0, row1)`` and columns ``[col0, col1)``."""
        from .submatrix_view import make_submatrix

        return make_submatrix(self, row0, row1, col0, col1)

    def get_diagonal(self) -> "MatrixView":
        from .diagonal_view import make_diagonal

        return make_diagonal(self)

    def get_diagonalmatrix(self) -> "MatrixView":
        from .diagonal_view import make_diagonalmatrix

        return make_diagonalmatrix(self)

    # --- cursors ---

    def _row_cursor(self, r: int, c: int) -> CursorBase:
        return self._row_cursor_cls(self, r, c)

    def _column_cursor(self, r: int, c: int) -> CursorBase:
        return self._column_cursor_cls(self, r, c)

    def _check_row(self, i: Any) -> int:
        i = check_index(i, what="row index")
        if i < 0 or i >= self.rows():
            raise OutOfBoundsError(f"row {i} out of range for {self.rows()} rows")
        return i

    def _check_col(self, j: Any) -> int:
        j = check_index(j, what="column index")
        if j < 0 or j >= self.cols():
            raise OutOfBoundsError(f"column {j} out of range for {self.cols()} columns")
        return j

    def begin(self, i: int | None = None) -> CursorBase:
        """Row-major cursor at the start of row ``i``, or of the whole view."""
        if i is None:
            if self.rows() == 0 or self.cols() == 0:
                return self.end()
            return self._row_cursor(0, 0)
        i = self._check_row(i)
        if self.cols() == 0:
            return self.end(i)
        return self._row_cursor(i, 0)

    def end(self, i: int | None = None) -> CursorBase:
        if i is None:
            return self._row_cursor(self.rows(), 0)
        i = self._check_row(i)
        return self._row_cursor(i + 1, 0)

    def column_begin(self, j: int | None = None) -> CursorBase:
        """Column-major cursor at the top of column ``j``, or of the whole view."""
        if j is None:
            if self.rows() == 0 or self.cols() == 0:
                return self.column_end()
            return self._column_cursor(0, 0)
        j = self._check_col(j)
        if self.rows() == 0:
            return self.column_end(j)
        return self._column_cursor(0, j)

    def column_end(self, j: int | None = None) -> CursorBase:
        if j is None:
            return self._column_cursor(0, self.cols())
        j = self._check_col(j)
        return self._column_cursor(0, j + 1)

    # --- iteration built on the cursors ---

    def __iter__(self) -> Iterator[Any]:
        return walk(self.begin(), self.end())

    def iter_row(self, i: int) -> Iterator[Any]:
        return walk(self.begin(i), self.end(i))

    def iter_column(self, j: int) -> Iterator[Any]:
        return walk(self.column_begin(j), self.column_end(j))

    def iter_columns(self) -> Iterator[Any]:
        return walk(self.column_begin(), self.column_end())

    def to_list(self) -> list[list[Any]]:
        if self.cols() == 0:
            return [[] for _ in range(self.rows())]
        return [list(self.iter_row(i)) for i in range(self.rows())]

    # --- materialization ---

    def copy(self) -> Any:
        """Independent dense copy (new storage, no aliasing)."""
        from .dense import Matrix

        return Matrix(self)

    def to_numpy(self, dtype: Any = None, *, allow_huge: bool = False) -> Any:
        from .interop import to_numpy

        return to_numpy(self, dtype=dtype, allow_huge=allow_huge)

    def __array__(self, dtype: Any = None, copy: Any = None) -> Any:
        # Exports always materialize; writes to the array never reach the storage.
        if copy is False:
            raise ValueError(
                f"{type(self).__name__} cannot be exported to NumPy without a copy"
            )
        return self.to_numpy(dtype)

    def summary(self) -> str:
        return _formatting.matrix_summary(self)

    def _describe(self) -> str:
        return f"shape={self.shape}, dtype={self.dtype}"


class WritableMatrixView(MatrixView):
    """Matrix view whose cells can be assigned; writes land in the shared storage."""

    _row_cursor_cls: type = RowCursor
    _column_cursor_cls: type = ColumnCursor

    @abc.abstractmethod
    def set(self, r: Any, c: Any, value: Any) -> None: ...

    def __setitem__(self, key: Any, value: Any) -> None:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise TypeError("matrix indices must be provided as [row, col]")
        i, j = key
        self.set(i, j, value)

    def fill(self, value: Any) -> "WritableMatrixView":
        cur = self.begin()
        stop = self.end()
        while cur != stop:
            cur.value = value  # type: ignore[attr-defined]
            cur.advance()
        return self
