from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .._storage import Storage
from .coercion import coerce_sequence_rows
from .cursors import BufferCursor, CursorBase
from .dtypes import infer_dtype, normalize_dtype, scalar_caster
from .errors import check_index
from .interop import from_numpy
from .matrix_api import MatrixView, WritableMatrixView


logger = logging.getLogger(__name__)


def _resolve_dtype(dtype: Any) -> str | None:
    token = normalize_dtype(dtype, np_module=np)
    if dtype is not None and token is None:
        raise TypeError(f"unsupported dtype: {dtype!r}")
    return token


def _copy_storage(source: MatrixView, dtype: str | None) -> Storage:
    """Element-by-element copy of ``source`` into a brand-new storage."""

    rows, cols = source.rows(), source.cols()
    target = Storage(rows, cols, dtype=source.dtype if dtype is None else dtype)
    buffer = target.buffer
    cast = target.coerce
    k = 0
    if cols:
        for i in range(rows):
            cur = source.begin(i)
            stop = source.end(i)
            while cur != stop:
                buffer[k] = cast(cur.value)  # type: ignore[attr-defined]
                k += 1
                cur.advance()
    logger.debug("copied %s into new %dx%d storage", type(source).__name__, rows, cols)
    return target


def _storage_from_rows(data: Any, dtype: str | None) -> Storage:
    rows, cols, values = coerce_sequence_rows(data)
    flat = [v for row in values for v in row]
    token = infer_dtype(flat) if dtype is None else dtype
    cast = scalar_caster(token)
    return Storage.from_buffer(rows, cols, [cast(v) for v in flat], dtype=token)


class Matrix(WritableMatrixView):
    """Dense matrix: the identity view over a shared ``Storage``.

    ``Matrix()`` is 0x0, ``Matrix(rows, cols)`` holds default elements,
    ``Matrix(data)`` builds from nested rows or a NumPy array, and
    ``Matrix(view)`` is an assignment-copy: a new storage with every element
    copied, so later writes on either side are never seen by the other.
    """

    def __init__(
        self,
        rows_or_data: Any = None,
        cols: int | None = None,
        *,
        dtype: Any = None,
    ) -> None:
        token = _resolve_dtype(dtype)
        source = rows_or_data
        is_count = hasattr(source, "__index__") and not isinstance(source, (bool, np.ndarray))
        if cols is not None and not is_count:
            raise TypeError("cols may only be given together with an integer row count")

        if source is None:
            storage = Storage(0, 0, dtype=token)
        elif isinstance(source, MatrixView):
            storage = _copy_storage(source, token)
        elif isinstance(source, np.ndarray):
            n_rows, n_cols, flat, np_token = from_numpy(source, dtype=token)
            cast = scalar_caster(np_token)
            storage = Storage.from_buffer(n_rows, n_cols, [cast(v) for v in flat], dtype=np_token)
        elif is_count:
            n_rows = check_index(source, what="rows")
            n_cols = n_rows if cols is None else check_index(cols, what="cols")
            storage = Storage(n_rows, n_cols, dtype=token)
        else:
            storage = _storage_from_rows(source, token)

        self._storage = storage

    @classmethod
    def _wrap(cls, storage: Storage) -> "Matrix":
        """A new identity descriptor over an existing storage (no copy)."""
        m = cls.__new__(cls)
        m._storage = storage
        return m

    @property
    def storage(self) -> Storage:
        return self._storage

    def rows(self) -> int:
        return self._storage.rows()

    def cols(self) -> int:
        return self._storage.cols()

    def get(self, r: Any, c: Any) -> Any:
        return self._storage.at(r, c)

    def set(self, r: Any, c: Any, value: Any) -> None:
        self._storage.set(r, c, value)

    def assign(self, other: MatrixView) -> "Matrix":
        """Replace this matrix's contents with a deep copy of ``other``.

        Views taken from this matrix earlier keep the storage they captured.
        """
        if other is self:
            return self
        self._storage = _copy_storage(other, None)
        return self

    def _snapshot(self) -> "Matrix":
        return Matrix._wrap(self._storage)

    def _row_cursor(self, r: int, c: int) -> CursorBase:
        return BufferCursor(self._storage, r * self._storage.cols() + c, r)

    def _to_numpy_fast(self, target: Any) -> Any:
        arr = np.array(self._storage.buffer, dtype=target)
        return arr.reshape(self.rows(), self.cols())

    def __copy__(self) -> "Matrix":
        return Matrix(self)

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return Matrix(self)
