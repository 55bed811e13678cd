from __future__ import annotations

from typing import Any

from .dtypes import default_value
from .errors import (
    InvalidAccessError,
    InvalidShapeError,
    OutOfBoundsError,
    check_coords,
    check_index,
)
from .matrix_api import MatrixView, WritableMatrixView


class DiagonalView(MatrixView):
    """The parent's main diagonal as a column vector: ``(r, 0) -> parent(r, r)``.

    Always constructible; a rectangular parent yields ``min(rows, cols)``
    entries. Only column 0 exists.
    """

    def __init__(self, parent: MatrixView) -> None:
        if not isinstance(parent, MatrixView):
            raise TypeError("DiagonalView requires a MatrixView parent")
        self._parent = parent._snapshot()

    @property
    def source(self) -> MatrixView:
        return self._parent

    @property
    def storage(self) -> Any:
        return self._parent.storage

    def rows(self) -> int:
        return min(self._parent.rows(), self._parent.cols())

    def cols(self) -> int:
        return 1

    def _check(self, r: Any, c: Any) -> int:
        c = check_index(c, what="column index")
        if c != 0:
            raise InvalidAccessError(
                f"a diagonal is a single-column vector; column {c} does not exist"
            )
        i = check_index(r, what="row index")
        if i < 0 or i >= self.rows():
            raise OutOfBoundsError(f"row {i} out of range for diagonal of length {self.rows()}")
        return i

    def get(self, r: Any, c: Any = 0) -> Any:
        i = self._check(r, c)
        return self._parent.get(i, i)

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            return super().__getitem__(key)
        return self.get(key, 0)

    def __len__(self) -> int:
        return self.rows()

    def _describe(self) -> str:
        return f"length={self.rows()}, source={type(self._parent).__name__}{self._parent.shape}"


class MutableDiagonalView(DiagonalView, WritableMatrixView):
    def set(self, r: Any, c: Any, value: Any) -> None:
        i = self._check(r, c)
        self._parent.set(i, i, value)  # type: ignore[attr-defined]

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple):
            super().__setitem__(key, value)
            return
        self.set(key, 0, value)


class DiagonalMatrixView(MatrixView):
    """Square read-only matrix with a column vector on its diagonal.

    Off-diagonal cells have no backing storage; they all read as one zero
    element built from the chain's dtype when the view is created. There is no
    writable variant of this view.
    """

    def __init__(self, parent: MatrixView) -> None:
        if not isinstance(parent, MatrixView):
            raise TypeError("DiagonalMatrixView requires a MatrixView parent")
        if parent.cols() != 1:
            raise InvalidShapeError(
                f"diagonal matrix needs a column vector, got shape {parent.shape}"
            )
        self._parent = parent._snapshot()
        self._zero = default_value(parent.dtype)

    @property
    def source(self) -> MatrixView:
        return self._parent

    @property
    def storage(self) -> Any:
        return self._parent.storage

    @property
    def zero(self) -> Any:
        return self._zero

    def rows(self) -> int:
        return self._parent.rows()

    def cols(self) -> int:
        return self._parent.rows()

    def get(self, r: Any, c: Any) -> Any:
        i, j = check_coords(self.rows(), self.cols(), r, c)
        if i != j:
            return self._zero
        return self._parent.get(i, 0)

    def _describe(self) -> str:
        return f"shape={self.shape}, source={type(self._parent).__name__}{self._parent.shape}"


def make_diagonal(parent: MatrixView) -> DiagonalView:
    if isinstance(parent, WritableMatrixView):
        return MutableDiagonalView(parent)
    return DiagonalView(parent)


def make_diagonalmatrix(parent: MatrixView) -> DiagonalMatrixView:
    return DiagonalMatrixView(parent)
