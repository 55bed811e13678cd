from __future__ import annotations

import logging
from typing import Any

from .cursors import CursorBase
from .errors import check_coords
from .matrix_api import MatrixView, WritableMatrixView


logger = logging.getLogger(__name__)


class TransposeView(MatrixView):
    """Rows and columns of the parent swapped: ``(r, c) -> parent(c, r)``.

    Iteration is dual rather than re-derived: the row cursors of a transpose
    are the parent's column cursors and vice versa, so transposing twice walks
    exactly like the parent.
    """

    def __init__(self, parent: MatrixView) -> None:
        if not isinstance(parent, MatrixView):
            raise TypeError("TransposeView requires a MatrixView parent")
        self._parent = parent._snapshot()

    @property
    def source(self) -> MatrixView:
        return self._parent

    @property
    def storage(self) -> Any:
        return self._parent.storage

    def rows(self) -> int:
        return self._parent.cols()

    def cols(self) -> int:
        return self._parent.rows()

    def get(self, r: Any, c: Any) -> Any:
        i, j = check_coords(self.rows(), self.cols(), r, c)
        return self._parent.get(j, i)

    def get_transpose(self) -> MatrixView:
        logger.debug("transpose of %s collapses to its parent", type(self).__name__)
        return self._parent._snapshot()

    def begin(self, i: int | None = None) -> CursorBase:
        return self._parent.column_begin(i)

    def end(self, i: int | None = None) -> CursorBase:
        return self._parent.column_end(i)

    def column_begin(self, j: int | None = None) -> CursorBase:
        return self._parent.begin(j)

    def column_end(self, j: int | None = None) -> CursorBase:
        return self._parent.end(j)

    def _describe(self) -> str:
        return f"shape={self.shape}, source={type(self._parent).__name__}{self._parent.shape}"


class MutableTransposeView(TransposeView, WritableMatrixView):
    def set(self, r: Any, c: Any, value: Any) -> None:
        i, j = check_coords(self.rows(), self.cols(), r, c)
        self._parent.set(j, i, value)  # type: ignore[attr-defined]


def make_transpose(parent: MatrixView) -> TransposeView:
    if isinstance(parent, WritableMatrixView):
        return MutableTransposeView(parent)
    return TransposeView(parent)
