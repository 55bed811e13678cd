from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .errors import OutOfBoundsError, check_coords, check_index
from .matrix_api import MatrixView, WritableMatrixView


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Rect:
    row0: int
    row1: int
    col0: int
    col1: int


class SubmatrixView(MatrixView):
    """A no-copy rectangular window ``[row0, row1) x [col0, col1)`` into a parent view.

    - Construction validation against the parent's shape
    - Element access by offsetting into the parent, bounds-checked against the
      window's own shape
    - View composition: a window of a window collapses into a single window
      over the outer window's parent
    - Cursors run in window-local coordinates
    """

    def __init__(self, source: MatrixView, row0: int, row1: int, col0: int, col1: int):
        if not isinstance(source, MatrixView):
            raise TypeError("SubmatrixView source must be a MatrixView")
        row0 = check_index(row0, what="row0")
        row1 = check_index(row1, what="row1")
        col0 = check_index(col0, what="col0")
        col1 = check_index(col1, what="col1")

        src_rows, src_cols = source.rows(), source.cols()
        if row0 < 0 or col0 < 0 or row0 > row1 or col0 > col1:
            raise OutOfBoundsError(
                f"invalid window rows [{row0}, {row1}) x cols [{col0}, {col1})"
            )
        if row1 > src_rows or col1 > src_cols:
            raise OutOfBoundsError(
                f"window rows [{row0}, {row1}) x cols [{col0}, {col1}) exceeds "
                f"source shape ({src_rows}, {src_cols})"
            )

        # Compose views deterministically.
        if isinstance(source, SubmatrixView):
            logger.debug("flattening window of window into one window over %s",
                         type(source.source).__name__)
            rect = source._rect
            row0, row1 = row0 + rect.row0, row1 + rect.row0
            col0, col1 = col0 + rect.col0, col1 + rect.col0
            source = source.source

        self._source = source._snapshot()
        self._rect = _Rect(row0=row0, row1=row1, col0=col0, col1=col1)

    # --- minimal matrix protocol ---

    def rows(self) -> int:
        return self._rect.row1 - self._rect.row0

    def cols(self) -> int:
        return self._rect.col1 - self._rect.col0

    @property
    def source(self) -> MatrixView:
        return self._source

    @property
    def storage(self) -> Any:
        return self._source.storage

    @property
    def row_offset(self) -> int:
        return self._rect.row0

    @property
    def col_offset(self) -> int:
        return self._rect.col0

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        r = self._rect
        return (r.row0, r.row1, r.col0, r.col1)

    def get(self, r: Any, c: Any) -> Any:
        i, j = check_coords(self.rows(), self.cols(), r, c)
        return self._source.get(self.row_offset + i, self.col_offset + j)

    # --- printing (structure-only; must not access elements) ---

    def _describe(self) -> str:
        src = self._source
        return (
            f"shape={self.shape}, offset=({self.row_offset},{self.col_offset}), "
            f"source={type(src).__name__}({src.rows()}x{src.cols()})"
        )


class MutableSubmatrixView(SubmatrixView, WritableMatrixView):
    def set(self, r: Any, c: Any, value: Any) -> None:
        i, j = check_coords(self.rows(), self.cols(), r, c)
        self._source.set(self.row_offset + i, self.col_offset + j, value)  # type: ignore[attr-defined]


def make_submatrix(
    source: MatrixView, row0: int, row1: int, col0: int, col1: int
) -> SubmatrixView:
    if isinstance(source, WritableMatrixView):
        return MutableSubmatrixView(source, row0, row1, col0, col1)
    return SubmatrixView(source, row0, row1, col0, col1)
