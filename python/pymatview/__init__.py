"""Dense 2-D matrices with composable, aliasing views.

A ``Matrix`` owns a shared row-major ``Storage``. Transposes, windows,
diagonals and diagonal matrices are lightweight views over it: writing through
any writable view changes what every other view over the same storage reads.
``Matrix(view)`` is the one operation that copies.
"""
from __future__ import annotations

__version__ = "0.1.0"

from typing import Any

from ._storage import Storage
from ._internal import export_guard as _export_guard
from ._internal import formatting as _formatting
from ._internal.cursors import (
    BufferCursor,
    ColumnCursor,
    ConstBufferCursor,
    ConstColumnCursor,
    ConstRowCursor,
    CursorBase,
    RowCursor,
)
from ._internal.dense import Matrix
from ._internal.diagonal_view import DiagonalMatrixView, DiagonalView, MutableDiagonalView
from ._internal.errors import (
    InvalidAccessError,
    InvalidShapeError,
    MatrixViewError,
    OutOfBoundsError,
)
from ._internal.formatting import format_matrix, write_matrix
from ._internal.interop import to_numpy
from ._internal.matrix_api import MatrixView, WritableMatrixView
from ._internal.submatrix_view import MutableSubmatrixView, SubmatrixView
from ._internal.transpose_view import MutableTransposeView, TransposeView
from ._internal.warnings import (
    PyMatViewDTypeWarning,
    PyMatViewPerformanceWarning,
    PyMatViewWarning,
)


_UNSET: Any = object()


def configure(
    *,
    edge_items: int | None = None,
    export_warn_elements: int | None = _UNSET,
    export_max_elements: int | None = _UNSET,
) -> None:
    """Adjust process-wide settings.

    ``edge_items`` controls how many leading/trailing rows and columns
    ``summary()`` shows. ``export_warn_elements`` is the element count above
    which a gathered NumPy export emits ``PyMatViewPerformanceWarning``
    (``None`` disables; the default comes from ``PYMATVIEW_EXPORT_WARN_ELEMENTS``).
    ``export_max_elements`` blocks larger exports unless ``allow_huge=True``.
    """

    _formatting.configure(edge_items=edge_items)
    if export_warn_elements is not _UNSET:
        _export_guard.set_warn_elements(export_warn_elements)
    if export_max_elements is not _UNSET:
        _export_guard.set_max_elements(export_max_elements)


__all__ = [
    "__version__",
    # Storage and matrices
    "Storage",
    "Matrix",
    "MatrixView",
    "WritableMatrixView",
    # Views
    "TransposeView",
    "MutableTransposeView",
    "SubmatrixView",
    "MutableSubmatrixView",
    "DiagonalView",
    "MutableDiagonalView",
    "DiagonalMatrixView",
    # Cursors
    "CursorBase",
    "ConstRowCursor",
    "RowCursor",
    "ConstColumnCursor",
    "ColumnCursor",
    "ConstBufferCursor",
    "BufferCursor",
    # Errors and warnings
    "MatrixViewError",
    "OutOfBoundsError",
    "InvalidShapeError",
    "InvalidAccessError",
    "PyMatViewWarning",
    "PyMatViewDTypeWarning",
    "PyMatViewPerformanceWarning",
    # Formatting, interop and settings
    "format_matrix",
    "write_matrix",
    "to_numpy",
    "configure",
]
