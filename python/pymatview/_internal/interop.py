from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import export_guard
from .cursors import walk
from .dtypes import normalize_dtype, numpy_dtype
from .errors import InvalidShapeError


logger = logging.getLogger(__name__)


def from_numpy(array: Any, *, dtype: str | None) -> tuple[int, int, list[Any], str]:
    """Flatten a 1-D or 2-D array into ``(rows, cols, row_major_values, dtype)``.

    1-D arrays become column vectors, matching how diagonals are shaped.
    """

    arr = np.asarray(array)
    if arr.ndim == 1:
        arr = arr.reshape(arr.shape[0], 1)
    if arr.ndim != 2:
        raise InvalidShapeError(f"Matrix input must be 1-D or 2-D, got ndim={arr.ndim}")

    token = dtype if dtype is not None else normalize_dtype(arr.dtype, np_module=np)
    if token is None:
        token = "object"
    rows, cols = (int(arr.shape[0]), int(arr.shape[1]))
    return rows, cols, arr.reshape(-1).tolist(), token


def to_numpy(view: Any, *, dtype: Any = None, allow_huge: bool = False) -> Any:
    """Materialize any view as a fresh 2-D ``numpy.ndarray``.

    The identity view exports its buffer directly. Every other view is gathered
    row by row through its own cursors.
    """

    export_guard.ensure_export_allowed(view, allow_huge=allow_huge)

    if dtype is None:
        target = numpy_dtype(view.dtype, np)
    else:
        token = normalize_dtype(dtype, np_module=np)
        target = numpy_dtype(token, np) if token is not None else np.dtype(dtype)

    fast_export = getattr(view, "_to_numpy_fast", None)
    if callable(fast_export):
        return fast_export(target)

    rows, cols = view.rows(), view.cols()
    export_guard.warn_if_slow_export(view, stacklevel=4)
    logger.debug("gathering %dx%d %s for export", rows, cols, type(view).__name__)

    out = np.empty((rows, cols), dtype=target)
    if cols == 0:
        return out
    for i in range(rows):
        for j, value in enumerate(walk(view.begin(i), view.end(i))):
            out[i, j] = value
    return out
