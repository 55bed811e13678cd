from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import InvalidShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def coerce_sequence_rows(candidate: Any) -> tuple[int, int, list[list[Any]]]:
    """Validate a nested row sequence and return ``(rows, cols, rows_as_lists)``.

    An empty outer sequence describes a 0x0 matrix.
    """

    if not is_sequence_like(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence of rows or a NumPy array."
        )
    rows = []
    for row in candidate:
        if not is_sequence_like(row):
            raise TypeError("Each matrix row must be a sequence of entries.")
        rows.append(list(row))
    if not rows:
        return 0, 0, []
    cols = len(rows[0])
    for row in rows:
        if len(row) != cols:
            raise InvalidShapeError(
                "Matrix data must be rectangular (every row the same length)."
            )
    return len(rows), cols, rows
