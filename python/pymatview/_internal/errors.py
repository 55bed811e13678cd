from __future__ import annotations


class MatrixViewError(Exception):
    """Base class for all pymatview errors."""


class OutOfBoundsError(MatrixViewError, IndexError):
    """A coordinate, cursor index or window bound lies outside the current shape."""


class InvalidShapeError(MatrixViewError, ValueError):
    """The operand does not have the shape the operation requires."""


class InvalidAccessError(MatrixViewError, IndexError):
    """A non-zero column was requested on a diagonal (single-column) view."""


def check_index(value: object, *, what: str = "index") -> int:
    """Return ``value`` as a plain int, rejecting non-integers.

    Bools are rejected: ``m[True, 0]`` is far more likely a bug than intent.
    """

    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return int(value.__index__())  # type: ignore[attr-defined]


def check_coords(rows: int, cols: int, r: object, c: object) -> tuple[int, int]:
    i = check_index(r, what="row index")
    j = check_index(c, what="column index")
    if i < 0 or j < 0 or i >= rows or j >= cols:
        raise OutOfBoundsError(f"index ({i}, {j}) out of range for shape ({rows}, {cols})")
    return i, j
