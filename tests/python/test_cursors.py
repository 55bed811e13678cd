import pytest

from pymatview import (
    BufferCursor,
    ColumnCursor,
    ConstColumnCursor,
    ConstRowCursor,
    Matrix,
    OutOfBoundsError,
    PyMatViewDTypeWarning,
    RowCursor,
)


def _ramp(rows, cols):
    m = Matrix(rows, cols, dtype="int64")
    for i in range(rows):
        for j in range(cols):
            m[i, j] = i + j
    return m


def _variants():
    b = _ramp(4, 5)
    col = Matrix([[1], [2], [3]])
    return {
        "matrix": b,
        "transpose": b.get_transpose(),
        "window": b.get_submatrix(1, 3, 1, 4),
        "diagonal": b.get_diagonal(),
        "diagonalmatrix": col.get_diagonalmatrix(),
        "nested": b.T.get_submatrix(0, 4, 1, 3).get_transpose(),
    }


def test_cursor_kinds_follow_writability():
    b = _ramp(2, 3)
    assert isinstance(b.begin(), BufferCursor)
    assert isinstance(b.column_begin(), ColumnCursor)
    w = b.get_submatrix(0, 2, 0, 2)
    assert isinstance(w.begin(), RowCursor)
    dm = Matrix([[1], [2]]).get_diagonalmatrix()
    assert type(dm.begin()) is ConstRowCursor
    assert type(dm.column_begin()) is ConstColumnCursor


def test_equality_is_by_position_across_kinds():
    b = _ramp(2, 3)
    w = b.get_submatrix(0, 2, 0, 3)
    assert b.begin() == w.begin()
    assert b.end() == w.end()
    assert b.begin(1) == b.column_begin(0).advance()
    assert b.begin() != b.end()
    assert not (b.begin() == "not a cursor")


def test_cursors_are_unhashable():
    with pytest.raises(TypeError):
        hash(_ramp(1, 1).begin())


def test_advance_and_jump():
    b = _ramp(2, 5)
    cur = b.begin()
    assert cur.advance() is cur
    assert cur.position == (0, 1)
    cur += 4
    assert cur.position == (1, 0)
    assert (cur.row, cur.column) == (1, 0)
    assert cur.value == 1


def test_copy_is_independent():
    b = _ramp(2, 2)
    cur = b.column_begin()
    dup = cur.copy()
    dup.advance()
    assert cur.position == (0, 0)
    assert dup.position == (1, 0)


def test_row_cursor_wraps_to_next_row():
    w = _ramp(4, 5).get_submatrix(1, 3, 1, 4)
    cur = w.begin()
    positions = []
    while cur != w.end():
        positions.append(cur.position)
        cur.advance()
    assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_column_cursor_wraps_to_next_column():
    w = _ramp(4, 5).get_submatrix(1, 3, 1, 4)
    cur = w.column_begin()
    positions = []
    while cur != w.column_end():
        positions.append(cur.position)
        cur.advance()
    assert positions == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]


def test_end_positions():
    b = _ramp(2, 5)
    assert b.end().position == (2, 0)
    assert b.end(0).position == (1, 0)
    assert b.column_end().position == (0, 5)
    assert b.column_end(3).position == (0, 4)


def test_bounded_cursor_index_out_of_range():
    b = _ramp(2, 5)
    with pytest.raises(OutOfBoundsError):
        b.begin(2)
    with pytest.raises(OutOfBoundsError):
        b.end(-1)
    with pytest.raises(OutOfBoundsError):
        b.column_begin(5)
    with pytest.raises(OutOfBoundsError):
        b.column_end(7)
    with pytest.raises(TypeError):
        b.begin(1.0)


def test_reading_past_the_end_raises():
    b = _ramp(2, 2)
    with pytest.raises(OutOfBoundsError):
        b.end().value
    w = b.get_submatrix(0, 1, 0, 2)
    with pytest.raises(OutOfBoundsError):
        w.end().value


@pytest.mark.parametrize("shape", [(0, 0), (0, 3), (3, 0)])
def test_empty_views_begin_at_end(shape):
    m = Matrix(*shape)
    assert m.begin() == m.end()
    assert m.column_begin() == m.column_end()
    assert list(m) == []
    t = m.get_transpose()
    assert t.begin() == t.end()
    assert list(t.iter_columns()) == []


def test_zero_column_rows_are_empty():
    m = Matrix(3, 0)
    assert m.begin(1) == m.end(1)
    assert list(m.iter_row(2)) == []
    assert m.to_list() == [[], [], []]


def test_zero_column_cursors_keep_their_row():
    m = Matrix(3, 0)
    w = m.get_submatrix(0, 3, 0, 0)
    assert m.end().position == (3, 0)
    assert m.end() == w.end()
    assert m.begin(1).position == (2, 0)
    assert m.end(1) == w.end(1)
    assert m.end(0) != m.end(1)
    assert m.end().copy().position == (3, 0)


def test_writable_cursors_write_through():
    b = Matrix(2, 3, dtype="int64")
    cur = b.begin()
    cur += 2
    cur.value = 5
    assert b[0, 2] == 5

    col = b.get_transpose().column_begin(1)
    col.advance()
    col.value = 9
    assert b[1, 1] == 9

    d = b.get_diagonal().begin()
    d.value = 4
    assert b[0, 0] == 4


def test_buffer_cursor_coerces_writes():
    b = Matrix(1, 2, dtype="int64")
    cur = b.begin()
    with pytest.warns(PyMatViewDTypeWarning):
        cur.value = 3.7
    assert b[0, 0] == 3
    with pytest.raises(ValueError):
        cur.value = "x"
    assert b[0, 0] == 3


@pytest.mark.parametrize("name", list(_variants()))
def test_walk_matches_get_for_every_variant(name):
    view = _variants()[name]
    expected_rows = [
        [view.get(i, j) for j in range(view.cols())] for i in range(view.rows())
    ]
    assert view.to_list() == expected_rows
    expected_cols = [
        view.get(i, j) for j in range(view.cols()) for i in range(view.rows())
    ]
    assert list(view.iter_columns()) == expected_cols


@pytest.mark.parametrize("name", list(_variants()))
def test_first_row_past_the_end_is_out_of_bounds(name):
    view = _variants()[name]
    with pytest.raises(OutOfBoundsError):
        view.at(view.rows(), 0)
