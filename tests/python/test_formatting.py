import io
import unittest

import numpy as np

import pymatview
from pymatview import Matrix, format_matrix, write_matrix
from pymatview._internal import formatting


def _ramp(rows, cols, dtype="int64"):
    m = Matrix(rows, cols, dtype=dtype)
    for i in range(rows):
        for j in range(cols):
            m[i, j] = i + j
    return m


class TestMatrixPrinting(unittest.TestCase):
    def test_str_layout(self):
        self.assertEqual(str(_ramp(2, 5)), "0 1 2 3 4 \n1 2 3 4 5 \n")

    def test_float_values_print_compactly(self):
        m = _ramp(2, 2, dtype="float64")
        m[1, 1] = 2.5
        self.assertEqual(str(m), "0 1 \n1 2.5 \n")

    def test_bool_values_print_as_digits(self):
        m = Matrix([[True, False]])
        self.assertEqual(str(m), "1 0 \n")

    def test_every_view_prints_through_its_cursors(self):
        b = _ramp(2, 3)
        self.assertEqual(str(b.T), "0 1 \n1 2 \n2 3 \n")
        self.assertEqual(str(b.get_submatrix(0, 2, 1, 3)), "1 2 \n2 3 \n")
        self.assertEqual(str(b.get_diagonal()), "0 \n2 \n")
        self.assertEqual(str(b.get_diagonal().get_diagonalmatrix()), "0 0 \n0 2 \n")

    def test_empty_views_print_nothing(self):
        self.assertEqual(str(Matrix()), "")
        self.assertEqual(str(Matrix(3, 0)), "")

    def test_zero_row_view_prints_nothing(self):
        self.assertEqual(str(Matrix(0, 4)), "")

    def test_write_matrix_to_stream(self):
        buf = io.StringIO()
        write_matrix(_ramp(1, 3), buf)
        self.assertEqual(buf.getvalue(), "0 1 2 \n")
        self.assertEqual(format_matrix(_ramp(1, 3)), buf.getvalue())

    def test_numpy_scalars_print_as_python_values(self):
        self.assertEqual(formatting._format_value(np.float32(1.5)), "1.5")
        self.assertEqual(formatting._format_value(np.int16(7)), "7")
        self.assertEqual(formatting._format_value(np.bool_(True)), "1")


class TestRepr(unittest.TestCase):
    def test_matrix_repr_is_structural(self):
        self.assertEqual(repr(Matrix(2, 3)), "Matrix(shape=(2, 3), dtype=float64)")

    def test_view_reprs_name_their_source(self):
        b = Matrix(2, 3, dtype="int64")
        self.assertEqual(
            repr(b.T), "MutableTransposeView(shape=(3, 2), source=Matrix(2, 3))"
        )
        self.assertEqual(
            repr(b.get_diagonal()), "MutableDiagonalView(length=2, source=Matrix(2, 3))"
        )
        dm = Matrix(2, 1).get_diagonalmatrix()
        self.assertEqual(repr(dm), "DiagonalMatrixView(shape=(2, 2), source=Matrix(2, 1))")


class TestSummary(unittest.TestCase):
    def tearDown(self):
        pymatview.configure(edge_items=4)

    def test_small_summary_shows_everything(self):
        text = _ramp(2, 3).summary()
        self.assertEqual(
            text,
            "Matrix(shape=(2, 3), dtype=int64)\n[\n [0 1 2]\n [1 2 3]\n]",
        )

    def test_large_summary_is_truncated(self):
        pymatview.configure(edge_items=1)
        text = _ramp(4, 5).summary()
        self.assertEqual(
            text,
            "Matrix(shape=(4, 5), dtype=int64)\n[\n [0 ... 4]\n ...\n [3 ... 7]\n]",
        )

    def test_empty_summary(self):
        self.assertEqual(Matrix(0, 2).summary(), "Matrix(shape=(0, 2), dtype=float64)\n[]")

    def test_view_summary_uses_view_name(self):
        text = _ramp(2, 2).T.summary()
        self.assertTrue(text.startswith("MutableTransposeView(shape=(2, 2), dtype=int64)"))

    def test_edge_items_must_be_positive(self):
        with self.assertRaises(ValueError):
            pymatview.configure(edge_items=0)
        self.assertEqual(formatting.get_edge_items(), 4)


if __name__ == "__main__":
    unittest.main()
