"""Tests for column-major Matrix storage, access and arithmetic.

Literal data below is written column by column unless built with
``from_rows``.
"""

import numpy as np
import pytest

from vectorama import Mat2, Mat3, Mat4, Matrix, Vec3, Vec4, Vector


@pytest.fixture
def columns_3x2():
    """Matrix<3, 2> written as two columns of three values."""
    return [
        [1.0, 2.0, 3.0],  # Column 0
        [4.0, 5.0, 6.0],  # Column 1
    ]


@pytest.fixture
def matrix_a():
    return Matrix.from_columns(
        [
            [1.0, 0.0, 7.0],  # Column 0
            [-5.0, -2.0, 2.0],  # Column 1
            [3.0, 6.0, -4.0],  # Column 2
        ]
    )


class TestConstruction:
    """Test constructors and the shape registry."""

    def test_zeros(self):
        """Test zeros fills every entry and picks the shaped class."""
        zeros = Matrix.zeros(3, 3)
        assert isinstance(zeros, Mat3)
        for m in range(3):
            for n in range(3):
                assert zeros[m, n] == 0.0

    def test_ones(self):
        ones = Mat2.ones()
        assert ones.shape == (2, 2)
        assert all(ones[m, n] == 1.0 for m in range(2) for n in range(2))

    def test_identity(self):
        """Test identity has ones on the diagonal only."""
        identity = Matrix.identity(4)
        assert isinstance(identity, Mat4)
        for m in range(4):
            for n in range(4):
                assert identity[m, n] == (1.0 if m == n else 0.0)

    def test_shaped_default_is_identity(self):
        assert Mat3() == Mat3.identity()

    def test_generic_needs_columns(self):
        with pytest.raises(TypeError):
            Matrix()

    def test_indexing_is_column_major(self, columns_3x2):
        """Test m[row, col] reads column ``col``, entry ``row``."""
        matrix = Matrix(columns_3x2)
        assert matrix.shape == (3, 2)
        for m in range(3):
            for n in range(2):
                assert matrix[m, n] == columns_3x2[n][m]

    def test_from_rows_matches_from_columns(self):
        by_rows = Matrix.from_rows([[1, 2], [3, 4]])
        by_columns = Matrix.from_columns([[1, 3], [2, 4]])
        assert by_rows == by_columns
        assert isinstance(by_rows, Mat2)

    def test_from_flattened(self):
        """Test a flat buffer is read column after column."""
        flat = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
        matrix = Matrix.from_flattened(flat, rows=3, cols=2)
        for m in range(3):
            for n in range(2):
                assert matrix[m, n] == flat[n * 3 + m]

    def test_from_flattened_wrong_size(self):
        with pytest.raises(ValueError, match="Invalid buffer size"):
            Mat4.from_flattened(list(range(15)))

    def test_shaped_class_rejects_other_shape(self):
        with pytest.raises(ValueError):
            Mat3.from_columns([[1, 2], [3, 4]])
        with pytest.raises(ValueError):
            Mat4([[1, 2, 3]] * 3)

    def test_result_class_follows_shape(self):
        """Test products come back as the canonical class for their shape."""
        product = Mat4.identity() @ Vec4(1, 2, 3, 1)
        assert isinstance(product, Vec4)
        assert isinstance(Mat3.identity() @ Vec3(1, 2, 3), Vec3)
        assert isinstance(Matrix.zeros(2, 5), Matrix)


class TestAccess:
    """Test element, column and window access."""

    def test_set_item(self):
        matrix = Mat2.zeros()
        matrix[0, 1] = 7
        assert matrix[0, 1] == 7.0
        assert matrix.as_flattened()[2] == 7.0

    def test_index_out_of_range(self):
        matrix = Mat3.identity()
        with pytest.raises(IndexError):
            matrix[3, 0]
        with pytest.raises(IndexError):
            matrix[0, -1]
        with pytest.raises(IndexError):
            matrix[5, 5] = 1.0

    def test_index_must_be_pair(self):
        with pytest.raises(TypeError):
            Mat3.identity()[0]

    def test_column(self):
        data = [
            [1.0, 2.0, 3.0],
            [4.0, 5.0, 6.0],
            [7.0, 8.0, 9.0],
        ]
        matrix = Mat3(data)
        for col in range(3):
            assert matrix.column(col) == tuple(data[col])

    def test_column_out_of_range(self):
        with pytest.raises(IndexError):
            Mat3.identity().column(3)

    def test_view(self, columns_3x2):
        """Test a 2x2 window starting at row 1."""
        matrix = Matrix(columns_3x2)
        view = matrix.view(2, 2, 1, 0)
        assert isinstance(view, Mat2)
        for m in range(2):
            for n in range(2):
                assert view[m, n] == matrix[m + 1, n]

    def test_view_is_a_copy(self):
        matrix = Mat4.identity()
        view = matrix.view(3, 3)
        view[0, 0] = 5.0
        assert matrix[0, 0] == 1.0

    def test_view_out_of_bounds(self):
        with pytest.raises(ValueError):
            Mat3.ones().view(2, 2, 2, 2)

    def test_transpose(self):
        matrix = Mat3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        expected = Mat3([[1, 4, 7], [2, 5, 8], [3, 6, 9]])
        assert matrix.transpose() == expected
        assert matrix.T.T == matrix

    def test_transpose_changes_shape(self, columns_3x2):
        assert Matrix(columns_3x2).transpose().shape == (2, 3)


class TestBuffers:
    """Test flat buffer and numpy interop."""

    def test_as_flattened_order(self):
        matrix = Mat2([[1.0, 2.0], [3.0, 4.0]])
        flat = matrix.as_flattened()
        assert flat.dtype == np.float32
        np.testing.assert_array_equal(flat, [1.0, 2.0, 3.0, 4.0])

    def test_as_flattened_read_only(self):
        flat = Mat2.identity().as_flattened()
        with pytest.raises(ValueError):
            flat[0] = 3.0

    def test_flattened_round_trip(self):
        matrix = Mat4.from_rows(np.arange(16).reshape(4, 4))
        assert Mat4.from_flattened(matrix.as_flattened()) == matrix

    def test_to_numpy_is_row_col(self):
        matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        array = matrix.to_numpy()
        assert array.shape == (2, 3)
        assert array[0, 2] == 3.0
        np.testing.assert_array_equal(np.asarray(matrix), array)

    def test_asarray_dtype(self):
        matrix = Mat2([[1, 2], [3, 4]])
        array = np.asarray(matrix, dtype=np.float64)
        assert array.dtype == np.float64
        np.testing.assert_array_equal(array, [[1.0, 3.0], [2.0, 4.0]])

    def test_asarray_copies_by_default(self):
        matrix = Mat2.identity()
        array = np.asarray(matrix)
        array[0, 0] = 5.0
        assert matrix[0, 0] == 1.0

    @pytest.mark.skipif(
        np.lib.NumpyVersion(np.__version__) < "2.0.0", reason="copy keyword needs numpy 2"
    )
    def test_asarray_without_copy(self):
        """Test copy=False shares storage and refuses a dtype change."""
        matrix = Mat2([[1, 2], [3, 4]])
        view = np.asarray(matrix, copy=False)
        view[1, 0] = 9.0
        assert matrix[1, 0] == 9.0
        with pytest.raises(ValueError):
            np.asarray(matrix, dtype=np.float64, copy=False)


class TestComparison:
    def test_equality(self):
        assert Mat2.identity() == Matrix.identity(2)
        assert Mat2.identity() != Mat2.zeros()
        assert Matrix.zeros(2, 3) != Matrix.zeros(3, 2)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Mat2.identity())

    def test_is_close(self):
        a = Mat2.identity()
        b = Mat2.identity()
        b[0, 0] = 1.0 + 5e-7
        assert a.is_close(b)
        assert not a.is_close(b, epsilon=1e-9)
        assert not a.is_close(Matrix.zeros(2, 3))


class TestArithmetic:
    """Test operators against hand-computed results."""

    def test_multiplication(self, matrix_a):
        matrix_b = Matrix.from_columns(
            [
                [-8.0, 7.0, 2.0],
                [6.0, 0.0, 4.0],
                [1.0, -3.0, 5.0],
            ]
        )
        expected = Matrix.from_columns(
            [
                [-37.0, -2.0, -50.0],
                [18.0, 24.0, 26.0],
                [31.0, 36.0, -19.0],
            ]
        )
        assert matrix_a @ matrix_b == expected
        assert matrix_a * matrix_b == expected

    def test_multiplication_matches_numpy(self):
        rng = np.random.default_rng(0)
        a = rng.standard_normal((3, 4)).astype(np.float32)
        b = rng.standard_normal((4, 2)).astype(np.float32)
        result = Matrix.from_rows(a) @ Matrix.from_rows(b)
        assert result.shape == (3, 2)
        np.testing.assert_allclose(result.to_numpy(), a @ b, atol=1e-5)

    def test_multiplication_shape_mismatch(self):
        with pytest.raises(ValueError):
            Matrix.zeros(2, 3) @ Matrix.zeros(2, 3)

    def test_identity_is_neutral(self, matrix_a):
        assert matrix_a @ Mat3.identity() == matrix_a
        assert Mat3.identity() @ matrix_a == matrix_a

    def test_scalar_multiplication(self, matrix_a):
        expected = Matrix.from_columns(
            [
                [2.0, 0.0, 14.0],
                [-10.0, -4.0, 4.0],
                [6.0, 12.0, -8.0],
            ]
        )
        assert 2.0 * matrix_a == expected
        assert matrix_a * 2 == expected

        in_place = matrix_a.copy()
        in_place *= 2.0
        assert in_place == expected

    def test_numpy_scalar_on_the_left(self, matrix_a):
        """Test numpy scalars scale through the matrix operators."""
        for scalar in (np.float32(2.0), np.float64(2.0), np.int64(2)):
            result = scalar * matrix_a
            assert isinstance(result, Mat3)
            assert result == matrix_a * 2.0

    def test_numpy_scalar_addition_rejected(self):
        with pytest.raises(TypeError):
            np.float32(1.0) + Mat2.identity()
        with pytest.raises(TypeError):
            np.ones((2, 2)) * Mat2.identity()

    def test_scalar_division(self):
        matrix = Mat3([[2, 4, 6], [8, 10, 12], [14, 16, 18]])
        expected = Mat3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert matrix / 2.0 == expected

        matrix /= 2
        assert matrix == expected

    def test_addition_and_subtraction(self):
        a = Mat3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        b = Mat3([[9, 8, 7], [6, 5, 4], [3, 2, 1]])
        assert a + b == Mat3.ones() * 10
        assert ((a + b) - b).is_close(a)

        accumulated = a.copy()
        accumulated += b
        accumulated -= a
        assert accumulated == b

    def test_subtraction_values(self):
        a = Mat3([[9, 8, 7], [6, 5, 4], [3, 2, 1]])
        b = Mat3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        expected = Mat3([[8, 6, 4], [2, 0, -2], [-4, -6, -8]])
        assert a - b == expected

    def test_negation(self):
        a = Mat3([[1, -2, 3], [-4, 5, -6], [7, -8, 9]])
        expected = Mat3([[-1, 2, -3], [4, -5, 6], [-7, 8, -9]])
        assert -a == expected

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            Matrix.zeros(2, 3) + Matrix.zeros(3, 2)
        with pytest.raises(ValueError):
            Mat2.zeros() - Mat3.zeros()

    def test_unsupported_operands(self):
        with pytest.raises(TypeError):
            Mat2.identity() + 1.0
        with pytest.raises(TypeError):
            Mat2.identity() * "2"

    def test_operators_do_not_alias(self):
        a = Mat2.identity()
        b = a * 1.0
        b[0, 0] = 3.0
        assert a[0, 0] == 1.0

    def test_copy_is_independent(self):
        a = Mat2.identity()
        b = a.copy()
        b[1, 1] = 0.0
        assert a[1, 1] == 1.0

    def test_vector_is_single_column_matrix(self):
        assert issubclass(Vector, Matrix)
        assert Vec3(1, 2, 3).shape == (3, 1)

    def test_repr(self):
        assert repr(Mat2.identity()) == "Mat2.from_rows([[1.0, 0.0], [0.0, 1.0]])"
