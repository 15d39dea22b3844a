"""
Dense matrix primitives used by the normal-equation regressor.

Every function returns a newly allocated `numpy.ndarray` and leaves its
operands untouched, so the same design matrix can be reused across
training calls.

Inversion is done with Gauss-Jordan elimination on the augmented matrix
[M | I] with partial pivoting. An LU factorisation with the same pivoting
rule is also available and gives the same inverse to within rounding.
"""

import numpy as np
from numpy.typing import ArrayLike
from typing import Tuple

from .exceptions import DimensionMismatchError, NotSquareError, SingularMatrixError

DEFAULT_TOLERANCE = 1e-12
INVERSION_METHODS = ("gauss-jordan", "lu")


def as_matrix(values: ArrayLike) -> np.ndarray:
    """
    Copy a 2-D collection of numbers into a new float matrix.

    Args:
        values: Nested sequences (one inner sequence per row), a 2-D array,
            or a `pandas.DataFrame`.

    Returns:
        matrix: Array of shape (rows, cols) with dtype float64

    Raises:
        DimensionMismatchError: If the input is empty, ragged or not 2-D.
    """
    if hasattr(values, "to_numpy"):
        values = values.to_numpy(dtype=float)

    if not isinstance(values, np.ndarray):
        rows = list(values)
        try:
            lengths = {len(row) for row in rows}
        except TypeError:
            raise DimensionMismatchError(
                "Expected a 2-D collection of rows, got a flat sequence."
            ) from None
        if len(lengths) > 1:
            raise DimensionMismatchError(
                f"All rows must have the same length, got lengths {sorted(lengths)}."
            )
        values = rows

    matrix = np.array(values, dtype=float)

    if matrix.ndim != 2:
        raise DimensionMismatchError(
            f"Expected a 2-D matrix, got an array with {matrix.ndim} dimension(s)."
        )
    if matrix.size == 0:
        raise DimensionMismatchError(f"Matrix must be non-empty, got shape {matrix.shape}.")

    return matrix


def vector_from_array(values: ArrayLike, as_column: bool = False) -> np.ndarray:
    """
    Wrap a flat sequence of numbers as a row or column matrix.

    Args:
        values: Flat sequence of length N
        as_column: If True, return an (N, 1) column matrix. Otherwise return
            a (1, N) row matrix. Default: False.

    Returns:
        matrix: Array of shape (1, N) or (N, 1)
    """
    if hasattr(values, "to_numpy"):
        values = values.to_numpy(dtype=float)

    vector = np.array(values, dtype=float)

    if vector.ndim != 1:
        raise DimensionMismatchError(
            f"Expected a flat sequence, got an array of shape {vector.shape}."
        )
    if vector.size == 0:
        raise DimensionMismatchError("Vector must be non-empty.")

    if as_column:
        return vector.reshape(-1, 1)
    return vector.reshape(1, -1)


def identity(n: int) -> np.ndarray:
    """Return the n x n identity matrix."""
    if n < 1:
        raise DimensionMismatchError(f"Identity size must be at least 1, got {n}.")
    return np.eye(n)


def transpose(matrix: ArrayLike) -> np.ndarray:
    """
    Swap rows and columns, so that result[j, i] == matrix[i, j].

    Returns:
        transposed: Array of shape (cols, rows)
    """
    m = as_matrix(matrix)
    return m.T.copy()


def multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """
    Matrix product C = A B.

    Args:
        a: Matrix of shape (n, k)
        b: Matrix of shape (k, m)

    Returns:
        product: Matrix of shape (n, m)

    Raises:
        DimensionMismatchError: If cols(a) != rows(b).
    """
    a = as_matrix(a)
    b = as_matrix(b)

    if a.shape[1] != b.shape[0]:
        raise DimensionMismatchError(
            f"Cannot multiply matrices of shape {a.shape} and {b.shape}: "
            f"{a.shape[1]} columns vs {b.shape[0]} rows."
        )

    return a @ b


def _square_matrix(matrix: ArrayLike) -> np.ndarray:
    m = as_matrix(matrix)
    if m.shape[0] != m.shape[1]:
        raise NotSquareError(f"Expected a square matrix, got shape {m.shape}.")
    return m


def _check_finite(m: np.ndarray, stage: str):
    if not np.all(np.isfinite(m)):
        raise SingularMatrixError(f"Matrix contains NaN or Inf values ({stage}).")


def _pivot_threshold(m: np.ndarray, tolerance: float) -> float:
    # Pivots are compared against the largest entry so the check is scale free
    return tolerance * float(np.max(np.abs(m)))


def _select_pivot(work: np.ndarray, col: int, threshold: float) -> int:
    """Return the row index of the largest candidate pivot at or below `col`."""
    pivot_row = col + int(np.argmax(np.abs(work[col:, col])))
    pivot = work[pivot_row, col]
    if not np.isfinite(pivot) or abs(pivot) <= threshold:
        raise SingularMatrixError(
            f"Matrix is singular to working precision: pivot {pivot:.3e} "
            f"in column {col} is below the threshold {threshold:.3e}."
        )
    return pivot_row


def _gauss_jordan_inverse(m: np.ndarray, tolerance: float) -> np.ndarray:
    n = m.shape[0]
    threshold = _pivot_threshold(m, tolerance)
    augmented = np.hstack([m, np.eye(n)])

    for col in range(n):
        pivot_row = _select_pivot(augmented, col, threshold)
        if pivot_row != col:
            augmented[[col, pivot_row]] = augmented[[pivot_row, col]]

        augmented[col] /= augmented[col, col]

        # Eliminate the pivot column from every other row
        factors = augmented[:, col].copy()
        factors[col] = 0.0
        augmented -= np.outer(factors, augmented[col])

    return augmented[:, n:]


def _lu(m: np.ndarray, tolerance: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray, int]:
    n = m.shape[0]
    threshold = _pivot_threshold(m, tolerance)
    upper = m.copy()
    lower = np.eye(n)
    perm = np.arange(n)
    n_swaps = 0

    for col in range(n):
        pivot_row = _select_pivot(upper, col, threshold)
        if pivot_row != col:
            upper[[col, pivot_row]] = upper[[pivot_row, col]]
            perm[[col, pivot_row]] = perm[[pivot_row, col]]
            lower[[col, pivot_row], :col] = lower[[pivot_row, col], :col]
            n_swaps += 1

        factors = upper[col + 1:, col] / upper[col, col]
        lower[col + 1:, col] = factors
        upper[col + 1:] -= np.outer(factors, upper[col])
        upper[col + 1:, col] = 0.0

    return perm, lower, upper, n_swaps


def lu_decompose(
    matrix: ArrayLike, tolerance: float = DEFAULT_TOLERANCE
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    LU factorisation with partial pivoting.

    Args:
        matrix: Square matrix M of shape (n, n)
        tolerance: Relative pivot threshold. Default: 1e-12.

    Returns:
        perm: Row permutation of shape (n,), such that M[perm] == L @ U
        lower: Unit lower triangular matrix L
        upper: Upper triangular matrix U

    Raises:
        NotSquareError: If M is not square.
        SingularMatrixError: If a pivot vanishes or M contains NaN/Inf.
    """
    m = _square_matrix(matrix)
    _check_finite(m, "input")
    perm, lower, upper, _ = _lu(m, tolerance)
    return perm, lower, upper


def _lu_inverse(m: np.ndarray, tolerance: float) -> np.ndarray:
    perm, lower, upper, _ = _lu(m, tolerance)
    n = m.shape[0]

    # Solve L U X = P I one row at a time
    rhs = np.eye(n)[perm]
    y = np.zeros_like(rhs)
    for i in range(n):
        y[i] = rhs[i] - lower[i, :i] @ y[:i]

    x = np.zeros_like(rhs)
    for i in reversed(range(n)):
        x[i] = (y[i] - upper[i, i + 1:] @ x[i + 1:]) / upper[i, i]

    return x


_INVERTERS = {
    "gauss-jordan": _gauss_jordan_inverse,
    "lu": _lu_inverse,
}


def invert(
    matrix: ArrayLike,
    tolerance: float = DEFAULT_TOLERANCE,
    method: str = "gauss-jordan",
) -> np.ndarray:
    """
    Exact inverse of a square matrix.

    A pivot is treated as zero when its magnitude is at most
    `tolerance * max(|M|)`. The threshold is global, so a badly scaled
    matrix such as diag(1e13, 1) is reported as singular even though it
    has an exact inverse. No approximate inverse is ever returned: if
    elimination breaks down, or produces NaN/Inf, a `SingularMatrixError`
    is raised instead.

    Args:
        matrix: Square matrix M of shape (n, n)
        tolerance: Relative pivot threshold. Default: 1e-12.
        method: 'gauss-jordan' (default) or 'lu'

    Returns:
        inverse: Matrix of shape (n, n) such that M @ inverse ~= I

    Raises:
        NotSquareError: If M is not square.
        SingularMatrixError: If M is singular to working precision.
        ValueError: If `method` is not recognised.
    """
    if method not in _INVERTERS:
        raise ValueError(
            f"Unknown inversion method '{method}'. Choose one of {INVERSION_METHODS}."
        )

    m = _square_matrix(matrix)
    _check_finite(m, "input")

    inverse = _INVERTERS[method](m, tolerance)
    _check_finite(inverse, "result")

    return inverse


def determinant(matrix: ArrayLike, tolerance: float = DEFAULT_TOLERANCE) -> float:
    """
    Determinant from the LU factorisation.

    Returns 0.0 when the matrix is singular to working precision.
    """
    m = _square_matrix(matrix)
    try:
        _check_finite(m, "input")
        _, _, upper, n_swaps = _lu(m, tolerance)
    except SingularMatrixError:
        return 0.0

    sign = -1.0 if n_swaps % 2 else 1.0
    return sign * float(np.prod(np.diag(upper)))
