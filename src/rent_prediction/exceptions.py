"""Exceptions raised by the matrix and regression routines."""


class LinearAlgebraError(ValueError):
    """Base exception for matrix operations."""


class DimensionMismatchError(LinearAlgebraError):
    """
    Raised when operand shapes are incompatible.

    This can happen when:
    - `multiply(A, B)` is called with cols(A) != rows(B)
    - A feature row does not have one value per row of theta
    - The number of training rows differs from the number of targets
    - Input rows are ragged or empty
    """


class NotSquareError(LinearAlgebraError):
    """Raised when inverting (or factorising) a non-square matrix."""


class SingularMatrixError(LinearAlgebraError):
    """
    Raised when a matrix has no numerically usable inverse.

    Collinear features, duplicated rows, or fewer samples than features
    all end up here when training.
    """
