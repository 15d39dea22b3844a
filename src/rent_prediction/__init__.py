"""Rent prediction with a closed-form (normal equation) linear regression."""

__version__ = "0.1.0"

from .exceptions import (
    LinearAlgebraError,
    DimensionMismatchError,
    NotSquareError,
    SingularMatrixError,
)

from .linalg import (
    as_matrix,
    vector_from_array,
    identity,
    transpose,
    multiply,
    invert,
    lu_decompose,
    determinant,
)

from .regressors import (
    NormalEquationRegression,
    design_matrix,
    train,
    predict,
)

__all__ = [
    # Errors
    "LinearAlgebraError",
    "DimensionMismatchError",
    "NotSquareError",
    "SingularMatrixError",

    # Matrix operations
    "as_matrix",
    "vector_from_array",
    "identity",
    "transpose",
    "multiply",
    "invert",
    "lu_decompose",
    "determinant",

    # Regression
    "NormalEquationRegression",
    "design_matrix",
    "train",
    "predict",
]
