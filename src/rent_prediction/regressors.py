"""Regression methods for model fitting."""

import numpy as np
from numpy.typing import ArrayLike

from .exceptions import DimensionMismatchError
from .linalg import (
    DEFAULT_TOLERANCE,
    as_matrix,
    invert,
    multiply,
    transpose,
    vector_from_array,
)


def design_matrix(dataset: ArrayLike) -> np.ndarray:
    """
    Build the design matrix X from the dataset rows.

    No intercept column is added. Include a constant feature (see
    `features.add_intercept`) if the model needs one.

    Args:
        dataset: N feature rows of equal length F

    Returns:
        X: Matrix of shape (N, F)
    """
    return as_matrix(dataset)


def train(
    dataset: ArrayLike,
    targets: ArrayLike,
    tolerance: float = DEFAULT_TOLERANCE,
    method: str = "gauss-jordan",
) -> np.ndarray:
    """
    Fit weights with the normal equation.

    Minimises ||X θ - y||² in closed form:
        θ = (X^T X)^{-1} X^T y

    Args:
        dataset: N feature rows of equal length F
        targets: N observed outcomes
        tolerance: Relative pivot threshold passed to `invert`. Default: 1e-12.
        method: Inversion method passed to `invert`. Default: 'gauss-jordan'.

    Returns:
        theta: Read-only weight matrix of shape (F, 1)

    Raises:
        DimensionMismatchError: If the dataset and targets differ in length.
        SingularMatrixError: If X^T X cannot be inverted (e.g. collinear
            features, or fewer samples than features).
    """
    X = design_matrix(dataset)
    y = vector_from_array(targets, as_column=True)

    if X.shape[0] != y.shape[0]:
        raise DimensionMismatchError(
            f"Dimensions in dataset ({X.shape[0]} rows) and targets "
            f"({y.shape[0]} values) do not match."
        )

    X_t = transpose(X)
    gram_inverse = invert(multiply(X_t, X), tolerance=tolerance, method=method)
    theta = multiply(gram_inverse, multiply(X_t, y))

    theta.flags.writeable = False
    return theta


def predict(features: ArrayLike, theta: ArrayLike) -> float:
    """
    Apply fitted weights to a single feature row.

    Args:
        features: Feature row of length F
        theta: Weight matrix of shape (F, 1), as returned by `train`

    Returns:
        prediction: Predicted value

    Raises:
        DimensionMismatchError: If len(features) != rows(theta), or theta
            has more than one column.
    """
    row = vector_from_array(features)
    theta = as_matrix(theta)

    if theta.shape[1] != 1:
        raise DimensionMismatchError(
            f"Theta must be a single column, got shape {theta.shape}."
        )
    if row.shape[1] != theta.shape[0]:
        raise DimensionMismatchError(
            f"Feature row has {row.shape[1]} values but theta has {theta.shape[0]} rows."
        )

    return float(multiply(row, theta)[0, 0])


class NormalEquationRegression():
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - Xθ||²

    The solution is obtained via the normal equations:
        θ = (X^T X)^{-1} X^T y

    Attributes:
        theta: Fitted weights of shape (n_features, 1)
        tolerance: Relative pivot threshold used when inverting X^T X
        method: Inversion method ('gauss-jordan' or 'lu')

    Example:
        >>> regressor = NormalEquationRegression()
        >>> regressor.fit(X_train, y_train)
        >>> predictions = regressor.predict(X_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE, method: str = "gauss-jordan"):
        """Initialize the linear regression model."""
        self.tolerance = tolerance
        self.method = method
        self.theta = None

    def fit(self, X: ArrayLike, y: ArrayLike) -> "NormalEquationRegression":
        """
        Fit the linear regression model using ordinary least squares.

        Args:
            X: Feature matrix of shape (n_samples, n_features)
            y: Target vector of shape (n_samples,)

        Returns:
            self: The fitted model
        """
        self.theta = train(X, y, tolerance=self.tolerance, method=self.method)
        return self

    def predict(self, X: ArrayLike) -> np.ndarray:
        """
        Generate predictions using the fitted model.

        Args:
            X: Feature matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        self._check_fitted("predict")
        X = as_matrix(X)

        if X.shape[1] != self.theta.shape[0]:
            raise DimensionMismatchError(
                f"Expected {self.theta.shape[0]} features, got {X.shape[1]}."
            )

        return multiply(X, self.theta)[:, 0]

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Coefficient array of shape (n_features,)
        """
        self._check_fitted("get_params")
        return self.theta[:, 0].copy()

    def _check_fitted(self, caller: str):
        if self.theta is None:
            raise ValueError(f"Model must be fitted before calling {caller}(). Call fit() first.")

    def __repr__(self):
        return f"NormalEquationRegression(tolerance={self.tolerance}, method='{self.method}')"
