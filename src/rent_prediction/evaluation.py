"""Evaluation metrics for rent predictions."""

import numpy as np
from numpy.typing import ArrayLike


def _as_arrays(y_true: ArrayLike, y_pred: ArrayLike):
    y_true = np.asarray(y_true, dtype=float).ravel()
    y_pred = np.asarray(y_pred, dtype=float).ravel()
    if y_true.shape != y_pred.shape:
        raise ValueError(
            f"Dimensions of y_true ({y_true.size}) and y_pred ({y_pred.size}) do not match."
        )
    if y_true.size == 0:
        raise ValueError("Cannot evaluate an empty set of predictions.")
    return y_true, y_pred


def mean_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Calculate the mean signed error, mean(y_pred - y_true).

    Positive values mean the model over-predicts on average.

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mean_error: Average of the signed errors
    """
    y_true, y_pred = _as_arrays(y_true, y_pred)
    return float(np.mean(y_pred - y_true))


def rmse(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        rmse: Root mean square error
    """
    y_true, y_pred = _as_arrays(y_true, y_pred)
    return float(np.sqrt(np.mean((y_pred - y_true)**2)))


def mae(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mae: Mean absolute error
    """
    y_true, y_pred = _as_arrays(y_true, y_pred)
    return float(np.mean(np.abs(y_pred - y_true)))


def mape(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Calculate mean absolute percentage error (MAPE).

    MAPE = mean(|y_true - y_pred| / |y_true|) * 100

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mape: Mean absolute percentage error (in percent)
    """
    y_true, y_pred = _as_arrays(y_true, y_pred)
    err = y_true - y_pred
    denom = y_true

    # Protect against divide-by-zero errors
    inds = np.where(np.isclose(denom, 0))
    denom = np.delete(denom, inds)
    err = np.delete(err, inds)

    return float(np.mean(np.abs(err / denom)) * 100)


def r2_score(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """
    Coefficient of determination of a set of predictions.

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    y_true, y_pred = _as_arrays(y_true, y_pred)
    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    return float(1.0 - sum_e / sum_s)
