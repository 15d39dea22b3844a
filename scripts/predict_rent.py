"""
Predict monthly rents for Dublin rental properties.

Trains a linear model on listings with known rents using the normal
equation, then predicts the rent of each property in a second set of
listings. When the second set includes the actual rents, the error of each
prediction and summary metrics are printed too.

Without arguments, the built-in reference dataset is used (18 training
properties and 3 held-out properties).

Usage:
```bash
python scripts/predict_rent.py
python scripts/predict_rent.py --train-path data/train.csv --test-path data/new.csv --verbose
```
"""

import argparse

import numpy as np
import pandas as pd

from rent_prediction.data import (
    holdout_data,
    load_listings,
    load_training_data,
    split_features_targets,
    training_data,
)
from rent_prediction.evaluation import mae, mean_error, rmse
from rent_prediction.linalg import DEFAULT_TOLERANCE, INVERSION_METHODS
from rent_prediction.regressors import predict, train


def report_predictions(predictions: np.ndarray, actuals=None):
    """Print one line per property, then summary metrics if actual rents are known."""
    if actuals is None:
        for i, price in enumerate(predictions):
            print(f"Prediction for property {i + 1} rent is: {price:.0f}")
        return

    actuals = np.asarray(actuals, dtype=float)
    for i, (price, actual) in enumerate(zip(predictions, actuals)):
        diff = price - actual
        print(
            f"Prediction for property {i + 1} rent is: {price:.0f}. "
            f"Actual rent: {actual:.0f}  (error: {diff:.0f} Euro)"
        )

    print(f"\nAverage error: {mean_error(actuals, predictions):.0f} Euro")
    print(f"RMSE: {rmse(actuals, predictions):.0f} Euro")
    print(f"MAE: {mae(actuals, predictions):.0f} Euro")


def main():
    parser = argparse.ArgumentParser(
        description="Predict rents with a normal-equation linear regression"
    )
    parser.add_argument(
        "--train-path",
        type=str,
        default=None,
        help="CSV of listings with a 'rent' column (default: built-in sample data)",
    )
    parser.add_argument(
        "--test-path",
        type=str,
        default=None,
        help="CSV of listings to price (default: built-in held-out properties)",
    )
    parser.add_argument(
        "--method",
        choices=INVERSION_METHODS,
        default="gauss-jordan",
        help="Matrix inversion method (default: gauss-jordan)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help=f"Relative pivot threshold for singularity (default: {DEFAULT_TOLERANCE})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )

    args = parser.parse_args()

    # Training data
    if args.train_path is None:
        print("Using built-in training data") if args.verbose else None
        features_train, rents_train = split_features_targets(training_data())
    else:
        features_train, rents_train = load_training_data(args.train_path, verbose=args.verbose)

    # Properties to price
    if args.test_path is None:
        df_test = holdout_data()
    else:
        df_test = load_listings(args.test_path, verbose=args.verbose)
    features_test, rents_test = split_features_targets(df_test)

    print(
        f"Training on {len(features_train)} properties "
        f"with {features_train.shape[1]} features..."
    ) if args.verbose else None
    theta = train(
        features_train, rents_train, tolerance=args.tolerance, method=args.method
    )

    if args.verbose:
        weights = pd.Series(theta[:, 0], index=features_train.columns)
        print("Fitted weights:")
        print(weights.to_string())
        print()

    predictions = np.array([predict(row, theta) for row in features_test.to_numpy()])
    report_predictions(predictions, rents_test)


if __name__ == "__main__":
    main()
