"""
Data loading functions for rental listings.

Listings are read from CSV files. A file either holds the raw listing
columns (see `features.RAW_COLUMNS`), which are converted to model features
here, or the engineered `FEATURE_COLUMNS` directly. A `rent` column is
optional: files of properties to price usually do not have one.
"""

import pandas as pd
from typing import Optional, Tuple

from ..features import FEATURE_COLUMNS, RAW_COLUMNS, TARGET_COLUMN, build_features
from .validation import validate_dataset


def load_listings(file_path: str, verbose: bool = False) -> pd.DataFrame:
    """
    Load rental listings from CSV.

    Args:
        file_path: Path to CSV file.
        verbose: Print progress messages. Default: False.

    Returns:
        pandas.DataFrame with `FEATURE_COLUMNS`, plus `rent` if the file has it
    """
    if verbose:
        print(f"Loading listings from {file_path}...")

    df = pd.read_csv(file_path)

    # Standardise column names
    df.columns = [col.strip().lower() for col in df.columns]

    if verbose:
        print(f"  Loaded {len(df)} rows with {len(df.columns)} columns")

    if all(col in df.columns for col in FEATURE_COLUMNS):
        features = df[FEATURE_COLUMNS].astype(float)
    elif all(col in df.columns for col in RAW_COLUMNS):
        if verbose:
            print("  Building features from raw listing columns...")
        features = build_features(df)
    else:
        missing = [col for col in RAW_COLUMNS if col not in df.columns]
        raise ValueError(
            f"{file_path} is missing required columns: {missing}. "
            f"Expected either {RAW_COLUMNS} or {FEATURE_COLUMNS}."
        )

    if TARGET_COLUMN in df.columns:
        features[TARGET_COLUMN] = pd.to_numeric(df[TARGET_COLUMN]).astype(float)

    return features


def split_features_targets(df: pd.DataFrame) -> Tuple[pd.DataFrame, Optional[pd.Series]]:
    """
    Separate the feature columns from the target column.

    Args:
        df: `pandas.DataFrame` with `FEATURE_COLUMNS` and optionally `rent`

    Returns:
        features: DataFrame with `FEATURE_COLUMNS`
        targets: Series of rents, or None if the column is absent
    """
    missing = [col for col in FEATURE_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Dataset is missing feature columns: {missing}")

    targets = df[TARGET_COLUMN].copy() if TARGET_COLUMN in df.columns else None
    return df[FEATURE_COLUMNS].copy(), targets


def load_training_data(
    file_path: str, verbose: bool = False
) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Load listings with known rents and check they can be used for training.

    Args:
        file_path: Path to CSV file.
        verbose: Print progress messages. Default: False.

    Returns:
        features: DataFrame with `FEATURE_COLUMNS`
        targets: Series of rents
    """
    df = load_listings(file_path, verbose=verbose)
    features, targets = split_features_targets(df)

    if targets is None:
        raise ValueError(f"{file_path} has no '{TARGET_COLUMN}' column to train on.")

    if verbose:
        print("  Validating dataset...")
    is_valid, errors = validate_dataset(features, targets, verbose=verbose)
    if not is_valid:
        raise ValueError("Validation failed:\n" + "\n".join(errors))

    return features, targets
