"""Feature creation utilities for rental listings."""

import numpy as np
import pandas as pd
import pandas.api.types as ptypes
from typing import Optional

# Column order of the engineered feature matrix (and of the reference data)
FEATURE_COLUMNS = [
    "bedrooms",
    "bathrooms",
    "north_dublin",
    "apartment",
    "house",
    "size_sqm",
    "size_sqm_squared",
    "distance_km",
]
TARGET_COLUMN = "rent"

RAW_COLUMNS = [
    "bedrooms",
    "bathrooms",
    "north_dublin",
    "property_type",
    "size_sqm",
    "distance_km",
]
PROPERTY_TYPES = ("apartment", "house")

# Yes/no flags are encoded as 10/0 so they sit on a similar scale to the room counts
FLAG_SCALE = 10.0

_TRUE_STRINGS = {"1", "1.0", "true", "yes", "y", "t"}
_FALSE_STRINGS = {"0", "0.0", "false", "no", "n", "f"}


def indicator(series: pd.Series, value, scale: float = FLAG_SCALE) -> pd.Series:
    """
    Return a `pandas.Series` flagging the entries equal to `value`.

    Args:
        series: `pandas.Series`
        value: Value to flag
        scale: Value assigned to flagged entries (default: 10.0)

    Returns:
        Series with `scale` where series == value, 0.0 otherwise
    """
    return (series == value).astype(float) * scale


def parse_flag(series: pd.Series) -> pd.Series:
    """
    Convert a boolean-like column (1/0, true/false, yes/no) to booleans.

    Raises:
        ValueError: If an entry cannot be interpreted as yes or no.
    """
    if ptypes.is_bool_dtype(series):
        return series.astype(bool)

    normalised = series.astype(str).str.strip().str.lower()
    unknown = ~normalised.isin(_TRUE_STRINGS | _FALSE_STRINGS)
    if unknown.any():
        bad_values = sorted(series[unknown].astype(str).unique())
        raise ValueError(f"Could not interpret flag values: {bad_values}")

    return normalised.isin(_TRUE_STRINGS)


def add_squared(
    df: pd.DataFrame, column: str, column_name: Optional[str] = None, inplace=False
) -> pd.DataFrame:
    """
    Add the square of an existing column.

    Args:
        df: `pandas.DataFrame`
        column: Name of the column to square
        column_name: Name of new column (default: '<column>_squared')
        inplace: If True, modifies dataframe in place. If False, returns a copy.

    Returns:
        DataFrame with the squared column added
    """
    if not inplace:
        df = df.copy()
    if column_name is None:
        column_name = f"{column}_squared"
    df[column_name] = df[column].astype(float) ** 2
    return df


def add_intercept(
    df: pd.DataFrame, column_name="intercept", inplace=False
) -> pd.DataFrame:
    """
    Add a column of ones to a dataframe

    Args:
        df: `pandas.DataFrame`
        column_name: Name of new column (default: 'intercept')
        inplace: If True, modifies dataframe in place. If False, returns a copy.

    Returns:
        DataFrame with intercept column added
    """
    if not inplace:
        df = df.copy()
    df[column_name] = np.ones(len(df))
    return df


def build_features(listings: pd.DataFrame) -> pd.DataFrame:
    """
    Engineer the model features from raw listing columns.

    Raw columns: bedrooms, bathrooms, north_dublin (yes/no), property_type
    ('apartment' or 'house'), size_sqm and distance_km (from O'Connell Bridge).

    Args:
        listings: `pandas.DataFrame` with the raw columns

    Returns:
        DataFrame with exactly `FEATURE_COLUMNS`, index preserved
    """
    missing = [col for col in RAW_COLUMNS if col not in listings.columns]
    if missing:
        raise ValueError(f"Listings are missing required columns: {missing}")

    property_type = listings["property_type"].astype(str).str.strip().str.lower()
    unknown = sorted(set(property_type) - set(PROPERTY_TYPES))
    if unknown:
        raise ValueError(
            f"Unknown property types {unknown}. Expected one of {PROPERTY_TYPES}."
        )

    features = pd.DataFrame(index=listings.index)
    features["bedrooms"] = pd.to_numeric(listings["bedrooms"]).astype(float)
    features["bathrooms"] = pd.to_numeric(listings["bathrooms"]).astype(float)
    features["north_dublin"] = indicator(parse_flag(listings["north_dublin"]), True)
    features["apartment"] = indicator(property_type, "apartment")
    features["house"] = indicator(property_type, "house")
    features["size_sqm"] = pd.to_numeric(listings["size_sqm"]).astype(float)
    features = add_squared(features, "size_sqm", inplace=True)
    features["distance_km"] = pd.to_numeric(listings["distance_km"]).astype(float)

    return features[FEATURE_COLUMNS].copy()
