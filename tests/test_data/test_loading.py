"""
Tests for loading listings from CSV files.
"""

import pytest
import pandas as pd
import numpy as np

from rent_prediction.data.loading import (
    load_listings,
    load_training_data,
    split_features_targets,
)
from rent_prediction.data.sample import training_data
from rent_prediction.features import FEATURE_COLUMNS, TARGET_COLUMN


@pytest.fixture
def raw_listings_csv(tmp_path):
    """Create a temporary CSV of raw listings with rents."""
    df = pd.DataFrame(
        {
            "Bedrooms": [2, 2, 3, 1, 4, 2, 1, 2, 2, 4],
            "Bathrooms": [2, 3, 2, 1, 3, 1, 1, 2, 2, 2],
            "North_Dublin": [0, 1, 0, 1, 1, 1, 0, 0, 0, 0],
            "Property_Type": [
                "apartment", "apartment", "apartment", "apartment", "house",
                "house", "apartment", "apartment", "house", "apartment",
            ],
            "Size_sqm": [91.0, 122.0, 127.0, 44.0, 139.0, 73.0, 50.0, 98.0, 63.0, 127.0],
            "Distance_km": [13.05, 2.28, 3.33, 1.03, 5.33, 1.87, 1.44, 2.51, 1.92, 3.28],
            "Rent": [2250, 2000, 3300, 1660, 2995, 2000, 3450, 3700, 2500, 3500],
        }
    )
    file_path = tmp_path / "listings.csv"
    df.to_csv(file_path, index=False)
    return str(file_path)


@pytest.fixture
def engineered_csv(tmp_path):
    """Create a temporary CSV holding the engineered reference data."""
    file_path = tmp_path / "engineered.csv"
    training_data().to_csv(file_path, index=False)
    return str(file_path)


class TestLoadListings:
    def test_raw_columns(self, raw_listings_csv):
        df = load_listings(raw_listings_csv)
        assert list(df.columns) == FEATURE_COLUMNS + [TARGET_COLUMN]
        assert len(df) == 10
        assert df.loc[1, "north_dublin"] == 10.0
        assert df.loc[4, "house"] == 10.0
        assert df.loc[0, "size_sqm_squared"] == pytest.approx(91.0**2)

    def test_engineered_columns(self, engineered_csv):
        df = load_listings(engineered_csv)
        pd.testing.assert_frame_equal(df, training_data())

    def test_without_rent(self, tmp_path):
        file_path = tmp_path / "new.csv"
        training_data()[FEATURE_COLUMNS].to_csv(file_path, index=False)
        df = load_listings(str(file_path))
        assert TARGET_COLUMN not in df.columns

    def test_missing_columns(self, tmp_path):
        file_path = tmp_path / "bad.csv"
        pd.DataFrame({"bedrooms": [1], "rent": [1000]}).to_csv(file_path, index=False)
        with pytest.raises(ValueError, match="missing required columns"):
            load_listings(str(file_path))

    def test_verbose(self, raw_listings_csv, capsys):
        load_listings(raw_listings_csv, verbose=True)
        out = capsys.readouterr().out
        assert "Loading listings from" in out
        assert "Loaded 10 rows" in out


class TestSplitFeaturesTargets:
    def test_split(self):
        features, targets = split_features_targets(training_data())
        assert list(features.columns) == FEATURE_COLUMNS
        assert targets.name == TARGET_COLUMN
        assert len(targets) == 18

    def test_no_targets(self):
        features, targets = split_features_targets(training_data()[FEATURE_COLUMNS])
        assert targets is None
        assert features.shape == (18, 8)

    def test_missing_features(self):
        with pytest.raises(ValueError, match="missing feature columns"):
            split_features_targets(training_data().drop(columns=["bedrooms"]))


class TestLoadTrainingData:
    def test_load(self, raw_listings_csv):
        features, targets = load_training_data(raw_listings_csv)
        assert features.shape == (10, 8)
        np.testing.assert_array_equal(targets.values[:2], [2250.0, 2000.0])

    def test_requires_rent(self, tmp_path):
        file_path = tmp_path / "new.csv"
        training_data()[FEATURE_COLUMNS].to_csv(file_path, index=False)
        with pytest.raises(ValueError, match="no 'rent' column"):
            load_training_data(str(file_path))

    def test_fails_validation(self, tmp_path):
        file_path = tmp_path / "small.csv"
        training_data().iloc[:3].to_csv(file_path, index=False)
        with pytest.raises(ValueError, match="Validation failed"):
            load_training_data(str(file_path))
