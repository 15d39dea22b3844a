"""
Tests for the reference Dublin dataset.
"""

import numpy as np

from rent_prediction.data.sample import holdout_data, training_data
from rent_prediction.data.validation import validate_dataset
from rent_prediction.features import FEATURE_COLUMNS, TARGET_COLUMN


class TestSampleData:
    def test_training_shape(self):
        df = training_data()
        assert df.shape == (18, 9)
        assert list(df.columns) == FEATURE_COLUMNS + [TARGET_COLUMN]

    def test_holdout_rents(self):
        df = holdout_data()
        assert df[TARGET_COLUMN].tolist() == [3500.0, 3000.0, 1850.0]

    def test_size_squared_column(self):
        df = holdout_data()
        np.testing.assert_allclose(df["size_sqm_squared"], df["size_sqm"] ** 2)

    def test_every_property_is_apartment_or_house(self):
        df = training_data()
        np.testing.assert_array_equal(df["apartment"] + df["house"], np.full(18, 10.0))

    def test_returns_fresh_copies(self):
        df = training_data()
        df.loc[0, TARGET_COLUMN] = 0.0
        assert training_data().loc[0, TARGET_COLUMN] == 2250.0

    def test_training_data_is_valid(self):
        df = training_data()
        is_valid, errors = validate_dataset(df[FEATURE_COLUMNS], df[TARGET_COLUMN])
        assert is_valid, errors
