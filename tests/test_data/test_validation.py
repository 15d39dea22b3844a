"""
Unit tests for dataset validation functions.
"""

import numpy as np
import pandas as pd

from rent_prediction.data.validation import find_ragged_rows, validate_dataset


class TestFindRaggedRows:
    """Tests for `find_ragged_rows`."""

    def test_all_rows_equal(self):
        assert find_ragged_rows([[1, 2], [3, 4], [5, 6]]) == []

    def test_short_row(self):
        ragged = find_ragged_rows([[1, 2, 3], [4, 5], [6, 7, 8]])
        assert len(ragged) == 1
        assert ragged[0] == (1, 2, 3)  # (row, actual, expected)

    def test_empty(self):
        assert find_ragged_rows([]) == []


class TestValidateDataset:
    """Tests for `validate_dataset`."""

    def test_valid_data(self):
        is_valid, errors = validate_dataset(
            [[1.0, 2.0], [3.0, 5.0], [4.0, 1.0]], [1.0, 2.0, 3.0]
        )
        assert is_valid
        assert errors == []

    def test_valid_dataframe(self):
        df = pd.DataFrame({"a": [1.0, 2.0, 3.0], "b": [0.0, 1.0, 0.0]})
        is_valid, _ = validate_dataset(df, pd.Series([1.0, 2.0, 3.0]))
        assert is_valid

    def test_empty(self):
        is_valid, errors = validate_dataset([])
        assert not is_valid
        assert "Dataset is empty" in errors

    def test_ragged(self):
        is_valid, errors = validate_dataset([[1.0, 2.0], [3.0]])
        assert not is_valid
        assert any("unexpected number of features" in e for e in errors)

    def test_ragged_rows_listed_regardless_of_verbose(self):
        _, quiet_errors = validate_dataset([[1.0, 2.0], [3.0]])
        _, verbose_errors = validate_dataset([[1.0, 2.0], [3.0]], verbose=True)
        assert any("row 1: 1 features (expected 2)" in e for e in quiet_errors)
        assert quiet_errors == verbose_errors

    def test_missing_values(self):
        is_valid, errors = validate_dataset([[1.0, np.nan], [3.0, 4.0]])
        assert not is_valid
        assert any("1 missing or infinite feature values" in e for e in errors)

    def test_non_numeric(self):
        is_valid, errors = validate_dataset([["a", 1.0], [2.0, 3.0]])
        assert not is_valid
        assert "Dataset contains non-numeric values" in errors

    def test_target_count_mismatch(self):
        is_valid, errors = validate_dataset([[1.0], [2.0]], [1.0, 2.0, 3.0])
        assert not is_valid
        assert any("do not match" in e for e in errors)

    def test_missing_targets(self):
        is_valid, errors = validate_dataset([[1.0], [2.0]], [1.0, np.inf])
        assert not is_valid
        assert any("target values" in e for e in errors)

    def test_fewer_rows_than_features(self):
        is_valid, errors = validate_dataset([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert not is_valid
        assert any("fewer rows (2) than features (3)" in e for e in errors)

    def test_verbose_output(self, capsys):
        validate_dataset([[1.0], [2.0]], [1.0, 2.0], verbose=True)
        assert "All validation checks passed" in capsys.readouterr().out

        validate_dataset([[1.0], [2.0]], [1.0], verbose=True)
        assert "Validation failed with 1 error(s)" in capsys.readouterr().out
