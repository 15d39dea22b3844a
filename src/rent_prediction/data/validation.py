"""
Consistency checks for training datasets.

These functions report problems instead of raising, so that callers can
show every issue at once before training.
"""

import numpy as np
from typing import List, Optional, Tuple


def find_ragged_rows(dataset) -> List[Tuple[int, int, int]]:
    """
    Find rows whose length differs from the first row.

    Args:
        dataset: Sequence of feature rows

    Returns:
        List of tuples: (row_index, actual_length, expected_length)
    """
    rows = _rows(dataset)
    if len(rows) == 0:
        return []

    expected = len(rows[0])
    return [
        (i, len(row), expected)
        for i, row in enumerate(rows)
        if len(row) != expected
    ]


def _rows(dataset) -> list:
    if hasattr(dataset, "to_numpy"):
        dataset = dataset.to_numpy()
    return [np.atleast_1d(np.asarray(row)) for row in dataset]


def validate_dataset(
    dataset,
    targets=None,
    verbose: bool = False
) -> Tuple[bool, List[str]]:
    """
    Validate that a dataset can be passed to `train`.

    Checks:
    1. The dataset has at least one row and one feature
    2. All rows have the same number of features
    3. All values are finite numbers
    4. Targets (if given) are finite and match the number of rows
    5. There are at least as many rows as features

    Args:
        dataset: Sequence of feature rows, 2-D array or `pandas.DataFrame`
        targets: Target values (optional)
        verbose: If True, print validation results

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = []
    rows = _rows(dataset)

    if len(rows) == 0 or len(rows[0]) == 0:
        errors.append("Dataset is empty")
    else:
        ragged = find_ragged_rows(rows)
        if ragged:
            errors.append(f"Found {len(ragged)} rows with an unexpected number of features")
            for i, actual, expected in ragged[:5]:  # Show first 5
                errors.append(f"  - row {i}: {actual} features (expected {expected})")
        else:
            values = _to_float(np.vstack(rows))
            if values is None:
                errors.append("Dataset contains non-numeric values")
            elif not np.all(np.isfinite(values)):
                n_bad = int(np.sum(~np.isfinite(values)))
                errors.append(f"Found {n_bad} missing or infinite feature values")

            n_rows, n_features = len(rows), len(rows[0])
            if n_rows < n_features:
                errors.append(
                    f"Dataset has fewer rows ({n_rows}) than features ({n_features}); "
                    "X^T X will be singular"
                )

    if targets is not None:
        target_values = _to_float(np.ravel(np.asarray(targets)))
        if target_values is None:
            errors.append("Targets contain non-numeric values")
        else:
            if len(target_values) != len(rows):
                errors.append(
                    f"Dimensions in dataset ({len(rows)}) and targets "
                    f"({len(target_values)}) do not match"
                )
            if not np.all(np.isfinite(target_values)):
                n_bad = int(np.sum(~np.isfinite(target_values)))
                errors.append(f"Found {n_bad} missing or infinite target values")

    is_valid = len(errors) == 0

    if verbose:
        if is_valid:
            print("All validation checks passed")
        else:
            print(f"Validation failed with {len(errors)} error(s):")
            for error in errors:
                print(f"  {error}")

    return is_valid, errors


def _to_float(values: np.ndarray) -> Optional[np.ndarray]:
    try:
        return values.astype(float)
    except (TypeError, ValueError):
        return None
