"""Rental listing data: the reference dataset, CSV loading and validation."""

from .sample import training_data, holdout_data
from .loading import load_listings, load_training_data, split_features_targets
from .validation import validate_dataset, find_ragged_rows

__all__ = [
    "training_data",
    "holdout_data",
    "load_listings",
    "load_training_data",
    "split_features_targets",
    "validate_dataset",
    "find_ragged_rows",
]
