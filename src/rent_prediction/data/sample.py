"""
Reference rental dataset for Dublin properties.

Each row holds the engineered features in `FEATURE_COLUMNS` order:
number of bedrooms, number of bathrooms, north Dublin flag (10 = yes),
apartment flag (10 = yes), house flag (10 = yes), size (sq m), size squared,
and distance from O'Connell Bridge (km). The `rent` column is the monthly
rent in Euro.
"""

import pandas as pd

from ..features import FEATURE_COLUMNS, TARGET_COLUMN

_TRAINING_ROWS = [
    # bed, bath, north, apt, house, size, size^2, distance, rent
    (2, 2, 0, 10, 0, 91.00, 8281.00, 13.05, 2250),      # Killiney
    (2, 3, 10, 10, 0, 122.00, 14884.00, 2.28, 2000),    # Drumcondra
    (2, 2, 0, 10, 0, 102.19, 10442.80, 8.79, 1924),     # Monkstown
    (3, 2, 0, 10, 0, 127.00, 16129.00, 3.33, 3300),     # Ballsbridge
    (2, 2, 0, 10, 0, 70.00, 4900.00, 1.10, 2950),       # Lower Baggot Street
    (1, 1, 10, 10, 0, 44.00, 1936.00, 1.03, 1660),      # IFSC
    (2, 1, 10, 10, 0, 52.00, 2704.00, 1.21, 2100),      # IFSC
    (4, 2, 0, 10, 0, 127.00, 16129.00, 3.28, 3500),     # Ballsbridge
    (1, 1, 10, 10, 0, 48.00, 2304.00, 2.96, 1600),      # IFSC
    (2, 2, 0, 10, 0, 80.00, 6400.00, 13.41, 1600),      # Cabinteely
    (2, 2, 0, 10, 0, 75.00, 5625.00, 1.88, 3950),       # Grand Canal Square
    (2, 2, 0, 10, 0, 75.00, 5625.00, 1.65, 4250),       # Dublin 2
    (1, 1, 0, 10, 0, 50.00, 2500.00, 1.44, 3450),       # Grand Canal Dock
    (4, 3, 10, 0, 10, 139.00, 19321.00, 5.33, 2995),    # Navan Road
    (2, 1, 10, 0, 10, 73.00, 5329.00, 1.87, 2000),      # East Wall
    (2, 2, 0, 10, 0, 98.00, 9604.00, 2.51, 3700),       # Ballsbridge
    (2, 2, 0, 10, 0, 72.00, 5184.00, 5.68, 1900),       # Goatstown
    (2, 1, 0, 0, 10, 63.00, 3969.00, 1.92, 2500),       # Ranelagh
]

_TEST_ROWS = [
    (2, 2, 0, 10, 0, 157.93, 24941.8849, 2.33, 3500),   # Ballsbridge
    (2, 1, 0, 10, 0, 97.00, 9409.0000, 1.44, 3000),     # Lower Baggot Street
    (1, 1, 10, 10, 0, 48.00, 2304.0000, 1.00, 1850),    # IFSC
]


def _to_frame(rows) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=FEATURE_COLUMNS + [TARGET_COLUMN], dtype=float)


def training_data() -> pd.DataFrame:
    """Return the 18 training properties with their rents."""
    return _to_frame(_TRAINING_ROWS)


def holdout_data() -> pd.DataFrame:
    """Return the 3 held-out properties with their actual rents."""
    return _to_frame(_TEST_ROWS)
