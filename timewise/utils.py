# timewise/utils.py
import os
from typing import Sequence

import numpy as np
import pandas as pd


def ensure_dir(path: str) -> None:
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


def save_csv(df: pd.DataFrame, path: str) -> None:
    ensure_dir(os.path.dirname(path))
    df.to_csv(path, index=False)


def as_float_array(values: Sequence[float]) -> np.ndarray:
    # Always a fresh 1-D copy so the caller's sequence is never touched.
    return np.array(values, dtype=float).reshape(-1)


def time_index(n: int) -> np.ndarray:
    """Dense zero-based time index 0..n-1 as floats."""
    return np.arange(n, dtype=float)
