# timewise/evaluation.py
from __future__ import annotations

from typing import Dict, Sequence

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error

from .utils import as_float_array

EPS = np.finfo(float).eps


def r_squared(actual: Sequence[float], predicted: Sequence[float]) -> float:
    """
    Coefficient of determination.

    A constant `actual` (total sum of squares ~ 0) yields exactly 1.0.
    Fits worse than the mean give negative values; they are not clamped.
    """
    y = as_float_array(actual)
    y_pred = as_float_array(predicted)

    mean_actual = y.sum() / len(y)
    total_sum_squares = float(((y - mean_actual) ** 2).sum())
    residual_sum_squares = float(((y - y_pred) ** 2).sum())

    if abs(total_sum_squares) < EPS:
        return 1.0
    return 1.0 - residual_sum_squares / total_sum_squares


def mse(actual: Sequence[float], predicted: Sequence[float]) -> float:
    # n > 0 is guaranteed by the caller
    y = as_float_array(actual)
    y_pred = as_float_array(predicted)
    return float(((y - y_pred) ** 2).sum() / len(y))


def compute_metrics(actual: Sequence[float], predicted: Sequence[float]) -> Dict[str, float]:
    y = as_float_array(actual)
    y_pred = as_float_array(predicted)
    return {
        "r2": r_squared(y, y_pred),
        "mse": mse(y, y_pred),
        "rmse": float(np.sqrt(mean_squared_error(y, y_pred))),
        "mae": float(mean_absolute_error(y, y_pred)),
    }
