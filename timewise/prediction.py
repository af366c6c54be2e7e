# timewise/prediction.py
from __future__ import annotations

import numbers
from typing import Sequence

import numpy as np

from .errors import ErrorKind, LinearRegressionError
from .result import Coefficients
from .utils import as_float_array, time_index


def predict(x_values: Sequence[float], coefficients: Coefficients) -> np.ndarray:
    x = as_float_array(x_values)
    return coefficients.slope * x + coefficients.intercept


def forecast(coefficients: Coefficients, periods: int) -> np.ndarray:
    """
    Extrapolate the fitted line for `periods` steps.

    The forecast index restarts at 0: forecast[i] = slope * i + intercept.
    Offsetting period labels by the series length is left to the presenter.
    """
    if isinstance(periods, bool) or not isinstance(periods, numbers.Integral):
        raise TypeError(f"periods must be an integer, got {type(periods).__name__}")
    if periods < 0:
        raise LinearRegressionError(ErrorKind.INVALID_INPUT, f"negative forecast periods ({periods})")
    return predict(time_index(int(periods)), coefficients)
