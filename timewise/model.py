# timewise/model.py
from __future__ import annotations

import logging
from typing import Dict, Sequence

import numpy as np
from sklearn.linear_model import LinearRegression

from .errors import ErrorKind, LinearRegressionError
from .evaluation import EPS, mse, r_squared
from .prediction import predict
from .result import Coefficients, RegressionResult
from .utils import as_float_array, time_index

log = logging.getLogger(__name__)


def calculate_coefficients(x: Sequence[float], y: Sequence[float]) -> Coefficients:
    """
    Closed-form least squares for y = slope * x + intercept.

    Raises LinearRegressionError(INVALID_INPUT) when the x values carry no
    variance (denominator n*sum(x^2) - sum(x)^2 is numerically zero).
    """
    x = as_float_array(x)
    y = as_float_array(y)
    n = float(len(x))

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_x2 = float((x * x).sum())

    denominator = n * sum_x2 - sum_x * sum_x
    if abs(denominator) < EPS:
        raise LinearRegressionError(ErrorKind.INVALID_INPUT, "degenerate least-squares denominator")

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return Coefficients(slope=slope, intercept=intercept)


def fit(series: Sequence[float]) -> RegressionResult:
    """
    Fit a straight line to `series` against the implicit index 0..n-1.

    Returns a complete RegressionResult or raises LinearRegressionError
    (EMPTY_DATA, INSUFFICIENT_DATA or INVALID_INPUT). No partial results.
    """
    y = as_float_array(series)
    if len(y) == 0:
        raise LinearRegressionError(ErrorKind.EMPTY_DATA)
    if len(y) < 2:
        raise LinearRegressionError(ErrorKind.INSUFFICIENT_DATA)

    x = time_index(len(y))
    coefficients = calculate_coefficients(x, y)

    y_pred = predict(x, coefficients)
    result = RegressionResult(
        coefficients=coefficients,
        r_squared=r_squared(y, y_pred),
        mse=mse(y, y_pred),
        predictions=tuple(float(v) for v in y_pred),
    )
    log.debug(
        "fit n=%d slope=%.6g intercept=%.6g r2=%.6g mse=%.6g",
        len(y), coefficients.slope, coefficients.intercept, result.r_squared, result.mse,
    )
    return result


def sklearn_fit_1d(x: Sequence[float], y: Sequence[float]) -> Coefficients:
    model = LinearRegression()
    model.fit(as_float_array(x).reshape(-1, 1), as_float_array(y))
    return Coefficients(slope=float(model.coef_[0]), intercept=float(model.intercept_))


def compare_with_sklearn(series: Sequence[float]) -> Dict[str, float]:
    """
    Fit `series` with the closed form and with scikit-learn.
    Output: both coefficient pairs plus their absolute differences.
    """
    result = fit(series)
    y = as_float_array(series)
    ref = sklearn_fit_1d(time_index(len(y)), y)
    return {
        "closed_form_slope": result.slope,
        "closed_form_intercept": result.intercept,
        "sklearn_slope": ref.slope,
        "sklearn_intercept": ref.intercept,
        "slope_abs_diff": abs(result.slope - ref.slope),
        "intercept_abs_diff": abs(result.intercept - ref.intercept),
    }
