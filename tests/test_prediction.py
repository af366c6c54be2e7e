# tests/test_prediction.py
import pytest

from timewise.errors import ErrorKind, LinearRegressionError
from timewise.prediction import forecast, predict
from timewise.result import Coefficients


def test_predict_applies_line_pointwise():
    coefficients = Coefficients(slope=2.0, intercept=1.0)
    assert list(predict([0, 1, 2], coefficients)) == [1.0, 3.0, 5.0]


def test_predict_preserves_order_and_length():
    coefficients = Coefficients(slope=-1.0, intercept=0.5)
    out = predict([3.0, -2.0, 10.0, 0.0], coefficients)
    assert list(out) == [-2.5, 2.5, -9.5, 0.5]


def test_forecast_starts_at_index_zero():
    coefficients = Coefficients(slope=1.0, intercept=10.0)
    assert list(forecast(coefficients, 3)) == [10.0, 11.0, 12.0]


def test_forecast_zero_periods_is_empty():
    assert len(forecast(Coefficients(slope=1.0, intercept=10.0), 0)) == 0


def test_forecast_negative_periods_rejected():
    with pytest.raises(LinearRegressionError) as exc:
        forecast(Coefficients(slope=1.0, intercept=10.0), -1)
    assert exc.value.kind is ErrorKind.INVALID_INPUT


@pytest.mark.parametrize("periods", [2.5, "3", True])
def test_forecast_requires_integer_periods(periods):
    with pytest.raises(TypeError):
        forecast(Coefficients(slope=1.0, intercept=10.0), periods)
