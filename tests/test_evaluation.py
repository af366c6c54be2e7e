# tests/test_evaluation.py
import pytest

from timewise.evaluation import compute_metrics, mse, r_squared


def test_r_squared_perfect_prediction():
    actual = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert abs(r_squared(actual, actual) - 1.0) < 1e-10


def test_r_squared_shifted_prediction_is_worse():
    actual = [1.0, 2.0, 3.0, 4.0, 5.0]
    shifted = [2.0, 3.0, 4.0, 5.0, 6.0]
    assert r_squared(actual, shifted) < 1.0


def test_r_squared_constant_actual_is_one():
    assert r_squared([7.0, 7.0, 7.0], [1.0, 2.0, 3.0]) == 1.0


def test_r_squared_is_not_clamped():
    actual = [1.0, 2.0, 3.0]
    predicted = [3.0, 2.0, 1.0]
    # SS_res = 8, SS_tot = 2
    assert r_squared(actual, predicted) == pytest.approx(-3.0)


def test_mse_zero_for_identical():
    a = [0.5, -1.0, 3.25]
    assert mse(a, a) == 0.0


def test_mse_is_mean_of_squared_differences():
    assert mse([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]) == 1.0
    assert mse([0.0, 0.0], [1.0, 3.0]) == 5.0


def test_compute_metrics_keys():
    m = compute_metrics([1.0, 2.0, 3.0], [2.0, 3.0, 4.0])

    assert set(m) == {"r2", "mse", "rmse", "mae"}
    assert m["mse"] == pytest.approx(1.0)
    assert m["rmse"] == pytest.approx(1.0)
    assert m["mae"] == pytest.approx(1.0)
    assert m["r2"] == pytest.approx(-0.5)
