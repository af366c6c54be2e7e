# tests/test_data_loader.py
import pandas as pd
import pytest

from timewise.data_loader import example_series, load_config, load_series_csv


def test_default_config_has_examples(config):
    examples = example_series(config)

    assert [ex["name"] for ex in examples] == ["monthly_sales", "decreasing_trend", "perfect_line"]
    assert examples[2]["data"] == [1.0, 3.0, 5.0, 7.0, 9.0]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_example_entry_requires_data():
    with pytest.raises(ValueError):
        example_series({"examples": [{"name": "broken"}]})


def test_load_series_csv_keeps_order_and_drops_bad_cells(tmp_path):
    path = tmp_path / "sales.csv"
    pd.DataFrame({"month": [1, 2, 3, 4], " value ": ["10", "oops", "12.5", "14"]}).to_csv(path, index=False)

    assert load_series_csv(str(path), "value") == [10.0, 12.5, 14.0]


def test_load_series_csv_missing_column(tmp_path):
    path = tmp_path / "sales.csv"
    pd.DataFrame({"month": [1, 2]}).to_csv(path, index=False)

    with pytest.raises(ValueError):
        load_series_csv(str(path), "value")
