# timewise/data_loader.py
import os
from typing import Any, Dict, List

import pandas as pd
import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load YAML config file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_series_csv(path: str, column: str) -> List[float]:
    """
    Read one numeric column of a CSV as an ordered series.
    Non-numeric cells are coerced to NaN and dropped; row order is kept.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Series CSV not found: {path}")

    df = pd.read_csv(path)
    df.columns = df.columns.str.strip()
    if column not in df.columns:
        raise ValueError(f"Missing column '{column}' in {path}. Got: {df.columns.tolist()}")

    values = pd.to_numeric(df[column], errors="coerce").dropna()
    return values.astype(float).tolist()


def example_series(config: Dict[str, Any]) -> List[Dict[str, Any]]:
    examples = config.get("examples", []) or []
    for ex in examples:
        missing = [k for k in ("name", "data") if k not in ex]
        if missing:
            raise ValueError(f"Example entry missing keys {missing}: {ex}")
    return examples
