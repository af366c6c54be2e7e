# tests/conftest.py
import os

import pytest
import yaml

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


@pytest.fixture(scope="session")
def config():
    with open(os.path.join(ROOT, "configs", "timewise_config.yaml"), "r") as f:
        return yaml.safe_load(f)
