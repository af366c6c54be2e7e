# timewise/result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Coefficients:
    """Fitted line y = slope * t + intercept over a zero-based time index t."""

    slope: float
    intercept: float


@dataclass(frozen=True)
class RegressionResult:
    coefficients: Coefficients
    r_squared: float
    mse: float
    predictions: Tuple[float, ...]

    @property
    def slope(self) -> float:
        return self.coefficients.slope

    @property
    def intercept(self) -> float:
        return self.coefficients.intercept
