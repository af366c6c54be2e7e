# timewise/report.py
from __future__ import annotations

import os
from typing import Dict, List, Sequence

import pandas as pd
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from .errors import MESSAGES, LinearRegressionError
from .result import RegressionResult
from .utils import as_float_array, ensure_dir, save_csv


def describe_error(err: LinearRegressionError) -> str:
    return MESSAGES[err.kind]


def format_result(
    result: RegressionResult,
    title: str = "",
    series: Sequence[float] | None = None,
    decimals: int = 2,
    metric_decimals: int = 4,
) -> List[str]:
    lines = []
    if title:
        lines.append(title)
        lines.append("-" * 42)
    if series is not None:
        lines.append(f"Data: {[float(v) for v in series]}")
    lines.append(f"Slope: {result.slope:.{decimals}f}")
    lines.append(f"Intercept: {result.intercept:.{decimals}f}")
    lines.append(f"R²: {result.r_squared:.{metric_decimals}f}")
    lines.append(f"MSE: {result.mse:.{metric_decimals}f}")
    return lines


def format_forecast(values: Sequence[float], start_period: int, decimals: int = 2) -> List[str]:
    """Period labels start at `start_period` (usually len(series) + 1)."""
    return [f"Period {start_period + i}: {v:.{decimals}f}" for i, v in enumerate(values)]


def result_to_frame(series: Sequence[float], result: RegressionResult) -> pd.DataFrame:
    y = as_float_array(series)
    pred = as_float_array(result.predictions)
    return pd.DataFrame({
        "t": range(len(y)),
        "actual": y,
        "predicted": pred,
        "residual": y - pred,
    })


def forecast_to_frame(values: Sequence[float], start_period: int) -> pd.DataFrame:
    values = as_float_array(values)
    return pd.DataFrame({
        "period": range(start_period, start_period + len(values)),
        "forecast": values,
    })


def summary_row(name: str, n: int, result: RegressionResult) -> Dict[str, float]:
    return {
        "name": name,
        "n": n,
        "slope": result.slope,
        "intercept": result.intercept,
        "r_squared": result.r_squared,
        "mse": result.mse,
    }


def export_results(
    out_dir: str,
    name: str,
    series: Sequence[float],
    result: RegressionResult,
    forecast_values: Sequence[float],
) -> Dict[str, str]:
    """
    Write fit and forecast tables for one series.
    Output: {"fit_csv": ..., "forecast_csv": ...}
    """
    fit_csv = os.path.join(out_dir, f"{name}_fit.csv")
    forecast_csv = os.path.join(out_dir, f"{name}_forecast.csv")

    save_csv(result_to_frame(series, result), fit_csv)
    save_csv(forecast_to_frame(forecast_values, len(series) + 1), forecast_csv)
    return {"fit_csv": fit_csv, "forecast_csv": forecast_csv}


def generate_pdf_report(pdf_path: str, rows: List[Dict[str, float]], forecasts: Dict[str, List[str]]):
    ensure_dir(os.path.dirname(pdf_path))
    c = canvas.Canvas(pdf_path, pagesize=letter)
    width, height = letter

    c.setFont("Helvetica-Bold", 16)
    c.drawString(50, height - 50, "Timewise Analytics - Linear Trend Report")

    y = height - 90
    for row in rows:
        if y < 140:
            c.showPage()
            y = height - 60

        c.setFont("Helvetica-Bold", 12)
        c.drawString(50, y, str(row["name"]))
        y -= 18

        c.setFont("Helvetica", 10)
        for k in ("n", "slope", "intercept", "r_squared", "mse"):
            c.drawString(60, y, f"{k}: {row[k]}")
            y -= 14

        for line in forecasts.get(str(row["name"]), []):
            c.drawString(60, y, line)
            y -= 14
            if y < 80:
                c.showPage()
                y = height - 60
        y -= 10

    c.showPage()
    c.save()
