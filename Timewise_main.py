# Timewise_main.py
from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional, Sequence

from timewise.data_loader import example_series, load_config, load_series_csv
from timewise.errors import LinearRegressionError
from timewise.model import fit
from timewise.prediction import forecast
from timewise.report import (
    describe_error,
    export_results,
    format_forecast,
    format_result,
    generate_pdf_report,
    summary_row,
)

log = logging.getLogger("timewise")


def setup_logging(config: dict) -> None:
    cfg = config.get("logging", {})
    logging.basicConfig(
        level=str(cfg.get("level", "INFO")).upper(),
        format=cfg.get("format", "%(asctime)s %(levelname)s %(name)s: %(message)s"),
    )


def analyze_series(
    name: str,
    series: Sequence[float],
    periods: int,
    config: dict,
    title: str = "",
    note: str = "",
    export: bool = False,
) -> Dict[str, Any]:
    """Fit, print and optionally export one series. Returns the summary row plus forecast lines."""
    decimals = int(config.get("report", {}).get("decimals", 2))
    metric_decimals = int(config.get("report", {}).get("metric_decimals", 4))

    result = fit(series)
    lines = format_result(result, title=title, series=series, decimals=decimals, metric_decimals=metric_decimals)
    if note:
        lines.insert(3 if title else 1, note)
    for line in lines:
        print(line)

    values = forecast(result.coefficients, periods)
    forecast_lines = format_forecast(values, start_period=len(series) + 1, decimals=decimals)
    if forecast_lines:
        print(f"\nForecast for the next {periods} periods:")
        for line in forecast_lines:
            print(line)

    if export:
        out_dir = config.get("outputs", {}).get("results_dir", "data/results")
        paths = export_results(out_dir, name, series, result, values)
        log.info("Saved %s and %s", paths["fit_csv"], paths["forecast_csv"])

    return {"row": summary_row(name, len(series), result), "forecast": forecast_lines}


def run_demo(config: dict, export: bool = False) -> List[Dict[str, Any]]:
    outputs = []
    for ex in example_series(config):
        print()
        out = analyze_series(
            name=ex["name"],
            series=ex["data"],
            periods=int(ex.get("forecast_periods", 0)),
            config=config,
            title=ex.get("title", ex["name"]),
            note=ex.get("note", ""),
            export=export,
        )
        outputs.append(out)
    return outputs


def run_error_checks() -> List[str]:
    """Fit the two degenerate inputs and print the mapped failure messages."""
    print("\nERROR HANDLING CHECK")
    print("-" * 42)
    messages = []
    for label, data in (("empty", []), ("single value", [42.0])):
        try:
            fit(data)
        except LinearRegressionError as e:
            msg = describe_error(e)
            print(f"OK ({label}): {msg}")
            messages.append(msg)
        else:
            print(f"FAILED ({label}): fit should have been rejected")
    return messages


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Timewise Analytics - linear trend regression")
    parser.add_argument(
        "--config",
        type=str,
        default="configs/timewise_config.yaml",
        help="Path to YAML config",
    )
    parser.add_argument(
        "--step",
        type=str,
        default="all",
        choices=["demo", "errors", "csv", "all"],
        help="Which part to run",
    )
    parser.add_argument("--csv", type=str, default=None, help="CSV file holding the series (step=csv)")
    parser.add_argument("--column", type=str, default="value", help="Numeric column to fit (step=csv)")
    parser.add_argument("--periods", type=int, default=3, help="Forecast horizon (step=csv)")
    parser.add_argument("--export", action="store_true", help="Write fit/forecast CSVs to outputs.results_dir")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logging(config)

    print("=" * 42)
    print("   TIMEWISE ANALYTICS - LINEAR REGRESSION")
    print("=" * 42)

    outputs = []
    if args.step in ["demo", "all"]:
        outputs.extend(run_demo(config, export=args.export))

    if args.step == "csv":
        if not args.csv:
            parser.error("--csv is required with --step csv")
        series = load_series_csv(args.csv, args.column)
        try:
            outputs.append(analyze_series(
                name=args.column,
                series=series,
                periods=args.periods,
                config=config,
                title=f"{args.csv} [{args.column}]",
                export=args.export,
            ))
        except LinearRegressionError as e:
            print(f"Error: {describe_error(e)}")
            return 1

    if args.step in ["errors", "all"]:
        run_error_checks()

    pdf_cfg = config.get("outputs", {})
    if outputs and pdf_cfg.get("pdf", False):
        pdf_path = pdf_cfg.get("pdf_path", "data/results/timewise_report.pdf")
        generate_pdf_report(
            pdf_path,
            [o["row"] for o in outputs],
            {str(o["row"]["name"]): o["forecast"] for o in outputs},
        )
        log.info("Saved PDF report to %s", pdf_path)

    print("\n" + "=" * 42)
    print("        ANALYSIS COMPLETE")
    print("=" * 42)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
