"""Command-line entry point: portfolio look-through exposure analysis.

Example:

  lookthrough-analyze data/securities.csv data/portfolio.csv \
    --output-folder out --save-image --image-format svg --usd --json
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import argparse
import logging

from lookthrough.config import Settings, get_settings, setup_logging
from lookthrough.data_models.reference_tables import load_reference_tables
from lookthrough.errors import LookthroughError
from lookthrough.services.chart_service import IMAGE_FORMATS, write_exposure_charts
from lookthrough.services.exposure_aggregation_service import build_portfolio_report
from lookthrough.services.portfolio_service import load_portfolio_from_csv
from lookthrough.services.security_registry_service import load_securities_from_csv

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simple portfolio holdings analyzer.")
    parser.add_argument(
        "securities",
        help="CSV with the composition of every security in the portfolio: "
        "ISIN,Name,Ticker,TER,Holding,HoldingWeight,Sector,SectorWeight,Country,CountryWeight,Region,RegionWeight",
    )
    parser.add_argument(
        "portfolio",
        help="CSV with the portfolio allocation: ISIN,Amount (in your currency) or ISIN,Weight (percent).",
    )
    parser.add_argument("-i", "--save-image", dest="save_image", action="store_true",
                        help="Also save the charts as a static image of 1920x1080.")
    parser.add_argument("-f", "--image-format", dest="image_format", choices=IMAGE_FORMATS, default="png",
                        help="Static image format (default png).")
    parser.add_argument("-s", "--image-scale", dest="image_scale", type=float, default=1.0,
                        help="Scale the output image up or down.")
    parser.add_argument("-o", "--output-folder", dest="output_folder", default=None,
                        help="Save output to this folder. Defaults to the portfolio's folder.")
    parser.add_argument("-d", "--display", action="store_true",
                        help="Open the rendered charts in the default browser.")
    currency = parser.add_mutually_exclusive_group()
    currency.add_argument("--eur", action="store_true", help="Portfolio currency is Euro (default).")
    currency.add_argument("--usd", action="store_true", help="Portfolio currency is USD.")
    currency.add_argument("--set-currency", dest="set_currency", metavar="CURRENCY", default=None,
                          help="Custom portfolio currency symbol.")
    parser.add_argument("-l", "--limit", type=int, default=settings.limit,
                        help=f"Limit the number of data points per chart (default {settings.limit}).")
    parser.add_argument("--json", dest="write_json", action="store_true",
                        help="Also write the report as <name>.json next to the charts.")
    parser.add_argument("--log-level", dest="log_level", default=settings.log_level,
                        help=f"Logging level (default {settings.log_level}).")
    return parser


def resolve_currency(args: argparse.Namespace, default: str) -> str:
    if args.set_currency:
        return args.set_currency
    if args.usd:
        return "$"
    if args.eur:
        return "€"
    return default


def run(args: argparse.Namespace, settings: Settings) -> List[Path]:
    tables = load_reference_tables(settings.reference_tables)
    registry = load_securities_from_csv(args.securities, tables)
    portfolio = load_portfolio_from_csv(args.portfolio)

    portfolio_path = Path(args.portfolio)
    name = portfolio_path.stem
    output_folder = Path(args.output_folder) if args.output_folder else portfolio_path.parent

    report = build_portfolio_report(
        registry,
        portfolio,
        name=name,
        currency=resolve_currency(args, settings.currency),
        tolerance=settings.tolerance,
    )

    written = write_exposure_charts(
        report,
        output_folder,
        name,
        limit=args.limit,
        image_format=args.image_format if args.save_image else None,
        image_scale=args.image_scale,
        image_size=(settings.image_width, settings.image_height),
        display=args.display,
    )

    if args.write_json:
        json_path = output_folder / f"{name}.json"
        json_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Wrote exposure report to %s", json_path)
        written.append(json_path)

    return written


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    setup_logging(args.log_level)

    try:
        run(args, settings)
    except (LookthroughError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        logger.error("Errors occurred; no report written")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
