"""
Command Line Entry Point

Usage:
    seller-report report data/dataset.json
    seller-report report data/dataset.json -o reports/sellers.parquet -f parquet
    seller-report generate data/dataset.json --sellers 5 --records 200
"""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from seller_analytics.analysis import ProfitRankStrategy, SalesAnalysisError, SalesAnalyzer
from seller_analytics.config import get_settings
from seller_analytics.config.logging import configure_logging
from seller_analytics.data import SalesDataGenerator
from seller_analytics.export import ReportFormat, ReportWriter
from seller_analytics.ingestion import load_bundle

logger = structlog.get_logger(__name__)


def run_report(args: argparse.Namespace) -> int:
    """Analyze a dataset file and print or write the report."""
    settings = get_settings()
    try:
        data = load_bundle(args.input or settings.data.input_path)
        reports = SalesAnalyzer(settings).analyze(data, ProfitRankStrategy.from_settings(settings))
    except (SalesAnalysisError, FileNotFoundError) as e:
        logger.error("Report failed", error=str(e), error_type=type(e).__name__)
        return 1
    
    if args.output:
        ReportWriter().write(reports, args.output, args.format or settings.data.output_format)
    else:
        payload = [report.model_dump() for report in reports]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def run_generate(args: argparse.Namespace) -> int:
    """Write a synthetic dataset bundle."""
    generator = SalesDataGenerator(seed=args.seed)
    data = generator.generate(
        n_sellers=args.sellers,
        n_products=args.products,
        n_customers=args.customers,
        n_records=args.records,
    )
    generator.save(data, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seller performance report")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    report = subparsers.add_parser("report", help="Build the seller report for a dataset")
    report.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Path to dataset JSON (default: DATA_INPUT_PATH)",
    )
    report.add_argument("-o", "--output", default=None, help="Write report to this file instead of stdout")
    report.add_argument(
        "-f", "--format",
        choices=[f.value for f in ReportFormat],
        default=None,
        help="Output format (default: DATA_OUTPUT_FORMAT)",
    )
    report.set_defaults(handler=run_report)
    
    generate = subparsers.add_parser("generate", help="Generate a synthetic dataset")
    generate.add_argument("output", help="Path of the dataset JSON to write")
    generate.add_argument("--sellers", type=int, default=5)
    generate.add_argument("--products", type=int, default=50)
    generate.add_argument("--customers", type=int, default=20)
    generate.add_argument("--records", type=int, default=200)
    generate.add_argument("--seed", type=int, default=42)
    generate.set_defaults(handler=run_generate)
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
