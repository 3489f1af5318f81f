"""
Report Writer

Converts seller reports into polars DataFrames and writes them as
JSON, CSV or Parquet.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union

import polars as pl
import structlog

from seller_analytics.config import get_settings
from seller_analytics.domain.models import SellerReport

logger = structlog.get_logger(__name__)

TOP_PRODUCT_SCHEMA = pl.List(pl.Struct({"sku": pl.Utf8, "quantity": pl.Int64}))

REPORT_SCHEMA = {
    "seller_id": pl.Utf8,
    "name": pl.Utf8,
    "revenue": pl.Float64,
    "profit": pl.Float64,
    "sales_count": pl.Int64,
    "top_products": TOP_PRODUCT_SCHEMA,
    "bonus": pl.Float64,
}


class ReportFormat(str, Enum):
    """Supported report formats"""
    JSON = "json"
    CSV = "csv"
    PARQUET = "parquet"


def reports_to_frame(reports: Sequence[SellerReport]) -> pl.DataFrame:
    """One row per seller, top_products kept as a list of structs"""
    rows = [report.model_dump() for report in reports]
    return pl.DataFrame(rows, schema=REPORT_SCHEMA)


def top_products_frame(reports: Sequence[SellerReport]) -> pl.DataFrame:
    """Long format: one row per (seller, product) with 1-based rank"""
    rows = [
        {
            "seller_id": report.seller_id,
            "rank": rank,
            "sku": product.sku,
            "quantity": product.quantity,
        }
        for report in reports
        for rank, product in enumerate(report.top_products, start=1)
    ]
    return pl.DataFrame(
        rows,
        schema={"seller_id": pl.Utf8, "rank": pl.Int64, "sku": pl.Utf8, "quantity": pl.Int64},
    )


class ReportWriter:
    """
    Writes seller reports to disk.
    
    Example:
        writer = ReportWriter()
        path = writer.write(reports, fmt=ReportFormat.PARQUET)
    """
    
    def __init__(self, output_dir: Optional[str] = None):
        self.output_dir = Path(output_dir or get_settings().data.output_path)
    
    def _default_path(self, fmt: ReportFormat) -> Path:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        return self.output_dir / f"seller_report_{timestamp}.{fmt.value}"
    
    def write(
        self,
        reports: List[SellerReport],
        path: Optional[Union[str, Path]] = None,
        fmt: Union[ReportFormat, str] = ReportFormat.JSON,
    ) -> Path:
        """
        Write reports and return the output path.
        
        CSV cannot hold nested columns, so top_products is stored there
        as a JSON string.
        """
        fmt = ReportFormat(fmt)
        output_file = Path(path) if path else self._default_path(fmt)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        
        if fmt == ReportFormat.JSON:
            payload = [report.model_dump() for report in reports]
            output_file.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        elif fmt == ReportFormat.CSV:
            df = reports_to_frame(reports).with_columns(
                pl.Series(
                    "top_products",
                    [json.dumps([p.model_dump() for p in r.top_products]) for r in reports],
                    dtype=pl.Utf8,
                )
            )
            df.write_csv(output_file)
        else:
            reports_to_frame(reports).write_parquet(output_file)
        
        logger.info(f"Written {len(reports)} seller reports to {output_file}", format=fmt.value)
        return output_file
