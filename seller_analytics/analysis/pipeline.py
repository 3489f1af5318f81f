"""
Sales Analysis Pipeline

Orchestrates validation, indexing, accumulation, ranking and formatting
into a single seller performance report.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional

import structlog

from seller_analytics.config import Settings, get_settings
from seller_analytics.domain.models import SellerReport
from .accumulator import accumulate_purchases
from .formatter import format_reports
from .indexer import build_product_index, build_seller_index, init_seller_stats
from .ranking import rank_sellers
from .validators import resolve_strategy, validate_bundle

logger = structlog.get_logger(__name__)


class SalesAnalyzer:
    """
    Seller performance report builder.
    
    Each call to analyze() is independent: all intermediate state is
    created and discarded within the call. Any failure aborts the run
    and no partial report is returned.
    
    Example:
        analyzer = SalesAnalyzer()
        reports = analyzer.analyze(bundle, ProfitRankStrategy())
    """
    
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
    
    @property
    def top_products_limit(self) -> int:
        return self.settings.report.top_products_limit
    
    @property
    def decimal_places(self) -> int:
        return self.settings.report.decimal_places
    
    def analyze(self, data: Any, config: Any) -> List[SellerReport]:
        """
        Build the ranked seller report.
        
        Args:
            data: Bundle with sellers, products, customers and purchase_records
            config: Strategy configuration providing calculate_revenue and
                calculate_bonus
            
        Returns:
            One report per input seller, sorted by profit descending
        """
        started_at = datetime.now(timezone.utc)
        
        bundle = validate_bundle(data)
        strategy = resolve_strategy(config)
        
        logger.info(
            "Starting sales analysis",
            sellers=len(bundle.sellers),
            products=len(bundle.products),
            purchase_records=len(bundle.purchase_records),
            strategy=type(strategy).__name__,
        )
        
        stats = init_seller_stats(bundle.sellers)
        seller_index = build_seller_index(stats)
        product_index = build_product_index(bundle.products)
        
        if len(seller_index) < len(stats):
            logger.warning("Duplicate seller ids in input", duplicates=len(stats) - len(seller_index))
        if len(product_index) < len(bundle.products):
            logger.warning("Duplicate SKUs in input", duplicates=len(bundle.products) - len(product_index))
        
        accumulate_purchases(bundle.purchase_records, seller_index, product_index, strategy)
        ranked = rank_sellers(stats, strategy, self.top_products_limit)
        reports = format_reports(ranked, self.decimal_places)
        
        duration = (datetime.now(timezone.utc) - started_at).total_seconds()
        logger.info(f"Sales analysis complete: {len(reports)} seller reports", duration_seconds=duration)
        
        return reports


def analyze_sales_data(
    data: Any,
    config: Any,
    settings: Optional[Settings] = None,
) -> List[SellerReport]:
    """Convenience wrapper around SalesAnalyzer.analyze"""
    return SalesAnalyzer(settings).analyze(data, config)
