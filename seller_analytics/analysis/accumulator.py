"""
Line-item accumulation.

Folds purchase records into per-seller revenue, profit, sales count and
per-SKU quantity tallies.
"""

from typing import Dict, Iterable

import structlog

from seller_analytics.domain.models import Product, PurchaseRecord, SellerStat
from .errors import UnresolvedReferenceError
from .strategies import ReportStrategy

logger = structlog.get_logger(__name__)


def accumulate_purchases(
    records: Iterable[PurchaseRecord],
    seller_index: Dict[str, SellerStat],
    product_index: Dict[str, Product],
    strategy: ReportStrategy,
) -> None:
    """
    Accumulate every purchase record into the seller stats in place.
    
    Seller revenue is the sum of record totals; profit is the sum of
    per-item (strategy revenue - purchase_price * quantity).
    
    Raises:
        UnresolvedReferenceError: seller_id or sku not in the indexes
    """
    record_count = 0
    item_count = 0
    
    for position, record in enumerate(records):
        seller = seller_index.get(record.seller_id)
        if seller is None:
            logger.warning("Unknown seller in purchase record", seller_id=record.seller_id, record=position)
            raise UnresolvedReferenceError("seller", record.seller_id, position)
        
        seller.sales_count += 1
        seller.revenue += record.total_amount
        
        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                logger.warning("Unknown product in purchase record", sku=item.sku, record=position)
                raise UnresolvedReferenceError("product", item.sku, position)
            
            cost = product.purchase_price * item.quantity
            revenue = strategy.calculate_revenue(item, product)
            seller.profit += revenue - cost
            
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity
            item_count += 1
        
        record_count += 1
    
    logger.debug("Purchases accumulated", records=record_count, items=item_count)
