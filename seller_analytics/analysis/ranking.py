"""
Profit ranking and bonus assignment.
"""

from typing import Dict, List

from seller_analytics.domain.models import SellerStat, TopProduct
from .strategies import ReportStrategy

TOP_PRODUCTS_LIMIT = 10


def top_products(products_sold: Dict[str, int], limit: int = TOP_PRODUCTS_LIMIT) -> List[TopProduct]:
    """Best sellers by quantity, descending; ties keep tally order"""
    ranked = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=quantity) for sku, quantity in ranked[:limit]]


def rank_sellers(
    stats: List[SellerStat],
    strategy: ReportStrategy,
    top_limit: int = TOP_PRODUCTS_LIMIT,
) -> List[SellerStat]:
    """
    Sort sellers by profit descending and finalize bonus and top_products.
    
    The sort is stable, so sellers with equal profit keep input order.
    Returns a new list; the stat objects themselves are updated in place.
    """
    ranked = sorted(stats, key=lambda stat: stat.profit, reverse=True)
    total = len(ranked)
    
    for index, seller in enumerate(ranked):
        seller.bonus = strategy.calculate_bonus(index, total, seller)
        seller.top_products = top_products(seller.products_sold, top_limit)
    
    return ranked
