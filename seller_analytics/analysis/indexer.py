"""
Lookup indexes for joining purchase records against the catalogs.
"""

from typing import Dict, Iterable, List

from seller_analytics.domain.models import Product, Seller, SellerStat


def init_seller_stats(sellers: Iterable[Seller]) -> List[SellerStat]:
    """One zeroed SellerStat per input seller, in input order"""
    return [SellerStat(id=seller.id, name=seller.full_name) for seller in sellers]


def build_seller_index(stats: Iterable[SellerStat]) -> Dict[str, SellerStat]:
    """Seller id -> stat. On duplicate ids the later entry wins."""
    return {stat.id: stat for stat in stats}


def build_product_index(products: Iterable[Product]) -> Dict[str, Product]:
    """SKU -> product. On duplicate SKUs the later entry wins."""
    return {product.sku: product for product in products}
