"""
Domain Models Module
"""
from .models import (
    Customer,
    DataBundle,
    Item,
    Product,
    PurchaseRecord,
    Seller,
    SellerReport,
    SellerStat,
    TopProduct,
)

__all__ = [
    "Customer",
    "DataBundle",
    "Item",
    "Product",
    "PurchaseRecord",
    "Seller",
    "SellerReport",
    "SellerStat",
    "TopProduct",
]
