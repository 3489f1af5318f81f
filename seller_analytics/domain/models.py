"""
Sales Domain Models

Input catalog/transaction records, the mutable per-seller accumulator,
and the output report shape.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SourceRecord(BaseModel):
    """Base for immutable input records"""
    
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class Seller(SourceRecord):
    """Seller catalog entry"""
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(SourceRecord):
    """Product catalog entry, keyed by SKU"""
    sku: str
    purchase_price: float = Field(description="Cost basis per unit")
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[float] = None


class Customer(SourceRecord):
    """Customer entry. Carried through, never joined."""
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None


class Item(SourceRecord):
    """Line item within a purchase record"""
    sku: str
    quantity: int
    sale_price: float
    discount: float = Field(default=0, description="Discount percentage, 0-100")


class PurchaseRecord(SourceRecord):
    """Single receipt attributed to one seller"""
    seller_id: str
    total_amount: float
    items: List[Item]
    receipt_id: Optional[str] = None
    customer_id: Optional[str] = None
    date: Optional[str] = None
    total_discount: Optional[float] = None


class DataBundle(SourceRecord):
    """Complete analysis input"""
    sellers: List[Seller]
    products: List[Product]
    customers: List[Customer]
    purchase_records: List[PurchaseRecord]


@dataclass
class SellerStat:
    """Running totals for one seller while the pipeline executes"""
    id: str
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    products_sold: Dict[str, int] = field(default_factory=dict)
    bonus: float = 0.0
    top_products: List["TopProduct"] = field(default_factory=list)


class TopProduct(BaseModel):
    """Best-selling SKU entry"""
    sku: str
    quantity: int


class SellerReport(BaseModel):
    """Final per-seller report row"""
    seller_id: str
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: List[TopProduct]
    bonus: float
