"""
Synthetic Data Generator

Generates a realistic sales dataset bundle for demos and testing:
- Sellers with names and positions
- Product catalog with cost and list price
- Customers
- Purchase records with discounted line items
"""

import json
import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np
from faker import Faker
import structlog

logger = structlog.get_logger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

POSITIONS = ["Junior Seller", "Seller", "Senior Seller", "Sales Lead"]
CATEGORIES = ["electronics", "clothing", "home_garden", "sports", "beauty", "books"]
DISCOUNTS = [0, 0, 0, 5, 10, 15, 20]

ITEMS_PER_RECORD = [1, 2, 3, 4, 5]
ITEMS_PER_RECORD_P = [0.40, 0.30, 0.15, 0.10, 0.05]

QUANTITIES = [1, 2, 3, 4, 5]
QUANTITIES_P = [0.60, 0.25, 0.10, 0.03, 0.02]


# =============================================================================
# GENERATOR
# =============================================================================

class SalesDataGenerator:
    """
    Seeded generator for analysis input bundles.
    
    Every purchase record references existing sellers, products and
    customers, and its total_amount is the rounded sum of its discounted
    line revenue.
    """
    
    def __init__(self, seed: int = 42):
        self.fake = Faker()
        self.fake.seed_instance(seed)
        self.random = random.Random(seed)
        self.rng = np.random.default_rng(seed)
    
    def generate_sellers(self, n: int) -> List[Dict[str, Any]]:
        return [
            {
                "id": f"seller_{i + 1}",
                "first_name": self.fake.first_name(),
                "last_name": self.fake.last_name(),
                "start_date": self.fake.date_between(start_date="-5y", end_date="-30d").isoformat(),
                "position": self.random.choice(POSITIONS),
            }
            for i in range(n)
        ]
    
    def generate_products(self, n: int) -> List[Dict[str, Any]]:
        products = []
        for i in range(n):
            category = self.random.choice(CATEGORIES)
            purchase_price = round(self.random.uniform(5, 250), 2)
            products.append({
                "sku": f"SKU_{i + 1:03d}",
                "name": f"{self.fake.word().title()} {category.replace('_', ' ').title()}",
                "category": category,
                "purchase_price": purchase_price,
                "sale_price": round(purchase_price * self.random.uniform(1.2, 2.0), 2),
            })
        return products
    
    def generate_customers(self, n: int) -> List[Dict[str, Any]]:
        return [
            {
                "id": f"customer_{i + 1}",
                "first_name": self.fake.first_name(),
                "last_name": self.fake.last_name(),
                "phone": self.fake.phone_number(),
            }
            for i in range(n)
        ]
    
    def generate_purchase_records(
        self,
        n: int,
        sellers: List[Dict[str, Any]],
        products: List[Dict[str, Any]],
        customers: List[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        records = []
        for i in range(n):
            num_items = int(self.rng.choice(ITEMS_PER_RECORD, p=ITEMS_PER_RECORD_P))
            items = []
            total = 0.0
            total_discount = 0.0
            
            for _ in range(num_items):
                product = self.random.choice(products)
                quantity = int(self.rng.choice(QUANTITIES, p=QUANTITIES_P))
                discount = self.random.choice(DISCOUNTS)
                gross = product["sale_price"] * quantity
                net = gross * (1 - discount / 100)
                
                items.append({
                    "sku": product["sku"],
                    "quantity": quantity,
                    "sale_price": product["sale_price"],
                    "discount": discount,
                })
                total += net
                total_discount += gross - net
            
            records.append({
                "receipt_id": f"receipt_{i + 1}",
                "date": self.fake.date_between(start_date="-1y", end_date="today").isoformat(),
                "seller_id": self.random.choice(sellers)["id"],
                "customer_id": self.random.choice(customers)["id"],
                "items": items,
                "total_amount": round(total, 2),
                "total_discount": round(total_discount, 2),
            })
        return records
    
    def generate(
        self,
        n_sellers: int = 5,
        n_products: int = 50,
        n_customers: int = 20,
        n_records: int = 200,
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Generate a complete bundle"""
        sellers = self.generate_sellers(n_sellers)
        products = self.generate_products(n_products)
        customers = self.generate_customers(n_customers)
        records = self.generate_purchase_records(n_records, sellers, products, customers)
        
        logger.info(
            "Generated synthetic dataset",
            sellers=n_sellers,
            products=n_products,
            customers=n_customers,
            purchase_records=n_records,
        )
        return {
            "sellers": sellers,
            "products": products,
            "customers": customers,
            "purchase_records": records,
        }
    
    def save(self, data: Dict[str, Any], path: Union[str, Path]) -> Path:
        """Save a bundle as JSON"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info(f"Saved dataset to {path}")
        return path
