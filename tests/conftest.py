"""
Test Suite Configuration
"""
import copy

import pytest

from seller_analytics.analysis import ProfitRankStrategy
from seller_analytics.config import Settings
from seller_analytics.config.settings import ReportSettings


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Create test settings"""
    return Settings(
        APP_ENV="testing",
        report=ReportSettings(),
    )


@pytest.fixture
def default_strategy() -> ProfitRankStrategy:
    """Default revenue/bonus strategy"""
    return ProfitRankStrategy()


@pytest.fixture
def single_seller_bundle() -> dict:
    """One seller, one product, one receipt"""
    return {
        "sellers": [{"id": "S1", "first_name": "Alice", "last_name": "Smith"}],
        "products": [{"sku": "P1", "purchase_price": 10}],
        "customers": [{"id": "C1"}],
        "purchase_records": [
            {
                "seller_id": "S1",
                "customer_id": "C1",
                "total_amount": 90,
                "items": [{"sku": "P1", "quantity": 2, "sale_price": 50, "discount": 0}],
            }
        ],
    }


@pytest.fixture
def sample_bundle() -> dict:
    """
    Three sellers:
    - S1: one receipt, profit 80
    - S2: two receipts, profit 84 (144 - 60, then 20 - 20)
    - S3: no receipts
    """
    return {
        "sellers": [
            {"id": "S1", "first_name": "Alice", "last_name": "Smith"},
            {"id": "S2", "first_name": "Bob", "last_name": "Jones"},
            {"id": "S3", "first_name": "Carol", "last_name": "White"},
        ],
        "products": [
            {"sku": "P1", "purchase_price": 10},
            {"sku": "P2", "purchase_price": 20},
            {"sku": "P3", "purchase_price": 5},
        ],
        "customers": [
            {"id": "C1", "first_name": "Dan", "last_name": "Brown"},
        ],
        "purchase_records": [
            {
                "receipt_id": "R1",
                "seller_id": "S1",
                "customer_id": "C1",
                "total_amount": 90,
                "items": [{"sku": "P1", "quantity": 2, "sale_price": 50, "discount": 0}],
            },
            {
                "receipt_id": "R2",
                "seller_id": "S2",
                "customer_id": "C1",
                "total_amount": 150,
                "items": [{"sku": "P2", "quantity": 3, "sale_price": 60, "discount": 20}],
            },
            {
                "receipt_id": "R3",
                "seller_id": "S2",
                "customer_id": "C1",
                "total_amount": 20,
                "items": [{"sku": "P3", "quantity": 4, "sale_price": 5, "discount": 0}],
            },
        ],
    }


@pytest.fixture
def sample_bundle_copy(sample_bundle) -> dict:
    """Deep copy for checking the pipeline leaves input untouched"""
    return copy.deepcopy(sample_bundle)
