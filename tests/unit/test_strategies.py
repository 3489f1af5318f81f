"""
Unit Tests - Calculation Strategies
"""
import pytest

from seller_analytics.analysis import FunctionStrategy, ProfitRankStrategy
from seller_analytics.config import Settings
from seller_analytics.config.settings import ReportSettings
from seller_analytics.domain.models import Item, Product, SellerStat


def _stat(profit: float) -> SellerStat:
    return SellerStat(id="S", name="Test Seller", profit=profit)


class TestProfitRankRevenue:
    """Tests for default revenue formula"""
    
    def test_half_discount(self, default_strategy):
        """Test 100 x 2 at 50% off"""
        item = Item(sku="P1", quantity=2, sale_price=100, discount=50)
        product = Product(sku="P1", purchase_price=1)
        
        assert default_strategy.calculate_revenue(item, product) == 100
    
    def test_no_discount(self, default_strategy):
        """Test undiscounted revenue"""
        item = Item(sku="P1", quantity=3, sale_price=25)
        product = Product(sku="P1", purchase_price=1)
        
        assert default_strategy.calculate_revenue(item, product) == 75


class TestProfitRankBonus:
    """Tests for default bonus tiers"""
    
    def test_single_seller_gets_top_rate(self, default_strategy):
        """Test lone seller is both first and last; first-place tier wins"""
        assert default_strategy.calculate_bonus(0, 1, _stat(80)) == pytest.approx(12)
    
    def test_first_place(self, default_strategy):
        """Test 15% for first"""
        assert default_strategy.calculate_bonus(0, 5, _stat(1000)) == pytest.approx(150)
    
    @pytest.mark.parametrize("index", [1, 2])
    def test_podium(self, default_strategy, index):
        """Test 10% for second and third"""
        assert default_strategy.calculate_bonus(index, 5, _stat(1000)) == pytest.approx(100)
    
    def test_middle(self, default_strategy):
        """Test 5% for non-podium, non-last"""
        assert default_strategy.calculate_bonus(3, 5, _stat(1000)) == pytest.approx(50)
    
    def test_last_place(self, default_strategy):
        """Test nothing for last"""
        assert default_strategy.calculate_bonus(4, 5, _stat(1000)) == 0
    
    def test_last_of_three_is_podium(self, default_strategy):
        """Test podium tier is checked before last place"""
        assert default_strategy.calculate_bonus(2, 3, _stat(1000)) == pytest.approx(100)
    
    def test_from_settings(self):
        """Test rates read from settings"""
        settings = Settings(report=ReportSettings(top_bonus_rate=0.2, standard_bonus_rate=0.01))
        strategy = ProfitRankStrategy.from_settings(settings)
        
        assert strategy.top_rate == 0.2
        assert strategy.podium_rate == 0.10
        assert strategy.standard_rate == 0.01


class TestFunctionStrategy:
    """Tests for callable adapter"""
    
    def test_delegates(self):
        """Test calls are forwarded with their arguments"""
        calls = []
        
        def revenue(item, product):
            calls.append(("revenue", item.sku, product.sku))
            return 1.5
        
        def bonus(index, total, seller):
            calls.append(("bonus", index, total, seller.id))
            return 2.5
        
        strategy = FunctionStrategy(revenue, bonus)
        item = Item(sku="P1", quantity=1, sale_price=1)
        product = Product(sku="P1", purchase_price=1)
        
        assert strategy.calculate_revenue(item, product) == 1.5
        assert strategy.calculate_bonus(0, 2, _stat(0)) == 2.5
        assert calls == [("revenue", "P1", "P1"), ("bonus", 0, 2, "S")]
