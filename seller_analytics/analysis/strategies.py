"""
Calculation Strategies

Pluggable revenue and bonus formulas consumed by the analysis pipeline.
Callers can swap formulas without touching the pipeline by passing any
ReportStrategy, or two plain callables wrapped in FunctionStrategy.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from seller_analytics.config import Settings, get_settings
from seller_analytics.domain.models import Item, Product, SellerStat

RevenueFunc = Callable[[Item, Product], float]
BonusFunc = Callable[[int, int, SellerStat], float]


class ReportStrategy(ABC):
    """Revenue/bonus calculation interface"""
    
    @abstractmethod
    def calculate_revenue(self, item: Item, product: Product) -> float:
        """Revenue of a single line item"""
    
    @abstractmethod
    def calculate_bonus(self, index: int, total: int, seller: SellerStat) -> float:
        """Bonus for the seller at zero-based rank `index` out of `total`"""


class ProfitRankStrategy(ReportStrategy):
    """
    Default strategy.
    
    Revenue is the discounted sale amount. Bonus is a share of profit
    picked by rank tier:
    
    - first place: top_rate
    - second and third: podium_rate
    - last place: nothing
    - everyone else: standard_rate
    
    Tiers are checked in that order, so a lone seller is both first and
    last and gets the first-place rate.
    """
    
    def __init__(
        self,
        top_rate: float = 0.15,
        podium_rate: float = 0.10,
        standard_rate: float = 0.05,
    ):
        self.top_rate = top_rate
        self.podium_rate = podium_rate
        self.standard_rate = standard_rate
    
    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProfitRankStrategy":
        report = (settings or get_settings()).report
        return cls(
            top_rate=report.top_bonus_rate,
            podium_rate=report.podium_bonus_rate,
            standard_rate=report.standard_bonus_rate,
        )
    
    def calculate_revenue(self, item: Item, product: Product) -> float:
        discount = 1 - item.discount / 100
        return item.sale_price * item.quantity * discount
    
    def calculate_bonus(self, index: int, total: int, seller: SellerStat) -> float:
        if index == 0:
            return seller.profit * self.top_rate
        elif index == 1 or index == 2:
            return seller.profit * self.podium_rate
        elif index == total - 1:
            return 0.0
        else:
            return seller.profit * self.standard_rate


class FunctionStrategy(ReportStrategy):
    """Adapts two plain callables to the ReportStrategy interface"""
    
    def __init__(self, calculate_revenue: RevenueFunc, calculate_bonus: BonusFunc):
        self._revenue = calculate_revenue
        self._bonus = calculate_bonus
    
    def calculate_revenue(self, item: Item, product: Product) -> float:
        return self._revenue(item, product)
    
    def calculate_bonus(self, index: int, total: int, seller: SellerStat) -> float:
        return self._bonus(index, total, seller)
