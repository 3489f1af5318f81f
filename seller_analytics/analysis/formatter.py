"""
Report formatting.

Accumulation runs in full float precision; rounding happens only here.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, List

from seller_analytics.domain.models import SellerReport, SellerStat

# Every double at or above this magnitude is a whole number
FRACTIONLESS_FLOOR = 2.0 ** 52


def round_half_away(value: float, places: int = 2) -> float:
    """
    Round half away from zero at `places` decimals.
    
    Works on the shortest decimal repr of the float, so 1.005 rounds to
    1.01 and -2.675 to -2.68. Float subclasses (numpy scalars) are
    accepted. Non-finite values and magnitudes of 2**52 and above carry
    no fractional part and are returned as plain floats.
    """
    value = float(value)
    if not math.isfinite(value) or abs(value) >= FRACTIONLESS_FLOOR:
        return value
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # 17 significant digits cover any double below the floor
        ctx.prec = max(ctx.prec, 17 + places)
        return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_reports(ranked: Iterable[SellerStat], places: int = 2) -> List[SellerReport]:
    """Project ranked seller stats into the output report shape"""
    return [
        SellerReport(
            seller_id=seller.id,
            name=seller.name,
            revenue=round_half_away(seller.revenue, places),
            profit=round_half_away(seller.profit, places),
            sales_count=seller.sales_count,
            top_products=list(seller.top_products),
            bonus=round_half_away(seller.bonus, places),
        )
        for seller in ranked
    ]
