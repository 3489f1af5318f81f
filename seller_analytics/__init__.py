"""
Seller Performance Analytics

Aggregates raw sales transactions into a ranked per-seller report.
"""
from .analysis import analyze_sales_data, SalesAnalyzer

__version__ = "1.0.0"

__all__ = ["analyze_sales_data", "SalesAnalyzer", "__version__"]
