"""
Sales Analysis Module
"""
from .errors import (
    SalesAnalysisError,
    InvalidInputError,
    MissingConfigurationError,
    InvalidStrategyTypeError,
    UnresolvedReferenceError,
)
from .strategies import ReportStrategy, ProfitRankStrategy, FunctionStrategy
from .pipeline import SalesAnalyzer, analyze_sales_data

__all__ = [
    "SalesAnalysisError",
    "InvalidInputError",
    "MissingConfigurationError",
    "InvalidStrategyTypeError",
    "UnresolvedReferenceError",
    "ReportStrategy",
    "ProfitRankStrategy",
    "FunctionStrategy",
    "SalesAnalyzer",
    "analyze_sales_data",
]
