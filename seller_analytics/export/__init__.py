"""
Report Export Module
"""
from .writer import ReportFormat, ReportWriter, reports_to_frame, top_products_frame

__all__ = [
    "ReportFormat",
    "ReportWriter",
    "reports_to_frame",
    "top_products_frame",
]
