"""
Data Ingestion Module
"""
from .loader import load_bundle

__all__ = ["load_bundle"]
