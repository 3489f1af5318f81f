"""
Sales analysis error taxonomy.

Every failure aborts the whole computation; nothing here is retried.
"""

from typing import Optional


class SalesAnalysisError(Exception):
    """Base class for all analysis failures"""


class InvalidInputError(SalesAnalysisError):
    """Input bundle is missing, malformed or has an empty collection"""
    
    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class MissingConfigurationError(SalesAnalysisError):
    """A required calculation strategy was not supplied"""
    
    def __init__(self, name: str):
        super().__init__(f"Missing required strategy: {name}")
        self.name = name


class InvalidStrategyTypeError(SalesAnalysisError):
    """A supplied strategy is not callable"""
    
    def __init__(self, name: str, actual_type: str):
        super().__init__(f"Strategy '{name}' must be callable, got {actual_type}")
        self.name = name
        self.actual_type = actual_type


class UnresolvedReferenceError(SalesAnalysisError):
    """A purchase record points at a seller or SKU absent from the catalogs"""
    
    def __init__(self, kind: str, key: str, record_index: Optional[int] = None):
        location = f" (purchase record #{record_index})" if record_index is not None else ""
        super().__init__(f"Unknown {kind} '{key}'{location}")
        self.kind = kind
        self.key = key
        self.record_index = record_index
