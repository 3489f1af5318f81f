"""
Input Validation

Structural checks on the input bundle and the strategy configuration.
Only presence and type are checked; values are not range-validated.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Tuple

import structlog
from pydantic import ValidationError

from seller_analytics.domain.models import DataBundle
from .errors import InvalidInputError, InvalidStrategyTypeError, MissingConfigurationError
from .strategies import FunctionStrategy, ReportStrategy

logger = structlog.get_logger(__name__)

REQUIRED_COLLECTIONS: Tuple[str, ...] = ("sellers", "products", "customers", "purchase_records")
REQUIRED_STRATEGIES: Tuple[str, ...] = ("calculate_revenue", "calculate_bonus")


def _lookup(source: Any, name: str) -> Any:
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _is_non_empty_sequence(value: Any) -> bool:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        return False
    return len(value) > 0


def validate_bundle(data: Any) -> DataBundle:
    """
    Check the input bundle shape and parse it into domain models.
    
    Args:
        data: Mapping (e.g. decoded JSON) or DataBundle
        
    Returns:
        Parsed DataBundle
        
    Raises:
        InvalidInputError: bundle missing, a collection missing/empty,
            or a record lacking required fields
    """
    if data is None:
        raise InvalidInputError("Input data bundle is missing")
    if not isinstance(data, (Mapping, DataBundle)):
        raise InvalidInputError(
            f"Input data bundle must be a mapping, got {type(data).__name__}"
        )
    
    for name in REQUIRED_COLLECTIONS:
        if not _is_non_empty_sequence(_lookup(data, name)):
            logger.warning("Invalid input collection", collection=name)
            raise InvalidInputError(f"'{name}' must be a non-empty sequence", field=name)
    
    if isinstance(data, DataBundle):
        return data
    
    try:
        return DataBundle.model_validate(data)
    except ValidationError as e:
        logger.warning("Input bundle failed parsing", error_count=e.error_count())
        raise InvalidInputError(f"Input data bundle is malformed: {e}") from e


def resolve_strategy(config: Any) -> ReportStrategy:
    """
    Check the strategy configuration and return it as a ReportStrategy.
    
    Accepts a ReportStrategy, any object exposing `calculate_revenue` and
    `calculate_bonus`, or a mapping with those keys. Presence of both is
    checked before either is checked for callability.
    """
    if config is None:
        raise MissingConfigurationError(REQUIRED_STRATEGIES[0])
    
    funcs = {name: _lookup(config, name) for name in REQUIRED_STRATEGIES}
    
    for name, func in funcs.items():
        if func is None:
            raise MissingConfigurationError(name)
    
    for name, func in funcs.items():
        if not callable(func):
            raise InvalidStrategyTypeError(name, type(func).__name__)
    
    if isinstance(config, ReportStrategy):
        return config
    return FunctionStrategy(funcs["calculate_revenue"], funcs["calculate_bonus"])
