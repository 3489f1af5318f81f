"""
Input bundle loader.

Reads a JSON dataset holding sellers, products, customers and
purchase_records. Shape checks are left to the analysis validator.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog

from seller_analytics.analysis.errors import InvalidInputError

logger = structlog.get_logger(__name__)


def load_bundle(path: Union[str, Path], encoding: str = "utf-8") -> Dict[str, Any]:
    """
    Load a dataset bundle from a JSON file.
    
    Raises:
        FileNotFoundError: path does not exist
        InvalidInputError: file is not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")
    
    try:
        with open(path, "r", encoding=encoding) as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"Dataset {path} is not valid {encoding} JSON: {e}") from e
    
    if not isinstance(data, dict):
        raise InvalidInputError(f"Dataset {path} must contain a JSON object")
    
    logger.info(
        f"Loaded dataset from {path}",
        collections={k: len(v) for k, v in data.items() if isinstance(v, list)},
    )
    return data
