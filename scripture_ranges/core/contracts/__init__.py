"""
Contract Validation Module

Валидация JSON записей диапазонов и наборов диапазонов.
"""

from .validators import (
    ContractValidator,
    RangeCollectionValidator,
    SchemaLoader,
    ScriptureRangeValidator,
    validate_range_collection,
    validate_scripture_range,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ScriptureRangeValidator",
    "RangeCollectionValidator",
    # Functions
    "validate_scripture_range",
    "validate_range_collection",
]
