"""Data schemas and validation."""
from .schemas import QuoteField, QuoteFields, QuoteRecord, TEXT_FIELDS

__all__ = [
    "QuoteField",
    "QuoteFields",
    "QuoteRecord",
    "TEXT_FIELDS",
]
