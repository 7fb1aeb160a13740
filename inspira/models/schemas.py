"""Pydantic schemas for quotes.

QuoteRecord is the plain snapshot handed out by the store; nothing that
leaves a database session is a live ORM object. QuoteFields validates the
partial updates coming from input fields before they reach the store.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class QuoteField(str, Enum):
    """Editable text inputs of the detail view."""

    TEXT = "text"
    CREATOR = "creator"
    DESCRIPTION_OF_HOW_FOUND = "description_of_how_found"
    INTERPRETATION = "interpretation"


TEXT_FIELDS = tuple(f.value for f in QuoteField)


class QuoteRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    text: Optional[str] = None
    creator: Optional[str] = None
    description_of_how_found: Optional[str] = None
    interpretation: Optional[str] = None
    image_data: Optional[bytes] = Field(default=None, repr=False)
    date_created: datetime

    def field_values(self) -> Dict[str, Optional[str]]:
        """Current values of the four text inputs keyed by field name."""
        return {name: getattr(self, name) for name in TEXT_FIELDS}


class QuoteFields(BaseModel):
    """Partial update payload. Only fields that were explicitly set are written."""

    model_config = ConfigDict(extra="forbid")

    text: Optional[str] = None
    creator: Optional[str] = None
    description_of_how_found: Optional[str] = None
    interpretation: Optional[str] = None
    image_data: Optional[bytes] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
