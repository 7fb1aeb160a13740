"""Application state container.

This is a small, import-safe state object used by the GUI layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class QuoteRow:
    """One row of the master list."""

    quote_id: str
    title: str
    creator: str = ""
    has_image: bool = False


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    rows: List[QuoteRow] = field(default_factory=list)
    displayed_quote_id: Optional[str] = None
    detail_fields: Dict[str, str] = field(default_factory=dict)
    validation_message: Optional[str] = None
    last_error: Optional[str] = None
