"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Call get_settings() in entrypoints
(gui, CLI) so .env is respected.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

# What happens when the last quote in the list is deleted
EMPTY_LIST_NEW_DRAFT = "new_draft"
EMPTY_LIST_LEAVE_EMPTY = "leave_empty"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(PROJECT_ROOT, "data", "inspira.db"),
    )

    # Draft handling
    empty_list_policy: str = os.getenv(
        "INSPIRA_EMPTY_LIST_POLICY", EMPTY_LIST_NEW_DRAFT
    )
    image_counts_as_content: bool = _env_flag("INSPIRA_IMAGE_COUNTS_AS_CONTENT")
    strict_invariants: bool = _env_flag("INSPIRA_STRICT_INVARIANTS")

    # Images
    image_max_size: int = int(os.getenv("INSPIRA_IMAGE_MAX_SIZE", "1024"))

    # Logging
    log_level: str = os.getenv("INSPIRA_LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        if self.empty_list_policy not in (EMPTY_LIST_NEW_DRAFT, EMPTY_LIST_LEAVE_EMPTY):
            raise ValueError(
                f"Unknown empty list policy: {self.empty_list_policy!r} "
                f"(expected {EMPTY_LIST_NEW_DRAFT!r} or {EMPTY_LIST_LEAVE_EMPTY!r})"
            )


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
