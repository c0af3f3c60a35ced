"""Foundation types for the Salesfire config accessor.

Provides the setting-path table, scope constants, the store descriptor
record and the exception classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# ---------------------------------------------------------------------------
# Setting paths
# ---------------------------------------------------------------------------


class SettingPath(str, Enum):
    """Config paths used throughout the accessor."""

    GENERAL_ENABLED = "general.isEnabled"
    GENERAL_SITE_ID = "general.siteId"
    FEED_ENABLED = "feed.isEnabled"
    FEED_DEFAULT_BRAND = "feed.defaultBrand"
    FEED_BRAND_CODE = "feed.brandCode"
    FEED_GENDER_CODE = "feed.genderCode"
    FEED_COLOUR_CODE = "feed.colourCode"
    FEED_AGE_GROUP_CODE = "feed.ageGroupCode"
    FEED_ATTRIBUTE_CODES = "feed.attributeCodes"


# ---------------------------------------------------------------------------
# Scope
# ---------------------------------------------------------------------------


class Scope(str, Enum):
    """Resolution level for a config lookup."""

    DEFAULT = "default"
    STORE = "store"


# ---------------------------------------------------------------------------
# Store descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StoreDescriptor:
    """A store paired with the site id configured for it.

    Attributes:
        store_id: Store identifier, or ``None`` in single-store mode.
        site_id: Site id resolved at that store's scope (``""`` when unset).
    """

    store_id: Optional[Any]
    site_id: str


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Base exception for config-related errors."""


class UnknownSettingError(ConfigError):
    """Raised when a setting path is not part of the known path table."""

    def __init__(self, setting: str) -> None:
        self.setting = setting
        super().__init__(f"Unknown setting path '{setting}'.")
