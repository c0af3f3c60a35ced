"""Typed snapshot of every Salesfire setting for one scope.

Built by ``SalesfireConfig.get_store_settings``::

    settings = cfg.get_store_settings(store_id=7)
    settings.available      # bool
    settings.brand_code     # normalized attribute code
    settings.model_dump()   # plain dict, e.g. for a feed job payload
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class StoreSettings(BaseModel):
    """Read-only view of the accessor values at one scope."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    store_id: Optional[Any] = None
    enabled: bool = False
    site_id: str = ""
    available: bool = False
    feed_enabled: bool = False
    default_brand: str = ""
    brand_code: str = ""
    gender_code: str = ""
    age_group_code: str = ""
    colour_code: str = ""
    attribute_codes: list[str] = Field(default_factory=list)
