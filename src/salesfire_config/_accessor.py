"""The Salesfire configuration accessor.

Wraps a scoped config store and a store manager with typed getters::

    cfg = SalesfireConfig(config_repo, store_repo)
    cfg.is_available(store_id=7)   # site id set AND enabled at store 7
    cfg.get_brand_code()           # normalized attribute code, default scope
    cfg.list_store_descriptors()   # [StoreDescriptor(store_id=..., site_id=...)]
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ._casters import _cast_flag, _to_text, split_codes, strip_code
from ._repository import ScopedConfigRepository, StoreRepository
from ._settings import StoreSettings
from ._types import Scope, SettingPath, StoreDescriptor, UnknownSettingError
from ._version import __version__

logger = logging.getLogger(__name__)

# The attribute-code list has always been read from the colour-code path,
# not from ``feed.attributeCodes``. Kept as observed until the intended
# source is confirmed.
ATTRIBUTE_CODES_SOURCE = SettingPath.FEED_COLOUR_CODE


class SalesfireConfig:
    """Typed, normalized access to the Salesfire settings.

    Every getter takes an optional ``store_id``. A falsy id (``None``, ``0``,
    ``""``) reads the default scope; anything else reads that store's scope.
    """

    def __init__(
        self,
        config_repo: ScopedConfigRepository,
        store_repo: StoreRepository,
    ) -> None:
        self.config_repo = config_repo
        self.store_repo = store_repo

    def get_version(self) -> str:
        """What version of the extension we are using."""
        return __version__

    def strip_code(self, code: Any) -> str:
        return strip_code(code)

    # -- Stores -------------------------------------------------------------

    def is_single_store_mode(self) -> bool:
        return bool(self.store_repo.is_single_store_mode())

    def list_store_descriptors(self) -> list[StoreDescriptor]:
        """Return one descriptor per store, each with its own site id.

        In single-store mode a single descriptor with ``store_id=None`` and
        the default-scope site id is returned.
        """
        if self.is_single_store_mode():
            logger.debug("Single-store mode; using default scope for site id")
            return [StoreDescriptor(store_id=None, site_id=self.get_site_id(None))]

        descriptors = []
        for store in self.store_repo.get_stores():
            store_id = store.id
            descriptors.append(
                StoreDescriptor(store_id=store_id, site_id=self.get_site_id(store_id))
            )
        logger.debug("Enumerated %d store(s)", len(descriptors))
        return descriptors

    # -- General ------------------------------------------------------------

    def is_available(self, store_id: Optional[Any] = None) -> bool:
        """Whether Salesfire is ready to use: site id set and enabled."""
        return bool(self.get_site_id(store_id)) and self.is_enabled(store_id)

    def is_enabled(self, store_id: Optional[Any] = None) -> bool:
        return _cast_flag(self.get_value(SettingPath.GENERAL_ENABLED, store_id))

    def get_site_id(self, store_id: Optional[Any] = None) -> str:
        return self.get_value(SettingPath.GENERAL_SITE_ID, store_id)

    # -- Feed ---------------------------------------------------------------

    def is_feed_enabled(self, store_id: Optional[Any] = None) -> bool:
        return _cast_flag(self.get_value(SettingPath.FEED_ENABLED, store_id))

    def get_default_brand(self, store_id: Optional[Any] = None) -> str:
        return self.get_value(SettingPath.FEED_DEFAULT_BRAND, store_id)

    def get_brand_code(self, store_id: Optional[Any] = None) -> str:
        """Product brand attribute code."""
        return strip_code(self.get_value(SettingPath.FEED_BRAND_CODE, store_id))

    def get_gender_code(self, store_id: Optional[Any] = None) -> str:
        """Product gender attribute code."""
        return strip_code(self.get_value(SettingPath.FEED_GENDER_CODE, store_id))

    def get_age_group_code(self, store_id: Optional[Any] = None) -> str:
        """Product age group attribute code."""
        return strip_code(self.get_value(SettingPath.FEED_AGE_GROUP_CODE, store_id))

    def get_colour_code(self, store_id: Optional[Any] = None) -> str:
        """Product colour attribute code."""
        return strip_code(self.get_value(SettingPath.FEED_COLOUR_CODE, store_id))

    def get_attribute_codes(self, store_id: Optional[Any] = None) -> list[str]:
        """List of additional attribute codes.

        Reads ``ATTRIBUTE_CODES_SOURCE``. Empty parts are kept, so an unset
        value gives ``[""]``.
        """
        return split_codes(self.get_value(ATTRIBUTE_CODES_SOURCE, store_id))

    # -- Snapshots ----------------------------------------------------------

    def get_store_settings(self, store_id: Optional[Any] = None) -> StoreSettings:
        """Collect every setting for one scope into a ``StoreSettings``."""
        return StoreSettings(
            store_id=store_id or None,
            enabled=self.is_enabled(store_id),
            site_id=self.get_site_id(store_id),
            available=self.is_available(store_id),
            feed_enabled=self.is_feed_enabled(store_id),
            default_brand=self.get_default_brand(store_id),
            brand_code=self.get_brand_code(store_id),
            gender_code=self.get_gender_code(store_id),
            age_group_code=self.get_age_group_code(store_id),
            colour_code=self.get_colour_code(store_id),
            attribute_codes=self.get_attribute_codes(store_id),
        )

    def list_store_settings(self) -> list[StoreSettings]:
        return [
            self.get_store_settings(descriptor.store_id)
            for descriptor in self.list_store_descriptors()
        ]

    # -- Resolution ---------------------------------------------------------

    def get_value(self, setting: SettingPath | str, store_id: Optional[Any] = None) -> str:
        """Read a setting at store scope when ``store_id`` is truthy, else default.

        Missing values resolve to ``""``; the result is always trimmed.

        Raises:
            UnknownSettingError: *setting* is not a known path.
        """
        try:
            path = SettingPath(setting)
        except ValueError:
            raise UnknownSettingError(str(setting)) from None

        if store_id:
            raw = self.config_repo.get_value(path.value, Scope.STORE, store_id)
        else:
            raw = self.config_repo.get_value(path.value)

        value = _to_text(raw)
        if not value:
            logger.debug("Setting %s is empty (store_id=%r)", path.value, store_id)
        return value
