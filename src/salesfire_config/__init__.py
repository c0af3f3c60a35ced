"""Typed access to the Salesfire extension's scoped configuration.

Reads enable flags, the site id and feed attribute codes from a host's
scoped config store, with per-store overrides, without depending on a
running host platform.
"""

from ._accessor import ATTRIBUTE_CODES_SOURCE, SalesfireConfig
from ._casters import split_codes, strip_code
from ._repository import (
    FakeScopedConfigRepository,
    FakeStoreRepository,
    ScopedConfigRepository,
    Store,
    StoreRepository,
)
from ._settings import StoreSettings
from ._testing import make_config
from ._types import ConfigError, Scope, SettingPath, StoreDescriptor, UnknownSettingError
from ._version import __version__

__all__ = [
    "__version__",
    # Core
    "SalesfireConfig",
    "SettingPath",
    "Scope",
    "StoreDescriptor",
    "StoreSettings",
    "ATTRIBUTE_CODES_SOURCE",
    "ConfigError",
    "UnknownSettingError",
    # Helpers
    "strip_code",
    "split_codes",
    # Collaborators
    "ScopedConfigRepository",
    "StoreRepository",
    "Store",
    # Testing
    "make_config",
    "FakeScopedConfigRepository",
    "FakeStoreRepository",
]
