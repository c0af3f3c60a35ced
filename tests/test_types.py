"""Tests for _types.py — SettingPath, Scope, StoreDescriptor and exceptions."""

import dataclasses

import pytest

from salesfire_config._types import (
    ConfigError,
    Scope,
    SettingPath,
    StoreDescriptor,
    UnknownSettingError,
)


class TestSettingPath:
    def test_fixed_table(self):
        assert {p.value for p in SettingPath} == {
            "general.isEnabled",
            "general.siteId",
            "feed.isEnabled",
            "feed.defaultBrand",
            "feed.brandCode",
            "feed.genderCode",
            "feed.colourCode",
            "feed.ageGroupCode",
            "feed.attributeCodes",
        }

    def test_lookup_by_value(self):
        assert SettingPath("general.siteId") is SettingPath.GENERAL_SITE_ID

    def test_compares_equal_to_string(self):
        assert SettingPath.FEED_ENABLED == "feed.isEnabled"


class TestScope:
    def test_values(self):
        assert Scope.DEFAULT.value == "default"
        assert Scope.STORE.value == "store"


class TestStoreDescriptor:
    def test_fields(self):
        descriptor = StoreDescriptor(store_id=3, site_id="abc")
        assert descriptor.store_id == 3
        assert descriptor.site_id == "abc"

    def test_frozen(self):
        descriptor = StoreDescriptor(store_id=None, site_id="abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.site_id = "other"  # type: ignore[misc]

    def test_equality(self):
        assert StoreDescriptor(None, "a") == StoreDescriptor(store_id=None, site_id="a")


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigError, Exception)
        assert issubclass(UnknownSettingError, ConfigError)

    def test_unknown_setting_message(self):
        err = UnknownSettingError("feed.nope")
        assert err.setting == "feed.nope"
        assert "feed.nope" in str(err)
