"""Tests for _repository.py — protocols and in-memory fakes."""

from salesfire_config._repository import (
    FakeScopedConfigRepository,
    FakeStoreRepository,
    ScopedConfigRepository,
    Store,
    StoreRepository,
)
from salesfire_config._types import Scope, SettingPath


class TestProtocols:
    def test_fakes_satisfy_protocols(self):
        assert isinstance(FakeScopedConfigRepository(), ScopedConfigRepository)
        assert isinstance(FakeStoreRepository(), StoreRepository)


class TestFakeScopedConfigRepository:
    def test_default_scope(self):
        repo = FakeScopedConfigRepository(default={"general.siteId": "abc"})
        assert repo.get_value("general.siteId") == "abc"

    def test_missing_is_none(self):
        assert FakeScopedConfigRepository().get_value("general.siteId") is None

    def test_store_overrides_default(self):
        repo = FakeScopedConfigRepository(
            default={"general.siteId": "abc"},
            stores={7: {"general.siteId": "xyz"}},
        )
        assert repo.get_value("general.siteId", Scope.STORE, 7) == "xyz"
        assert repo.get_value("general.siteId") == "abc"

    def test_store_falls_back_to_default(self):
        repo = FakeScopedConfigRepository(default={"general.siteId": "abc"}, stores={7: {}})
        assert repo.get_value("general.siteId", Scope.STORE, 7) == "abc"
        assert repo.get_value("general.siteId", Scope.STORE, 99) == "abc"

    def test_accepts_setting_path_members(self):
        repo = FakeScopedConfigRepository()
        repo.set_default(SettingPath.FEED_BRAND_CODE, "brand")
        assert repo.get_value("feed.brandCode") == "brand"
        assert repo.get_value(SettingPath.FEED_BRAND_CODE) == "brand"

    def test_set_store(self):
        repo = FakeScopedConfigRepository()
        repo.set_store(2, "feed.isEnabled", "1")
        assert repo.get_value("feed.isEnabled", Scope.STORE, 2) == "1"
        assert repo.get_value("feed.isEnabled") is None

    def test_input_mappings_copied(self):
        default = {"general.siteId": "abc"}
        repo = FakeScopedConfigRepository(default=default)
        repo.set_default("general.siteId", "changed")
        assert default["general.siteId"] == "abc"


class TestFakeStoreRepository:
    def test_defaults(self):
        repo = FakeStoreRepository()
        assert repo.is_single_store_mode() is False
        assert repo.get_stores() == []

    def test_stores(self):
        repo = FakeStoreRepository(store_ids=[1, 2])
        assert [store.id for store in repo.get_stores()] == [1, 2]

    def test_add_store(self):
        repo = FakeStoreRepository()
        assert repo.add_store("eu") == Store(id="eu")
        assert repo.get_stores() == [Store(id="eu")]

    def test_single_store_mode(self):
        assert FakeStoreRepository(single_store_mode=True).is_single_store_mode() is True
