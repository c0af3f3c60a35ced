"""Test utilities for the Salesfire config accessor."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping

from ._accessor import SalesfireConfig
from ._repository import FakeScopedConfigRepository, FakeStoreRepository


def make_config(
    *,
    default: Mapping[str, Any] | None = None,
    stores: Mapping[Hashable, Mapping[str, Any]] | None = None,
    store_ids: Iterable[Hashable] | None = None,
    single_store_mode: bool = False,
) -> SalesfireConfig:
    """Build a ``SalesfireConfig`` over in-memory fakes.

    ``store_ids`` defaults to the keys of ``stores``. The fakes stay
    reachable as ``cfg.config_repo`` / ``cfg.store_repo`` for mutation::

        cfg = make_config(default={"general.siteId": "abc"}, stores={7: {}})
        cfg.config_repo.set_store(7, "general.isEnabled", "1")
    """
    if store_ids is None:
        store_ids = list((stores or {}).keys())
    return SalesfireConfig(
        FakeScopedConfigRepository(default=default, stores=stores),
        FakeStoreRepository(store_ids=store_ids, single_store_mode=single_store_mode),
    )
