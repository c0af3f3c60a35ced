"""Collaborator protocols and in-memory implementations for tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping, Protocol, runtime_checkable

from ._types import Scope, SettingPath


@runtime_checkable
class ScopedConfigRepository(Protocol):
    """Abstraction over the host's scoped key-value config store.

    ``get_value`` returns the configured value or ``None``. A store-scoped
    lookup is expected to fall back to the default scope on its own, the way
    the host platform does.
    """

    def get_value(
        self,
        path: str,
        scope: Scope = Scope.DEFAULT,
        scope_id: Any = None,
    ) -> Any:
        ...


@runtime_checkable
class StoreRepository(Protocol):
    """Abstraction over the host's store manager."""

    def is_single_store_mode(self) -> bool:
        ...

    def get_stores(self) -> Iterable[Any]:
        ...


def _key(path: Any) -> str:
    """Return the plain string form of a setting path."""
    return path.value if isinstance(path, SettingPath) else str(path)


@dataclass(frozen=True)
class Store:
    """Minimal store record; only ``id`` is read by the accessor."""

    id: Hashable


class FakeScopedConfigRepository:
    """Dict-backed scoped config store for tests.

    >>> repo = FakeScopedConfigRepository(
    ...     default={"general.siteId": "abc"},
    ...     stores={7: {"general.siteId": "xyz"}},
    ... )
    >>> repo.get_value("general.siteId", Scope.STORE, 7)
    'xyz'
    >>> repo.get_value("general.siteId", Scope.STORE, 8)
    'abc'
    """

    def __init__(
        self,
        default: Mapping[str, Any] | None = None,
        stores: Mapping[Hashable, Mapping[str, Any]] | None = None,
    ) -> None:
        self._default: dict[str, Any] = dict(default or {})
        self._stores: dict[Hashable, dict[str, Any]] = {
            store_id: dict(values) for store_id, values in (stores or {}).items()
        }

    # -- Protocol methods ---------------------------------------------------

    def get_value(
        self,
        path: str,
        scope: Scope = Scope.DEFAULT,
        scope_id: Any = None,
    ) -> Any:
        path = _key(path)
        if scope == Scope.STORE:
            store_values = self._stores.get(scope_id, {})
            if path in store_values:
                return store_values[path]
        return self._default.get(path)

    # -- Mutation helpers for test setup ------------------------------------

    def set_default(self, path: str, value: Any) -> None:
        self._default[_key(path)] = value

    def set_store(self, store_id: Hashable, path: str, value: Any) -> None:
        self._stores.setdefault(store_id, {})[_key(path)] = value


class FakeStoreRepository:
    """List-backed store manager for tests.

    >>> FakeStoreRepository(store_ids=[1, 2]).get_stores()
    [Store(id=1), Store(id=2)]
    """

    def __init__(
        self,
        store_ids: Iterable[Hashable] = (),
        single_store_mode: bool = False,
    ) -> None:
        self._stores = [Store(id=store_id) for store_id in store_ids]
        self.single_store_mode = single_store_mode

    def is_single_store_mode(self) -> bool:
        return self.single_store_mode

    def get_stores(self) -> list[Store]:
        return list(self._stores)

    def add_store(self, store_id: Hashable) -> Store:
        store = Store(id=store_id)
        self._stores.append(store)
        return store
