"""Registry of available synchronous ratings-store backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from db import DEFAULT_DB_URL
from domain.ratings.protocol import RatingsStore
from repositories.ratings.memory import InMemoryRatingsStore, LockedRatingsStore
from repositories.ratings.sql import SqlRatingsStore

CreateStoreFn = Callable[[str], RatingsStore]


@dataclass(frozen=True)
class StoreDescriptor:
    """Everything required to build one store backend."""

    backend: str
    description: str
    persistent: bool
    create_store: CreateStoreFn


_REGISTRY: dict[str, StoreDescriptor] = {}


def register(descriptor: StoreDescriptor) -> None:
    """Register one store descriptor."""
    key = descriptor.backend.lower()
    if key in _REGISTRY:
        raise ValueError(f"Duplicate store descriptor registration for backend={key}")
    _REGISTRY[key] = descriptor


def get_all() -> list[StoreDescriptor]:
    """Return all registered descriptors in deterministic order."""
    return [_REGISTRY[key] for key in sorted(_REGISTRY)]


def get(backend: str) -> StoreDescriptor:
    """Get one registered descriptor by backend name."""
    try:
        return _REGISTRY[backend.lower()]
    except KeyError as exc:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(
            f"No store backend registered for {backend}. Available: {available}"
        ) from exc


def create_store(backend: str, *, db_url: str = DEFAULT_DB_URL) -> RatingsStore:
    """Build a store for ``backend``; ``db_url`` is ignored by in-memory backends."""
    return get(backend).create_store(db_url)


# (backend, description, persistent, factory)
_BACKENDS: list[tuple[str, str, bool, CreateStoreFn]] = [
    ("memory", "Single-owner dict store.", False, lambda _db_url: InMemoryRatingsStore()),
    ("locked", "Dict store guarded by a reentrant lock.", False, lambda _db_url: LockedRatingsStore()),
    ("sql", "SQLAlchemy store over the player_ratings table.", True, SqlRatingsStore.from_url),
]


def _register_defaults() -> None:
    if _REGISTRY:
        return
    for backend, description, persistent, factory in _BACKENDS:
        register(
            StoreDescriptor(
                backend=backend,
                description=description,
                persistent=persistent,
                create_store=factory,
            )
        )


_register_defaults()

__all__ = [
    "StoreDescriptor",
    "create_store",
    "get",
    "get_all",
    "register",
]
