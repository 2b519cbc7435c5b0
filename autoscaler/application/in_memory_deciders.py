"""In-memory Deciders registry. Per-key locking, optimistic concurrency on resource_version."""

import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncIterator

from autoscaler.application.deciders import Watcher
from autoscaler.application.exceptions import (
    DeciderConflictError,
    DeciderNotFoundError,
    InvalidDeciderSpecError,
)
from autoscaler.domain.models.decider import Decider

logger = logging.getLogger(__name__)


def _key(namespace: str, name: str) -> str:
    return f"{namespace}/{name}"


def _validate(decider: Decider) -> None:
    """Reject payloads the control loop cannot run with. Raises InvalidDeciderSpecError."""
    meta = decider.metadata
    if not meta.namespace or not meta.name:
        raise InvalidDeciderSpecError("Decider metadata must carry namespace and name")
    spec = decider.spec
    if not spec.service_name:
        raise InvalidDeciderSpecError(f"Decider {meta.key}: service_name must not be empty")
    if spec.tick_interval <= timedelta(0):
        raise InvalidDeciderSpecError(f"Decider {meta.key}: tick_interval must be positive")
    if spec.max_scale_up_rate <= 0:
        raise InvalidDeciderSpecError(f"Decider {meta.key}: max_scale_up_rate must be positive")


class InMemoryDeciders:
    """
    Deciders held in process memory. For tests or single-node control planes.
    Stored and returned Deciders are deep copies; callers never share state with the store.
    Operations on one key are serialized; distinct keys proceed independently.
    """

    def __init__(self) -> None:
        self._store: dict[str, Decider] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}
        self._watchers: list[Watcher] = []

    @asynccontextmanager
    async def _locked(self, key: str) -> AsyncIterator[None]:
        """Hold the key's lock. The lock is dropped once no caller uses it and the key is gone."""
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[key] -= 1
            if self._lock_users[key] == 0:
                del self._lock_users[key]
                if key not in self._store:
                    del self._locks[key]

    def _notify(self, key: str) -> None:
        for watcher in list(self._watchers):
            try:
                watcher(key)
            except Exception:
                logger.exception("Decider watcher failed for %s", key)

    async def get(self, namespace: str, name: str) -> Decider:
        key = _key(namespace, name)
        async with self._locked(key):
            stored = self._store.get(key)
            if stored is None:
                raise DeciderNotFoundError(f"Decider not found: {key}")
            return stored.model_copy(deep=True)

    async def create(self, decider: Decider) -> Decider:
        _validate(decider)
        key = decider.key
        async with self._locked(key):
            if key in self._store:
                raise DeciderConflictError(f"Decider already exists: {key}")
            stored = decider.model_copy(deep=True)
            stored.metadata.uid = stored.metadata.uid or str(uuid.uuid4())
            stored.metadata.generation = 1
            stored.metadata.resource_version = "1"
            self._store[key] = stored
            self._notify(key)
            return stored.model_copy(deep=True)

    async def update(self, decider: Decider) -> Decider:
        _validate(decider)
        key = decider.key
        async with self._locked(key):
            current = self._store.get(key)
            if current is None:
                raise DeciderNotFoundError(f"Decider not found: {key}")
            expected = decider.metadata.resource_version
            if expected and expected != current.metadata.resource_version:
                raise DeciderConflictError(
                    f"Decider {key} was modified: resource_version {expected} "
                    f"!= {current.metadata.resource_version}"
                )
            stored = decider.model_copy(deep=True)
            stored.metadata.uid = current.metadata.uid
            stored.metadata.generation = current.metadata.generation
            if stored.spec != current.spec:
                stored.metadata.generation += 1
            stored.metadata.resource_version = str(int(current.metadata.resource_version) + 1)
            self._store[key] = stored
            self._notify(key)
            return stored.model_copy(deep=True)

    async def delete(self, namespace: str, name: str) -> None:
        key = _key(namespace, name)
        async with self._locked(key):
            if self._store.pop(key, None) is None:
                raise DeciderNotFoundError(f"Decider not found: {key}")
            self._notify(key)

    def watch(self, watcher: Watcher) -> None:
        self._watchers.append(watcher)
