"""Deciders registry protocol. The reconciler depends on this; implementations store and notify."""

from typing import Callable, Protocol

from autoscaler.domain.models.decider import Decider

Watcher = Callable[[str], None]


class Deciders(Protocol):
    """
    Custodial store of Deciders keyed by (namespace, name).
    Watchers receive "namespace/name" whenever a Decider is created, updated or deleted;
    delivery is at-least-once and same-key events arrive in order.
    """

    async def get(self, namespace: str, name: str) -> Decider:
        """Return the current Decider. Raises DeciderNotFoundError if absent."""
        ...

    async def create(self, decider: Decider) -> Decider:
        """Store a new Decider, returning it with registry-populated fields. Raises DeciderConflictError if present."""
        ...

    async def update(self, decider: Decider) -> Decider:
        """Replace the stored Decider. Raises DeciderNotFoundError or DeciderConflictError on version mismatch."""
        ...

    async def delete(self, namespace: str, name: str) -> None:
        """Remove the Decider. Raises DeciderNotFoundError if absent."""
        ...

    def watch(self, watcher: Watcher) -> None:
        """Register a function to call with the key of each changed Decider."""
        ...
