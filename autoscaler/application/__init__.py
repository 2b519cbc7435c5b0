# Application layer: registry contract, reference registry and the Decider reconciler.

from autoscaler.application.decider_reconciler import DeciderReconciler
from autoscaler.application.deciders import Deciders, Watcher
from autoscaler.application.exceptions import (
    DeciderConflictError,
    DeciderNotFoundError,
    InvalidDeciderSpecError,
    RegistryError,
    RegistryUnavailableError,
)
from autoscaler.application.in_memory_deciders import InMemoryDeciders

__all__ = [
    "DeciderReconciler",
    "Deciders",
    "Watcher",
    "DeciderConflictError",
    "DeciderNotFoundError",
    "InvalidDeciderSpecError",
    "RegistryError",
    "RegistryUnavailableError",
    "InMemoryDeciders",
]
