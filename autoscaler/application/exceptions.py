"""Decider registry exceptions. Propagated to the reconciler unchanged in kind."""


class RegistryError(Exception):
    """Base for all registry errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DeciderNotFoundError(RegistryError):
    """Raised by get/update/delete when no Decider exists for the key."""


class DeciderConflictError(RegistryError):
    """Raised by create when the key exists, or by update on resource version mismatch."""


class InvalidDeciderSpecError(RegistryError):
    """Raised when the registry rejects the Decider payload."""


class RegistryUnavailableError(RegistryError):
    """Raised when the backing store cannot be reached. Transient; callers may retry."""
