"""Errors raised by workout generation."""


class GenerationError(Exception):
    """Base class for routine generation failures."""


class EmptyCatalogError(GenerationError):
    """No catalog template survived the equipment/focus/kid-mode filter.

    The caller is expected to relax its constraints (for example clear the
    equipment filter) and try again.
    """

    def __init__(self, message: str = "No exercises match the requested constraints"):
        super().__init__(message)


class InsufficientCatalogError(GenerationError):
    """Fewer unique templates are available than the routine needs.

    Only raised in strict mode. By default generation degrades gracefully
    and reports the gap through ``GeneratedRoutine.shortfall``.
    """

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} exercises but only {available} are available"
        )

    @property
    def shortfall(self) -> int:
        return self.requested - self.available


class InvalidRequestError(GenerationError, ValueError):
    """A malformed generation request (a programming error, not retried)."""
