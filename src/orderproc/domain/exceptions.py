"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OrderNotFoundError(EntityNotFoundError):
    """The order to process does not exist."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order with ID {order_id} could not be found in the system")
        self.order_id = order_id


class PersistenceError(DomainException):
    """A repository could not read or write its backing store."""
