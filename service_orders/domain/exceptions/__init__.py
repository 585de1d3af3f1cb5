from .domain_exceptions import (
    DomainError,
    DomainException,
    ValidationException,
    NotFoundException,
    GuardViolationException,
    ConflictException,
    PersistenceFailureException
)

__all__ = [
    "DomainError",
    "DomainException",
    "ValidationException",
    "NotFoundException",
    "GuardViolationException",
    "ConflictException",
    "PersistenceFailureException"
]
