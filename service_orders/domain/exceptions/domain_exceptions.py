from dataclasses import dataclass
from typing import Any, Optional

from ..enums import ErrorCode, Severity


@dataclass
class DomainError:
    operation: str
    code: ErrorCode
    severity: Severity
    message: str
    resource_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.operation,
            "id": self.resource_id,
            "code": self.code.value,
            "severity": self.severity.value,
            "message": self.message
        }


class DomainException(Exception):
    def __init__(self, error: DomainError):
        self.error = error
        super().__init__(error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def severity(self) -> Severity:
        return self.error.severity


class ValidationException(DomainException):
    pass


class NotFoundException(DomainException):
    pass


class GuardViolationException(DomainException):
    pass


class ConflictException(DomainException):
    pass


class PersistenceFailureException(DomainException):
    pass
