# core/exceptions.py
"""Coded errors raised by services; ``code`` is stable and safe to show or match on."""


class DomainError(Exception):
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Malformed or out-of-range input caught at the service boundary."""


class NotFoundError(DomainError):
    """A referenced project, staff member, line or payment does not exist."""


class BusinessRuleError(DomainError):
    """Well-formed input that the current state does not allow."""


class ConcurrencyError(DomainError):
    """The record changed since the caller read it."""


__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "BusinessRuleError",
    "ConcurrencyError",
]
