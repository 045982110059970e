"""Base domain exception classes."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"
