"""Domain exceptions package."""

from orgmapper.domain.exceptions.base import DomainException
from orgmapper.domain.exceptions.ownership_exceptions import (
    DuplicateDepartmentError,
    OwnershipConflictError,
    OwnershipDomainException,
)

__all__ = [
    "DomainException",
    "DuplicateDepartmentError",
    "OwnershipConflictError",
    "OwnershipDomainException",
]
