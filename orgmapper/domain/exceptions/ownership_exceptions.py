"""Ownership domain exceptions."""

from orgmapper.domain.exceptions.base import DomainException


class OwnershipDomainException(DomainException):
    """Base exception for parent/child ownership errors."""


class OwnershipConflictError(OwnershipDomainException):
    """Raised when attaching a child that already belongs to another parent."""

    def __init__(self, child: str, current_owner: str, new_owner: str):
        super().__init__(
            message=(
                f"{child} already belongs to '{current_owner}' "
                f"and cannot be attached to '{new_owner}'"
            ),
            code="OWNERSHIP_CONFLICT",
            details={"child": child, "current_owner": current_owner, "new_owner": new_owner},
        )


class DuplicateDepartmentError(OwnershipDomainException):
    """Raised when an organization already has a department with the same name."""

    def __init__(self, organization: str, department: str):
        super().__init__(
            message=f"Organization '{organization}' already has a department named '{department}'",
            code="DUPLICATE_DEPARTMENT",
            details={"organization": organization, "department": department},
        )
