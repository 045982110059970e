"""Domain entities package."""

from orgmapper.domain.entities.department import Department
from orgmapper.domain.entities.employee import Employee
from orgmapper.domain.entities.organization import Organization

__all__ = [
    "Department",
    "Employee",
    "Organization",
]
