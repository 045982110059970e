"""Department domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orgmapper.domain.exceptions import OwnershipConflictError

if TYPE_CHECKING:
    from orgmapper.domain.entities.employee import Employee
    from orgmapper.domain.entities.organization import Organization


@dataclass(eq=False)
class Department:
    """
    Department entity.

    A department owns its employees. The ``organization`` back-reference
    is excluded from ``repr`` so that printing a cyclic graph terminates.
    """

    name: str
    employees: set[Employee] = field(default_factory=set)
    organization: Organization | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate department after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Department name cannot be empty")

    def add_employee(self, employee: Employee) -> None:
        """
        Attach an employee to this department.

        Sets the employee's ``department`` and ``department_name`` and,
        when this department already belongs to an organization, its
        ``organization``. The employee is also registered in the
        organization's employee set. Re-adding an employee this
        department already owns is a no-op.

        Args:
            employee: Employee to attach

        Raises:
            OwnershipConflictError: If the employee already belongs to a
                different department or organization
        """
        owner = employee.department
        if owner is not None and owner is not self:
            raise OwnershipConflictError(
                f"Employee '{employee.first_name} {employee.last_name}'",
                owner.name,
                self.name,
            )

        # Only a name was assigned, without going through a department.
        if owner is None and employee.department_name not in (None, self.name):
            raise OwnershipConflictError(
                f"Employee '{employee.first_name} {employee.last_name}'",
                employee.department_name,
                self.name,
            )

        if (
            self.organization is not None
            and employee.organization is not None
            and employee.organization is not self.organization
        ):
            raise OwnershipConflictError(
                f"Employee '{employee.first_name} {employee.last_name}'",
                employee.organization.name,
                self.organization.name,
            )

        employee.department = self
        employee.department_name = self.name
        self.employees.add(employee)

        if self.organization is not None:
            employee.organization = self.organization
            self.organization.employees.add(employee)

    def remove_employee(self, employee: Employee) -> None:
        """
        Detach an employee from this department.

        Raises:
            ValueError: If the employee is not part of this department
        """
        if employee not in self.employees:
            raise ValueError("Employee is not part of this department")

        self.employees.remove(employee)
        employee.department = None
        employee.department_name = None

    def has_employee(self, employee: Employee) -> bool:
        return employee in self.employees
