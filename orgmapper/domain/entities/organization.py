"""Organization domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from orgmapper.domain.exceptions import DuplicateDepartmentError, OwnershipConflictError

if TYPE_CHECKING:
    from orgmapper.domain.entities.department import Department
    from orgmapper.domain.entities.employee import Employee


@dataclass(eq=False)
class Organization:
    """
    Organization entity.

    The organization is the root of the ownership graph: it holds its
    departments and every employee attached to it, directly or through a
    department. Children only keep a back-reference to it.
    """

    name: str
    departments: set[Department] = field(default_factory=set)
    employees: set[Employee] = field(default_factory=set)

    def __post_init__(self) -> None:
        """Validate organization after initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("Organization name cannot be empty")

    def add_department(self, department: Department) -> None:
        """
        Attach a department and all of its employees to this organization.

        Args:
            department: Department to attach

        Raises:
            OwnershipConflictError: If the department or one of its
                employees belongs to another organization
            DuplicateDepartmentError: If another department with the same
                name is already attached
        """
        if department.organization is not None and department.organization is not self:
            raise OwnershipConflictError(
                f"Department '{department.name}'",
                department.organization.name,
                self.name,
            )

        existing = self.find_department(department.name)
        if existing is not None and existing is not department:
            raise DuplicateDepartmentError(self.name, department.name)

        for employee in department.employees:
            if employee.organization is not None and employee.organization is not self:
                raise OwnershipConflictError(
                    f"Employee '{employee.first_name} {employee.last_name}'",
                    employee.organization.name,
                    self.name,
                )

        department.organization = self
        self.departments.add(department)

        for employee in department.employees:
            employee.organization = self
            self.employees.add(employee)

    def add_employee(self, employee: Employee) -> None:
        """
        Attach an employee directly, without a department.

        Raises:
            OwnershipConflictError: If the employee belongs to another
                organization
        """
        if employee.organization is not None and employee.organization is not self:
            raise OwnershipConflictError(
                f"Employee '{employee.first_name} {employee.last_name}'",
                employee.organization.name,
                self.name,
            )

        employee.organization = self
        self.employees.add(employee)

    def find_department(self, name: str) -> Department | None:
        """
        Return the department with the given name, if any.

        Department names are unique within an organization, see
        ``add_department``.
        """
        for department in self.departments:
            if department.name == name:
                return department
        return None
