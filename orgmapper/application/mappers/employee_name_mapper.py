"""Projection of employees to display names."""

from collections.abc import Iterable
from typing import Optional

from orgmapper.application.mapping.projection import project
from orgmapper.domain.entities.employee import Employee


class EmployeeNameMapper:
    """
    Maps employees to name strings.

    A name is ``first_name`` and ``last_name`` joined by ``separator``.
    The default separator is empty, so "Manoj" and "Mishra" become
    "ManojMishra".
    """

    def __init__(self, separator: str = ""):
        self.separator = separator

    def to_name(self, employee: Employee) -> Optional[str]:
        """Return the employee's name, or None when both parts are missing."""
        if employee.first_name is None and employee.last_name is None:
            return None
        return self.separator.join([employee.first_name or "", employee.last_name or ""])

    def to_name_set(self, employees: Optional[Iterable[Employee]]) -> frozenset[str]:
        """
        Project employees to a set of names.

        Employees with the same name collapse into one entry.
        """
        return project(employees, self.to_name)
