"""Data Transfer Objects (DTOs) for application layer."""

from orgmapper.application.dto.department_dto import DepartmentDto
from orgmapper.application.dto.employee_dto import EmployeeDto
from orgmapper.application.dto.organization_dto import OrganizationDto

__all__ = [
    "DepartmentDto",
    "EmployeeDto",
    "OrganizationDto",
]
