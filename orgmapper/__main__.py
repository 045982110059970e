"""
Demo entrypoint.

Builds a small organization, maps its employee, department and the
organization itself, and prints each DTO as JSON.

Run with ``python -m orgmapper`` or the ``orgmapper-demo`` script.
"""

import logging

from orgmapper.application.mappers import entity_to_dto_mapper
from orgmapper.core.config import settings
from orgmapper.core.logging import setup_logging
from orgmapper.domain.entities import Department, Employee, Organization

logger = logging.getLogger(__name__)


def build_sample_organization() -> Organization:
    organization = Organization(name="Electrical")
    department = Department(name="Electrical")
    organization.add_department(department)

    department.add_employee(
        Employee(
            first_name="Manoj",
            last_name="Mishra",
            position="Assistant",
            salary=10000,
            age=10,
        )
    )
    return organization


def main() -> None:
    setup_logging()
    logger.info(f"Starting {settings.app_name} demo v{settings.version}")

    organization = build_sample_organization()
    department = next(iter(organization.departments))
    employee = next(iter(department.employees))

    logger.info(f"Source employee: {employee}")
    print(entity_to_dto_mapper.employee_to_dto(employee).model_dump_json())

    logger.info(f"Source department: {department}")
    print(entity_to_dto_mapper.department_to_dto(department).model_dump_json())

    logger.info(f"Source organization: {organization}")
    print(entity_to_dto_mapper.organization_to_dto(organization).model_dump_json())


if __name__ == "__main__":
    main()
