"""
Pytest configuration and fixtures for orgmapper tests.

This module provides:
- The sample organization graph (one organization, one department,
  one employee) wired by plain field assignment
- A mapper built from default settings
"""

import pytest

from orgmapper.application.mappers import EntityToDtoMapper
from orgmapper.core.config import Settings
from orgmapper.domain.entities import Department, Employee, Organization


# ============================================================================
# Entity Fixtures
# ============================================================================
@pytest.fixture
def organization() -> Organization:
    return Organization(name="Electrical")


@pytest.fixture
def department(organization: Organization) -> Department:
    return Department(name="Electrical", organization=organization)


@pytest.fixture
def employee(organization: Organization, department: Department) -> Employee:
    """Employee linked to the organization, not yet part of the department set."""
    return Employee(
        first_name="Manoj",
        last_name="Mishra",
        position="Assistant",
        salary=10000,
        age=10,
        department_name=department.name,
        organization=organization,
    )


@pytest.fixture
def staffed_department(department: Department, employee: Employee) -> Department:
    department.employees = {employee}
    return department


# ============================================================================
# Mapper Fixtures
# ============================================================================
@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def mapper(settings: Settings) -> EntityToDtoMapper:
    return EntityToDtoMapper(settings)
