"""
Mapper from domain entities to output DTOs.

The rule tables below are the whole mapping configuration. They are
registered and validated when ``EntityToDtoMapper`` is constructed, so a
typo in a path or field name fails at import time through the module
level ``entity_to_dto_mapper`` instance.
"""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel

from orgmapper.application.dto import DepartmentDto, EmployeeDto, OrganizationDto
from orgmapper.application.exceptions import UnmappedTypeError
from orgmapper.application.mappers.employee_name_mapper import EmployeeNameMapper
from orgmapper.application.mapping import (
    Derived,
    FieldAccessorTable,
    MappingDefinition,
    MappingTarget,
    ObjectMapper,
    collection_projection,
)
from orgmapper.core.config import Settings, settings as default_settings
from orgmapper.domain.entities import Department, Employee, Organization

logger = logging.getLogger(__name__)

EMPLOYEE_FIELDS = {
    "department_name": "department_name",
    "organization_name": "organization.name",
}

DEPARTMENT_FIELDS = {
    "employee_names": Derived("employee_names", source="employees"),
    "organization_name": "organization.name",
}

ORGANIZATION_FIELDS = {
    "department_names": Derived("department_names", source="departments"),
    "employee_names": Derived("employee_names", source="employees"),
}


def build_accessor_table() -> FieldAccessorTable:
    """Register the readable fields of the domain entities."""
    accessors = FieldAccessorTable()
    accessors.register(Employee, relations={"organization": Organization, "department": Department})
    accessors.register(Department, relations={"organization": Organization})
    accessors.register(Organization)
    return accessors


def department_name(department: Department) -> Optional[str]:
    return department.name


class EntityToDtoMapper:
    """
    Maps Employee, Department and Organization entities to their DTOs.

    Department mapping carries two enrichment hooks on
    ``organization_name``: the before-hook writes the lowercased
    department name, the declared rule then copies
    ``organization.name``, and the after-hook finally writes the
    lowercased department name plus the configured suffix. The after-hook
    value is the one that ends up in the DTO.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.name_mapper = EmployeeNameMapper(self.settings.employee_name_separator)

        self.engine = ObjectMapper(build_accessor_table())
        self.engine.register_transform("employee_names", self.name_mapper.to_name_set)
        self.engine.register_transform("department_names", collection_projection(department_name))

        self.engine.register(
            MappingDefinition.from_table(Employee, EmployeeDto, EMPLOYEE_FIELDS)
        )
        self.engine.register(
            MappingDefinition.from_table(
                Department,
                DepartmentDto,
                DEPARTMENT_FIELDS,
                before=(self.enrich_organization_name,),
                after=(self.enrich_organization_name_with_suffix,),
            )
        )
        self.engine.register(
            MappingDefinition.from_table(Organization, OrganizationDto, ORGANIZATION_FIELDS)
        )

        self._dto_types: dict[type, type[BaseModel]] = {
            Employee: EmployeeDto,
            Department: DepartmentDto,
            Organization: OrganizationDto,
        }

    def employee_to_dto(self, employee: Optional[Employee]) -> Optional[EmployeeDto]:
        return self.engine.map(employee, EmployeeDto)

    def department_to_dto(self, department: Optional[Department]) -> Optional[DepartmentDto]:
        return self.engine.map(department, DepartmentDto)

    def organization_to_dto(self, organization: Optional[Organization]) -> Optional[OrganizationDto]:
        return self.engine.map(organization, OrganizationDto)

    def to_dto(
        self, entity: Any
    ) -> Optional[Union[EmployeeDto, DepartmentDto, OrganizationDto]]:
        """
        Map any supported entity to its DTO.

        Returns:
            The DTO, or None for a None entity

        Raises:
            UnmappedTypeError: If the entity type is not supported
        """
        if entity is None:
            return None

        for entity_type, dto_type in self._dto_types.items():
            if isinstance(entity, entity_type):
                return self.engine.map(entity, dto_type)

        raise UnmappedTypeError(type(entity))

    # ------------------------------------------------------------------
    # Enrichment hooks
    # ------------------------------------------------------------------

    def enrich_organization_name(self, source: Department, target: MappingTarget) -> None:
        target.set("organization_name", source.name.lower())
        if self.settings.trace_hooks:
            logger.debug(f"Before mapping: {target}")

    def enrich_organization_name_with_suffix(self, source: Department, target: MappingTarget) -> None:
        target.set(
            "organization_name",
            source.name.lower() + self.settings.department_organization_suffix,
        )
        if self.settings.trace_hooks:
            logger.debug(f"After mapping: {target}")


entity_to_dto_mapper = EntityToDtoMapper()
