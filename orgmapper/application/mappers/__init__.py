"""
Entity → DTO mappers.

This package contains the concrete mapping configuration:
- EntityToDtoMapper: rule tables and enrichment hooks for the
  Employee, Department and Organization DTOs
- EmployeeNameMapper: projection of employees to name strings
"""

from orgmapper.application.mappers.employee_name_mapper import EmployeeNameMapper
from orgmapper.application.mappers.entity_to_dto_mapper import (
    EntityToDtoMapper,
    build_accessor_table,
    entity_to_dto_mapper,
)

__all__ = [
    "EmployeeNameMapper",
    "EntityToDtoMapper",
    "build_accessor_table",
    "entity_to_dto_mapper",
]
