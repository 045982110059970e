"""Declarative mapping engine."""

from orgmapper.application.mapping.accessors import MISSING, FieldAccessor, FieldAccessorTable
from orgmapper.application.mapping.hooks import HookPhase, MappingHook
from orgmapper.application.mapping.object_mapper import ObjectMapper
from orgmapper.application.mapping.projection import collection_projection, project
from orgmapper.application.mapping.rules import (
    Derived,
    FieldRule,
    MappingDefinition,
    rules_from_table,
)
from orgmapper.application.mapping.target import MappingTarget

__all__ = [
    "MISSING",
    "Derived",
    "FieldAccessor",
    "FieldAccessorTable",
    "FieldRule",
    "HookPhase",
    "MappingDefinition",
    "MappingHook",
    "MappingTarget",
    "ObjectMapper",
    "collection_projection",
    "project",
    "rules_from_table",
]
