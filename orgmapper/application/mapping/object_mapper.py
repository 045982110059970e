"""
Declarative object mapper.

Each call to ``ObjectMapper.map`` walks a fixed sequence:

    START -> BEFORE_HOOK -> FIELD_COPY -> AFTER_HOOK -> DONE

Field copying overwrites values written by before-hooks, and after-hooks
overwrite everything. The DTO is only built once the after-hooks have
returned, so any failure leaves the caller without a target.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable
from typing import Any, Optional, TypeVar

from pydantic import BaseModel

from orgmapper.application.exceptions import MappingDefinitionError, UnmappedTypeError
from orgmapper.application.mapping.accessors import MISSING, FieldAccessorTable
from orgmapper.application.mapping.hooks import HookPhase, run_hooks
from orgmapper.application.mapping.rules import FieldRule, MappingDefinition
from orgmapper.application.mapping.target import MappingTarget

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Transform = Callable[[Any], Any]


class ObjectMapper:
    """
    Maps source objects to DTOs using registered definitions.

    Definitions and transforms are registered once, up front, and checked
    against the accessor table and the DTO fields at that point. After
    registration the mapper only reads its registries, so one instance
    can be shared freely.
    """

    def __init__(self, accessors: FieldAccessorTable):
        self.accessors = accessors
        self._transforms: dict[str, Transform] = {}
        self._definitions: dict[tuple[type, type], MappingDefinition] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_transform(self, name: str, transform: Transform) -> None:
        """
        Register a named transform usable by derived field rules.

        Raises:
            MappingDefinitionError: If the name is already taken
        """
        if name in self._transforms:
            raise MappingDefinitionError(f"Transform '{name}' is already registered")
        self._transforms[name] = transform

    def register(self, definition: MappingDefinition) -> MappingDefinition:
        """
        Validate and register a mapping definition.

        Implicit same-name rules are expanded here, so the returned
        definition lists every rule that will run.

        Returns:
            The registered definition

        Raises:
            MappingDefinitionError: If the definition is invalid or a
                definition for the same type pair already exists
        """
        if definition.key in self._definitions:
            raise MappingDefinitionError(
                "A mapping for this type pair is already registered",
                source_type=definition.source_type,
                target_type=definition.target_type,
            )

        compiled = self._compile(definition)
        self._definitions[compiled.key] = compiled

        logger.info(
            f"Registered mapping {compiled.source_type.__name__} -> "
            f"{compiled.target_type.__name__}: {len(compiled.rules)} field rules, "
            f"{len(compiled.before_hooks)} before hooks, {len(compiled.after_hooks)} after hooks"
        )
        return compiled

    def _compile(self, definition: MappingDefinition) -> MappingDefinition:
        source_type = definition.source_type
        target_type = definition.target_type

        def reject(message: str, field: Optional[str] = None) -> MappingDefinitionError:
            return MappingDefinitionError(
                message, source_type=source_type, target_type=target_type, field=field
            )

        if not (isinstance(target_type, type) and issubclass(target_type, BaseModel)):
            raise reject(f"Target type {target_type!r} is not a pydantic model")

        if not self.accessors.is_registered(source_type):
            raise reject(f"Source type {source_type.__name__} has no registered field accessors")

        target_fields = target_type.model_fields
        seen: set[str] = set()

        for rule in definition.rules:
            if rule.target not in target_fields:
                raise reject(f"{target_type.__name__} has no field '{rule.target}'", rule.target)

            if rule.target in seen:
                raise reject(f"Field '{rule.target}' is mapped more than once", rule.target)
            seen.add(rule.target)

            if rule.source is None and rule.transform is None:
                raise reject(f"Rule for '{rule.target}' has neither a source path nor a transform", rule.target)

            if rule.source is not None:
                try:
                    self.accessors.validate_path(source_type, rule.source)
                except ValueError as e:
                    raise reject(str(e), rule.target) from e

            if rule.transform is not None and rule.transform not in self._transforms:
                raise reject(f"Unknown transform '{rule.transform}'", rule.target)

        rules = list(definition.rules)
        if definition.implicit:
            source_fields = self.accessors.fields_of(source_type)
            for name in target_fields:
                if name not in seen and name in source_fields:
                    rules.append(FieldRule.path(name, name))

        return dataclasses.replace(definition, rules=tuple(rules))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def definition_for(self, source_type: type, target_type: type) -> MappingDefinition:
        """
        Find the definition for a type pair, following the source MRO.

        Raises:
            UnmappedTypeError: If no definition matches
        """
        for klass in source_type.__mro__:
            definition = self._definitions.get((klass, target_type))
            if definition is not None:
                return definition
        raise UnmappedTypeError(source_type, target_type)

    def definitions(self) -> list[MappingDefinition]:
        return list(self._definitions.values())

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def map(self, source: Any, target_type: type[T]) -> Optional[T]:
        """
        Map ``source`` to a new ``target_type`` instance.

        A None source maps to None without running any hook.

        Raises:
            UnmappedTypeError: If no definition matches the type pair
            HookExecutionError: If a before or after hook fails
            TargetConstructionError: If the collected values are invalid
        """
        if source is None:
            logger.debug(f"Source is None, skipping mapping to {target_type.__name__}")
            return None

        definition = self.definition_for(type(source), target_type)
        target: MappingTarget[T] = MappingTarget(target_type)

        run_hooks(HookPhase.BEFORE, definition.before_hooks, source, target)

        for rule in definition.rules:
            value = self._evaluate(rule, source)
            if value is not MISSING:
                target.set(rule.target, value)

        run_hooks(HookPhase.AFTER, definition.after_hooks, source, target)

        result = target.build()
        logger.debug(f"Mapped {type(source).__name__} -> {target_type.__name__}")
        return result

    def map_all(self, sources: Iterable[Any], target_type: type[T]) -> list[Optional[T]]:
        """Map each source in order; None items map to None."""
        return [self.map(source, target_type) for source in sources]

    def _evaluate(self, rule: FieldRule, source: Any) -> Any:
        if rule.source is not None:
            value = self.accessors.resolve(source, rule.source)
        else:
            value = source

        if rule.transform is None:
            return value

        return self._transforms[rule.transform](None if value is MISSING else value)
