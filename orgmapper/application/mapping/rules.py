"""Declarative mapping rules and definitions."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Union

from orgmapper.application.mapping.hooks import MappingHook


@dataclass(frozen=True)
class FieldRule:
    """
    How one target field is populated.

    ``source`` is a dotted path on the source object. ``transform`` names
    a registered transform; it receives the value at ``source``, or the
    whole source object when no path is given.
    """

    target: str
    source: Optional[str] = None
    transform: Optional[str] = None

    @classmethod
    def path(cls, target: str, source: str) -> "FieldRule":
        return cls(target=target, source=source)

    @classmethod
    def derived(cls, target: str, transform: str, source: Optional[str] = None) -> "FieldRule":
        return cls(target=target, source=source, transform=transform)


@dataclass(frozen=True)
class Derived:
    """Table entry for a transform-backed field (see ``rules_from_table``)."""

    transform: str
    source: Optional[str] = None


def rules_from_table(table: Mapping[str, Union[str, Derived]]) -> tuple[FieldRule, ...]:
    """
    Build rules from a ``{target_field: source_path | Derived}`` table.

    Example:
        rules_from_table({
            "organization_name": "organization.name",
            "employee_names": Derived("employee_names", source="employees"),
        })
    """
    rules = []
    for target, entry in table.items():
        if isinstance(entry, Derived):
            rules.append(FieldRule.derived(target, entry.transform, entry.source))
        else:
            rules.append(FieldRule.path(target, entry))
    return tuple(rules)


@dataclass(frozen=True)
class MappingDefinition:
    """
    Static description of a mapping from one source type to one DTO type.

    Attributes:
        source_type: Type of the objects being mapped
        target_type: DTO type produced
        rules: Explicit field rules, applied in order
        before_hooks: Hooks run on the empty target before field copying
        after_hooks: Hooks run once field copying has completed
        implicit: Copy same-named fields that have no explicit rule
    """

    source_type: type
    target_type: type
    rules: tuple[FieldRule, ...] = ()
    before_hooks: tuple[MappingHook, ...] = ()
    after_hooks: tuple[MappingHook, ...] = ()
    implicit: bool = True

    @classmethod
    def from_table(
        cls,
        source_type: type,
        target_type: type,
        table: Mapping[str, Union[str, Derived]],
        *,
        before: tuple[MappingHook, ...] = (),
        after: tuple[MappingHook, ...] = (),
        implicit: bool = True,
    ) -> "MappingDefinition":
        return cls(
            source_type=source_type,
            target_type=target_type,
            rules=rules_from_table(table),
            before_hooks=tuple(before),
            after_hooks=tuple(after),
            implicit=implicit,
        )

    @property
    def key(self) -> tuple[type, type]:
        return (self.source_type, self.target_type)

    def rule_for(self, target: str) -> Optional[FieldRule]:
        for rule in self.rules:
            if rule.target == target:
                return rule
        return None
