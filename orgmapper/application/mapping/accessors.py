"""
Explicit field accessor table used to resolve dotted source paths.

Every source type taking part in a mapping registers the fields that may
be read from it, and which of those fields are single-valued references
to another registered type. Paths such as ``organization.name`` are
checked against this table when a mapping is registered and walked
through it when a mapping runs.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Optional

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for a path that could not be resolved to a value."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def split_path(path: str) -> list[str]:
    """
    Split a dotted path into its segments.

    Raises:
        ValueError: If the path is empty or has an empty segment
    """
    segments = path.split(".")
    if not path or any(not segment for segment in segments):
        raise ValueError(f"Invalid source path '{path}'")
    return segments


@dataclass(frozen=True)
class FieldAccessor:
    """A readable field of a registered type."""

    name: str
    getter: Callable[[Any], Any]
    related_type: Optional[type] = None

    @property
    def is_relation(self) -> bool:
        return self.related_type is not None


class FieldAccessorTable:
    """Registry of readable fields per source type."""

    def __init__(self) -> None:
        self._accessors: dict[type, dict[str, FieldAccessor]] = {}

    def register(
        self,
        cls: type,
        fields: Optional[Iterable[str]] = None,
        relations: Optional[Mapping[str, type]] = None,
    ) -> None:
        """
        Register the readable fields of a type.

        Args:
            cls: Type to register
            fields: Field names; defaults to the dataclass fields of ``cls``
            relations: Fields holding a single reference to another
                registered type, keyed by field name

        Raises:
            TypeError: If no field names are given for a non-dataclass type
            ValueError: If a relation names a field that is not registered
        """
        if fields is None:
            if not dataclasses.is_dataclass(cls):
                raise TypeError(f"{cls.__name__} is not a dataclass; pass its field names explicitly")
            fields = [f.name for f in dataclasses.fields(cls)]

        names = list(fields)
        relations = dict(relations or {})
        unknown = set(relations) - set(names)
        if unknown:
            raise ValueError(f"Relations {sorted(unknown)} are not fields of {cls.__name__}")

        self._accessors[cls] = {
            name: FieldAccessor(name=name, getter=attrgetter(name), related_type=relations.get(name))
            for name in names
        }

    def _registered_type(self, cls: type) -> Optional[type]:
        for klass in cls.__mro__:
            if klass in self._accessors:
                return klass
        return None

    def is_registered(self, cls: type) -> bool:
        return self._registered_type(cls) is not None

    def fields_of(self, cls: type) -> dict[str, FieldAccessor]:
        """Return the registered accessors of ``cls`` (empty if unregistered)."""
        klass = self._registered_type(cls)
        if klass is None:
            return {}
        return dict(self._accessors[klass])

    def get(self, cls: type, name: str) -> Optional[FieldAccessor]:
        klass = self._registered_type(cls)
        if klass is None:
            return None
        return self._accessors[klass].get(name)

    def validate_path(self, source_type: type, path: str) -> FieldAccessor:
        """
        Check that a path can be walked from ``source_type``.

        Every segment but the last must be a registered relation.

        Returns:
            Accessor of the last segment

        Raises:
            ValueError: If a segment cannot be resolved
        """
        segments = split_path(path)
        current: Optional[type] = source_type
        accessor: Optional[FieldAccessor] = None

        for index, segment in enumerate(segments):
            if current is None:
                raise ValueError(
                    f"Cannot resolve '{segment}' in '{path}': "
                    f"'{segments[index - 1]}' is not a relation"
                )
            accessor = self.get(current, segment)
            if accessor is None:
                raise ValueError(f"{current.__name__} has no registered field '{segment}' (path '{path}')")
            current = accessor.related_type

        return accessor

    def resolve(self, source: Any, path: str) -> Any:
        """
        Read the value at ``path`` starting from ``source``.

        A None link anywhere along the path, a field the reached object
        does not register, or a None final value all resolve to MISSING.
        Never raises for such gaps.
        """
        current = source
        for segment in split_path(path):
            if current is None:
                return MISSING
            accessor = self.get(type(current), segment)
            if accessor is None:
                logger.debug(f"{type(current).__name__} has no registered field '{segment}' (path '{path}')")
                return MISSING
            current = accessor.getter(current)

        if current is None:
            return MISSING
        return current
