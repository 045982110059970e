"""
Collection projections.

A projection turns a collection of rich objects into a set of simple
values. Results are frozensets: elements whose projections are equal
collapse into a single entry, and projections evaluating to None are
dropped. A None collection projects to an empty set.
"""

from collections.abc import Callable, Iterable
from typing import Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def project(items: Optional[Iterable[T]], projector: Callable[[T], Optional[R]]) -> frozenset[R]:
    if items is None:
        return frozenset()
    return frozenset(value for value in map(projector, items) if value is not None)


def collection_projection(
    projector: Callable[[T], Optional[R]],
) -> Callable[[Optional[Iterable[T]]], frozenset[R]]:
    """Build a transform that projects a whole collection with ``projector``."""

    def transform(items: Optional[Iterable[T]]) -> frozenset[R]:
        return project(items, projector)

    transform.__name__ = f"project_{getattr(projector, '__name__', 'items')}"
    return transform
