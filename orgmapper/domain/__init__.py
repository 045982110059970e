"""Domain layer package.

The domain layer contains the organization model: plain entities with
identity semantics and the domain exceptions raised when ownership rules
between them are broken.
"""

__all__ = []
