"""Employee domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orgmapper.domain.entities.department import Department
    from orgmapper.domain.entities.organization import Organization


@dataclass(eq=False)
class Employee:
    """
    Employee entity.

    ``department_name`` is a denormalized copy of the owning department's
    name. ``department`` and ``organization`` are non-owning
    back-references. All three are kept in sync by
    ``Department.add_employee``; assigning them directly is allowed but
    consistency then becomes the caller's concern.

    Equality and hashing are by identity so employees can be held in sets
    while their fields change.
    """

    first_name: str
    last_name: str
    position: str | None = None
    salary: int | None = None
    age: int | None = None
    department_name: str | None = None
    organization: Organization | None = field(default=None, repr=False)
    department: Department | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate employee after initialization."""
        if self.salary is not None and self.salary < 0:
            raise ValueError("Employee salary cannot be negative")

        if self.age is not None and self.age < 0:
            raise ValueError("Employee age cannot be negative")

    def belongs_to(self, organization: Organization) -> bool:
        """Check if the employee is linked to the given organization."""
        return self.organization is organization
