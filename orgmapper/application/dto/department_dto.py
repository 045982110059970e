"""Department DTOs (Data Transfer Objects)."""

from typing import Optional

from pydantic import BaseModel, Field


class DepartmentDto(BaseModel):
    """Output DTO for department information."""

    name: Optional[str] = Field(None, description="Department name")
    employee_names: frozenset[str] = Field(
        default_factory=frozenset, description="Full names of the department's employees"
    )
    organization_name: Optional[str] = Field(None, description="Derived organization label")

    model_config = {"frozen": True}
