"""Organization DTOs (Data Transfer Objects)."""

from typing import Optional

from pydantic import BaseModel, Field


class OrganizationDto(BaseModel):
    """Output DTO for organization information."""

    name: Optional[str] = Field(None, description="Organization name")
    department_names: frozenset[str] = Field(
        default_factory=frozenset, description="Names of the organization's departments"
    )
    employee_names: frozenset[str] = Field(
        default_factory=frozenset, description="Full names of the organization's employees"
    )

    model_config = {"frozen": True}
