"""Employee DTOs (Data Transfer Objects)."""

from typing import Optional

from pydantic import BaseModel, Field


class EmployeeDto(BaseModel):
    """Output DTO for employee information."""

    first_name: Optional[str] = Field(None, description="Employee's first name")
    last_name: Optional[str] = Field(None, description="Employee's last name")
    position: Optional[str] = Field(None, description="Job position")
    salary: Optional[int] = Field(None, description="Salary")
    age: Optional[int] = Field(None, description="Age in years")
    department_name: Optional[str] = Field(None, description="Name of the owning department")
    organization_name: Optional[str] = Field(None, description="Name of the owning organization")

    model_config = {"frozen": True}
