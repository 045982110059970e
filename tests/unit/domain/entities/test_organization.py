"""Unit tests for Organization entity."""

import pytest

from orgmapper.domain.entities import Department, Employee, Organization
from orgmapper.domain.exceptions import DuplicateDepartmentError, OwnershipConflictError


class TestOrganizationCreation:
    """Test Organization entity creation."""

    def test_create_organization_minimal(self):
        """Test creating organization with a name only."""
        organization = Organization(name="Acme")

        assert organization.departments == set()
        assert organization.employees == set()

    def test_empty_name_raises_error(self):
        """Test empty name raises error."""
        with pytest.raises(ValueError):
            Organization(name="")

    def test_repr_of_cyclic_graph_terminates(self):
        """Test repr of a fully linked graph is finite."""
        organization = Organization(name="Acme")
        department = Department(name="Research")
        organization.add_department(department)
        department.add_employee(Employee(first_name="John", last_name="Smith"))

        text = repr(organization)

        assert "Research" in text
        assert "John" in text


class TestOrganizationDepartments:
    """Test Organization department management."""

    def test_add_department_adopts_employees(self):
        """Test add_department links the department and its employees."""
        organization = Organization(name="Acme")
        department = Department(name="Research")
        employee = Employee(first_name="John", last_name="Smith")
        department.add_employee(employee)

        organization.add_department(department)

        assert department.organization is organization
        assert department in organization.departments
        assert employee.organization is organization
        assert employee in organization.employees

    def test_add_department_twice_is_idempotent(self):
        """Test re-adding the same department keeps a single entry."""
        organization = Organization(name="Acme")
        department = Department(name="Research")

        organization.add_department(department)
        organization.add_department(department)

        assert len(organization.departments) == 1

    def test_add_department_from_other_organization_raises_error(self):
        """Test attaching a department owned elsewhere fails."""
        department = Department(name="Research", organization=Organization(name="Globex"))

        with pytest.raises(OwnershipConflictError):
            Organization(name="Acme").add_department(department)

    def test_add_department_with_foreign_employee_raises_error(self):
        """Test a department holding another organization's employee is rejected."""
        organization = Organization(name="Acme")
        department = Department(name="Research")
        department.employees.add(
            Employee(first_name="John", last_name="Smith", organization=Organization(name="Globex"))
        )

        with pytest.raises(OwnershipConflictError):
            organization.add_department(department)

        assert department.organization is None
        assert organization.departments == set()

    def test_add_same_named_department_raises_error(self):
        """Test a second department with an existing name is rejected."""
        organization = Organization(name="Acme")
        research = Department(name="Research")
        organization.add_department(research)
        namesake = Department(name="Research")

        with pytest.raises(DuplicateDepartmentError) as exc_info:
            organization.add_department(namesake)

        assert exc_info.value.code == "DUPLICATE_DEPARTMENT"
        assert organization.departments == {research}
        assert namesake.organization is None
        assert organization.find_department("Research") is research

    def test_find_department(self):
        """Test find_department looks up by name."""
        organization = Organization(name="Acme")
        department = Department(name="Research")
        organization.add_department(department)

        assert organization.find_department("Research") is department
        assert organization.find_department("Sales") is None


class TestOrganizationEmployees:
    """Test Organization direct employee management."""

    def test_add_employee(self):
        """Test add_employee links the employee without a department."""
        organization = Organization(name="Acme")
        employee = Employee(first_name="John", last_name="Smith")

        organization.add_employee(employee)

        assert employee.organization is organization
        assert employee.department_name is None

    def test_add_employee_from_other_organization_raises_error(self):
        """Test attaching another organization's employee fails."""
        employee = Employee(first_name="John", last_name="Smith", organization=Organization(name="Globex"))

        with pytest.raises(OwnershipConflictError):
            Organization(name="Acme").add_employee(employee)
