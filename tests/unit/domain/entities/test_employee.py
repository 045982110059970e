"""Unit tests for Employee entity."""

import pytest

from orgmapper.domain.entities import Employee, Organization


class TestEmployeeCreation:
    """Test Employee entity creation."""

    def test_create_employee_minimal(self):
        """Test creating employee with only names."""
        employee = Employee(first_name="Manoj", last_name="Mishra")

        assert employee.first_name == "Manoj"
        assert employee.last_name == "Mishra"
        assert employee.position is None
        assert employee.department_name is None
        assert employee.organization is None

    def test_negative_salary_raises_error(self):
        """Test negative salary raises error."""
        with pytest.raises(ValueError):
            Employee(first_name="A", last_name="B", salary=-1)

    def test_negative_age_raises_error(self):
        """Test negative age raises error."""
        with pytest.raises(ValueError):
            Employee(first_name="A", last_name="B", age=-1)


class TestEmployeeIdentity:
    """Test Employee identity semantics."""

    def test_equal_fields_are_distinct_employees(self):
        """Test two employees with identical fields are not equal."""
        first = Employee(first_name="John", last_name="Smith")
        second = Employee(first_name="John", last_name="Smith")

        assert first != second
        assert len({first, second}) == 2

    def test_hash_stable_after_mutation(self):
        """Test an employee stays findable in a set after a field change."""
        employee = Employee(first_name="John", last_name="Smith")
        employees = {employee}

        employee.position = "Engineer"

        assert employee in employees

    def test_repr_excludes_organization(self):
        """Test repr does not recurse into the organization."""
        organization = Organization(name="Acme")
        employee = Employee(first_name="John", last_name="Smith", organization=organization)
        organization.employees.add(employee)

        assert "Acme" not in repr(employee)

    def test_belongs_to(self, employee, organization):
        """Test belongs_to checks the organization by identity."""
        assert employee.belongs_to(organization) is True
        assert employee.belongs_to(Organization(name="Electrical")) is False
