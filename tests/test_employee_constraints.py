"""
Tests for the Employee constraint table and its evaluation routine.
"""
import pytest

from employee_api.domain.models.employee import Employee
from employee_api.domain.validation import (
    ConstraintKind,
    EMPLOYEE_CONSTRAINTS,
    FieldConstraint,
    collect_violations,
    validate_employee,
)
from employee_api.exceptions import ValidationError


@pytest.fixture
def employee(valid_payload):
    return Employee(**valid_payload)


class TestValidEmployees:

    def test_valid_employee_passes(self, employee):
        validate_employee(employee)
        assert collect_violations(employee) == []

    @pytest.mark.parametrize("gender", ["Male", "Female", "Other"])
    def test_every_gender_is_accepted(self, employee, gender):
        employee.gender = gender
        validate_employee(employee)

    def test_id_is_not_constrained(self, employee):
        employee.id = "anything"
        validate_employee(employee)


class TestFieldConstraints:

    @pytest.mark.parametrize("field_name", [
        "first_name", "last_name", "gender", "email",
        "phone_number", "job_title", "department",
    ])
    def test_missing_field_is_named(self, employee, field_name):
        setattr(employee, field_name, "")

        with pytest.raises(ValidationError) as exc_info:
            validate_employee(employee)

        assert exc_info.value.fields == [field_name]
        assert exc_info.value.violations[0]["message"] == f"{field_name} is required"

    @pytest.mark.parametrize("length, accepted", [(1, False), (2, True), (50, True), (51, False)])
    def test_first_name_length_boundaries(self, employee, length, accepted):
        employee.first_name = "J" * length

        violations = collect_violations(employee)

        if accepted:
            assert violations == []
        else:
            assert violations == [{
                "field": "first_name",
                "message": "first_name must be between 2 and 50 characters",
            }]

    @pytest.mark.parametrize("phone, accepted", [
        ("123456789", False),
        ("1234567890", True),
        ("123456789012345", True),
        ("1234567890123456", False),
        ("(555) 010-9999", True),
    ])
    def test_phone_number_length_boundaries(self, employee, phone, accepted):
        employee.phone_number = phone
        assert (collect_violations(employee) == []) is accepted

    @pytest.mark.parametrize("gender", ["Unknown", "male", "MALE", " Male"])
    def test_gender_outside_enum_is_rejected(self, employee, gender):
        employee.gender = gender

        with pytest.raises(ValidationError) as exc_info:
            validate_employee(employee)

        assert exc_info.value.fields == ["gender"]
        assert "Male, Female, Other" in exc_info.value.violations[0]["message"]

    @pytest.mark.parametrize("email", ["not-an-email", "jo@", "@x.com", "jo x@x.com", "jo@@x.com"])
    def test_malformed_email_is_rejected(self, employee, email):
        employee.email = email

        with pytest.raises(ValidationError) as exc_info:
            validate_employee(employee)

        assert exc_info.value.fields == ["email"]

    def test_length_counts_characters_not_bytes(self, employee):
        employee.last_name = "Müller-Øster"
        employee.department = "É" * 50
        validate_employee(employee)


class TestCollectAllViolations:

    def test_every_offending_field_is_reported(self, employee):
        employee.first_name = "J"
        employee.gender = "Unknown"
        employee.email = "nope"
        employee.department = ""

        with pytest.raises(ValidationError) as exc_info:
            validate_employee(employee)

        assert exc_info.value.fields == ["first_name", "gender", "email", "department"]

    def test_empty_employee_reports_every_field_once(self):
        violations = collect_violations(Employee())

        assert [v["field"] for v in violations] == [
            "first_name", "last_name", "gender", "email",
            "phone_number", "job_title", "department",
        ]
        assert all(v["message"].endswith("is required") for v in violations)

    def test_validation_error_carries_fields_in_details(self, employee):
        employee.job_title = "X"

        with pytest.raises(ValidationError) as exc_info:
            validate_employee(employee)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"fields": exc_info.value.violations}


class TestConstraintTable:

    def test_table_covers_every_attribute(self):
        constrained = {c.field for c in EMPLOYEE_CONSTRAINTS}
        assert constrained == {
            "first_name", "last_name", "gender", "email",
            "phone_number", "job_title", "department",
        }

    def test_every_field_is_required(self):
        required = {c.field for c in EMPLOYEE_CONSTRAINTS if c.kind is ConstraintKind.REQUIRED}
        assert required == {c.field for c in EMPLOYEE_CONSTRAINTS}

    def test_custom_table_is_evaluated(self, employee):
        table = (FieldConstraint("job_title", ConstraintKind.ONE_OF, {"choices": ("CEO",)}),)

        violations = collect_violations(employee, table)

        assert violations == [{"field": "job_title", "message": "job_title must be one of: CEO"}]
