"""
Employee DTO
============

Pydantic models for employee API requests and responses.
"""
import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from employee_api.domain.constants.employee_fields import EmployeeFields
from employee_api.domain.models.employee import Employee
from employee_api.exceptions import DecodeError


class EmployeeRequest(BaseModel):
    """
    DTO for creating/replacing an employee.

    Only shape is checked here (each field a string, null or absent).
    Business constraints live in the domain constraint table. Unknown keys,
    including any client-sent ``_id``/``id``, are dropped.
    """
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "first_name": "Jo",
                "last_name": "Doe",
                "gender": "Male",
                "email": "jo@x.com",
                "phone_number": "1234567890",
                "job_title": "Engineer",
                "department": "R&D",
            }
        },
    )

    first_name: Optional[StrictStr] = None
    last_name: Optional[StrictStr] = None
    gender: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone_number: Optional[StrictStr] = None
    job_title: Optional[StrictStr] = None
    department: Optional[StrictStr] = None

    def to_entity(self) -> Employee:
        """Build an Employee, treating absent and null fields as empty strings."""
        return Employee(**{
            field_name: getattr(self, field_name) or ""
            for field_name in EmployeeFields.ATTRIBUTES
        })


def decode_employee(payload: Any) -> Employee:
    """
    Decode a request body into an Employee.

    Args:
        payload: Raw JSON body (bytes or str) or an already parsed JSON value

    Returns:
        Employee without an id

    Raises:
        DecodeError: If the body is not valid JSON, not an object, or a field
            is not a string
    """
    if isinstance(payload, (bytes, bytearray, str)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise DecodeError(details={"reason": "request body is not valid JSON"}) from exc

    if not isinstance(payload, dict):
        raise DecodeError(details={"reason": "request body must be a JSON object"})
    try:
        return EmployeeRequest.model_validate(payload).to_entity()
    except PydanticValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
        raise DecodeError(details={"fields": fields}) from exc


class EmployeeResponse(BaseModel):
    """DTO for employee data. The identifier is serialized as ``_id``."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "_id": "6928422b8c9933d948cfdc21",
                "first_name": "Jo",
                "last_name": "Doe",
                "gender": "Male",
                "email": "jo@x.com",
                "phone_number": "1234567890",
                "job_title": "Engineer",
                "department": "R&D",
            }
        },
    )

    id: str = Field(..., alias=EmployeeFields.MONGO_ID)
    first_name: str
    last_name: str
    gender: str
    email: str
    phone_number: str
    job_title: str
    department: str

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            gender=employee.gender,
            email=employee.email,
            phone_number=employee.phone_number,
            job_title=employee.job_title,
            department=employee.department,
        )


class MessageResponse(BaseModel):
    """DTO for operations that only report success."""
    message: str


class ErrorResponse(BaseModel):
    """DTO documenting the error body rendered by the exception handlers."""
    error: str = Field(..., description="Machine-readable error category")
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
