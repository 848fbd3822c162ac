"""
Test configuration and fixtures for pytest.

The API is built with an explicitly injected container whose repository
keeps employees in memory, so no MongoDB server is needed.
"""
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from employee_api.core.config import Settings
from employee_api.di.base_container import BaseContainer
from employee_api.di.providers import EmployeeProvider
from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.main import create_application


class InMemoryEmployeeRepository(EmployeeRepository):
    """EmployeeRepository keeping documents in a dict, keyed like MongoDB."""

    def __init__(self):
        self.documents: Dict[str, Employee] = {}
        self.calls: List[str] = []
        self.fail_with: Optional[Exception] = None

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail_with is not None:
            raise self.fail_with

    def is_valid_id(self, employee_id: str) -> bool:
        return ObjectId.is_valid(employee_id)

    def find_all(self) -> List[Employee]:
        self._record("find_all")
        return list(self.documents.values())

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        self._record("find_by_id")
        return self.documents.get(employee_id)

    def insert_one(self, employee: Employee) -> str:
        self._record("insert_one")
        employee_id = str(ObjectId())
        self.documents[employee_id] = employee.with_id(employee_id)
        return employee_id

    def replace_by_id(self, employee_id: str, employee: Employee) -> bool:
        self._record("replace_by_id")
        if employee_id not in self.documents:
            return False
        self.documents[employee_id] = employee.with_id(employee_id)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        self._record("delete_by_id")
        return self.documents.pop(employee_id, None) is not None


@pytest.fixture
def repository():
    """Empty in-memory employee repository."""
    return InMemoryEmployeeRepository()


@pytest.fixture
def container(repository):
    """Container wired with the in-memory repository."""
    container = BaseContainer()
    container.register_singleton(EmployeeRepository, repository)
    EmployeeProvider.register(container)
    return container


@pytest.fixture
def settings(monkeypatch):
    """Settings with a fixed client origin."""
    monkeypatch.setenv("CLIENT_ORIGIN", "http://localhost:5173")
    return Settings()


@pytest.fixture
def client(settings, container):
    """HTTP client for API testing."""
    app = create_application(settings=settings, container=container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_payload():
    """A request body satisfying every constraint."""
    return {
        "first_name": "Jo",
        "last_name": "Doe",
        "gender": "Male",
        "email": "jo@x.com",
        "phone_number": "1234567890",
        "job_title": "Eng",
        "department": "R&D",
    }


@pytest.fixture
def other_payload():
    """A second valid body, different in every field."""
    return {
        "first_name": "Maria",
        "last_name": "Rossi",
        "gender": "Female",
        "email": "maria.rossi@acme.io",
        "phone_number": "+39 055 123456",
        "job_title": "Accountant",
        "department": "Finance",
    }
