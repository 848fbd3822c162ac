"""
MongoDB Employee Repository
===========================

Concrete implementation of EmployeeRepository using MongoDB.
"""
import logging
from typing import Callable, List, Optional, TypeVar

import pymongo
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from employee_api.domain.constants.employee_fields import EmployeeFields
from employee_api.domain.models.employee import Employee
from employee_api.domain.repositories.employee_repository import EmployeeRepository
from employee_api.exceptions import InvalidIdentifierError, StorageError, StorageTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MongoEmployeeRepository(EmployeeRepository):
    """
    MongoDB implementation of EmployeeRepository.

    Documents are keyed by MongoDB's generated ``_id`` ObjectId. Every
    driver call runs under ``pymongo.timeout`` so it cannot outlive the
    request that issued it.
    """

    def __init__(self, collection: Collection, timeout_seconds: Optional[float] = None):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Collection holding employee documents
            timeout_seconds: Time budget for each driver call (None for no limit)
        """
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def _run(self, action: str, operation: Callable[[], T]) -> T:
        """Run a driver call, translating driver failures into StorageError."""
        try:
            with pymongo.timeout(self._timeout_seconds):
                return operation()
        except PyMongoError as exc:
            if exc.timeout:
                logger.error(f"⏱️  Timed out trying to {action}: {exc}")
                raise StorageTimeoutError(f"Timed out trying to {action}") from exc
            logger.error(f"❌ Failed to {action}: {exc}")
            raise StorageError(f"Failed to {action}") from exc

    def _filter_by_id(self, employee_id: str) -> dict:
        if not ObjectId.is_valid(employee_id):
            raise InvalidIdentifierError(employee_id)
        return {EmployeeFields.MONGO_ID: ObjectId(employee_id)}

    def _to_entity(self, doc: dict) -> Employee:
        """Convert MongoDB document to Employee entity."""
        values = {}
        for field_name in EmployeeFields.ATTRIBUTES:
            value = doc.get(field_name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                logger.error(
                    f"❌ Employee {doc.get(EmployeeFields.MONGO_ID)} has non-string "
                    f"{field_name}: {type(value).__name__}"
                )
                raise StorageError("Failed to decode employee")
            values[field_name] = value

        return Employee(id=str(doc[EmployeeFields.MONGO_ID]), **values)

    def _to_document(self, employee: Employee) -> dict:
        """Convert Employee entity to MongoDB document (without _id)."""
        return {
            field_name: getattr(employee, field_name)
            for field_name in EmployeeFields.ATTRIBUTES
        }

    def is_valid_id(self, employee_id: str) -> bool:
        """Check the raw identifier is a 24-hex-character ObjectId."""
        return ObjectId.is_valid(employee_id)

    def find_all(self) -> List[Employee]:
        """Find all employees, all-or-nothing."""
        docs = self._run("fetch employees", lambda: list(self._collection.find({})))
        return [self._to_entity(doc) for doc in docs]

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        """Find an employee by its ID."""
        query = self._filter_by_id(employee_id)
        doc = self._run("fetch employee", lambda: self._collection.find_one(query))
        if not doc:
            return None
        return self._to_entity(doc)

    def insert_one(self, employee: Employee) -> str:
        """Insert a new employee and return the generated id."""
        doc = self._to_document(employee)
        result = self._run("create employee", lambda: self._collection.insert_one(doc))
        return str(result.inserted_id)

    def replace_by_id(self, employee_id: str, employee: Employee) -> bool:
        """Replace all fields of an employee, keeping its _id."""
        query = self._filter_by_id(employee_id)
        doc = self._to_document(employee)
        result = self._run("update employee", lambda: self._collection.replace_one(query, doc))
        return result.matched_count > 0

    def delete_by_id(self, employee_id: str) -> bool:
        """Delete an employee."""
        query = self._filter_by_id(employee_id)
        result = self._run("delete employee", lambda: self._collection.delete_one(query))
        return result.deleted_count > 0
