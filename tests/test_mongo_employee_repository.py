"""
Tests for the MongoDB employee repository against a mocked collection.
"""
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ExecutionTimeout, NetworkTimeout, PyMongoError

from employee_api.domain.models.employee import Employee
from employee_api.exceptions import InvalidIdentifierError, StorageError, StorageTimeoutError
from employee_api.infrastructure.db.mongo_employee_repository import MongoEmployeeRepository


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def mongo_repository(collection):
    return MongoEmployeeRepository(collection, timeout_seconds=2.0)


@pytest.fixture
def document(valid_payload):
    return {"_id": ObjectId(), **valid_payload}


class TestReads:

    def test_find_all_converts_documents(self, mongo_repository, collection, document, valid_payload):
        collection.find.return_value = [document]

        employees = mongo_repository.find_all()

        collection.find.assert_called_once_with({})
        assert employees == [Employee(id=str(document["_id"]), **valid_payload)]

    def test_find_all_on_empty_collection(self, mongo_repository, collection):
        collection.find.return_value = []
        assert mongo_repository.find_all() == []

    def test_missing_and_null_fields_decode_as_empty(self, mongo_repository, collection):
        oid = ObjectId()
        collection.find.return_value = [{"_id": oid, "first_name": "Jo", "email": None}]

        employee = mongo_repository.find_all()[0]

        assert employee.id == str(oid)
        assert employee.first_name == "Jo"
        assert employee.email == ""
        assert employee.department == ""

    def test_undecodable_document_fails_whole_listing(self, mongo_repository, collection, document):
        bad = {**document, "_id": ObjectId(), "phone_number": 1234567890}
        collection.find.return_value = [document, bad]

        with pytest.raises(StorageError) as exc_info:
            mongo_repository.find_all()

        assert exc_info.value.message == "Failed to decode employee"

    def test_find_by_id_uses_object_id_filter(self, mongo_repository, collection, document):
        collection.find_one.return_value = document

        employee = mongo_repository.find_by_id(str(document["_id"]))

        collection.find_one.assert_called_once_with({"_id": document["_id"]})
        assert employee.id == str(document["_id"])

    def test_find_by_id_missing_returns_none(self, mongo_repository, collection):
        collection.find_one.return_value = None
        assert mongo_repository.find_by_id(str(ObjectId())) is None


class TestWrites:

    def test_insert_returns_generated_id(self, mongo_repository, collection, valid_payload):
        oid = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=oid)

        employee_id = mongo_repository.insert_one(Employee(id="ignored", **valid_payload))

        assert employee_id == str(oid)
        collection.insert_one.assert_called_once_with(valid_payload)

    def test_replace_is_a_full_document_replace(self, mongo_repository, collection, valid_payload):
        oid = ObjectId()
        collection.replace_one.return_value = MagicMock(matched_count=1)

        matched = mongo_repository.replace_by_id(str(oid), Employee(id=str(ObjectId()), **valid_payload))

        assert matched is True
        collection.replace_one.assert_called_once_with({"_id": oid}, valid_payload)
        collection.update_one.assert_not_called()

    def test_replace_without_match_returns_false(self, mongo_repository, collection, valid_payload):
        collection.replace_one.return_value = MagicMock(matched_count=0)
        assert mongo_repository.replace_by_id(str(ObjectId()), Employee(**valid_payload)) is False

    @pytest.mark.parametrize("deleted_count, expected", [(1, True), (0, False)])
    def test_delete_reports_whether_anything_was_deleted(self, mongo_repository, collection, deleted_count, expected):
        oid = ObjectId()
        collection.delete_one.return_value = MagicMock(deleted_count=deleted_count)

        assert mongo_repository.delete_by_id(str(oid)) is expected
        collection.delete_one.assert_called_once_with({"_id": oid})


class TestIdentifiers:

    @pytest.mark.parametrize("raw, valid", [
        ("6928422b8c9933d948cfdc21", True),
        ("not-a-valid-id", False),
        ("6928422b8c9933d948cfdc2", False),
        ("", False),
    ])
    def test_is_valid_id(self, mongo_repository, raw, valid):
        assert mongo_repository.is_valid_id(raw) is valid

    def test_invalid_id_never_reaches_collection(self, mongo_repository, collection):
        with pytest.raises(InvalidIdentifierError):
            mongo_repository.delete_by_id("not-a-valid-id")

        collection.delete_one.assert_not_called()


class TestDriverErrors:

    def test_driver_error_becomes_storage_error_without_detail(self, mongo_repository, collection):
        collection.find.side_effect = PyMongoError("connection refused by 10.0.0.5:27017")

        with pytest.raises(StorageError) as exc_info:
            mongo_repository.find_all()

        assert exc_info.value.message == "Failed to fetch employees"
        assert "10.0.0.5" not in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, PyMongoError)

    @pytest.mark.parametrize("error", [NetworkTimeout("timed out"), ExecutionTimeout("operation exceeded time limit")])
    def test_timeouts_become_storage_timeout(self, mongo_repository, collection, valid_payload, error):
        collection.insert_one.side_effect = error

        with pytest.raises(StorageTimeoutError) as exc_info:
            mongo_repository.insert_one(Employee(**valid_payload))

        assert exc_info.value.status_code == 504

    def test_no_timeout_configured(self, collection):
        collection.find.return_value = []
        assert MongoEmployeeRepository(collection).find_all() == []
