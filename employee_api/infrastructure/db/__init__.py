from .mongo_connection import MongoConnection
from .mongo_employee_repository import MongoEmployeeRepository

__all__ = ["MongoConnection", "MongoEmployeeRepository"]
