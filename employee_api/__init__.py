"""
Employee API
============

CRUD HTTP backend for employee records stored in MongoDB.
"""
__version__ = "1.0.0"
