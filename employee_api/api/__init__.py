"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers
- Dependencies: resolve services from the application's DI container
"""
