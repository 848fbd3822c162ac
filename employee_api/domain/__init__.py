"""
Domain Layer
============

Business entities, constraints and repository contracts.
No framework or database dependencies live here.
"""
