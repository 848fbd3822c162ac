"""
Application Layer
=================

Use cases, services and DTOs that orchestrate the domain.
"""
