"""
Infrastructure Layer
====================

Concrete implementations of domain repositories (MongoDB).
"""
