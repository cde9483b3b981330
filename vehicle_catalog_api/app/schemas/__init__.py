"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the SQLite store so the API
representation stays decoupled from persistence.
"""
