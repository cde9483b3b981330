"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is split into ``core`` (configuration, database
access, logging and the error taxonomy), ``schemas`` (request and
response models), ``services`` (validation rules, the query composer
and the SQLite store) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
