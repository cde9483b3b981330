"""Configuration, database access, logging and the error taxonomy."""
