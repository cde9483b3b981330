"""
Service layer.

``vehicle_rules`` holds the pure validation functions,
``vehicle_store`` the SQLite persistence and ``vehicle_service`` the
orchestration used by the API handlers.
"""
