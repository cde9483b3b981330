"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import vehicles

router = APIRouter()

router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
