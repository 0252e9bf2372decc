# File: backend/app/api/v1/api.py
# Version: v0.2.0
"""
v1 API aggregator.

Routers included under /api:
- health
- solve
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router
from . import solve as solve_router

api_router = APIRouter()
api_router.include_router(health_router.router)
api_router.include_router(solve_router.router)
