"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import todos, users

router = APIRouter()

router.include_router(todos.router, prefix="/todos", tags=["todos"])
router.include_router(users.router, prefix="/users", tags=["users"])
