"""
Top-level router for version 1 of the API.

When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todo" paths internally, so no prefix.
router.include_router(todos.router, tags=["todos"])
