"""
Top-level router.

Aggregates the endpoint routers.  When a new endpoint module is
added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import persons, welcome

router = APIRouter()

router.include_router(welcome.router, tags=["welcome"])
router.include_router(persons.router, prefix="/persons", tags=["persons"])
