from __future__ import annotations

from app.api.routes import books, health
from fastapi import APIRouter

api_router = APIRouter()

# Keep this list in the order you want routes registered.
for _mod in (
    health,
    books,
):
    api_router.include_router(_mod.router)
