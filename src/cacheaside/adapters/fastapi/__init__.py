"""FastAPI adapter for cacheaside."""

from cacheaside.adapters.fastapi.app import build_coordinator, create_app
from cacheaside.adapters.fastapi.router import PersonModel, create_router
from cacheaside.adapters.fastapi.settings import Settings

__all__ = [
    "create_app",
    "build_coordinator",
    "create_router",
    "PersonModel",
    "Settings",
]
