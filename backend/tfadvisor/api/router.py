"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from tfadvisor.api.health import router as health_router
from tfadvisor.api.repository import router as repository_router
from tfadvisor.api.validation import router as validation_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validate / suggest
api_router.include_router(validation_router, tags=["Validation"])

# Patterns and guidance documents
api_router.include_router(repository_router, tags=["Repository"])
