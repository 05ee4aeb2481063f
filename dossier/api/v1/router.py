"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Routes get
their services from dossier.api.v1.dependencies.
"""

from fastapi import APIRouter

from dossier.api.v1.endpoints import (
    attachments,
    documents,
    expirations,
    groups,
    health,
    hirings,
    profiles,
    requisites,
    services,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(requisites.router, prefix="/requisites", tags=["requisites"])
api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(hirings.router, prefix="/hirings", tags=["hirings"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(
    attachments.router, prefix="/attachments", tags=["attachments"]
)
api_router.include_router(
    expirations.router, prefix="/expirations", tags=["expirations"]
)
