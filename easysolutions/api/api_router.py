from fastapi import APIRouter
from easysolutions.api.endpoints import health, catalog, contact

api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(catalog.router, tags=["Catalog"])
api_router.include_router(contact.router, tags=["Contact"])
