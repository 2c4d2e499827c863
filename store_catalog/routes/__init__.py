"""API routes."""

from fastapi import APIRouter

from store_catalog.routes import stores

api_router = APIRouter()

# Store catalog endpoints
api_router.include_router(stores.router, prefix="/v1/stores", tags=["stores"])
