from fastapi import APIRouter
from app.api.v1.endpoints import (
    synthesis,
    scene,
    archive
)

api_router = APIRouter(prefix="/v1")

api_router.include_router(
    synthesis.router,
    prefix="/synthesis",
    tags=["Planet Synthesis"]
)

api_router.include_router(
    scene.router,
    prefix="/scene",
    tags=["System Scene"]
)

api_router.include_router(
    archive.router,
    prefix="/archive",
    tags=["Archive Data"]
)
