"""HTTP routes."""

from fastapi import APIRouter

from rolegate.api import auth, data, health, upload, users

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, tags=["users"])
router.include_router(data.router, tags=["data"])
router.include_router(upload.router, tags=["upload"])
