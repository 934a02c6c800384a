from fastapi import APIRouter

from classboard.api import auth, classes, dashboard, system

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(auth.router)
api_router.include_router(classes.router)
api_router.include_router(dashboard.router)
