# src/trdp_config/api/routes.py
from fastapi import APIRouter
from .endpoints.configs import config_router
from .endpoints.engine import engine_router

api_router = APIRouter()
api_router.include_router(config_router, tags=["configs"])
api_router.include_router(engine_router, tags=["engine"])
