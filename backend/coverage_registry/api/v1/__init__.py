"""
API v1 module initialization.
"""

from fastapi import APIRouter
from .roles import router as roles_router
from .policies import router as policies_router
from .subscribers import router as subscribers_router
from .pricing import router as pricing_router

api_router = APIRouter()

api_router.include_router(roles_router, prefix="/roles", tags=["roles"])
api_router.include_router(policies_router, prefix="/policies", tags=["policies"])
api_router.include_router(subscribers_router, prefix="/subscribers", tags=["subscribers"])
api_router.include_router(pricing_router, prefix="/pricing", tags=["pricing"])
