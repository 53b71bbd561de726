"""
Top‑level API router.

Aggregates domain‑specific routers under a unified prefix.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, products

router = APIRouter()

# The browser client calls the singular ``/product`` path.
router.include_router(products.router, prefix="/product", tags=["products"])
router.include_router(health.router, prefix="/health", tags=["health"])
