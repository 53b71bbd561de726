"""
Service layer abstraction.

Each service encapsulates the business logic for a domain.  Handlers
in ``api`` only translate HTTP to service calls and service errors to
status codes.
"""

from .product_service import ProductService

__all__ = ["ProductService"]
