# API Routes

from .merchants import router as merchants_router
from .cart import router as cart_router
from .checkout import router as checkout_router

__all__ = ["merchants_router", "cart_router", "checkout_router"]
