"""
Storefront Application

Multi-merchant food storefront: one cart across many merchants,
per-merchant delivery quotes, and a combined checkout message.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from .core.config import settings
from .routes import merchants_router, cart_router, checkout_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Default delivery rate: {settings.currency_symbol}{settings.default_delivery_fee_per_km}/km")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Multi-merchant ordering with per-merchant delivery quotes",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(merchants_router)
app.include_router(cart_router)
app.include_router(checkout_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "merchants": "/api/merchants",
            "cart": "/api/cart",
            "checkout": "/api/checkout",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
