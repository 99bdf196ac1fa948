# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from app.core.config import get_settings
from app.services.sync_service import SyncService
from app.state import build_state

# Routers
from app.routers.products import router as products_router
from app.routers.cart import router as cart_router
from app.routers.orders import router as orders_router
from app.routers.stats import router as stats_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Build the in-memory state around one store client.
      - Load catalog and order history (concurrently). A failure is
        logged and kept on state.last_error; the API still starts.

    Shutdown:
      - Close the store client.
    """
    state = build_state()
    app.state.inventory = state

    logger.info("🔄 Startup: Loading catalog and orders from %s ...", settings.STORE_API_URL)
    result = await SyncService().refresh(state)
    if result.error:
        logger.error("❌ Startup: catalog load FAILED: %s", result.error)
    else:
        logger.info("✅ Startup: %s products, %s orders loaded.", result.products, result.orders)

    try:
        yield
    finally:
        await state.store.aclose()


app = FastAPI(
    title=settings.PROJECT_NAME or "Inventory Memo API",
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Versioned API prefix, e.g. /api/v1
app.include_router(products_router, prefix=settings.API_V1_STR)
app.include_router(cart_router, prefix=settings.API_V1_STR)
app.include_router(orders_router, prefix=settings.API_V1_STR)
app.include_router(stats_router, prefix=settings.API_V1_STR)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "inventory-memo"}
