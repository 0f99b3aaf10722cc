# Main application file

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from librestock.database import engine, Base
from librestock.core.config import settings
from librestock.core.errors import rate_limit_exceeded_handler
from librestock.core.rate_limiter import limiter
from librestock.models import registry  # noqa: F401  registers every table
from librestock.routers import (
    areas,
    audit_logs,
    branding,
    categories,
    clients,
    health,
    inventory,
    locations,
    orders,
    products,
    remote_desktop,
    suppliers,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("librestock")


# LIFESPAN

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ENV == "development":
        # Production schemas are managed by Alembic
        Base.metadata.create_all(bind=engine)
        logger.info("Development database tables ensured")

    if not settings.BETTER_AUTH_SECRET:
        logger.warning("BETTER_AUTH_SECRET is not set, authenticated endpoints will fail")

    yield


# APP INIT

app = FastAPI(
    title="LibreStock API",
    description="Inventory management for yacht provisioning",
    version="1.0.0",
    lifespan=lifespan,
)


# CORS (Token-based auth)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    rate_limit_exceeded_handler
)
app.add_middleware(SlowAPIMiddleware)


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

# Health checks and the redirector live outside the API prefix
app.include_router(health.router)
app.include_router(remote_desktop.router)

for api_router in (
    branding.router,
    categories.router,
    products.router,
    locations.router,
    areas.router,
    inventory.router,
    suppliers.router,
    clients.router,
    orders.router,
    audit_logs.router,
):
    app.include_router(api_router, prefix=settings.API_PREFIX)


# ROOT

@app.get("/")
def root():
    return {"message": "LibreStock API is running"}
