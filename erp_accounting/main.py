"""
Small Business ERP Accounting — FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from erp_accounting.config import get_settings
from erp_accounting.api.health import router as health_router
from erp_accounting.api.ledgers import router as ledgers_router
from erp_accounting.api.vouchers import router as vouchers_router
from erp_accounting.api.reports import router as reports_router
from erp_accounting.api.inventory import router as inventory_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry bookkeeping, GST and inventory for a small business",
    debug=settings.DEBUG,
)


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """
    The database failed mid-request. The session is discarded
    without a commit, so nothing from this request is kept.
    """
    logger.error(f"Storage error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


# Register routers
app.include_router(health_router)
app.include_router(ledgers_router)
app.include_router(vouchers_router)
app.include_router(reports_router)
app.include_router(inventory_router)
