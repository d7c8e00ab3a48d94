"""
app/api/listing_controller.py

Handles requests to /services/.

  POST /services/  Register (or replace) service listings.  Body is a JSON
                   array of listings; FastAPI/pydantic rejects malformed
                   entries with 422 before the service is called.
  GET  /services/  List the listings currently eligible for
                   recommendation, optionally narrowed by category.
"""

from typing import List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.core.exceptions import AppBaseException
from app.core.logger import get_logger
from app.models.listing_models import (
    ListingCreate,
    ListingsResponse,
    RegisterListingsResponse,
)
from app.services.listing_service import listing_service

logger = get_logger(__name__)

router = APIRouter(prefix="/services", tags=["Services"])


def _err(message: str, status: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


@router.post("/", response_model=RegisterListingsResponse, summary="Register service listings")
async def register_listings(body: List[ListingCreate]) -> JSONResponse:
    logger.info("Listing registration received — %d listing(s).", len(body))
    try:
        result = listing_service.register(body)
    except AppBaseException as exc:
        logger.exception("Listing registration failed: %s", exc)
        return _err("Failed to register service listings.", status=500)
    return JSONResponse(status_code=200, content=result.model_dump())


@router.get("/", response_model=ListingsResponse, summary="List active service listings")
async def list_listings(
    category: Optional[str] = Query(default=None),
) -> JSONResponse:
    try:
        result = listing_service.list_active(category)
    except AppBaseException as exc:
        logger.exception("Listing catalog read failed: %s", exc)
        return _err("Failed to read service listings.", status=500)
    return JSONResponse(status_code=200, content=result.model_dump())
