"""Deals API module.

The registry raises one exception type per rejected outcome; this module maps
each of them to an HTTP status. ``legacy_router`` serves the same handlers
under the legacy root-level paths (``/createDeal``, ``/claimDeal/{id}``...).
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from deals.exceptions import (
    DealError,
    DealNotFoundError,
    DealExpirationError,
    DealSoldOutError,
    DealAlreadyClaimedError,
    InvalidDealDataError
)
from deals.models.deal import DealCreate, DealUpdate, DealResponse
from deals.services.deal_registry import DealRegistry
from deals.dependencies import get_deal_registry
from deals.logger import get_logger

logger = get_logger("api.deals")

router = APIRouter()
legacy_router = APIRouter()

_ERROR_STATUS = {
    DealNotFoundError: status.HTTP_404_NOT_FOUND,
    DealExpirationError: status.HTTP_410_GONE,
    DealSoldOutError: status.HTTP_410_GONE,
    DealAlreadyClaimedError: status.HTTP_410_GONE,
    InvalidDealDataError: status.HTTP_400_BAD_REQUEST,
}

def to_http_exception(error: DealError) -> HTTPException:
    """Map a registry error to the HTTP error returned to the client."""
    logger.info(f"{type(error).__name__} for deal {error.deal_id}: {error.message}")
    status_code = _ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    if isinstance(error, InvalidDealDataError):
        return HTTPException(
            status_code=status_code,
            detail={"message": error.message, "errors": error.validation_errors}
        )
    return HTTPException(status_code=status_code, detail=error.message)

@router.post("", response_model=DealResponse, status_code=status.HTTP_201_CREATED)
@legacy_router.post("/createDeal", response_model=DealResponse, status_code=status.HTTP_201_CREATED)
async def create_deal(
    deal_in: DealCreate,
    registry: DealRegistry = Depends(get_deal_registry)
):
    """Create a new deal"""
    try:
        deal = await registry.create_deal(
            item_count=deal_in.item_count,
            price=deal_in.price,
            end_time=deal_in.end_time
        )
    except DealError as e:
        raise to_http_exception(e)
    return DealResponse.from_deal(deal)

@router.put("/{deal_id}", response_model=DealResponse)
@legacy_router.put("/updateDeal/{deal_id}", response_model=DealResponse)
async def update_deal(
    deal_id: str,
    deal_in: DealUpdate,
    registry: DealRegistry = Depends(get_deal_registry)
):
    """Replace a deal's item count and end time"""
    try:
        deal = await registry.update_deal(
            deal_id,
            item_count=deal_in.item_count,
            end_time=deal_in.end_time
        )
    except DealError as e:
        raise to_http_exception(e)
    return DealResponse.from_deal(deal)

@router.post("/{deal_id}/claim", response_model=DealResponse)
@legacy_router.post("/claimDeal/{deal_id}", response_model=DealResponse)
async def claim_deal(
    deal_id: str,
    user_id: str = Query(..., alias="userId", description="Identifier of the claiming user"),
    registry: DealRegistry = Depends(get_deal_registry)
):
    """Claim one slot of a deal for a user"""
    try:
        deal = await registry.claim_deal(deal_id, user_id)
    except DealError as e:
        raise to_http_exception(e)
    return DealResponse.from_deal(deal)

@router.post("/{deal_id}/end", response_model=DealResponse)
@legacy_router.post("/endDeal/{deal_id}", response_model=DealResponse)
async def end_deal(
    deal_id: str,
    registry: DealRegistry = Depends(get_deal_registry)
):
    """End a deal and return its final state"""
    try:
        deal = await registry.end_deal(deal_id)
    except DealError as e:
        raise to_http_exception(e)
    return DealResponse.from_deal(deal)
