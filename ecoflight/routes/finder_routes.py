"""Routes for the eco route finder."""

import logging
from fastapi import APIRouter, Depends, HTTPException

from ..schemas.finder_schemas import RouteSearchRequest, RouteSearchResponse
from ..services.finder_service import RouteFinderService
from ..services.singleton import get_finder_service
from ..validator import FormValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/routes", tags=["routes"])


@router.post("/search", response_model=RouteSearchResponse)
async def search_routes(
    request: RouteSearchRequest,
    finder: RouteFinderService = Depends(get_finder_service),
):
    """
    Find eco-friendly flight options.
    
    Returns:
        Heading, formatted travel date and options
    """
    try:
        result = await finder.search(request.origin, request.destination, request.date)
    except FormValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid travel date: {e}")
    return RouteSearchResponse(**result)
