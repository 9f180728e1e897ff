"""Routes for emissions calculation, offset pricing and status."""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from ..distance_resolver import DistanceLookupError
from ..models.calculation import CalculationResult
from ..schemas.calculator_schemas import CalculateRequest, ErrorResponse, OffsetResponse, StatusResponse
from ..services.calculator_service import CalculatorService
from ..services.singleton import get_calculator_service
from ..validator import FormValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["calculator"])

CALCULATION_FAILED = "Could not calculate emissions. Please check airport codes and try again."


@router.post("/calculate", response_model=CalculationResult)
async def calculate(
    request: CalculateRequest,
    calculator: CalculatorService = Depends(get_calculator_service),
):
    """
    Estimate flight emissions for the calculator form.
    
    Args:
        request: Raw form values
        
    Returns:
        Display strings, raw figures and comparisons
    """
    dismiss_after = calculator.config.ERROR_DISMISS_SECONDS
    try:
        return await calculator.calculate(
            request.departure,
            request.arrival,
            request.cabin_class,
            request.passengers,
        )
    except FormValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=ErrorResponse(error=e.message, field=e.field, dismiss_after_seconds=dismiss_after).model_dump(),
        )
    except DistanceLookupError as e:
        logger.error(f"Error calculating emissions: {e} {e.details}")
        raise HTTPException(
            status_code=502,
            detail=ErrorResponse(error=CALCULATION_FAILED, dismiss_after_seconds=dismiss_after).model_dump(),
        )


@router.get("/offset", response_model=OffsetResponse)
async def get_offset(
    amount: Optional[str] = None,
    calculator: CalculatorService = Depends(get_calculator_service),
):
    """
    Price a carbon offset. Meant to be called on every edit of the amount field.
    
    Args:
        amount: Amount in kg as typed; non-numeric input prices 0 kg
    """
    return OffsetResponse(**calculator.get_offset(amount))


@router.get("/status", response_model=StatusResponse)
async def get_status(calculator: CalculatorService = Depends(get_calculator_service)):
    """Get the loading flag for in-flight calculations."""
    return StatusResponse(**calculator.get_status())
