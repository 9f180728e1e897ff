"""Routes for the analytics dashboard."""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..schemas.analytics_schemas import AnalyticsResponse
from ..services.analytics_service import AnalyticsService
from ..services.singleton import get_analytics_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse)
async def get_analytics(
    period: str = "This Month",
    progress: Optional[List[float]] = Query(None),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    """
    Load the dashboard for a time period.
    
    Args:
        period: Time period label (e.g. "This Month")
        progress: Percent values of the progress circles to draw
    """
    dashboard = await analytics.load_dashboard(period.strip(), progress or [])
    return AnalyticsResponse(**dashboard)
