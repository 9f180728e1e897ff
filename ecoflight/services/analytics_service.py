"""Analytics dashboard with placeholder charts."""

import asyncio
import logging
import math
from typing import Dict, List

from ..config import CHART_PLACEHOLDER_URL, PROGRESS_CIRCLE_RADIUS

logger = logging.getLogger(__name__)

PROGRESS_CIRCUMFERENCE = 2 * math.pi * PROGRESS_CIRCLE_RADIUS


def progress_offset(value: float) -> float:
    """Stroke dash offset drawing `value` percent of a progress circle."""
    return PROGRESS_CIRCUMFERENCE - (value / 100) * PROGRESS_CIRCUMFERENCE


class AnalyticsService:
    """Serves the dashboard for a time period."""
    
    def __init__(self, delay_seconds: float = 1.0):
        self.delay_seconds = delay_seconds
    
    async def load_dashboard(self, period: str, progress_values: List[float]) -> Dict:
        logger.info(f"Loading data for: {period}")
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        
        return {
            "period": period,
            "chart_url": CHART_PLACEHOLDER_URL,
            "progress": [
                {"value": value, "offset": progress_offset(value)}
                for value in progress_values
            ],
        }
