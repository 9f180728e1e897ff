"""Tests for route finder and analytics services."""

import asyncio
import math

import pytest
from ecoflight.services.analytics_service import AnalyticsService, progress_offset
from ecoflight.services.finder_service import RouteFinderService
from ecoflight.validator import FormValidationError


def test_route_search_results():
    """Test the three sample options and heading."""
    finder = RouteFinderService(delay_seconds=0)
    result = asyncio.run(finder.search("London", "New York", "2025-12-25"))
    
    assert result["heading"] == "Eco-Friendly Options from London to New York"
    assert result["date"] == "Thursday, December 25, 2025"
    assert [o.flight_no for o in result["options"]] == ["EA 123", "GW 456", "SE 789"]
    assert result["options"][2].stops == "1 stop (DXB)"


def test_route_search_without_date():
    """Test the date is omitted when not given."""
    finder = RouteFinderService(delay_seconds=0)
    assert asyncio.run(finder.search("Paris", "Rome"))["date"] is None


def test_route_search_requires_both_endpoints():
    """Test empty endpoints are rejected."""
    finder = RouteFinderService(delay_seconds=0)
    with pytest.raises(FormValidationError):
        asyncio.run(finder.search("Paris", ""))


@pytest.mark.parametrize("value,expected", [
    (0, 2 * math.pi * 15.9155),
    (100, 0.0),
    (50, math.pi * 15.9155),
])
def test_progress_offset(value, expected):
    """Test progress circle dash offsets."""
    assert progress_offset(value) == pytest.approx(expected)


def test_load_dashboard():
    """Test dashboard content for a period."""
    analytics = AnalyticsService(delay_seconds=0)
    dashboard = asyncio.run(analytics.load_dashboard("This Year", [75.0]))
    
    assert dashboard["period"] == "This Year"
    assert dashboard["chart_url"] == "https://via.placeholder.com/600x300?text=Chart+Data"
    assert dashboard["progress"][0]["value"] == 75.0
    assert dashboard["progress"][0]["offset"] == pytest.approx(0.25 * 2 * math.pi * 15.9155)
