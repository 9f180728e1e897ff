"""Route distance resolvers.

Every resolver exposes the same awaitable ``resolve_distance(departure, arrival)``
so callers do not change when the static table is swapped for a remote service.
"""

import asyncio
import logging
import math
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .models.route import RouteTable

logger = logging.getLogger(__name__)


class DistanceLookupError(Exception):
    """Raised when a remote distance lookup fails."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message)
        self.details = details or {}


class DistanceResolver:
    """Base class for distance resolvers."""

    async def resolve_distance(self, departure: str, arrival: str) -> float:
        """
        Resolve the distance between two airports.

        Args:
            departure: Upper-case departure airport code
            arrival: Upper-case arrival airport code

        Returns:
            Distance in km
        """
        raise NotImplementedError


class RouteTableResolver(DistanceResolver):
    """Resolves distances from a static route table after a simulated delay.

    Unknown pairs resolve to the table's default distance; this resolver never
    fails.
    """

    def __init__(self, route_table: Optional[RouteTable] = None, delay_seconds: float = 0.8):
        self.route_table = route_table or RouteTable()
        self.delay_seconds = delay_seconds

    async def resolve_distance(self, departure: str, arrival: str) -> float:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        distance = self.route_table.lookup(departure, arrival)
        logger.debug(f"Resolved {departure}-{arrival} to {distance} km")
        return distance


class RemoteDistanceResolver(DistanceResolver):
    """Resolves distances from an HTTP distance service.

    Expects ``GET {base_url}/distance?from=XXX&to=YYY`` to answer
    ``{"distance_km": <number>}``. A 404 means the route is unknown and gives
    the default distance; any other failure raises DistanceLookupError.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 10,
        retries: int = 3,
        default_distance_km: float = 2500,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize remote resolver.

        Args:
            base_url: Base URL of the distance service
            timeout: Request timeout in seconds
            retries: Retries for 5xx responses and connection errors
            default_distance_km: Distance for routes the service does not know
            session: Pre-built session (a retrying session is created if omitted)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_distance_km = default_distance_km

        if session is None:
            session = requests.Session()
            retry_strategy = Retry(
                total=retries,
                backoff_factor=1,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def _fetch_distance(self, departure: str, arrival: str) -> float:
        url = f"{self.base_url}/distance"
        params = {"from": departure, "to": arrival}

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            logger.error(f"Distance lookup timed out for {departure}-{arrival}")
            raise DistanceLookupError("Distance service timed out", {"route": f"{departure}-{arrival}"}) from e
        except requests.RequestException as e:
            logger.error(f"Distance lookup failed for {departure}-{arrival}: {e}")
            raise DistanceLookupError("Distance service unavailable", {"route": f"{departure}-{arrival}"}) from e

        if response.status_code == 404:
            logger.info(f"Route {departure}-{arrival} unknown to distance service, using default")
            return self.default_distance_km

        if response.status_code != 200:
            logger.error(f"Distance service returned {response.status_code} for {departure}-{arrival}")
            raise DistanceLookupError(
                f"Distance service returned HTTP {response.status_code}",
                {"status_code": response.status_code},
            )

        try:
            distance = float(response.json()["distance_km"])
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed distance payload for {departure}-{arrival}: {e}")
            raise DistanceLookupError("Malformed distance service response") from e

        if not math.isfinite(distance) or distance < 0:
            logger.error(f"Invalid distance {distance} for {departure}-{arrival}")
            raise DistanceLookupError("Distance service returned an invalid distance", {"distance_km": distance})
        return distance

    async def resolve_distance(self, departure: str, arrival: str) -> float:
        # requests is blocking; keep the event loop free
        return await asyncio.to_thread(self._fetch_distance, departure, arrival)


def build_resolver(config, route_table: Optional[RouteTable] = None) -> DistanceResolver:
    """
    Create the resolver selected by configuration.

    Args:
        config: Application Config
        route_table: Route table for the static resolver

    Returns:
        RemoteDistanceResolver when DISTANCE_SERVICE_URL is set, else RouteTableResolver
    """
    table = route_table or RouteTable()
    if config.DISTANCE_SERVICE_URL:
        logger.info(f"Using remote distance service at {config.DISTANCE_SERVICE_URL}")
        return RemoteDistanceResolver(
            base_url=config.DISTANCE_SERVICE_URL,
            timeout=config.DISTANCE_SERVICE_TIMEOUT,
            retries=config.DISTANCE_SERVICE_RETRIES,
            default_distance_km=table.default_distance_km,
        )
    logger.info(f"Using static route table with {len(table.distances)} routes")
    return RouteTableResolver(table, delay_seconds=config.RESOLVER_DELAY_SECONDS)
