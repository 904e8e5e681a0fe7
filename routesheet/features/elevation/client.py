"""
Elevation service client.

Sends route geometry (GeoJSON) to an elevation service and returns the
same structure with elevations added to every position.

A single best-effort request: no retry, and no timeout unless one is
configured. Whether to continue without elevation on failure is up to the
caller.
"""

import json
import logging
from typing import Any, Optional, Protocol

import httpx

from routesheet.config import settings
from routesheet.shared.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Query to Elevation Service failed"


class ElevationService(Protocol):
    """Anything that can enrich GeoJSON with elevations."""

    async def augment(self, geojson: Any) -> Any:
        ...


class ElevationClient:
    """
    Async client for the hosted elevation service.

    Usage:
        client = ElevationClient()
        enriched = await client.augment(feature_collection)
    """

    HEADERS = {
        "Accept": "application/json",
        "Content-Type": "text/plain",
    }

    def __init__(
        self,
        server: Optional[str] = None,
        port: Optional[int] = None,
        protocol: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.server = server or settings.elevation_server
        self.port = port or settings.elevation_port
        self.protocol = protocol or settings.elevation_protocol
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self.protocol}://{self.server}:{self.port}/"

    async def augment(self, geojson: Any) -> Any:
        """
        Add elevations to a GeoJSON structure.

        Raises:
            NetworkError: Transport failure or non-200 status
            ParseError: Response body is not JSON
        """
        body = json.dumps(geojson)
        logger.debug(f"POST {self.url} ({len(body)} bytes)")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport
            ) as client:
                response = await client.post(
                    self.url,
                    content=body,
                    headers=self.HEADERS
                )
        except httpx.HTTPError as e:
            logger.warning(f"Elevation service unreachable: {e}")
            raise NetworkError(f"{ERROR_PREFIX}: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"Elevation service error: {response.status_code} {response.reason_phrase}"
            )
            raise NetworkError(
                f"{ERROR_PREFIX}: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase
            )

        try:
            return json.loads(response.text)
        except ValueError as e:
            raise ParseError(f"{ERROR_PREFIX}: {e}") from e
