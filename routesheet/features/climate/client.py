"""
Daymet client.

Looks up daily climate values for a batch of point/day queries using the
Daymet single-pixel API. Queries are issued one after another, in order;
the first failure aborts the whole batch.
"""

import logging
from typing import List, Optional, Protocol, Sequence

import httpx

from routesheet.config import settings
from routesheet.shared.errors import NetworkError, ParseError

from .models import DAYMET_VARIABLES, ClimateQuery, Observation

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Query to Daymet failed"


class ClimateService(Protocol):
    """Anything that returns one observation per query, in query order."""

    async def augment(self, queries: Sequence[ClimateQuery]) -> List[Observation]:
        ...


def parse_observation(payload: object) -> Observation:
    """
    Read the first day of a Daymet JSON response.

    Daymet labels columns with units, e.g. "tmax (deg c)"; only the
    variable name before the space is used.

    Raises:
        ParseError: If the payload has no data for the day
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), dict):
        raise ParseError(f"{ERROR_PREFIX}: response has no data")

    values = {}
    for label, series in payload["data"].items():
        variable = label.split(" ", 1)[0]
        name = DAYMET_VARIABLES.get(variable)
        if name is None:
            continue
        if not isinstance(series, list) or not series:
            raise ParseError(f"{ERROR_PREFIX}: no {variable} value for the requested day")
        value = series[0]
        if value is not None and not isinstance(value, (int, float)):
            raise ParseError(f"{ERROR_PREFIX}: {variable} is not numeric: {value!r}")
        values[name] = None if value is None else float(value)

    if not values:
        raise ParseError(f"{ERROR_PREFIX}: response has no climate variables")
    return Observation(**values)


class DaymetClient:
    """
    Async client for the Daymet single-pixel API.

    Usage:
        client = DaymetClient()
        observations = await client.augment(queries)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url or settings.daymet_api_url
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self._transport = transport

    @staticmethod
    def params_for(query: ClimateQuery) -> dict:
        day = query.date.isoformat()
        return {
            "lat": query.lat,
            "lon": query.long,
            "vars": ",".join(DAYMET_VARIABLES),
            "start": day,
            "end": day,
            "format": "json",
        }

    async def augment(self, queries: Sequence[ClimateQuery]) -> List[Observation]:
        """
        Fetch one observation per query.

        Returns:
            Observations in the same order as `queries`

        Raises:
            NetworkError: Transport failure or non-200 status
            ParseError: Malformed response body
        """
        observations = []

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport
        ) as client:
            for query in queries:
                observations.append(await self._fetch(client, query))

        logger.info(f"Fetched {len(observations)} Daymet observations")
        return observations

    async def _fetch(self, client: httpx.AsyncClient, query: ClimateQuery) -> Observation:
        params = self.params_for(query)
        logger.debug(f"GET {self.base_url} {params}")

        try:
            response = await client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Daymet unreachable: {e}")
            raise NetworkError(f"{ERROR_PREFIX}: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"Daymet error: {response.status_code} - {response.text[:200]}"
            )
            raise NetworkError(
                f"{ERROR_PREFIX}: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"{ERROR_PREFIX}: {e}") from e

        return parse_observation(payload)
