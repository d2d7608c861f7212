"""
Geo-6 POI Async Provider

This module provides the Geo6POIProvider class for searching points of interest
with the Geo-6 API (api.geo6.be). Both API generations are served by the same
class, the authentication strategy given at construction selects which one.
"""

import ipaddress
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlsplit

import httpx

from .auth import AuthStrategy, BearerTokenAuth, LegacyHmacAuth, RequestSigner
from .exceptions import (
    ConfigurationError,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from .mapper import mapFeatureCollection, resolveLanguage
from .models import POIAddress
from .query import GeocodeQuery, ReverseQuery

logger = logging.getLogger(__name__)


def isIpAddress(text: str) -> bool:
    """Check if text is an IPv4 or IPv6 address (IPv4-mapped IPv6 included)."""
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


class Geo6POIProvider:
    """Async geocoding provider for the Geo-6 POI API, dood!

    Every geocodeQuery() call validates the query, signs it and performs
    exactly one HTTP request. Nothing is cached between calls.

    Example:
        >>> from lib.geo6_poi import BearerTokenAuth, GeocodeQuery, Geo6POIProvider
        >>>
        >>> provider = Geo6POIProvider(auth=BearerTokenAuth(clientId="my-id", privateKey="my-key"))
        >>> results = await provider.geocodeQuery(GeocodeQuery.create("Manneken Pis").withLocale("fr"))
        >>> for poi in results:
        ...     print(f"{poi.name}: {poi.coordinates.latitude}, {poi.coordinates.longitude}")
    """

    PROVIDER_NAME = "geo6-poi"
    API_BASE_URL = "https://api.geo6.be/"
    LEGACY_API_PATH = "/geocode/getPOI"
    TOKEN_API_PATH = "/geocode/getPOIList"
    DEFAULT_REFERER = "http://localhost/"

    def __init__(
        self,
        auth: AuthStrategy,
        httpClient: Optional[httpx.AsyncClient] = None,
        endpoint: Optional[str] = None,
        referer: Optional[str] = None,
        requestTimeout: int = 10,
    ):
        """Initialize Geo-6 POI provider, dood!

        Args:
            auth: LegacyHmacAuth for the legacy API, BearerTokenAuth for the newer one
            httpClient: HTTP client used to send requests (default: new client per request)
            endpoint: API base URL (default: https://api.geo6.be/)
            referer: Value of the Referer header (default: http://localhost/)
            requestTimeout: HTTP request timeout in seconds, used when no client is given (default: 10)
        """
        match auth:
            case LegacyHmacAuth():
                self.apiPath = self.LEGACY_API_PATH
                self.dedupeTranslations = False
            case BearerTokenAuth():
                self.apiPath = self.TOKEN_API_PATH
                self.dedupeTranslations = True
            case _:
                raise ConfigurationError(f"Unknown authentication strategy: {type(auth).__name__}")

        self.auth = auth
        self.httpClient = httpClient
        self.endpoint = (endpoint or self.API_BASE_URL).rstrip("/")
        self.referer = referer or self.DEFAULT_REFERER
        self.requestTimeout = requestTimeout

        apiHost = urlsplit(self.endpoint).hostname or ""
        self.signer = RequestSigner(auth, self.getName(), apiHost, self.apiPath)

    def getName(self) -> str:
        return self.PROVIDER_NAME

    async def geocodeQuery(self, query: GeocodeQuery) -> List[POIAddress]:
        """Search points of interest matching the query text.

        Args:
            query: Query with text, optional locale and optional
                ``source`` / ``locality`` data filters

        Returns:
            List of addresses (possibly empty)

        Raises:
            UnsupportedOperation: If query text is an IP address
            InvalidArgument: If query text is empty
            InvalidServerResponse: If API response can't be used
            ConfigurationError: If request can't be signed
            httpx.HTTPError: Transport errors are not handled here
        """
        search = query.text

        # This API does not support IP
        if isIpAddress(search):
            raise UnsupportedOperation(
                "The Geo-6 POI provider does not support IP addresses, only street addresses."
            )

        # Save a request if no valid query entered
        if not search or not search.strip():
            raise InvalidArgument("Query cannot be empty.")

        language = resolveLanguage(query.locale)
        url = self.buildUrl(search, query.getData("source"), query.getData("locality"))

        data = await self._executeQuery(url)
        return mapFeatureCollection(
            self.getName(),
            data,
            language=language,
            dedupeTranslations=self.dedupeTranslations,
        )

    async def reverseQuery(self, query: ReverseQuery) -> List[POIAddress]:
        # This API does not support reverse geocoding
        raise UnsupportedOperation("The Geo-6 POI provider does not support reverse geocoding.")

    def buildUrl(self, search: str, source: Optional[str] = None, locality: Optional[str] = None) -> str:
        """Build request URL, filters are path segments, never query parameters.

        Locality is only used together with source.
        """
        segments = []
        if source is not None:
            segments.append(str(source))
            if locality is not None:
                segments.append(str(locality))
        segments.append(search)

        return self.endpoint + self.apiPath + "".join("/" + quote(segment, safe="") for segment in segments)

    async def _executeQuery(self, url: str) -> Dict[str, Any]:
        """Send signed request and parse JSON response, dood!

        Single point for all HTTP requests. Builds headers, sends exactly one
        request and converts HTTP status problems into provider errors.

        Args:
            url: Full request URL

        Returns:
            Parsed JSON response

        Error Handling:
            - 401/403: InvalidCredentials
            - 429: QuotaExceeded
            - Other non-2xx: InvalidServerResponse
            - Empty or non-JSON body: InvalidServerResponse
            - Timeout / network errors: propagated as is
        """
        headers = {"Referer": self.referer}
        headers.update(self.signer.getHeaders())

        logger.debug(f"Making request to {url}")

        if self.httpClient is not None:
            response = await self._send(self.httpClient, url, headers)
        else:
            # Create new session for each request
            async with httpx.AsyncClient(timeout=self.requestTimeout) as session:
                response = await self._send(session, url, headers)

        statusCode = response.status_code
        if statusCode in (401, 403):
            logger.error(f"Invalid credentials: {statusCode}")
            raise InvalidCredentials(f'API access denied. Request: "{url}"', url, statusCode)
        elif statusCode == 429:
            logger.error("Daily quota exceeded")
            raise QuotaExceeded(f'Daily quota exceeded "{url}"', url, statusCode)
        elif statusCode >= 300:
            logger.error(f"API request failed: {statusCode}")
            logger.debug(f"Response text: {response.text}")
            raise InvalidServerResponse.forStatusCode(url, statusCode)

        body = response.text
        if not body.strip():
            logger.warning(f"Empty response for {url}")
            raise InvalidServerResponse.emptyResponse(url)

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise InvalidServerResponse.create(url) from e

        # API error
        if not isinstance(data, dict):
            logger.error(f"Unexpected JSON response type: {type(data).__name__}")
            raise InvalidServerResponse.create(url)

        logger.debug(f"API request successful: {statusCode}")
        return data

    async def _send(self, client: httpx.AsyncClient, url: str, headers: Dict[str, str]) -> httpx.Response:
        request = client.build_request("GET", url, headers=headers)
        return await client.send(request)
