"""
Geocoder factory: builds Geo6POIProvider from the [geo6-poi] config section
"""

import logging
from typing import Any, Dict, Optional

import httpx

from lib.geo6_poi import AuthStrategy, BearerTokenAuth, ConfigurationError, Geo6POIProvider, LegacyHmacAuth

logger = logging.getLogger(__name__)

API_LEGACY = "legacy"
API_TOKEN = "token"


def createAuthStrategy(config: Dict[str, Any]) -> AuthStrategy:
    """
    Create authentication strategy from configuration.

    Args:
        config: The [geo6-poi] configuration section

    Returns:
        LegacyHmacAuth for api = "legacy", BearerTokenAuth for api = "token" (default)

    Raises:
        ConfigurationError: If api type is unknown or credentials are missing
    """
    apiType = config.get("api", API_TOKEN)
    privateKey = config.get("private-key")
    if not privateKey:
        raise ConfigurationError("Geo-6 private-key is not specified in configuration")

    if apiType == API_LEGACY:
        customerId = config.get("customer-id")
        if not customerId:
            raise ConfigurationError("Geo-6 customer-id is not specified in configuration")
        return LegacyHmacAuth(customerId=str(customerId), privateKey=str(privateKey))

    elif apiType == API_TOKEN:
        clientId = config.get("client-id")
        if not clientId:
            raise ConfigurationError("Geo-6 client-id is not specified in configuration")
        return BearerTokenAuth(clientId=str(clientId), privateKey=str(privateKey))

    raise ConfigurationError(f"Unknown Geo-6 api type: {apiType} (expected '{API_LEGACY}' or '{API_TOKEN}')")


def createGeo6Provider(config: Dict[str, Any], httpClient: Optional[httpx.AsyncClient] = None) -> Geo6POIProvider:
    """
    Create Geo-6 POI provider from configuration.

    Args:
        config: The [geo6-poi] configuration section
        httpClient: Optional HTTP client to send requests with

    Raises:
        ConfigurationError: If configuration is missing or invalid

    Configuration format:
        {
            "api": "token",  # or "legacy"
            "client-id": "...",  # "customer-id" for legacy api
            "private-key": "...",
            "endpoint": "https://api.geo6.be/",
            "referer": "http://localhost/",
            "request-timeout": 10
        }
    """
    if not config:
        raise ConfigurationError("Geo-6 POI configuration is missing")

    auth = createAuthStrategy(config)

    try:
        requestTimeout = int(config.get("request-timeout", 10))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid Geo-6 request-timeout: {config.get('request-timeout')}") from e

    provider = Geo6POIProvider(
        auth=auth,
        httpClient=httpClient,
        endpoint=config.get("endpoint"),
        referer=config.get("referer"),
        requestTimeout=requestTimeout,
    )
    logger.info(f"Initialized {type(auth).__name__} Geo-6 POI provider for {provider.endpoint}, dood!")
    return provider
