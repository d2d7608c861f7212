"""
Geo-6 POI Geocoding Provider Library

This module provides an async geocoding provider for the Geo-6 "points of interest"
API (api.geo6.be): request signing for both API generations and normalization of
the bilingual (French/Dutch) responses into POIAddress records.

Example usage:
    from lib.geo6_poi import BearerTokenAuth, GeocodeQuery, Geo6POIProvider

    provider = Geo6POIProvider(auth=BearerTokenAuth(clientId="your_client_id", privateKey="your_key"))

    # Search in French only (falls back to Dutch when no French name exists)
    results = await provider.geocodeQuery(GeocodeQuery.create("Manneken Pis").withLocale("fr"))

    # Restrict search to one source and locality
    query = GeocodeQuery.create("Manneken Pis").withData("source", "urbis").withData("locality", "Bruxelles")
    results = await provider.geocodeQuery(query)
"""

from .auth import (
    AuthStrategy,
    BearerTokenAuth,
    LegacyHmacAuth,
    LegacySignature,
    RequestSigner,
    buildBearerToken,
    signLegacy,
)
from .exceptions import (
    ConfigurationError,
    Geo6Error,
    InvalidArgument,
    InvalidCredentials,
    InvalidServerResponse,
    QuotaExceeded,
    UnsupportedOperation,
)
from .mapper import ComponentKind, Language, extractComponents, mapFeatureCollection
from .models import AdminLevel, Coordinates, Feature, FeatureCollection, POIAddress, POIAddressBuilder
from .provider import Geo6POIProvider
from .query import GeocodeQuery, ReverseQuery

__all__ = [
    "Geo6POIProvider",
    "GeocodeQuery",
    "ReverseQuery",
    "AuthStrategy",
    "LegacyHmacAuth",
    "BearerTokenAuth",
    "LegacySignature",
    "RequestSigner",
    "signLegacy",
    "buildBearerToken",
    "ComponentKind",
    "Language",
    "extractComponents",
    "mapFeatureCollection",
    "AdminLevel",
    "Coordinates",
    "Feature",
    "FeatureCollection",
    "POIAddress",
    "POIAddressBuilder",
    "Geo6Error",
    "UnsupportedOperation",
    "InvalidArgument",
    "InvalidServerResponse",
    "InvalidCredentials",
    "QuotaExceeded",
    "ConfigurationError",
]
