"""
Pytest configuration and common fixtures for Geo-6 POI geocoder tests.

This module provides a fake Geo-6 API (httpx.MockTransport) and sample
responses shared by integration and CLI tests. All fixtures follow camelCase
naming convention.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List

import httpx
import pytest

TOKEN_KEY = "0123456789abcdef" * 4

# ============================================================================
# Sample Responses
# ============================================================================


@pytest.fixture
def mannekenPisResponse() -> Dict[str, Any]:
    """
    Provide feature collection with two known features.

    The first one has both French and Dutch names, the second one only
    a French name.

    Returns:
        Dict: Parsed getPOI response
    """
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [4.350012, 50.844984]},
                "properties": {
                    "id": 1234,
                    "source": "urbis",
                    "name_fr": "MANNEKEN-PIS",
                    "name_nl": "MANNEKEN PIS",
                    "components": [
                        {"type": "country", "id": "BE", "name_fr": "Belgique", "name_nl": "België"},
                        {"type": "municipality", "id": "21004", "name_fr": "Bruxelles", "name_nl": "Brussel"},
                        {"type": "postal_code", "id": "1000", "name_fr": "1000", "name_nl": "1000"},
                        {"type": "street", "id": "1", "name_fr": "Rue de l'Etuve", "name_nl": "Stoofstraat"},
                        {"type": "location_type", "id": "2", "name_fr": "Fontaines", "name_nl": "Fonteinen"},
                    ],
                },
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [4.351234, 50.848123]},
                "properties": {
                    "id": 5678,
                    "source": "urbis",
                    "name_fr": "LIEU RÉPUTÉ",
                    "components": [
                        {"type": "location_type", "id": "3", "name_fr": "Lieux réputés", "name_nl": "Bekende plaatsen"},
                    ],
                },
            },
        ],
    }


# ============================================================================
# HTTP Fixtures
# ============================================================================


class FakeGeo6Api:
    """Callable MockTransport handler keeping every request it served"""

    def __init__(self, body: Dict[str, Any], statusCode: int = 200):
        self.body = body
        self.statusCode = statusCode
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.statusCode, json=self.body)

    def createClient(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def fakeGeo6Api(mannekenPisResponse) -> FakeGeo6Api:
    """
    Provide fake Geo-6 API answering with the Manneken-Pis response.

    Example:
        def testSearch(fakeGeo6Api):
            provider = Geo6POIProvider(auth=..., httpClient=fakeGeo6Api.createClient())
    """
    return FakeGeo6Api(mannekenPisResponse)


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def tokenKey() -> str:
    """Provide HS512 signing key used by the token API configuration."""
    return TOKEN_KEY


@pytest.fixture
def writeConfig(tmp_path: Path) -> Callable[[str], Path]:
    """
    Provide helper writing config.toml into a temporary directory.

    Returns:
        Callable taking TOML content and returning the config path
    """

    def _write(content: str) -> Path:
        configPath = tmp_path / "config.toml"
        configPath.write_text(content)
        return configPath

    return _write


@pytest.fixture
def tokenConfigToml(tokenKey) -> str:
    """Provide configuration for the newer (token) API."""
    return f"""
[geo6-poi]
api = "token"
client-id = "client"
private-key = "{tokenKey}"
referer = "https://example.org/"

[logging]
level = "DEBUG"
"""


@pytest.fixture
def legacyConfigToml() -> str:
    """Provide configuration for the legacy API."""
    return """
[geo6-poi]
api = "legacy"
customer-id = "customer"
private-key = "s3cretKey"
"""
