"""
Geocode and reverse query objects for the Geo-6 POI provider.

Queries are immutable: every with*() helper returns a new query.
"""

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Self

from .models import Coordinates


@dataclass(frozen=True)
class GeocodeQuery:
    """Free-text geocoding query, dood!

    Filters like ``source`` and ``locality`` travel as opaque query data.

    Example:
        >>> query = GeocodeQuery.create("Manneken Pis").withLocale("fr").withData("source", "urbis")
        >>> query.getData("source")
        'urbis'
    """

    text: str
    locale: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(cls, text: str) -> Self:
        return cls(text=text)

    def withText(self, text: str) -> Self:
        return dataclasses.replace(self, text=text)

    def withLocale(self, locale: Optional[str]) -> Self:
        return dataclasses.replace(self, locale=locale)

    def withData(self, name: str, value: Any) -> Self:
        newData = dict(self.data)
        newData[name] = value
        return dataclasses.replace(self, data=MappingProxyType(newData))

    def getData(self, name: str, default: Any = None) -> Any:
        return self.data.get(name, default)


@dataclass(frozen=True)
class ReverseQuery:
    """Coordinates to address query (not supported by the Geo-6 POI API)"""

    coordinates: Coordinates
    locale: Optional[str] = None

    @classmethod
    def fromCoordinates(cls, latitude: float, longitude: float) -> Self:
        return cls(coordinates=Coordinates(latitude=float(latitude), longitude=float(longitude)))

    def withLocale(self, locale: Optional[str]) -> Self:
        return dataclasses.replace(self, locale=locale)
