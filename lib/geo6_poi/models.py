"""
Geo-6 POI API Data Models

This module defines TypedDict models for the raw Geo-6 POI API responses
and the immutable POIAddress value produced from them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NotRequired, Optional, Self, Tuple

from typing_extensions import TypedDict


# Raw API Response Models


class Component(TypedDict, total=False, closed=False):
    """Typed sub-field of a feature (street, municipality, ...), dood!

    Every component carries both a French and a Dutch name.
    """

    type: str  # Component kind (e.g. "street", "postal_code")
    id: str | int  # Component identifier (postal code value for "postal_code")
    name_fr: Optional[str]  # French name
    name_nl: Optional[str]  # Dutch name


class FeatureProperties(TypedDict):
    """Properties of a single feature"""

    id: str | int  # POI identifier
    source: str  # Data source (e.g. "urbis")
    name_fr: NotRequired[Optional[str]]  # French POI name
    name_nl: NotRequired[Optional[str]]  # Dutch POI name
    components: List[Component]  # Typed address components


class Geometry(TypedDict):
    """GeoJSON point geometry"""

    type: str  # Always "Point"
    coordinates: List[float]  # [longitude, latitude]


class Feature(TypedDict):
    """Single result record of the API"""

    type: str  # Always "Feature"
    geometry: Geometry
    properties: FeatureProperties


class FeatureCollection(TypedDict, total=False):
    """Response body of getPOI / getPOIList"""

    type: str  # Always "FeatureCollection"
    features: List[Feature]


# Output Models


@dataclass(frozen=True)
class Coordinates:
    """Latitude/longitude pair"""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class AdminLevel:
    """Administrative unit: 1 = region, 2 = province, 3 = municipality"""

    level: int
    name: str


@dataclass(frozen=True)
class POIAddress:
    """Standardized address of a point of interest, dood!

    Built once by POIAddressBuilder and never modified afterwards.
    """

    providedBy: str
    coordinates: Coordinates
    streetNumber: Optional[str] = None
    streetName: Optional[str] = None
    locality: Optional[str] = None  # Municipality name
    subLocality: Optional[str] = None  # Locality (district) inside the municipality
    postalCode: Optional[str] = None
    country: Optional[str] = None
    adminLevels: Tuple[AdminLevel, ...] = ()

    # POI-specific fields
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    source: Optional[str] = None

    def getAdminLevel(self, level: int) -> Optional[AdminLevel]:
        """Get admin level by its number, or None if absent."""
        for adminLevel in self.adminLevels:
            if adminLevel.level == level:
                return adminLevel
        return None

    def toDict(self) -> Dict[str, Any]:
        """Convert address to JSON-ready dict."""
        return {
            "providedBy": self.providedBy,
            "latitude": self.coordinates.latitude,
            "longitude": self.coordinates.longitude,
            "streetNumber": self.streetNumber,
            "streetName": self.streetName,
            "locality": self.locality,
            "subLocality": self.subLocality,
            "postalCode": self.postalCode,
            "country": self.country,
            "adminLevels": {adminLevel.level: adminLevel.name for adminLevel in self.adminLevels},
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "source": self.source,
        }


@dataclass
class POIAddressBuilder:
    """Accumulates POIAddress fields, then produces the frozen value.

    Every setter returns the builder itself so calls can be chained.
    """

    providedBy: str
    coordinates: Optional[Coordinates] = None
    fields: Dict[str, Optional[str]] = field(default_factory=dict)
    adminLevels: Dict[int, str] = field(default_factory=dict)

    def setCoordinates(self, latitude: float, longitude: float) -> Self:
        self.coordinates = Coordinates(latitude=float(latitude), longitude=float(longitude))
        return self

    def setStreetNumber(self, value: Optional[str]) -> Self:
        self.fields["streetNumber"] = value
        return self

    def setStreetName(self, value: Optional[str]) -> Self:
        self.fields["streetName"] = value
        return self

    def setLocality(self, value: Optional[str]) -> Self:
        self.fields["locality"] = value
        return self

    def setSubLocality(self, value: Optional[str]) -> Self:
        self.fields["subLocality"] = value
        return self

    def setPostalCode(self, value: Optional[str]) -> Self:
        self.fields["postalCode"] = value
        return self

    def setCountry(self, value: Optional[str]) -> Self:
        self.fields["country"] = value
        return self

    def setType(self, value: Optional[str]) -> Self:
        self.fields["type"] = value
        return self

    def setId(self, value: Optional[str]) -> Self:
        self.fields["id"] = value
        return self

    def setName(self, value: Optional[str]) -> Self:
        self.fields["name"] = value
        return self

    def setSource(self, value: Optional[str]) -> Self:
        self.fields["source"] = value
        return self

    def addAdminLevel(self, level: int, name: Optional[str]) -> Self:
        """Add admin level, ignoring empty names."""
        if name is not None:
            self.adminLevels[level] = name
        return self

    def build(self) -> POIAddress:
        """Produce immutable POIAddress from collected fields.

        Raises:
            ValueError: If coordinates were never set
        """
        if self.coordinates is None:
            raise ValueError("Coordinates are required to build POIAddress")

        return POIAddress(
            providedBy=self.providedBy,
            coordinates=self.coordinates,
            adminLevels=tuple(AdminLevel(level, name) for level, name in sorted(self.adminLevels.items())),
            **self.fields,
        )
