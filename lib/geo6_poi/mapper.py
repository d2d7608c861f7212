"""
Geo-6 POI response mapping

Turns a GeoJSON-like feature collection into POIAddress records. Every feature
is extracted twice (French and Dutch names), then the language policy decides
which of the two records are returned.
"""

import logging
import re
from enum import StrEnum
from typing import Any, Callable, Dict, List, Optional

from .exceptions import InvalidArgument
from .models import Component, Feature, POIAddress, POIAddressBuilder

logger = logging.getLogger(__name__)


class Language(StrEnum):
    """Languages provided by the API"""

    FR = "fr"
    NL = "nl"


class ComponentKind(StrEnum):
    """Component types we know how to map"""

    COUNTRY = "country"
    LOCALITY = "locality"
    MUNICIPALITY = "municipality"
    POSTAL_CODE = "postal_code"
    PROVINCE = "province"
    REGION = "region"
    STREET = "street"
    STREET_NUMBER = "street_number"
    LOCATION_TYPE = "location_type"


LOCALE_PATTERN = re.compile(r"^(fr|nl)")


def _localizedName(component: Component, language: Language) -> Optional[str]:
    return component.get(f"name_{language}")


def _componentId(component: Component, language: Language) -> Optional[str]:
    value = component.get("id")
    return None if value is None else str(value)


def _localizedText(component: Component, language: Language) -> Optional[str]:
    value = _localizedName(component, language)
    return None if value is None else str(value)


# ComponentKind -> (value getter, builder setter)
COMPONENT_MAPPING: Dict[
    ComponentKind,
    tuple[Callable[[Component, Language], Optional[str]], Callable[[POIAddressBuilder, Optional[str]], Any]],
] = {
    ComponentKind.COUNTRY: (_localizedName, POIAddressBuilder.setCountry),
    ComponentKind.LOCALITY: (_localizedName, POIAddressBuilder.setSubLocality),
    ComponentKind.MUNICIPALITY: (
        _localizedName,
        lambda builder, value: builder.setLocality(value).addAdminLevel(3, value),
    ),
    ComponentKind.POSTAL_CODE: (_componentId, POIAddressBuilder.setPostalCode),
    ComponentKind.PROVINCE: (_localizedName, lambda builder, value: builder.addAdminLevel(2, value)),
    ComponentKind.REGION: (_localizedName, lambda builder, value: builder.addAdminLevel(1, value)),
    ComponentKind.STREET: (_localizedName, POIAddressBuilder.setStreetName),
    ComponentKind.STREET_NUMBER: (_localizedText, POIAddressBuilder.setStreetNumber),
    ComponentKind.LOCATION_TYPE: (_localizedName, POIAddressBuilder.setType),
}


def resolveLanguage(locale: Optional[str]) -> Optional[Language]:
    """Get preferred language from locale, dood!

    Args:
        locale: Locale hint like "fr", "fr_BE" or "nl-BE"

    Returns:
        Language matching the locale prefix, or None for no preference
    """
    if not locale:
        return None
    match = LOCALE_PATTERN.match(locale)
    if match is None:
        return None
    return Language(match.group(1))


def extractComponents(providedBy: str, feature: Feature, language: str) -> Optional[POIAddress]:
    """Extract address of a feature in one language.

    Args:
        providedBy: Provider name stored in the address
        feature: Raw feature from the API
        language: "fr" or "nl" (case insensitive)

    Returns:
        POIAddress, or None if the feature has no name in this language

    Raises:
        InvalidArgument: If language is neither French nor Dutch
    """
    try:
        lang = Language(language.lower())
    except ValueError:
        raise InvalidArgument("The Geo-6 POI provider only supports FR (French) and NL (Dutch).")

    properties = feature["properties"]
    name = properties.get(f"name_{lang}")
    if name is None:
        return None

    longitude, latitude = feature["geometry"]["coordinates"][:2]
    builder = POIAddressBuilder(providedBy).setCoordinates(latitude, longitude)

    for component in properties.get("components") or []:
        try:
            kind = ComponentKind(component.get("type"))
        except ValueError:
            continue
        getValue, setValue = COMPONENT_MAPPING[kind]
        setValue(builder, getValue(component, lang))

    source = properties.get("source")
    poiId = properties.get("id")
    return (
        builder.setSource(None if source is None else str(source))
        .setId(None if poiId is None else str(poiId))
        .setName(name)
        .build()
    )


def isSameTranslation(poiFr: POIAddress, poiNl: POIAddress) -> bool:
    """Check if Dutch record carries nothing the French one does not.

    Only coordinates, type and name are compared.
    """
    return poiFr.coordinates == poiNl.coordinates and poiFr.type == poiNl.type and poiFr.name == poiNl.name


def mapFeatureCollection(
    providedBy: str,
    data: Dict[str, Any],
    language: Optional[Language] = None,
    dedupeTranslations: bool = False,
) -> List[POIAddress]:
    """Map parsed API response to addresses.

    Args:
        providedBy: Provider name stored in every address
        data: Parsed JSON response (feature collection)
        language: Preferred language, None to return both languages
        dedupeTranslations: Drop Dutch record when it equals the French one
            (only used when no language is preferred)

    Returns:
        List of addresses in feature order, empty if there are no features
    """
    features = data.get("features") or []
    results: List[POIAddress] = []

    for feature in features:
        poiFr = extractComponents(providedBy, feature, Language.FR)
        poiNl = extractComponents(providedBy, feature, Language.NL)

        match language:
            case Language.FR:
                preferred = poiFr if poiFr is not None else poiNl
                if preferred is not None:
                    results.append(preferred)
            case Language.NL:
                preferred = poiNl if poiNl is not None else poiFr
                if preferred is not None:
                    results.append(preferred)
            case _:
                if poiFr is not None:
                    results.append(poiFr)
                if poiNl is not None:
                    if dedupeTranslations and poiFr is not None and isSameTranslation(poiFr, poiNl):
                        logger.debug(f"Skipping Dutch duplicate of POI {poiNl.id}")
                        continue
                    results.append(poiNl)

    logger.debug(f"Mapped {len(features)} features to {len(results)} addresses")
    return results
