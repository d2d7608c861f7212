"""
Unit tests for Geo-6 POI response mapping

Covers component extraction, language selection and the Dutch duplicate
suppression of the newer API, dood!
"""

import copy

import pytest

from .exceptions import InvalidArgument
from .mapper import ComponentKind, Language, extractComponents, mapFeatureCollection, resolveLanguage

PROVIDER = "geo6-poi"


def makeFeature(
    poiId="1",
    nameFr="MANNEKEN-PIS",
    nameNl="MANNEKEN PIS",
    typeFr="Fontaines",
    typeNl="Fonteinen",
    coordinates=(4.350012, 50.844984),
):
    """Build a raw feature like the API returns it."""
    properties = {
        "id": poiId,
        "source": "urbis",
        "components": [
            {"type": "country", "id": "BE", "name_fr": "Belgique", "name_nl": "België"},
            {"type": "region", "id": "04000", "name_fr": "Région de Bruxelles-Capitale", "name_nl": "Brussels Hoofdstedelijk Gewest"},
            {"type": "province", "id": "21000", "name_fr": "Bruxelles", "name_nl": "Brussel"},
            {"type": "municipality", "id": "21004", "name_fr": "Bruxelles", "name_nl": "Brussel"},
            {"type": "locality", "id": "1", "name_fr": "Pentagone", "name_nl": "Vijfhoek"},
            {"type": "postal_code", "id": 1000, "name_fr": None, "name_nl": None},
            {"type": "street", "id": "2", "name_fr": "Rue de l'Etuve", "name_nl": "Stoofstraat"},
            {"type": "street_number", "id": "3", "name_fr": 31, "name_nl": 31},
            {"type": "location_type", "id": "4", "name_fr": typeFr, "name_nl": typeNl},
            {"type": "unknown_thing", "id": "5", "name_fr": "ignored", "name_nl": "genegeerd"},
        ],
    }
    if nameFr is not None:
        properties["name_fr"] = nameFr
    if nameNl is not None:
        properties["name_nl"] = nameNl

    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": list(coordinates)},
        "properties": properties,
    }


def makeCollection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


class TestExtractComponents:
    """Test single feature extraction, dood!"""

    def test_coordinates_order(self):
        """Geometry is [lon, lat], output exposes latitude and longitude"""
        poi = extractComponents(PROVIDER, makeFeature(), "fr")

        assert poi is not None
        assert poi.coordinates.latitude == pytest.approx(50.844984, abs=0.00001)
        assert poi.coordinates.longitude == pytest.approx(4.350012, abs=0.00001)

    def test_french_fields(self):
        poi = extractComponents(PROVIDER, makeFeature(), "fr")

        assert poi is not None
        assert poi.providedBy == PROVIDER
        assert poi.name == "MANNEKEN-PIS"
        assert poi.type == "Fontaines"
        assert poi.id == "1"
        assert poi.source == "urbis"
        assert poi.country == "Belgique"
        assert poi.locality == "Bruxelles"
        assert poi.subLocality == "Pentagone"
        assert poi.streetName == "Rue de l'Etuve"
        assert poi.streetNumber == "31"
        assert poi.postalCode == "1000"

    def test_dutch_fields(self):
        poi = extractComponents(PROVIDER, makeFeature(), "nl")

        assert poi is not None
        assert poi.name == "MANNEKEN PIS"
        assert poi.type == "Fonteinen"
        assert poi.country == "België"
        assert poi.locality == "Brussel"
        assert poi.streetName == "Stoofstraat"
        assert poi.postalCode == "1000"

    def test_admin_levels(self):
        poi = extractComponents(PROVIDER, makeFeature(), "fr")

        assert poi is not None
        assert [adminLevel.level for adminLevel in poi.adminLevels] == [1, 2, 3]
        assert poi.getAdminLevel(1).name == "Région de Bruxelles-Capitale"
        assert poi.getAdminLevel(2).name == "Bruxelles"
        assert poi.getAdminLevel(3).name == "Bruxelles"
        assert poi.getAdminLevel(4) is None

    def test_missing_name_drops_language(self):
        """No name in the language means no record"""
        feature = makeFeature(nameNl=None)

        assert extractComponents(PROVIDER, feature, "nl") is None
        assert extractComponents(PROVIDER, feature, "fr") is not None

    def test_null_name_drops_language(self):
        feature = makeFeature()
        feature["properties"]["name_nl"] = None

        assert extractComponents(PROVIDER, feature, "nl") is None

    def test_language_is_case_insensitive(self):
        poi = extractComponents(PROVIDER, makeFeature(), "FR")

        assert poi is not None
        assert poi.name == "MANNEKEN-PIS"

    def test_invalid_language(self):
        with pytest.raises(InvalidArgument, match="only supports FR"):
            extractComponents(PROVIDER, makeFeature(), "en")

    def test_missing_components(self):
        """Feature without components still yields a record"""
        feature = makeFeature()
        feature["properties"]["components"] = []

        poi = extractComponents(PROVIDER, feature, "fr")

        assert poi is not None
        assert poi.streetName is None
        assert poi.postalCode is None
        assert poi.adminLevels == ()

    def test_known_component_kinds(self):
        assert len(ComponentKind) == 9


class TestResolveLanguage:
    """Test locale to language resolution"""

    @pytest.mark.parametrize(
        "locale, expected",
        [
            ("fr", Language.FR),
            ("fr_BE", Language.FR),
            ("nl", Language.NL),
            ("nl-BE", Language.NL),
            ("en", None),
            ("", None),
            (None, None),
            ("de_BE", None),
        ],
    )
    def test_resolve(self, locale, expected):
        assert resolveLanguage(locale) == expected


class TestMapFeatureCollection:
    """Test language policy over the whole result set, dood!"""

    def test_empty_features(self):
        assert mapFeatureCollection(PROVIDER, {"features": []}) == []

    def test_absent_features(self):
        assert mapFeatureCollection(PROVIDER, {"type": "FeatureCollection"}) == []

    def test_default_returns_both_languages(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature()))

        assert [poi.name for poi in results] == ["MANNEKEN-PIS", "MANNEKEN PIS"]

    def test_french_only(self):
        results = mapFeatureCollection(
            PROVIDER, makeCollection(makeFeature("1"), makeFeature("2", nameFr="JEANNEKE-PIS")), Language.FR
        )

        assert [poi.name for poi in results] == ["MANNEKEN-PIS", "JEANNEKE-PIS"]

    def test_dutch_only(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature()), Language.NL)

        assert len(results) == 1
        assert results[0].name == "MANNEKEN PIS"
        assert results[0].type == "Fonteinen"

    def test_dutch_falls_back_to_french(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature(nameNl=None)), Language.NL)

        assert len(results) == 1
        assert results[0].name == "MANNEKEN-PIS"

    def test_french_falls_back_to_dutch(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature(nameFr=None)), Language.FR)

        assert len(results) == 1
        assert results[0].name == "MANNEKEN PIS"

    def test_no_name_at_all(self):
        feature = makeFeature(nameFr=None, nameNl=None)

        assert mapFeatureCollection(PROVIDER, makeCollection(feature), Language.FR) == []
        assert mapFeatureCollection(PROVIDER, makeCollection(feature)) == []

    def test_default_missing_dutch(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature(nameNl=None)))

        assert [poi.name for poi in results] == ["MANNEKEN-PIS"]

    def test_dedupe_identical_translations(self):
        """Newer API: identical Dutch record collapses into the French one"""
        feature = makeFeature(nameNl="MANNEKEN-PIS", typeNl="Fontaines")

        results = mapFeatureCollection(PROVIDER, makeCollection(feature), dedupeTranslations=True)

        assert len(results) == 1
        assert results[0].country == "Belgique"

    def test_dedupe_keeps_distinct_translations(self):
        results = mapFeatureCollection(PROVIDER, makeCollection(makeFeature()), dedupeTranslations=True)

        assert [poi.name for poi in results] == ["MANNEKEN-PIS", "MANNEKEN PIS"]

    def test_dedupe_ignores_address_components(self):
        """Only coordinates, type and name are compared"""
        feature = makeFeature(nameNl="MANNEKEN-PIS", typeNl="Fontaines")
        poiNl = extractComponents(PROVIDER, feature, "nl")

        results = mapFeatureCollection(PROVIDER, makeCollection(feature), dedupeTranslations=True)

        assert len(results) == 1
        assert poiNl is not None
        assert poiNl.streetName != results[0].streetName

    def test_no_dedupe_in_legacy_mode(self):
        feature = makeFeature(nameNl="MANNEKEN-PIS", typeNl="Fontaines")

        results = mapFeatureCollection(PROVIDER, makeCollection(feature), dedupeTranslations=False)

        assert len(results) == 2

    def test_dedupe_not_applied_with_locale(self):
        feature = makeFeature(nameNl="MANNEKEN-PIS", typeNl="Fontaines")

        results = mapFeatureCollection(PROVIDER, makeCollection(feature), Language.NL, dedupeTranslations=True)

        assert len(results) == 1
        assert results[0].country == "België"

    def test_input_not_modified(self):
        data = makeCollection(makeFeature())
        original = copy.deepcopy(data)

        mapFeatureCollection(PROVIDER, data)

        assert data == original
