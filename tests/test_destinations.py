"""Tests for destination loading, legacy migration and catalog search."""

import unittest
import sys
import os

# Add src to path - use absolute path to handle running from different directories
_current_dir = os.path.dirname(os.path.abspath(__file__))
_project_root = os.path.dirname(_current_dir)
_src_dir = os.path.join(_project_root, 'src')
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)
from pydantic import ValidationError

from domain.catalog import filter_destinations, list_categories
from domain.destinations import (
    GOA_DATA,
    KERALA_CALLING_DATA,
    MANALI_DATA,
    DestinationSource,
    get_all_destinations,
    get_destination,
    load_destinations,
    migrate_destination,
    normalize_date_label,
)
from domain.itinerary.availability import build_availability
from domain.itinerary.resolver import resolve_package
from schemas.destination import TravelPackage


class TestNormalizeDateLabel(unittest.TestCase):

    def test_same_month_compact_label(self):
        self.assertEqual(normalize_date_label("Oct 5-12, 2025"), "Oct 5 - Oct 12, 2025")

    def test_cross_month_compact_label(self):
        self.assertEqual(normalize_date_label("Oct 28-Nov 3, 2025"), "Oct 28 - Nov 3, 2025")

    def test_canonical_label_unchanged(self):
        self.assertEqual(normalize_date_label("Sep 26 - Oct 3, 2025"), "Sep 26 - Oct 3, 2025")

    def test_unknown_shape_unchanged(self):
        self.assertEqual(normalize_date_label("TBD"), "TBD")


class TestMigrateDestination(unittest.TestCase):

    def setUp(self):
        self.migrated = migrate_destination(MANALI_DATA)

    def test_does_not_modify_input(self):
        self.assertIn("thingsToDo", MANALI_DATA)
        self.assertEqual(MANALI_DATA["packages"][0]["availableDates"][0], "Oct 5-12, 2025")

    def test_legacy_fields_renamed(self):
        self.assertEqual(self.migrated["subtitle"], MANALI_DATA["shortDescription"])
        self.assertEqual(self.migrated["hero_image"], MANALI_DATA["imageUrl"])
        self.assertEqual([a["name"] for a in self.migrated["attractions"]], MANALI_DATA["thingsToDo"])
        for key in ("shortDescription", "imageUrl", "thingsToDo", "bestTimeToVisit", "availableDates"):
            self.assertNotIn(key, self.migrated)

    def test_packages_migrated(self):
        package = self.migrated["packages"][0]
        self.assertEqual(package["destination_id"], "1")
        self.assertEqual(package["departure_city"], "Mumbai")
        self.assertEqual(package["available_dates"], ["Oct 5 - Oct 12, 2025", "Nov 15 - Nov 22, 2025"])

    def test_departure_cities_and_base_price_derived(self):
        cities = self.migrated["departure_cities"]
        self.assertEqual([c["name"] for c in cities], ["Mumbai", "Ahmedabad"])
        self.assertEqual(cities[0]["price"], 12800)
        self.assertEqual(self.migrated["base_price"], 12800)

    def test_current_schema_passes_through(self):
        migrated = migrate_destination(KERALA_CALLING_DATA)
        self.assertEqual(migrated["subtitle"], "Venice of the East!")
        self.assertEqual(migrated["base_price"], 9999)
        self.assertEqual(len(migrated["departure_cities"]), 3)
        self.assertEqual(len(migrated["packages"][0]["itinerary"]), 7)


class TestLoadDestinations(unittest.TestCase):

    def test_registry_discovers_all_modules(self):
        registry = get_all_destinations()
        self.assertEqual(set(registry), {"kerala-calling", "1", "2"})
        self.assertEqual(get_destination("2").name, "Goa")
        self.assertIsNone(get_destination("missing"))

    def test_camel_case_documents_are_accepted(self):
        document = {
            "id": "camel",
            "name": "Camel",
            "category": "Adventure",
            "basePrice": 5000,
            "keyStats": {"duration": "3 days", "difficulty": "Hard", "ageGroup": "18+", "maxAltitude": "9,000 ft"},
            "packages": [{
                "id": "c1",
                "name": "Jeep",
                "price": 5000,
                "departureCity": "Baroda/Surat",
                "availableDates": ["Jan 9 - Jan 12, 2026"],
                "itinerary": [{"day": 1, "title": "Start"}, {"day": 2, "title": "End"}]
            }]
        }
        destination = load_destinations([document])["camel"]
        self.assertEqual(destination.key_stats.age_group, "18+")
        self.assertEqual(destination.packages[0].destination_id, "camel")
        self.assertEqual(destination.departure_cities[0].name, "Baroda/Surat")

    def test_invalid_documents_are_skipped(self):
        source = DestinationSource.from_documents([
            GOA_DATA,
            {"id": "bad", "name": "Mars", "category": "Space"},
        ])
        self.assertEqual([d.id for d in source.all()], ["2"])
        self.assertIsNone(source.get("bad"))

    def test_duplicate_ids_keep_first(self):
        registry = load_destinations([GOA_DATA, dict(GOA_DATA, name="Goa Again")])
        self.assertEqual(registry["2"].name, "Goa")

    def test_migrated_legacy_data_drives_the_index(self):
        manali = load_destinations([MANALI_DATA])["1"]
        index = build_availability(manali.packages, "Mumbai")
        self.assertEqual(index.months, ["October", "November"])
        self.assertEqual(index.days_by_month["October"], ["5"])
        # m1 and m2 share every date; the first listed wins
        self.assertEqual(resolve_package(manali.packages, "Mumbai", "October", "5").id, "m1")


class TestItineraryValidation(unittest.TestCase):

    def test_day_numbers_must_be_contiguous(self):
        with self.assertRaises(ValidationError):
            TravelPackage(
                id="p",
                name="Broken",
                price=1,
                departure_city="Kochi",
                itinerary=[{"day": 1, "title": "A"}, {"day": 3, "title": "C"}]
            )

    def test_day_numbers_start_at_one(self):
        with self.assertRaises(ValidationError):
            TravelPackage(
                id="p",
                name="Broken",
                price=1,
                departure_city="Kochi",
                itinerary=[{"day": 2, "title": "B"}]
            )


class TestCatalog(unittest.TestCase):

    def setUp(self):
        self.destinations = DestinationSource.from_documents(
            [KERALA_CALLING_DATA, MANALI_DATA, GOA_DATA]
        ).all()

    def test_categories(self):
        self.assertEqual(list_categories(self.destinations), ["All", "Beach", "Mountain"])

    def test_filter_by_category(self):
        names = [d.name for d in filter_destinations(self.destinations, category="Beach")]
        self.assertEqual(names, ["Kerala Calling", "Goa"])

    def test_all_category_keeps_everything(self):
        self.assertEqual(len(filter_destinations(self.destinations, category="All")), 3)

    def test_search_is_case_insensitive(self):
        names = [d.name for d in filter_destinations(self.destinations, search="  mAnA ")]
        self.assertEqual(names, ["Manali"])

    def test_category_then_search(self):
        self.assertEqual(filter_destinations(self.destinations, category="Mountain", search="goa"), [])


if __name__ == "__main__":
    unittest.main()
