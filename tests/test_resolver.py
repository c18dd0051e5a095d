"""Tests for package resolution."""

import unittest
import sys
import os

# Add src to path - use absolute path to handle running from different directories
_current_dir = os.path.dirname(os.path.abspath(__file__))
_project_root = os.path.dirname(_current_dir)
_src_dir = os.path.join(_project_root, 'src')
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from domain.itinerary.date_labels import parse_start
from domain.itinerary.resolver import matching_date_label, resolve_package
from schemas.destination import TravelPackage


def make_package(package_id, city, dates):
    return TravelPackage(
        id=package_id,
        name=f"Package {package_id}",
        price=10000,
        departure_city=city,
        available_dates=dates
    )


class TestResolvePackage(unittest.TestCase):

    def setUp(self):
        self.k1 = make_package("k1", "Ahmedabad", ["Sep 26 - Oct 3, 2025", "Oct 3 - Oct 10, 2025"])

    def test_resolves_matching_package(self):
        self.assertIs(resolve_package([self.k1], "Ahmedabad", "September", "26"), self.k1)

    def test_no_match_returns_none(self):
        self.assertIsNone(resolve_package([self.k1], "Ahmedabad", "December", "1"))

    def test_month_and_day_must_match_the_same_label(self):
        # Oct 3 is an end date of the first label, not a start
        package = make_package("p", "Ahmedabad", ["Sep 26 - Oct 3, 2025"])
        self.assertIsNone(resolve_package([package], "Ahmedabad", "October", "3"))
        self.assertIsNone(resolve_package([package], "Ahmedabad", "September", "3"))

    def test_city_must_match(self):
        self.assertIsNone(resolve_package([self.k1], "Mumbai", "September", "26"))

    def test_first_in_list_order_wins(self):
        a = make_package("a", "Ahmedabad", ["Oct 3 - Oct 10, 2025"])
        b = make_package("b", "Ahmedabad", ["Oct 3 - Oct 9, 2025"])
        self.assertIs(resolve_package([a, b], "Ahmedabad", "October", "3"), a)
        self.assertIs(resolve_package([b, a], "Ahmedabad", "October", "3"), b)

    def test_incomplete_selection_returns_none(self):
        self.assertIsNone(resolve_package([self.k1], None, "September", "26"))
        self.assertIsNone(resolve_package([self.k1], "Ahmedabad", None, "26"))
        self.assertIsNone(resolve_package([self.k1], "Ahmedabad", "September", None))

    def test_deterministic(self):
        packages = [self.k1, make_package("k2", "Ahmedabad", ["Sep 26 - Oct 2, 2025"])]
        results = {resolve_package(packages, "Ahmedabad", "September", "26").id for _ in range(5)}
        self.assertEqual(results, {"k1"})

    def test_resolved_package_is_sound(self):
        packages = [
            make_package("x", "Mumbai", ["Oct 3 - Oct 10, 2025"]),
            self.k1,
        ]
        package = resolve_package(packages, "Ahmedabad", "October", "3")
        self.assertEqual(package.departure_city, "Ahmedabad")
        starts = [parse_start(label) for label in package.available_dates]
        self.assertTrue(any(s.month == "October" and s.day == "3" for s in starts))

    def test_malformed_labels_do_not_break_resolution(self):
        package = make_package("p", "Kochi", ["TBD", "Oct 18 - Oct 24, 2025"])
        self.assertIs(resolve_package([package], "Kochi", "October", "18"), package)


class TestMatchingDateLabel(unittest.TestCase):

    def test_returns_matching_label(self):
        package = make_package("k1", "Ahmedabad", ["Sep 26 - Oct 3, 2025", "Oct 3 - Oct 10, 2025"])
        self.assertEqual(matching_date_label(package, "October", "3"), "Oct 3 - Oct 10, 2025")
        self.assertIsNone(matching_date_label(package, "October", "10"))
        self.assertIsNone(matching_date_label(package, None, "3"))


if __name__ == "__main__":
    unittest.main()
