"""One-time migration of destination documents to the current schema.

Older records carry ``shortDescription``, ``imageUrl``, ``thingsToDo``,
``bestTimeToVisit`` and compact date labels such as ``"Oct 5-12, 2025"``.
``migrate_destination`` rewrites any of those shapes into the keys that
``schemas.destination.Destination`` validates.
"""

import copy
import logging
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


_CANONICAL_LABEL = re.compile(r'^[A-Za-z]+\s+[0-9]{1,2}\s+-\s+[A-Za-z]+\s+[0-9]{1,2},\s*[0-9]{4}$')
# "Oct 5-12, 2025"
_SAME_MONTH_LABEL = re.compile(r'^([A-Za-z]+)\s+([0-9]{1,2})\s*-\s*([0-9]{1,2}),\s*([0-9]{4})$')
# "Oct 28-Nov 3, 2025"
_CROSS_MONTH_LABEL = re.compile(r'^([A-Za-z]+)\s+([0-9]{1,2})\s*-\s*([A-Za-z]+)\s+([0-9]{1,2}),\s*([0-9]{4})$')

_DROPPED_KEYS = ("bestTimeToVisit", "best_time_to_visit", "availableDates", "available_dates")


def normalize_date_label(label: str) -> str:
    """Rewrite a compact label to "<Mon> <D> - <Mon> <D>, <YYYY>".

    Labels already in that form, and labels that match no known shape, are
    returned unchanged.
    """
    if not isinstance(label, str):
        return label
    text = label.strip()
    if _CANONICAL_LABEL.match(text):
        return text

    match = _SAME_MONTH_LABEL.match(text)
    if match:
        month, start, end, year = match.groups()
        return f"{month} {start} - {month} {end}, {year}"

    match = _CROSS_MONTH_LABEL.match(text)
    if match:
        start_month, start, end_month, end, year = match.groups()
        return f"{start_month} {start} - {end_month} {end}, {year}"

    return label


def _take(doc: Dict[str, Any], *keys: str) -> Any:
    """Pop the first present key out of ``doc``; removes the alternates too."""
    value = None
    found = False
    for key in keys:
        if key in doc:
            candidate = doc.pop(key)
            if not found:
                value = candidate
                found = True
    return value


def _migrate_package(package: Dict[str, Any], destination_id: Optional[str]) -> Dict[str, Any]:
    package = dict(package)

    labels = _take(package, "available_dates", "availableDates") or []
    package["available_dates"] = [normalize_date_label(label) for label in labels]

    city = _take(package, "departure_city", "departureCity")
    if city is not None:
        package["departure_city"] = city

    owner = _take(package, "destination_id", "destinationId")
    package["destination_id"] = owner or destination_id

    itinerary = _take(package, "itinerary")
    package["itinerary"] = itinerary or []
    return package


def _summarize_departure_cities(packages: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """One summary per departure city, cheapest package first seen wins the price."""
    summaries: Dict[str, Dict[str, Any]] = {}
    for package in packages:
        city = package.get("departure_city")
        if not city:
            continue
        price = package.get("price")
        summary = summaries.get(city)
        if summary is None:
            summaries[city] = {
                "name": city,
                "image": None,
                "price": price,
                "duration": package.get("duration", "")
            }
        elif price is not None and (summary["price"] is None or price < summary["price"]):
            summary["price"] = price
            summary["duration"] = package.get("duration", "")
    return list(summaries.values())


def migrate_destination(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``document`` in the current destination schema."""
    doc = copy.deepcopy(document)
    destination_id = doc.get("id")

    subtitle = _take(doc, "subtitle")
    short_description = _take(doc, "shortDescription", "short_description")
    doc["subtitle"] = subtitle or short_description or ""

    hero_image = _take(doc, "hero_image", "heroImage", "imageUrl", "image_url")
    doc["hero_image"] = hero_image

    long_description = _take(doc, "long_description", "longDescription")
    doc["long_description"] = long_description or ""

    attractions = _take(doc, "attractions")
    things_to_do = _take(doc, "thingsToDo", "things_to_do")
    if not attractions and things_to_do:
        attractions = [{"name": name, "image": None} for name in things_to_do]
    doc["attractions"] = attractions or []

    key_stats = _take(doc, "key_stats", "keyStats")
    if key_stats is not None:
        doc["key_stats"] = key_stats

    for key in _DROPPED_KEYS:
        if key in doc:
            logger.debug("Destination %s: dropping legacy field %s", destination_id, key)
            doc.pop(key)

    packages = [_migrate_package(p, destination_id) for p in (doc.get("packages") or [])]
    doc["packages"] = packages

    departure_cities = _take(doc, "departure_cities", "departureCities")
    doc["departure_cities"] = departure_cities or _summarize_departure_cities(packages)

    base_price = _take(doc, "base_price", "basePrice")
    if base_price is None:
        prices = [p["price"] for p in packages if p.get("price") is not None]
        base_price = min(prices) if prices else 0
    doc["base_price"] = base_price

    return doc
