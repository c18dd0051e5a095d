# Destination catalog search
from typing import Iterable, List

from schemas.destination import Destination
from utils.text import matches_search

ALL_CATEGORIES = "All"


def list_categories(destinations: Iterable[Destination]) -> List[str]:
    """"All" followed by each category present, in first-seen order."""
    categories = [ALL_CATEGORIES]
    for destination in destinations:
        if destination.category not in categories:
            categories.append(destination.category)
    return categories


def filter_destinations(
    destinations: Iterable[Destination],
    category: str = ALL_CATEGORIES,
    search: str = ""
) -> List[Destination]:
    """Filter by category first, then by a name search."""
    results = list(destinations)

    if category and category != ALL_CATEGORIES:
        results = [d for d in results if d.category == category]

    if search:
        results = [d for d in results if matches_search(d.name, search)]

    return results
