"""Destination data loader - discovers destination documents and validates them."""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from domain.destinations.migration import migrate_destination
from schemas.destination import Destination

logger = logging.getLogger(__name__)

_NON_DATA_MODULES = {"loader", "migration", "__init__"}


def _discover_destination_documents() -> List[Dict]:
    """Collect every ``*_DATA`` destination document in this package."""
    documents = []
    package_path = Path(__file__).parent
    package_name = __name__.rsplit('.', 1)[0] if '.' in __name__ else 'domain.destinations'

    for module_info in pkgutil.iter_modules([str(package_path)]):
        module_name = module_info.name
        if module_name in _NON_DATA_MODULES or module_name.startswith('__'):
            continue

        try:
            module = importlib.import_module(f'.{module_name}', package=package_name)
        except ImportError:
            logger.warning("Could not import destination module %s", module_name, exc_info=True)
            continue

        for attr_name in dir(module):
            if attr_name.endswith('_DATA') and not attr_name.startswith('_'):
                document = getattr(module, attr_name)
                if isinstance(document, dict) and 'id' in document:
                    documents.append(document)

    return documents


def load_destinations(documents: Iterable[Dict]) -> Dict[str, Destination]:
    """Migrate and validate raw documents; invalid ones are logged and skipped."""
    registry: Dict[str, Destination] = {}
    for document in documents:
        try:
            destination = Destination.model_validate(migrate_destination(document))
        except ValidationError as e:
            logger.warning(
                "Skipping destination %r: %d validation error(s): %s",
                document.get("id"), e.error_count(), e
            )
            continue
        if destination.id in registry:
            logger.warning("Duplicate destination id %r, keeping the first one", destination.id)
            continue
        registry[destination.id] = destination
    return registry


# Auto-discover and register all destinations
DESTINATION_REGISTRY = load_destinations(_discover_destination_documents())


def get_destination(destination_id: str) -> Optional[Destination]:
    """Get destination by id."""
    return DESTINATION_REGISTRY.get(destination_id)


def get_all_destinations() -> Dict[str, Destination]:
    """Get all available destinations."""
    return DESTINATION_REGISTRY.copy()


class DestinationSource:
    """Read side of the destination datastore."""

    def __init__(self, destinations: Optional[Iterable[Destination]] = None):
        if destinations is None:
            self._destinations = get_all_destinations()
        else:
            self._destinations = {d.id: d for d in destinations}

    @classmethod
    def from_documents(cls, documents: Iterable[Dict]) -> "DestinationSource":
        return cls(load_destinations(documents).values())

    def get(self, destination_id: str) -> Optional[Destination]:
        return self._destinations.get(destination_id)

    def all(self) -> List[Destination]:
        return list(self._destinations.values())
