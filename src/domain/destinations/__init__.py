from .kerala_calling import KERALA_CALLING_DATA
from .manali import MANALI_DATA
from .goa import GOA_DATA
from .loader import (
    DestinationSource,
    get_destination,
    get_all_destinations,
    load_destinations,
    DESTINATION_REGISTRY
)
from .migration import migrate_destination, normalize_date_label

__all__ = [
    "KERALA_CALLING_DATA",
    "MANALI_DATA",
    "GOA_DATA",
    "DestinationSource",
    "get_destination",
    "get_all_destinations",
    "load_destinations",
    "DESTINATION_REGISTRY",
    "migrate_destination",
    "normalize_date_label"
]
