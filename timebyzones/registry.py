"""
Timezone Registry

The fixed set of locations shown by the reports: short display labels
(mostly airport codes) mapped to IANA timezone identifiers.

Insertion order is display order. The mappings are read-only views, so
nothing can change them after import.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

TIMEZONES: Mapping[str, str] = MappingProxyType({
    "UTC": "UTC",
    "CDG": "Europe/Paris",          # Paris Charles de Gaulle
    "LHR": "Europe/London",         # London Heathrow
    "IAD": "America/New_York",      # Washington Dulles
    "ORD": "America/Chicago",       # Chicago O'Hare
    "DEN": "America/Denver",        # Denver
    "SFO": "America/Los_Angeles",   # San Francisco
    "HNL": "Pacific/Honolulu",      # Honolulu
    "HYD": "Asia/Kolkata",          # Hyderabad
    "SIN": "Asia/Singapore",        # Singapore
    "NRT": "Asia/Tokyo",            # Tokyo Narita
})

DEFAULT_LABELS = ("UTC", "IAD", "SFO")
US_LABELS = ("IAD", "ORD", "DEN", "SFO", "HNL")


def select(labels: Iterable[str], registry: Mapping[str, str] = TIMEZONES) -> Mapping[str, str]:
    """Return a read-only sub-mapping of the registry, in the order given.

    Raises KeyError for a label the registry doesn't know.
    """
    return MappingProxyType({label: registry[label] for label in labels})


DEFAULT_ZONES = select(DEFAULT_LABELS)
US_ZONES = select(US_LABELS)
