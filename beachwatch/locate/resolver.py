"""Resolve free-form beach names against the location table."""

from beachwatch.config.schema import normalize_beach_key
from beachwatch.errors import NotFoundError
from beachwatch.locate.table import DEFAULT_LOCATIONS
from beachwatch.models.location import LocationEntry, LocationTable


def resolve(name: str, table: LocationTable = DEFAULT_LOCATIONS) -> LocationEntry:
    """Look up a beach by exact normalized key.

    Case and surrounding/repeated whitespace are ignored. No fuzzy matching:
    multi-part names such as "Rockaway Beach, NY" must be trimmed by the
    caller.

    Raises:
        NotFoundError: carrying every valid key, so the caller can re-prompt.
    """
    key = normalize_beach_key(name)
    entry = table.get(key)
    if entry is None:
        raise NotFoundError(name, table.keys_list())
    return entry
