"""Beach location models."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from beachwatch.models.common import BeachKey


@dataclass(frozen=True)
class LocationEntry:
    key: BeachKey
    display_name: str
    latitude: float
    longitude: float
    borough: str = ""


class LocationTable(Mapping[BeachKey, LocationEntry]):
    """Read-only lookup table of beaches keyed by normalized name.

    Built once from a sequence of entries; duplicate keys are rejected so
    every key maps to exactly one entry.
    """

    def __init__(self, entries: list[LocationEntry] | tuple[LocationEntry, ...]):
        table: dict[BeachKey, LocationEntry] = {}
        for entry in entries:
            if entry.key in table:
                raise ValueError(f"Duplicate beach key: {entry.key}")
            table[entry.key] = entry
        self._entries = MappingProxyType(table)

    def __getitem__(self, key: BeachKey) -> LocationEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[BeachKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def keys_list(self) -> list[BeachKey]:
        return list(self._entries)

    def __repr__(self) -> str:
        return f"LocationTable({self.keys_list()!r})"
