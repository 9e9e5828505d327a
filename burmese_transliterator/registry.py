"""
Caller-owned collection of custom mappings.
"""

import logging
from typing import Iterator, Optional

from .mapping import CUSTOM_LABEL, MappingEntry

logger = logging.getLogger(__name__)


class CustomMappingRegistry:
    """
    Custom mappings, most recently added first.

    The registry order is the order in which entries of equal source
    length are tried, so a newer mapping shadows an older one. Nothing
    here is persisted.
    """

    def __init__(self, entries: Optional[list[MappingEntry]] = None):
        self._entries: list[MappingEntry] = list(entries or [])

    def add(self, source: str, target: str) -> Optional[MappingEntry]:
        """
        Add a custom mapping with top priority.

        Args:
            source: Burmese text to match.
            target: Devanagari text to emit.

        Returns:
            The new entry, or None if ``source`` or ``target`` is empty.
        """
        if not source or not target:
            logger.warning("Refusing custom mapping with empty source or target: %r -> %r", source, target)
            return None

        entry = MappingEntry(source=source, target=target, label=CUSTOM_LABEL)
        self._entries.insert(0, entry)
        return entry

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``. Out-of-range indices are ignored."""
        if 0 <= index < len(self._entries):
            del self._entries[index]

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> list[MappingEntry]:
        """Snapshot of the current entries, most recent first."""
        return list(self._entries)

    def __getitem__(self, index: int) -> MappingEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def add_custom_mapping(registry: CustomMappingRegistry, source: str, target: str) -> None:
    registry.add(source, target)


def remove_custom_mapping(registry: CustomMappingRegistry, index: int) -> None:
    registry.remove(index)
