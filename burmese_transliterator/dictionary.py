"""
Mapping table loading and dictionary construction.

The search order of a Dictionary is what gives the scanner its
longest-match-first behaviour, so building it is kept separate from
scanning and is tested on its own.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .mapping import MappingEntry

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "burmese_devanagari.json"


class DictionaryLoadError(Exception):
    """Raised when a mapping table file cannot be loaded."""
    pass


class Dictionary:
    """
    Immutable, ordered search list of mapping entries.

    Entries are kept sorted by source length, longest first. Entries of
    equal length keep the order they were given in, so whatever comes
    first (custom entries, most recent first) shadows what comes later.
    """

    def __init__(self, entries: Iterable[MappingEntry] = (), version: str = ""):
        # sorted() is stable, including with reverse=True
        self._entries = tuple(sorted(entries, key=lambda e: len(e.source), reverse=True))
        self.version = version

    @property
    def entries(self) -> tuple[MappingEntry, ...]:
        return self._entries

    def lookup(self, source: str) -> Optional[MappingEntry]:
        """Return the reachable entry for an exact source string, if any."""
        for entry in self._entries:
            if entry.source == source:
                return entry
        return None

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return any(entry.source == source for entry in self._entries)

    def __repr__(self) -> str:
        return f"Dictionary(entries={len(self._entries)}, version={self.version!r})"


def build_dictionary(
    static_entries: Iterable[MappingEntry],
    custom_entries: Iterable[MappingEntry] = (),
    version: str = "",
) -> Dictionary:
    """
    Build the search list used by the scanner.

    Args:
        static_entries: Entries shipped with the application.
        custom_entries: Caller-supplied entries in registry order
            (most recently added first).
        version: Version tag of the static table, kept for reporting.

    Returns:
        A Dictionary holding custom entries ahead of static entries,
        stably sorted by source length descending.
    """
    candidates = []
    for entry in [*custom_entries, *static_entries]:
        if not entry.is_valid:
            logger.warning("Skipping mapping with empty source (target=%r)", entry.target)
            continue
        candidates.append(entry)
    return Dictionary(candidates, version=version)


def load_static_entries(path: Optional[Path | str] = None) -> tuple[list[MappingEntry], str]:
    """
    Load the static mapping table from a JSON file.

    The file holds ``{"version": ..., "entries": [{"source", "target", "label"}, ...]}``.

    Args:
        path: Table to load. Defaults to the packaged Burmese → Devanagari table.

    Returns:
        The entries in file order and the table's version string.

    Raises:
        DictionaryLoadError: If the file is missing or malformed.
    """
    table_path = Path(path) if path else DEFAULT_DICTIONARY_PATH
    if not table_path.is_file():
        raise DictionaryLoadError(f"Dictionary file not found: {table_path}")

    try:
        data = json.loads(table_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"{table_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DictionaryLoadError(f"Invalid JSON in {table_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
        raise DictionaryLoadError(f"{table_path}: expected an object with an 'entries' list")

    entries = []
    for i, item in enumerate(data["entries"]):
        entries.append(_parse_entry(item, i, table_path))

    version = str(data.get("version", ""))
    logger.info("Loaded %d mappings from %s (version %s)", len(entries), table_path.name, version or "unversioned")
    return entries, version


def _parse_entry(item: object, index: int, table_path: Path) -> MappingEntry:
    """Validate one raw table entry."""
    if not isinstance(item, dict):
        raise DictionaryLoadError(f"{table_path}: entry {index} is not an object")

    source = item.get("source")
    target = item.get("target")
    label = item.get("label", "")

    if not isinstance(source, str) or not source:
        raise DictionaryLoadError(f"{table_path}: entry {index} has an empty or missing 'source'")
    if not isinstance(target, str):
        raise DictionaryLoadError(f"{table_path}: entry {index} has a missing 'target'")
    if label is not None and not isinstance(label, str):
        raise DictionaryLoadError(f"{table_path}: entry {index} has a non-string 'label'")

    return MappingEntry.from_dict(item)
