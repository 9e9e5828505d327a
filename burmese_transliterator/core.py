"""
Transliterator Core Engine

Ties the static mapping table, the caller's custom mappings and the
longest-match scanner together. Each conversion rebuilds the search
list from the registry as it is at call time, then scans the input.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings
from .dictionary import Dictionary, build_dictionary, load_static_entries
from .mapping import ConversionResult, MappingEntry
from .registry import CustomMappingRegistry
from .scanner import convert

logger = logging.getLogger(__name__)

SAMPLE_TEXTS = (
    "မင်္ဂလာပါ",
    "ကောင်းပါတယ်",
    "ဘာလဲ",
    "ဒါဘာလဲ",
    "ဘာလုပ်ကြမလဲ",
)


class Transliterator:
    """
    Main transliterator engine.

    Holds the static table and a custom-mapping registry and converts
    Burmese text to Devanagari with a token breakdown.
    """

    def __init__(
        self,
        static_entries: Optional[list[MappingEntry]] = None,
        registry: Optional[CustomMappingRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self.registry = registry if registry is not None else CustomMappingRegistry()

        if static_entries is None:
            path = Path(self.settings.dictionary_path) if self.settings.dictionary_path else None
            static_entries, self.version = load_static_entries(path)
        else:
            self.version = ""
        self.static_entries = list(static_entries)

    def dictionary(self) -> Dictionary:
        """Snapshot of the search list with the current custom mappings."""
        return build_dictionary(self.static_entries, self.registry.entries(), version=self.version)

    def convert(self, text: str) -> ConversionResult:
        """
        Convert Burmese text.

        Args:
            text: Raw input; never rejected.

        Returns:
            ConversionResult with the Devanagari output and the breakdown.
        """
        return convert(
            text,
            self.dictionary(),
            unknown_marker=self.settings.unknown_marker,
            passthrough_unknown=self.settings.passthrough_unknown,
        )

    def add_mapping(self, source: str, target: str) -> Optional[MappingEntry]:
        entry = self.registry.add(source, target)
        if entry is not None:
            logger.info("Added custom mapping %s -> %s", source, target)
        return entry

    def remove_mapping(self, index: int) -> None:
        self.registry.remove(index)

    @staticmethod
    def sample_texts() -> list[str]:
        """Return the built-in sample phrases."""
        return list(SAMPLE_TEXTS)


def format_breakdown(result: ConversionResult) -> str:
    """Render the word-by-word breakdown, one token per line."""
    lines = []
    for token in result.tokens:
        line = f"{token.matched_source} → {token.matched_target}"
        if token.label:
            line += f" ({token.label})"
        lines.append(line)
    return "\n".join(lines)
