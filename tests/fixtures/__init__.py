# Test fixtures
from .sample_mappings import (
    ABC_ENTRIES,
    BURMESE_ENTRIES,
    SAMPLE_TABLE_JSON,
    SAMPLE_CONFIG_TOML,
    KNOWN_CONVERSIONS,
)

__all__ = [
    "ABC_ENTRIES",
    "BURMESE_ENTRIES",
    "SAMPLE_TABLE_JSON",
    "SAMPLE_CONFIG_TOML",
    "KNOWN_CONVERSIONS",
]
