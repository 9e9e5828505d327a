"""
Burmese Transliterator - Burmese → Devanagari phonetic conversion

Scans Burmese text left to right, matching the longest known phrase or
character at each position, and returns the Devanagari output together
with a breakdown of which fragment produced what.
"""

from .core import SAMPLE_TEXTS, Transliterator, format_breakdown
from .dictionary import Dictionary, DictionaryLoadError, build_dictionary, load_static_entries
from .mapping import ConversionResult, MappingEntry, Token
from .registry import CustomMappingRegistry, add_custom_mapping, remove_custom_mapping
from .scanner import convert

__version__ = "1.0.0"

__all__ = [
    "SAMPLE_TEXTS",
    "Transliterator",
    "format_breakdown",
    "Dictionary",
    "DictionaryLoadError",
    "build_dictionary",
    "load_static_entries",
    "ConversionResult",
    "MappingEntry",
    "Token",
    "CustomMappingRegistry",
    "add_custom_mapping",
    "remove_custom_mapping",
    "convert",
]
