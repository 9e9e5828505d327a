"""
Longest-match-first scanner.

Walks the input left to right. At each position the dictionary is tried
in its stored order (longest sources first) and the first entry whose
source equals the text at that position is emitted. Characters nothing
matches become "unknown" tokens, so every input is consumed in full.
"""

import logging
from typing import Optional

from .dictionary import Dictionary
from .mapping import UNKNOWN_MARKER, ConversionResult, Token

logger = logging.getLogger(__name__)


def convert(
    text: str,
    dictionary: Dictionary,
    unknown_marker: str = UNKNOWN_MARKER,
    passthrough_unknown: bool = False,
) -> ConversionResult:
    """
    Convert Burmese text to Devanagari.

    Args:
        text: Input text. May be empty or contain non-Burmese characters.
        dictionary: Search list built by ``build_dictionary``. Not modified.
        unknown_marker: Target emitted for characters with no mapping.
        passthrough_unknown: Emit unmatched characters unchanged instead
            of the marker.

    Returns:
        ConversionResult with the output string and its token breakdown.
    """
    if not text or not text.strip():
        return ConversionResult()

    tokens: list[Token] = []
    position = 0
    length = len(text)

    while position < length:
        token = _match_at(text, position, dictionary)
        if token is None:
            char = text[position]
            token = Token.unknown(char, char if passthrough_unknown else unknown_marker)
        tokens.append(token)
        position += len(token.matched_source)

    result = ConversionResult.from_tokens(tokens)
    logger.debug(
        "Converted %d characters into %d tokens (%d unknown)",
        length, len(tokens), len(result.unknown_tokens),
    )
    return result


def _match_at(text: str, position: int, dictionary: Dictionary) -> Optional[Token]:
    """Return the token for the first entry matching at ``position``, or None."""
    for entry in dictionary:
        size = len(entry.source)
        if size == 0:
            # Would never advance the cursor
            continue
        if text[position:position + size] == entry.source:
            return Token.from_entry(entry)
    return None
