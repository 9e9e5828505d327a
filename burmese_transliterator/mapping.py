"""
Core data structures for the transliteration engine.
"""

from dataclasses import dataclass, field

UNKNOWN_MARKER = "❓"
UNKNOWN_LABEL = "Unknown character"
CUSTOM_LABEL = "Custom mapping"


@dataclass(frozen=True)
class MappingEntry:
    """A single Burmese → Devanagari mapping."""
    source: str  # Burmese text, must be non-empty to take part in matching
    target: str  # Devanagari output
    label: str = ""  # Human-readable gloss

    @property
    def is_valid(self) -> bool:
        """Entries with an empty source can never be matched."""
        return len(self.source) > 0

    @classmethod
    def from_dict(cls, data: dict) -> "MappingEntry":
        return cls(
            source=data["source"],
            target=data["target"],
            label=data.get("label") or "",
        )

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "label": self.label}


@dataclass(frozen=True)
class Token:
    """
    One scan step of a conversion: the source fragment consumed and the
    target fragment it produced.
    """
    matched_source: str
    matched_target: str
    label: str = ""
    unmatched: bool = False  # Set only by Token.unknown

    @property
    def is_unknown(self) -> bool:
        return self.unmatched

    @classmethod
    def from_entry(cls, entry: MappingEntry) -> "Token":
        return cls(entry.source, entry.target, entry.label or "")

    @classmethod
    def unknown(cls, char: str, marker: str = UNKNOWN_MARKER) -> "Token":
        return cls(char, marker, UNKNOWN_LABEL, unmatched=True)

    def to_dict(self) -> dict:
        return {
            "source": self.matched_source,
            "target": self.matched_target,
            "label": self.label,
        }


@dataclass(frozen=True)
class ConversionResult:
    """
    Output of a conversion.

    ``output`` is always the concatenation of every token's target, in order.
    """
    output: str = ""
    tokens: tuple[Token, ...] = field(default_factory=tuple)

    @classmethod
    def from_tokens(cls, tokens: list[Token]) -> "ConversionResult":
        return cls("".join(t.matched_target for t in tokens), tuple(tokens))

    @property
    def source(self) -> str:
        """The input text, reassembled from the consumed fragments."""
        return "".join(t.matched_source for t in self.tokens)

    @property
    def unknown_tokens(self) -> list[Token]:
        return [t for t in self.tokens if t.is_unknown]

    def to_dict(self) -> dict:
        return {
            "output": self.output,
            "tokens": [t.to_dict() for t in self.tokens],
        }
