"""
Sample mapping tables and texts for use in tests.
"""

from burmese_transliterator.mapping import MappingEntry


# Abstract table used by the end-to-end example: every prefix of "ABC" maps
ABC_ENTRIES = [
    MappingEntry("A", "३", "one letter"),
    MappingEntry("ABC", "१", "three letters"),
    MappingEntry("AB", "२", "two letters"),
]

# Small Burmese table mixing phrases and single consonants
BURMESE_ENTRIES = [
    MappingEntry("က", "क", "ka"),
    MappingEntry("ကြ", "जा१", "plural form"),
    MappingEntry("ဘာလဲ", "बा२ले³¹१३", "What?"),
    MappingEntry("ဘ", "ब", "bha"),
    MappingEntry("လ", "ल", "la"),
]

SAMPLE_TABLE_JSON = """{
  "version": "test-1",
  "entries": [
    {"source": "က", "target": "क", "label": "ka"},
    {"source": "ကြ", "target": "जा१", "label": "plural form"},
    {"source": "ခ", "target": "ख"}
  ]
}
"""

SAMPLE_CONFIG_TOML = """
[transliterator]
unknown_marker = "?"
passthrough_unknown = true
log_level = "info"
"""

# Known conversions against the packaged table: (input, output, token count)
KNOWN_CONVERSIONS = [
    ("မင်္ဂလာပါ", "मिंग्गालाबा२", 1),
    ("ကောင်းပါတယ်", "कोन्३बा१२दें२", 1),
    ("ဘာလဲ", "बा२ले³¹१३", 1),
    ("ဘာလုပ်ကြမလဲ", "बा२लोपजा१म१ले३¹१३", 1),
    ("ကြ", "जा१", 1),
    ("ကခ", "कख", 2),
]
