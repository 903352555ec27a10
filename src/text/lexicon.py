"""English reference tables for pluralization and number spelling.

The tables are read-only module constants shared by `pluralize` and `number_to_words`. Keep them
small and deterministic; irregular plurals are keyed by their lower-case singular form.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

IRREGULAR_PLURALS: Mapping[str, str] = MappingProxyType(
    {
        "billiards": "billiards",
        "child": "children",
        "person": "people",
        "mouse": "mice",
        "goose": "geese",
        "man": "men",
        "woman": "women",
        "tooth": "teeth",
        "foot": "feet",
        "knife": "knives",
        "leaf": "leaves",
        "life": "lives",
        "loaf": "loaves",
        "shelf": "shelves",
        "wolf": "wolves",
        "wife": "wives",
        "cactus": "cacti",
        "focus": "foci",
        "fungus": "fungi",
        "nucleus": "nuclei",
        "radius": "radii",
        "syllabus": "syllabi",
        "thesis": "theses",
        "analysis": "analyses",
        "crisis": "crises",
        "diagnosis": "diagnoses",
        "oasis": "oases",
        "phenomenon": "phenomena",
        "criterion": "criteria",
        "bacterium": "bacteria",
        "octopus": "octopuses",
        "cul-de-sac": "culs-de-sac",
        "lasagna": "lasagne",
    }
)

UNCOUNTABLE_WORDS: frozenset[str] = frozenset(
    {
        # Fields of study.
        "acoustics",
        "aerobics",
        "aerodynamics",
        "aeronautics",
        "athletics",
        "classics",
        "economics",
        "electronics",
        "genetics",
        "linguistics",
        "logistics",
        "mathematics",
        "mechanics",
        "obstetrics",
        "physics",
        "politics",
        "statistics",
        "thermodynamics",
        # Games.
        "billiards",
        "bowls",
        "cards",
        "darts",
        "draughts",
        "skittles",
        # Illnesses.
        "diabetes",
        "measles",
        "mumps",
        "rabies",
        "rickets",
        "shingles",
        # Misc.
        "biceps",
        "spaghetti",
    }
)

UNITS: tuple[str, ...] = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

TENS: tuple[str, ...] = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Index `i` names the base-1000 chunk at position `i` (0 = units chunk, no scale word).
SCALES: tuple[str, ...] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
)
