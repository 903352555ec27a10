"""Rule-based English pluralization.

Precedence (first match wins):
    1) uncountable words are returned unchanged,
    2) irregular words map to their table plural (singular when `count == 1`),
    3) suffix rules apply for `count != 1`.

The singular form is never altered: `pluralize(word, 1) == word` for every word.
"""

from __future__ import annotations

import re

from src.text.lexicon import IRREGULAR_PLURALS, UNCOUNTABLE_WORDS

_SIBILANT_END_RE = re.compile(r"(?:s|sh|ch|x|z)$")
_VOWEL_Y_END_RE = re.compile(r"[aeiou]y$")


def _apply_suffix_rules(word: str, lower_word: str) -> str:
    if _SIBILANT_END_RE.search(lower_word):
        return word + "es"
    if lower_word.endswith("y") and not _VOWEL_Y_END_RE.search(lower_word):
        return word[:-1] + "ies"
    if lower_word.endswith("fe"):
        return word[:-2] + "ves"
    if lower_word.endswith("f"):
        return word[:-1] + "ves"
    return word + "s"


def pluralize(word: str, count: int) -> str:
    """Return the form of `word` that agrees with `count`.

    Lookups are case-insensitive. Irregular plurals come from the table as-is, so their casing
    follows the table entry rather than the caller's input; suffix rules keep the input casing.
    """

    lower_word = word.lower()

    if lower_word in UNCOUNTABLE_WORDS:
        return word

    irregular = IRREGULAR_PLURALS.get(lower_word)
    if irregular is not None:
        return word if count == 1 else irregular

    if count == 1:
        return word

    return _apply_suffix_rules(word, lower_word)
