"""Pure text transformations.

Case styles, edit distance, pluralization, number spelling, size formatting and HTML text helpers.
All functions are stateless; lookup tables live in `src.text.lexicon`.
"""
