"""Pure helpers over nested data (deep merge, collection utilities)."""
