"""URL, query-string and CSS colour helpers (parsing only, no network access)."""
