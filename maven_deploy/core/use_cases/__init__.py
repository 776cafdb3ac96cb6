"""Use cases — the entry points a host or the CLI calls."""
