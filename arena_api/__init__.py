"""arena_api – HTTP surface over the simulation core."""
