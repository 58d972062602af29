"""Domain modules: metric catalog, shared foundations and snapshot engine."""
