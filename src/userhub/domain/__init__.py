"""Domain layer: aggregates, exceptions and repository interfaces."""
