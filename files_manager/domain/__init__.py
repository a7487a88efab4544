"""Domain layer: entities, repository interfaces and domain services."""
