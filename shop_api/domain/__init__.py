"""Domain layer: entities, field constants and repository contracts."""
