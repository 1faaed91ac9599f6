"""Domain layer: entities, exceptions and pure transformations."""
