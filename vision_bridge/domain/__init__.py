"""Domain layer: models, constants, gateway interfaces and pure services."""
