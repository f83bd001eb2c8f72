"""Domain layer: entities, interfaces, services and errors."""
