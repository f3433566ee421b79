"""Domain layer: entities, events, protocols and validators."""
