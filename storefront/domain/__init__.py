"""Domain layer: pure models, field constants and repository contracts."""
