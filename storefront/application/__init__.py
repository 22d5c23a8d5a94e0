"""Application layer: DTOs, validation and use cases."""
