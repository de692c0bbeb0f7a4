"""Application layer: DTOs, use cases and their tagged results."""
