"""Application layer: DTOs, the mapping engine and the entity mappers."""
