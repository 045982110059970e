"""orgmapper: declarative mapping of organization entities to DTOs."""

__version__ = "0.1.0"
