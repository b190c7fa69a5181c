"""Infrastructure adapters around the domain layer."""
