"""Domain ports (interfaces implemented by infrastructure)."""
