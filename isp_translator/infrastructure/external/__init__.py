"""External services: the transformation provider."""
