"""Window widgets."""
