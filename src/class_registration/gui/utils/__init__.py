"""GUI helpers: icons and logging."""
