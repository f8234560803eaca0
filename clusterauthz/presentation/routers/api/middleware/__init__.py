"""API middleware and request dependencies."""
