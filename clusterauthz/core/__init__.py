"""Core package - cross-cutting building blocks (config, results, errors, container)."""
