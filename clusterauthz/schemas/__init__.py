"""Request and response schemas (Pydantic)."""
