"""Presentation layer (FastAPI routers, middleware, error rendering)."""
