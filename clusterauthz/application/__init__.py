"""Application layer - command and query handlers (CQRS) and services.

Handlers depend on domain protocols only; adapters are injected by the
container.
"""
