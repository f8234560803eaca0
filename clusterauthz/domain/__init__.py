"""Domain layer - pure authorization model.

Structure:
- enums/: Actions, verbs, builtin roles
- value_objects/: Permission, ResourcePattern, Principal, resource identifiers
- entities/: Role, Policy
- services/: PolicyConverter (pure, deterministic)
- errors/: Persistence and cluster errors
- protocols/: Ports implemented by infrastructure adapters

The domain layer has NO framework or infrastructure dependencies.
"""
