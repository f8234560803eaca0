"""Authorization infrastructure package.

Casbin-based implementations of the authorization ports:
- model.conf: RBAC model definition
- policy_rules.py: Policy <-> casbin rule mapping
- casbin_authorizer.py: CasbinAuthorizer implementing AuthorizerProtocol
- casbin_role_controller.py: CasbinRoleController implementing RoleControllerProtocol
- builtin_policies.py: Builtin role policies and root user seeding
- permissive_authorizer.py: Authorizer used while RBAC is disabled
"""
