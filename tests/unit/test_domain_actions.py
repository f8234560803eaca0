"""Unit tests for action enums and builtin roles."""

import pytest

from clusterauthz.domain.enums import (
    BUILTIN_ROLES,
    ActionDomain,
    ActionKind,
    BuiltinRole,
    Verb,
)


@pytest.mark.unit
class TestActionKind:
    """Test action domains and verbs."""

    @pytest.mark.parametrize(
        ("action", "domain", "verbs"),
        [
            (ActionKind.MANAGE_ROLES, ActionDomain.ROLES, (Verb.CREATE, Verb.READ, Verb.UPDATE, Verb.DELETE)),
            (ActionKind.READ_ROLES, ActionDomain.ROLES, (Verb.READ,)),
            (ActionKind.MANAGE_CLUSTER, ActionDomain.CLUSTER, (Verb.CREATE, Verb.READ, Verb.UPDATE, Verb.DELETE)),
            (ActionKind.CREATE_COLLECTIONS, ActionDomain.COLLECTIONS, (Verb.CREATE,)),
            (ActionKind.UPDATE_TENANTS, ActionDomain.TENANTS, (Verb.UPDATE,)),
            (ActionKind.DELETE_DATA, ActionDomain.DATA, (Verb.DELETE,)),
        ],
    )
    def test_domain_and_verbs(self, action, domain, verbs):
        assert action.domain is domain
        assert action.verbs == verbs

    def test_wire_names_round_trip(self):
        assert ActionKind("create_collections") is ActionKind.CREATE_COLLECTIONS
        assert "read_data" in ActionKind.values()

    @pytest.mark.parametrize("value", ["", "create", "create_schema", "CREATE_COLLECTIONS"])
    def test_unknown_names_are_invalid(self, value):
        assert ActionKind.is_valid(value) is False

    def test_roles_and_cluster_are_not_scoped(self):
        scoped = {domain for domain in ActionDomain if domain.is_scoped}
        assert scoped == {
            ActionDomain.COLLECTIONS,
            ActionDomain.TENANTS,
            ActionDomain.DATA,
        }


@pytest.mark.unit
class TestBuiltinRoles:
    """Test the reserved role set."""

    def test_builtin_set(self):
        assert BUILTIN_ROLES == frozenset({"admin", "editor", "viewer"})

    @pytest.mark.parametrize("name", ["admin", "editor", "viewer"])
    def test_is_builtin(self, name):
        assert BuiltinRole.is_builtin(name) is True

    @pytest.mark.parametrize("name", ["newRole", "Admin", "", "admins"])
    def test_is_not_builtin(self, name):
        assert BuiltinRole.is_builtin(name) is False

    def test_set_is_immutable(self):
        with pytest.raises(AttributeError):
            BUILTIN_ROLES.add("other")  # type: ignore[attr-defined]
