def test_admin_wildcard_expands_to_declared_actions(resolver):
    assert resolver.capabilities_for("admin", "subscribers") == {"view", "create", "delete"}
    assert resolver.capabilities_for("admin", "users") == {"view"}


def test_editor_cannot_delete(resolver):
    assert resolver.capabilities_for("editor", "subscribers") == {"view", "create"}
    assert not resolver.has_permission("editor", "subscribers", "delete")


def test_unknown_or_missing_role_falls_back_to_default(resolver):
    assert resolver.effective_role(None) == "viewer"
    assert resolver.effective_role("owner") == "viewer"
    assert resolver.capabilities_for(None, "subscribers") == {"view"}


def test_role_is_case_insensitive(resolver):
    assert resolver.effective_role(" Admin ") == "admin"


def test_viewer_has_no_users_access(resolver):
    assert resolver.capabilities_for("viewer", "users") == frozenset()


def test_unknown_resource_is_empty(resolver):
    assert resolver.capabilities_for("admin", "billing") == frozenset()


def test_all_capabilities(resolver):
    caps = resolver.all_capabilities("editor")
    assert set(caps) == {"subscribers", "users", "dashboard"}
    assert caps["dashboard"] == {"view"}
