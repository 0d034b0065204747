from src.rules.models import Rules


class CapabilityResolver:
    """
    Resolves a role to the set of action tags it may perform on a resource.

    The result is meant to be computed once per session and handed to the
    view assembler as an opaque set.
    """

    def __init__(self, rules: Rules):
        self.rules = rules

    def effective_role(self, role: str | None) -> str:
        """Unknown or missing roles fall back to the default role."""
        rbac = self.rules.rbac
        if role and role.strip().lower() in rbac.roles:
            return role.strip().lower()
        return rbac.default_role

    def capabilities_for(self, role: str | None, resource: str) -> frozenset[str]:
        rbac = self.rules.rbac
        grants = rbac.roles[self.effective_role(role)].get(resource, [])
        if "*" in grants:
            return frozenset(rbac.resources.get(resource, []))
        return frozenset(grants)

    def all_capabilities(self, role: str | None) -> dict[str, frozenset[str]]:
        """Every resource's capability set for `role`."""
        return {
            resource: self.capabilities_for(role, resource)
            for resource in self.rules.rbac.resources
        }

    def has_permission(self, role: str | None, resource: str, action: str) -> bool:
        return action in self.capabilities_for(role, resource)
