"""Authorization infrastructure package.

Static role-based access control built with Casbin:
- model.conf: Casbin model (role, resource, action; no role hierarchy)
- policy.csv: Role grants, one `p, role, resource, action` line each
- casbin_policy_loader.py: Compiles the policy into an AccessPolicy
"""

from src.infrastructure.authorization.casbin_policy_loader import (
    create_enforcer,
    load_access_policy,
)

__all__ = ["create_enforcer", "load_access_policy"]
