"""Authorization dependency factories.

The access policy is compiled once at application startup from the Casbin
model and policy files named in settings, then shared read-only by every
request. The identity token verifier is app-scoped as well.
"""

from functools import lru_cache

from src.core.config import settings
from src.domain.value_objects import AccessPolicy
from src.infrastructure.security.identity_token_verifier import IdentityTokenVerifier

# Module-level state for the policy singleton
_policy: AccessPolicy | None = None


def init_access_policy(
    model_path: str | None = None,
    policy_path: str | None = None,
) -> AccessPolicy:
    """Load the access policy at application startup.

    MUST be called during FastAPI lifespan startup. Calling it again
    reloads the policy from disk.

    Args:
        model_path: Casbin model path (defaults to settings.authz_model_path).
        policy_path: Casbin policy path (defaults to settings.authz_policy_path).

    Returns:
        AccessPolicy: The loaded policy.

    Raises:
        OSError: If a policy file cannot be read.
    """
    global _policy

    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_policy_loader import (
        load_access_policy,
    )

    _policy = load_access_policy(
        model_path or settings.authz_model_path,
        policy_path or settings.authz_policy_path,
        get_logger(),
    )
    return _policy


def set_access_policy(policy: AccessPolicy | None) -> None:
    """Install (or clear, with None) the policy singleton directly."""
    global _policy
    _policy = policy


def get_access_policy() -> AccessPolicy:
    """Get the access policy singleton.

    Raises:
        RuntimeError: If called before init_access_policy().
    """
    if _policy is None:
        raise RuntimeError(
            "Access policy not initialized. Call init_access_policy() during startup."
        )
    return _policy


@lru_cache()
def get_identity_verifier() -> IdentityTokenVerifier:
    """Get the identity token verifier singleton (app-scoped)."""
    return IdentityTokenVerifier(
        secret_key=settings.identity_jwt_secret,
        algorithm=settings.identity_jwt_algorithm,
        audience=settings.identity_jwt_audience,
        role_claim=settings.identity_role_claim,
    )
