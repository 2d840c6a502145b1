"""Build the AccessPolicy from a Casbin model and CSV policy.

Casbin parses and validates the model and policy files; the parsed
`p, role, resource, action` lines are then compiled into an immutable
AccessPolicy so request-time checks are plain dictionary lookups.

Policy lines naming a role or action outside the closed enums are skipped
with a warning rather than failing startup. A missing or unparsable file is
fatal: the error is logged and re-raised.

Usage:
    policy = load_access_policy(
        settings.authz_model_path, settings.authz_policy_path, logger
    )
    policy.can(UserRole.CLIENT, Resource.LEADS, Action.READ)
"""

from collections import defaultdict
from typing import TYPE_CHECKING

import casbin

from src.domain.enums import Action, UserRole
from src.domain.value_objects import AccessPolicy, PermissionRule

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


def create_enforcer(model_path: str, policy_path: str) -> casbin.Enforcer:
    """Create a file-backed Casbin enforcer.

    Args:
        model_path: Path to model.conf.
        policy_path: Path to the CSV policy.

    Returns:
        casbin.Enforcer: Enforcer with the policy loaded.
    """
    return casbin.Enforcer(model_path, policy_path)


def load_access_policy(
    model_path: str,
    policy_path: str,
    logger: "LoggerProtocol",
) -> AccessPolicy:
    """Load and compile the access policy.

    Args:
        model_path: Path to model.conf.
        policy_path: Path to the CSV policy.
        logger: Structured logger.

    Returns:
        AccessPolicy: Compiled policy.

    Raises:
        OSError: If a file cannot be read.
        ValueError: If Casbin rejects the model or policy.
    """
    try:
        enforcer = create_enforcer(model_path, policy_path)
    except (OSError, ValueError, RuntimeError) as e:
        logger.critical(
            "access_policy_load_failed",
            error=e,
            model_path=model_path,
            policy_path=policy_path,
        )
        raise

    grants: defaultdict[tuple[str, str], set[UserRole]] = defaultdict(set)
    skipped = 0
    for line in enforcer.get_policy():
        if len(line) < 3:
            skipped += 1
            logger.warning("policy_line_skipped", reason="too_few_fields", line=line)
            continue
        role_value, resource, action = (field.strip() for field in line[:3])
        role = UserRole.parse(role_value)
        if role is None:
            skipped += 1
            logger.warning("policy_line_skipped", reason="unknown_role", role=role_value)
            continue
        if action not in Action.values():
            skipped += 1
            logger.warning("policy_line_skipped", reason="unknown_action", action=action)
            continue
        grants[(resource, action)].add(role)

    policy = AccessPolicy(
        PermissionRule(resource=resource, action=action, allowed_roles=frozenset(roles))
        for (resource, action), roles in grants.items()
    )
    logger.info(
        "access_policy_loaded",
        rules=len(policy.rules),
        skipped_lines=skipped,
        policy_path=policy_path,
    )
    return policy
