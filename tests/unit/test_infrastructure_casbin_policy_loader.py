"""Unit tests for the Casbin-backed policy loader.

Tests cover:
- The shipped model.conf/policy.csv load and agree with Casbin's enforcer
- Lines with unknown roles or actions are skipped with a warning
- Missing files are fatal and logged at critical level
"""

from itertools import product

import pytest

from src.core.config import settings
from src.domain.enums import Action, Resource, UserRole
from src.infrastructure.authorization import create_enforcer, load_access_policy


@pytest.fixture
def policy_file(tmp_path):
    """Write a small policy containing one bad role and one bad action."""
    path = tmp_path / "policy.csv"
    path.write_text(
        "p, client, leads, read\n"
        "p, admin, leads, read\n"
        "p, owner, leads, read\n"
        "p, admin, leads, export\n"
    )
    return str(path)


@pytest.mark.unit
class TestLoadDefaultPolicy:
    """Test loading the policy files shipped with the package."""

    def test_loads_and_logs(self, mock_logger):
        policy = load_access_policy(
            settings.authz_model_path, settings.authz_policy_path, mock_logger
        )

        assert policy.rules
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args[0][0] == "access_policy_loaded"
        mock_logger.warning.assert_not_called()

    def test_matches_casbin_enforcer(self, access_policy):
        enforcer = create_enforcer(settings.authz_model_path, settings.authz_policy_path)

        for role, resource, action in product(UserRole, Resource, Action):
            assert access_policy.can(role, resource, action) == enforcer.enforce(
                role.value, resource.value, action.value
            ), (role, resource, action)

    def test_client_grants(self, access_policy):
        assert access_policy.permissions_for(UserRole.CLIENT) == [
            ("dashboard", "read"),
            ("leads", "read"),
            ("notifications", "read"),
            ("subscription", "read"),
        ]

    def test_user_management_is_admin_only(self, access_policy):
        for action in Action:
            assert access_policy.allowed_roles(Resource.USERS, action) == frozenset(
                {UserRole.SUPER_ADMIN, UserRole.ADMIN}
            )

    def test_sites_are_super_admin_only(self, access_policy):
        assert access_policy.can(UserRole.SUPER_ADMIN, Resource.SITES, Action.READ)
        assert not access_policy.can(UserRole.ADMIN, Resource.SITES, Action.READ)


@pytest.mark.unit
class TestLoadCustomPolicy:
    """Test skipping and failure behaviour with custom files."""

    def test_unknown_role_and_action_lines_are_skipped(self, mock_logger, policy_file):
        policy = load_access_policy(settings.authz_model_path, policy_file, mock_logger)

        assert policy.allowed_roles("leads", "read") == frozenset(
            {UserRole.CLIENT, UserRole.ADMIN}
        )
        assert policy.allowed_roles("leads", "export") == frozenset()
        assert mock_logger.warning.call_count == 2
        reasons = {call.kwargs["reason"] for call in mock_logger.warning.call_args_list}
        assert reasons == {"unknown_role", "unknown_action"}
        assert mock_logger.info.call_args.kwargs["skipped_lines"] == 2

    def test_missing_policy_file_raises(self, mock_logger, tmp_path):
        missing = str(tmp_path / "missing.csv")

        with pytest.raises((OSError, RuntimeError, ValueError)):
            load_access_policy(settings.authz_model_path, missing, mock_logger)

        mock_logger.critical.assert_called_once()

    def test_missing_model_file_raises(self, mock_logger, policy_file, tmp_path):
        missing = str(tmp_path / "missing.conf")

        with pytest.raises((OSError, RuntimeError, ValueError)):
            load_access_policy(missing, policy_file, mock_logger)

        assert mock_logger.critical.call_args[0][0] == "access_policy_load_failed"
