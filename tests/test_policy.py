"""Policy Tests.

Unit tests for role resolution, access policy and confirmation gate.
"""

from types import SimpleNamespace

import pytest

from exo_tools.base import ExecutionOptions, RiskLevel
from exo_tools.policies import check_access, check_confirmation, resolve_role


class TestResolveRole:
    """Tests for resolve_role()."""

    @pytest.mark.parametrize(
        "context,expected",
        [
            ({"user": {"id": "1", "role": "user"}}, "user"),
            ({"user": {"id": "1", "role": "admin"}}, "admin"),
            ({"isAdmin": True}, "admin"),
            ({"is_admin": True}, "admin"),
            ({"isAdmin": "yes"}, None),
            ({"isAdmin": False}, None),
            ({"user": {"id": "1"}}, None),
            ({}, None),
            (None, None),
        ],
    )
    def test_resolution(self, context, expected):
        """Test each admin signal resolves as documented."""
        assert resolve_role(context) == expected

    def test_reported_role_prefers_user_role(self):
        """Test explicit role is the one reported alongside isAdmin."""
        assert resolve_role({"user": {"role": "user"}, "isAdmin": True}) == "user"

    def test_legacy_flag_applies_without_role(self):
        """Test isAdmin applies when user has no role."""
        assert resolve_role({"user": {"id": "1"}, "isAdmin": True}) == "admin"

    def test_user_object_with_role_attribute(self):
        """Test user may be an object instead of a mapping."""
        ctx = {"user": SimpleNamespace(id="1", role="admin")}
        assert resolve_role(ctx) == "admin"


class TestCheckAccess:
    """Tests for check_access()."""

    def test_low_and_medium_always_allowed(self):
        for level in (RiskLevel.LOW, RiskLevel.MEDIUM):
            assert check_access(level, {}, ExecutionOptions()) is True

    def test_high_denied_without_admin(self):
        assert check_access(RiskLevel.HIGH, {"user": {"role": "user"}}, ExecutionOptions()) is False

    def test_high_allowed_with_sudo(self):
        assert check_access(RiskLevel.HIGH, {}, ExecutionOptions(sudo=True)) is True

    def test_high_allowed_for_admin(self):
        assert check_access(RiskLevel.HIGH, {"isAdmin": True}, ExecutionOptions()) is True

    def test_high_allowed_for_legacy_flag_alongside_user_role(self):
        """Test isAdmin grants access even when user.role is not admin."""
        ctx = {"user": {"id": "1", "role": "user"}, "isAdmin": True}
        assert check_access(RiskLevel.HIGH, ctx, ExecutionOptions()) is True

    def test_high_denied_for_truthy_non_bool_flag(self):
        ctx = {"user": {"role": "user"}, "isAdmin": "true"}
        assert check_access(RiskLevel.HIGH, ctx, ExecutionOptions()) is False


class TestCheckConfirmation:
    """Tests for check_confirmation()."""

    def test_not_required(self):
        assert check_confirmation(False, ExecutionOptions()) is True

    def test_required_and_missing(self):
        assert check_confirmation(True, ExecutionOptions()) is False

    def test_required_and_given(self):
        assert check_confirmation(True, ExecutionOptions(confirmed=True)) is True
