"""Access Policy - risk-based gating.

LOW and MEDIUM tools are open to everyone. HIGH tools require the admin
role or an explicit per-call ``sudo`` override.

Two inputs can signal admin: ``context["user"]["role"]`` and the legacy
boolean ``context["isAdmin"]``. Either one grants access. ``resolve_role``
reports a single role for error messages: an explicit user role wins there,
the legacy flag only shows when no role is present.
"""

from collections.abc import Mapping
from typing import Any

from exo_tools.base import ExecutionOptions, RiskLevel

ADMIN_ROLE = "admin"

LEGACY_ADMIN_KEYS = ("isAdmin", "is_admin")


def resolve_role(context: Mapping[str, Any] | None) -> str | None:
    """
    Resolve the effective role of the caller.

    Args:
        context: Execution context

    Returns:
        str | None: ``user.role`` if set, ``"admin"`` for a legacy admin
        flag, otherwise None

    Example:
        resolve_role({"user": {"id": "1", "role": "user"}})  # "user"
        resolve_role({"isAdmin": True})  # "admin"
        resolve_role({})  # None
    """
    if not context:
        return None

    user = context.get("user")
    if isinstance(user, Mapping):
        role = user.get("role")
    else:
        role = getattr(user, "role", None)
    if role:
        return str(role)

    if has_legacy_admin_flag(context):
        return ADMIN_ROLE

    return None


def has_legacy_admin_flag(context: Mapping[str, Any] | None) -> bool:
    """True when ``isAdmin`` or ``is_admin`` is exactly True."""
    if not context:
        return False
    # Truthy strings don't count
    return any(context.get(key) is True for key in LEGACY_ADMIN_KEYS)


def check_access(
    risk_level: RiskLevel,
    context: Mapping[str, Any] | None,
    options: ExecutionOptions,
) -> bool:
    """
    Decide whether a call at ``risk_level`` may proceed.

    Returns:
        bool: True to allow, False to deny
    """
    if risk_level is not RiskLevel.HIGH:
        return True

    if options.sudo:
        return True

    return resolve_role(context) == ADMIN_ROLE or has_legacy_admin_flag(context)
