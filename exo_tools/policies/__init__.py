"""Policy enforcement: risk-based access and confirmation gating."""

from exo_tools.base import RiskLevel
from exo_tools.policies.access import ADMIN_ROLE, check_access, resolve_role
from exo_tools.policies.confirmation import check_confirmation

__all__ = ["ADMIN_ROLE", "RiskLevel", "check_access", "check_confirmation", "resolve_role"]
