"""Confirmation Gate - human-in-the-loop approval.

Independent of risk level: a LOW tool may require confirmation and a HIGH
tool may not.
"""

from exo_tools.base import ExecutionOptions


def check_confirmation(requires_confirmation: bool, options: ExecutionOptions) -> bool:
    """Allow unless confirmation is required and the call is not confirmed."""
    if not requires_confirmation:
        return True
    return options.confirmed
