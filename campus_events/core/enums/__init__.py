"""Core enums package.

Usage:
    from campus_events.core.enums import ErrorCode, Environment
"""

from campus_events.core.enums.environment import Environment
from campus_events.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
