"""Core enums package.

Usage:
    from user_service.core.enums import ErrorCode, Environment
"""

from user_service.core.enums.environment import Environment
from user_service.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
