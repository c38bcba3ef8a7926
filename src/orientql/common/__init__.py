"""Common utilities and exceptions for orientql.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    OrientQLError and include structured error information.
"""

from orientql.common.exceptions import (
    OrientQLError,
    ErrorCode,
    # Helper functions
    configuration_error,
    command_not_found_error,
)

__all__ = [
    # Base Exception and Error Codes
    "OrientQLError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "command_not_found_error",
]
