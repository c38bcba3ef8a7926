from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for orientql.

    Errors are categorized by code instead of by a deep exception
    hierarchy. The builder itself only fails on configuration problems:
    everything else (unsafe characters, missing tokens) is handled
    leniently at render time.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"
    COMMAND_NOT_FOUND = "CONFIG_003"


class OrientQLError(Exception):
    """Base exception for all orientql errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize an orientql error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from orientql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": error_code.value,
                "details": self.details,
            },
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "OrientQLError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for OrientQLError

        Returns:
            OrientQLError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> OrientQLError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        OrientQLError with CONFIG_INVALID code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return OrientQLError(
        message=message,
        error_code=ErrorCode.CONFIG_INVALID,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def command_not_found_error(
    command_id: str,
    owner: str,
    **kwargs
) -> OrientQLError:
    """Create the error raised when a command id is missing from a registry.

    Args:
        command_id: The command id that could not be resolved
        owner: Name of the type that owns the registry

    Returns:
        OrientQLError with COMMAND_NOT_FOUND code
    """
    details = kwargs.get('details', {})
    details["command_id"] = command_id
    details["owner"] = owner

    return OrientQLError(
        message=f"command {command_id} not found in {owner}",
        error_code=ErrorCode.COMMAND_NOT_FOUND,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
