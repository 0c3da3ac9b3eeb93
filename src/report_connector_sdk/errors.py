from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes reported by connector health checks."""
    CONNECTION_FAILED = "CONNECTION_FAILED"
    TIMEOUT = "TIMEOUT"


SAFE_ERROR_MESSAGES = {
    ErrorCode.CONNECTION_FAILED: "The datasource rejected the connection or could not be reached.",
    ErrorCode.TIMEOUT: "The datasource did not answer the health check in time.",
}


def get_safe_message(error_code: ErrorCode) -> str:
    """Returns a sanitized message for an error code, safe to show end users.

    Args:
        error_code (ErrorCode): The error code to describe.

    Returns:
        str: The user-facing message.
    """
    return SAFE_ERROR_MESSAGES[error_code]
