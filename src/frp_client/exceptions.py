"""
Custom exceptions for the frp_client module.

Only InvalidArgumentError is raised to callers. The encoding and decoding
errors are raised inside the request routine and turned into failed results.
"""

from typing import Optional, Any


class FrpClientError(Exception):
    """Base exception class for all frp_client related errors."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self.message)


class InvalidArgumentError(FrpClientError, ValueError):
    """Raised when invalid arguments are passed to the client."""

    def __init__(self, argument_name: str, argument_value: Any, expected: str) -> None:
        """Initialize the exception.

        Args:
            argument_name: Name of the invalid argument
            argument_value: The invalid value that was provided
            expected: Description of what was expected
        """
        self.argument_name = argument_name
        self.argument_value = argument_value
        self.expected = expected

        message = (
            f"Invalid argument '{argument_name}': got {type(argument_value).__name__} "
            f"({argument_value!r}), expected {expected}"
        )

        super().__init__(
            message,
            {
                "argument_name": argument_name,
                "argument_value": argument_value,
                "expected": expected,
            },
        )


class RequestEncodingError(FrpClientError):
    """Raised when a request body cannot be serialized."""

    def __init__(self, content_type: str, error: Exception) -> None:
        self.content_type = content_type
        self.error = error

        message = f"Failed to encode request body as {content_type}: {error}"

        super().__init__(message, {"content_type": content_type, "error": error})


class ResponseDecodingError(FrpClientError):
    """Raised when a response body cannot be decoded into the requested type."""

    def __init__(self, error: Exception, body: Optional[str] = None) -> None:
        self.error = error
        self.body = body

        super().__init__(str(error), {"error": error, "body": body})
