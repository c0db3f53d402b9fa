"""Error types for runline primitives.

Building a command is pure computation, so these are reserved for caller
mistakes that must fail fast:
- Primitives: programming errors only (empty executable)
- Runtime/configurations: precondition failures (no image, no requirements)

Free-text input (raw option strings) never raises; the tokenizer falls
back instead.
"""

from typing import Optional


class CommandError(Exception):
    """Base exception for command construction failures.

    Attributes:
        message: Error description.
        cause: Optional underlying exception being wrapped.
    """

    def __init__(self, message: str, cause: Optional[Exception] = None):
        """Initialize CommandError.

        Args:
            message: Description of the error.
            cause: Optional exception that triggered this error.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause


class EmptyExecutableError(CommandError):
    """Command was constructed with an empty executable."""

    def __init__(self, message: str = "empty executable"):
        super().__init__(message)


class ConfigurationError(CommandError):
    """Configuration error (missing field, invalid value, etc).

    Raised when a derived invocation cannot be built from the settings it
    was given, e.g. a container run without an image.

    Attributes:
        message: Description of the error.
        field: Optional field name that failed.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize ConfigurationError.

        Args:
            message: Description of the error.
            field: Optional field that caused the error.
        """
        super().__init__(message)
        self.field = field
