"""Custom exception hierarchy for sdxxd.

All exceptions inherit from SdxxdError so the CLI can catch every
sdxxd-specific failure with a single except clause. Each class carries
the process exit code the command line tool terminates with.
"""

from __future__ import annotations


class SdxxdError(Exception):
    """Base exception for all sdxxd errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary of additional context about the error.
        exit_code: Process exit status reported by the CLI.
    """

    exit_code: int = 1

    def __init__(self, message: str, context: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Optional dictionary of additional context about the error.
        """
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including context if present."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class UsageError(SdxxdError):
    """Exception raised for invalid flag values.

    Example:
        >>> raise UsageError("invalid length", flag="length", context={"value": "0"})
    """

    exit_code = 1

    def __init__(self, message: str, flag: str | None = None, context: dict | None = None):
        """Initialize the usage error.

        Args:
            message: Human-readable error message.
            flag: Name of the offending flag, if applicable.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if flag:
            ctx["flag"] = flag
        super().__init__(message, ctx)
        self.flag = flag


class NumericLiteralError(SdxxdError):
    """Exception raised when an integer literal cannot be represented.

    Raised for literals outside the signed 64-bit range.
    """

    exit_code = 1

    def __init__(self, message: str, literal: str | None = None, context: dict | None = None):
        ctx = context or {}
        if literal is not None:
            ctx["literal"] = literal
        super().__init__(message, ctx)
        self.literal = literal


class SourceError(SdxxdError):
    """Exception raised when the input file cannot be opened, sized or positioned.

    Example:
        >>> raise SourceError("No such file or directory", path="missing.bin")
    """

    exit_code = 2

    def __init__(self, message: str, path: str | None = None, context: dict | None = None):
        """Initialize the source error.

        Args:
            message: Human-readable error message.
            path: The path that caused the error, if applicable.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path


class SeekError(SdxxdError):
    """Exception raised when a seek is requested on a non-seekable source."""

    exit_code = 4


class DecodeError(SdxxdError):
    """Exception raised when dump text cannot be turned back into bytes.

    The exit code defaults to 2 (file input); the stream driver reports
    decode failures with exit code 1.
    """

    exit_code = 2

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        exit_code: int | None = None,
        context: dict | None = None,
    ):
        """Initialize the decode error.

        Args:
            message: Human-readable error message.
            line_number: 1-based input line where decoding failed, if known.
            exit_code: Override for the default exit code.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if line_number is not None:
            ctx["line"] = line_number
        super().__init__(message, ctx)
        self.line_number = line_number
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(SdxxdError):
    """Exception raised for configuration errors.

    Example:
        >>> raise ConfigError("Invalid log level", config_key="log_level")
    """

    exit_code = 1

    def __init__(self, message: str, config_key: str | None = None, context: dict | None = None):
        """Initialize the config error.

        Args:
            message: Human-readable error message.
            config_key: The configuration key that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, ctx)
        self.config_key = config_key
