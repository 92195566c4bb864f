"""
Resource Code Generator - Custom Exceptions

This module defines the exception classes raised while turning a .resx
file into an accessor source file.
"""

from typing import Any, Dict, Optional


class ResxCodegenException(Exception):
    """Base exception for all resource code generation errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "RESX_CODEGEN_ERROR"
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (Code: {self.error_code}, Context: {self.context})"
        return f"{self.message} (Code: {self.error_code})"


class ConfigurationException(ResxCodegenException):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(
            message,
            error_code="CONFIG_ERROR",
            context={"config_key": config_key} if config_key else {},
        )


class InputNotFoundError(ResxCodegenException):
    """Raised when the resource file does not exist."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message,
            error_code="INPUT_NOT_FOUND",
            context={"path": path} if path else {},
        )


class MalformedInputError(ResxCodegenException):
    """Raised when the resource file is not a usable resx document."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        entry_name: Optional[str] = None,
    ):
        context = {}
        if path:
            context["path"] = path
        if entry_name is not None:
            context["entry_name"] = entry_name

        super().__init__(message, error_code="MALFORMED_INPUT", context=context)


class OutputNotWritableError(ResxCodegenException):
    """Raised when the generated source file cannot be created or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            message,
            error_code="OUTPUT_NOT_WRITABLE",
            context={"path": path} if path else {},
        )


class GenerationFailure(ResxCodegenException):
    """
    The single failure reported for a generation run.

    Wraps whatever went wrong underneath. ``reason`` keeps the error code of
    the underlying cause so input and output problems stay distinguishable
    in diagnostics.
    """

    def __init__(
        self,
        message: str,
        reason: str = "UNEXPECTED_ERROR",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(
            message,
            error_code="GENERATION_FAILED",
            context={"reason": reason},
        )
        self.reason = reason
        self.cause = cause

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenerationFailure":
        """Fold any exception into a generation failure."""
        if isinstance(exc, ResxCodegenException):
            return cls(exc.message, reason=exc.error_code, cause=exc)
        return cls(str(exc), cause=exc)
