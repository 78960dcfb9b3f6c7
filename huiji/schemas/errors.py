"""
Schemas
File: errors.py

Purpose: Error taxonomy for the MediaWiki client.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used by the client."""

    # Errors reported by the server in the response envelope
    API_ERROR = "API_ERROR"

    # Errors detected locally before any request is sent
    PARAMETER_VALIDATION_ERROR = "PARAMETER_VALIDATION_ERROR"
    UNSUPPORTED_ACTION = "UNSUPPORTED_ACTION"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MediaWikiMessage(BaseModel):
    """
    A single warning or error entry from the API envelope.

    With ``errorformat=plaintext`` the server sends ``{code, text, module}``
    triples; any extra keys (``data`` and friends) are kept.
    """

    model_config = ConfigDict(extra="allow")

    code: str = Field(default="", description="Machine-readable message code")
    text: str = Field(default="", description="Plain-text message")
    module: str = Field(default="main", description="API module that raised it")

    def format(self) -> str:
        """Render as ``[<module>] <code>: <text>``."""
        return f"[{self.module}] {self.code}: {self.text}"


class MWClientError(BaseModel):
    """
    Structured error model for passing failures around without exceptions.

    Callers that prefer to branch on API-level failure rather than catch
    can convert an exception with ``to_error_model()`` and back again
    with ``to_exception()``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.API_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    messages: list[MediaWikiMessage] = Field(
        default_factory=list,
        description="Ordered error entries returned by the server",
    )

    def to_exception(self) -> "MWClientException":
        """Convert this error model to a raisable exception."""
        if self.code == ErrorCodes.API_ERROR:
            return MediaWikiApiException(
                self.messages,
                docref=self.details.get("docref"),
            )
        return MWClientException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MWClientException(Exception):
    """
    Base exception for all client errors.

    Transport failures from httpx/requests are not wrapped in this
    hierarchy; they reach the caller as raised by the HTTP library.
    """

    def __init__(
        self,
        message: str,
        code: str = "MW_CLIENT_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MWClientError:
        """Convert this exception to a MWClientError model."""
        return MWClientError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class MediaWikiApiException(MWClientException):
    """Exception raised when the response envelope carries ``errors``."""

    def __init__(
        self,
        messages: list[MediaWikiMessage],
        docref: str | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if docref:
            details["docref"] = docref
        super().__init__(
            message="\n".join(m.format() for m in messages),
            code=ErrorCodes.API_ERROR,
            details=details,
        )
        self.messages = list(messages)
        self.docref = docref

    @property
    def codes(self) -> list[str]:
        """Error codes in server order."""
        return [m.code for m in self.messages]

    def to_error_model(self) -> MWClientError:
        model = super().to_error_model()
        model.messages = list(self.messages)
        return model


class ParameterValidationException(MWClientException):
    """Exception raised when request parameters are rejected locally."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        code: str = ErrorCodes.PARAMETER_VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=code,
            details=full_details,
        )
