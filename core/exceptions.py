"""
Custom exception hierarchy for the relay bot.
Provides structured error handling with proper context.
"""

from typing import Optional, Dict, Any


class RelayBotException(Exception):
    """Base exception for all relay bot errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize exception with message and optional context.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# ==================== Database Exceptions ====================


class DatabaseException(RelayBotException):
    """Base exception for database-related errors."""

    pass


class DatabaseConnectionError(DatabaseException):
    """Raised when database connection fails."""

    def __init__(self, details: Optional[str] = None):
        super().__init__(
            message="Failed to connect to database",
            error_code="DATABASE_CONNECTION_ERROR",
            context={"details": details} if details else {},
        )


# ==================== API/External Service Exceptions ====================


class ExternalServiceException(RelayBotException):
    """Base exception for external service errors."""

    pass


class CompletionServiceError(ExternalServiceException):
    """Raised when the completion (LLM) request fails."""

    def __init__(self, model: Optional[str] = None, details: Optional[str] = None):
        super().__init__(
            message="Completion request failed",
            error_code="COMPLETION_SERVICE_ERROR",
            context={"model": model, "details": details},
        )


class TelegramAPIError(ExternalServiceException):
    """Raised when Telegram API call fails."""

    def __init__(self, status_code: Optional[int] = None, details: Optional[str] = None):
        super().__init__(
            message="Telegram API request failed",
            error_code="TELEGRAM_API_ERROR",
            context={"status_code": status_code, "details": details},
        )


# ==================== Validation Exceptions ====================


class ValidationException(RelayBotException):
    """Base exception for validation errors."""

    pass


class ConfigurationError(ValidationException):
    """Raised when configuration is invalid."""

    def __init__(self, setting: str, reason: str):
        super().__init__(
            message=f"Invalid configuration: {setting} - {reason}",
            error_code="CONFIGURATION_ERROR",
            context={"setting": setting, "reason": reason},
        )


# ==================== Pipeline Exceptions ====================
# Expected outcomes of a single update. The pipeline turns these into a fixed
# notice for the user; they never reach the application error handler.


class PipelineException(RelayBotException):
    """Base exception for updates the pipeline cannot answer."""

    pass


class UnclassifiableUpdateError(PipelineException):
    """Raised when an update has no text, caption or photo."""

    def __init__(self, message_id: Optional[int] = None):
        super().__init__(
            message="Update has no text, caption or photo",
            error_code="UNCLASSIFIABLE_UPDATE",
            context={"message_id": message_id},
        )


class MissingSenderIdentityError(PipelineException):
    """Raised when the sender of an update cannot be determined."""

    def __init__(self, message_id: Optional[int] = None):
        super().__init__(
            message="Update has no sender",
            error_code="MISSING_SENDER_IDENTITY",
            context={"message_id": message_id},
        )


class NoUsableCompletionError(PipelineException):
    """Raised when the completion service returned nothing to send."""

    def __init__(self, user_id: Optional[str] = None, outputs: int = 0):
        super().__init__(
            message="Completion returned no usable response",
            error_code="NO_USABLE_COMPLETION",
            context={"user_id": user_id, "outputs": outputs},
        )
