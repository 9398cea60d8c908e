"""
Core utilities and infrastructure for the relay bot.
"""

from core.exceptions import (
    RelayBotException,
    DatabaseException,
    DatabaseConnectionError,
    ExternalServiceException,
    CompletionServiceError,
    TelegramAPIError,
    ValidationException,
    ConfigurationError,
    PipelineException,
    UnclassifiableUpdateError,
    MissingSenderIdentityError,
    NoUsableCompletionError,
)
from core.logging_config import configure_logging, get_logger

__all__ = [
    "RelayBotException",
    "DatabaseException",
    "DatabaseConnectionError",
    "ExternalServiceException",
    "CompletionServiceError",
    "TelegramAPIError",
    "ValidationException",
    "ConfigurationError",
    "PipelineException",
    "UnclassifiableUpdateError",
    "MissingSenderIdentityError",
    "NoUsableCompletionError",
    "configure_logging",
    "get_logger",
]
