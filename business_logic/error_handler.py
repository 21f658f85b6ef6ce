"""
Centralized error handling and user feedback.

This module classifies errors raised around the planning core, maps
calculation error codes to fixed user messages, and builds notification
payloads for the presentation layer.
"""

import logging
from collections import Counter, deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .plan_validator import ValidationError

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for better classification."""
    VALIDATION_ERROR = "validation_error"
    CALCULATION_ERROR = "calculation_error"
    DATA_ERROR = "data_error"
    CONFIGURATION_ERROR = "configuration_error"
    SYSTEM_ERROR = "system_error"


class CalculationErrorCode(Enum):
    """Known calculation failures with fixed user messages."""
    INVALID_BUDGET = "Budget must be a positive number"
    MISSING_BENCHMARK = "Benchmark not configured for this channel"
    WEIGHT_SUM_ERROR = "Benchmark weights must sum to 1.0"
    DIVISION_BY_ZERO = "Cannot calculate — division by zero"
    DATE_RANGE_ERROR = "Invalid date range for flight period"
    CHANNEL_NOT_FOUND = "Channel configuration not found"


SEVERITY_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL
}


@dataclass
class ErrorInfo:
    """Structured error information."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    user_message: str
    technical_details: Optional[str] = None
    suggested_action: Optional[str] = None
    code: Optional[CalculationErrorCode] = None
    timestamp: datetime = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now()


class ErrorHandler:
    """
    Centralized error handling and user feedback system.

    Converts exceptions and calculation error codes into ErrorInfo records
    and keeps a bounded history for monitoring.
    """

    def __init__(self, history_limit: int = 100):
        self.error_history = deque(maxlen=history_limit)

    def handle_calculation_error(self, code: CalculationErrorCode, context: str) -> str:
        """
        Format a calculation error for display.

        Args:
            code: The calculation error code
            context: Where the error occurred (channel, field, ...)

        Returns:
            Message in the form "<context>: <message>"
        """
        return f"{context}: {code.value}"

    def handle_validation_error(self, error: Exception, context: str = "") -> ErrorInfo:
        """
        Handle validation errors with specific user guidance.

        Args:
            error: The validation exception
            context: Additional context about the operation

        Returns:
            ErrorInfo object with structured error information
        """
        return ErrorInfo(
            category=ErrorCategory.VALIDATION_ERROR,
            severity=ErrorSeverity.WARNING,
            message=f"Validation error in {context}: {str(error)}",
            user_message=str(error),  # Validation errors are user-facing already
            suggested_action="Please correct the highlighted issues and try again."
        )

    def classify_error(self, error: Exception, context: str = "") -> ErrorInfo:
        """
        Classify an error and return appropriate ErrorInfo.

        Args:
            error: The exception to classify
            context: Additional context about the operation

        Returns:
            ErrorInfo object with structured error information
        """
        if isinstance(error, ValidationError):
            return self.handle_validation_error(error, context)

        if isinstance(error, ZeroDivisionError):
            return ErrorInfo(
                category=ErrorCategory.CALCULATION_ERROR,
                severity=ErrorSeverity.ERROR,
                message=f"Division by zero in {context}: {str(error)}",
                user_message=self.handle_calculation_error(CalculationErrorCode.DIVISION_BY_ZERO, context),
                code=CalculationErrorCode.DIVISION_BY_ZERO,
                technical_details=str(error)
            )

        if isinstance(error, KeyError):
            return ErrorInfo(
                category=ErrorCategory.DATA_ERROR,
                severity=ErrorSeverity.ERROR,
                message=f"Missing data in {context}: {str(error)}",
                user_message=self.handle_calculation_error(CalculationErrorCode.CHANNEL_NOT_FOUND, context),
                code=CalculationErrorCode.CHANNEL_NOT_FOUND,
                technical_details=str(error),
                suggested_action="Check that every channel in the mix exists in the catalog."
            )

        if isinstance(error, (ValueError, TypeError)):
            return ErrorInfo(
                category=ErrorCategory.DATA_ERROR,
                severity=ErrorSeverity.ERROR,
                message=f"Invalid input in {context}: {str(error)}",
                user_message="Some planning inputs are invalid.",
                technical_details=str(error),
                suggested_action="Review the campaign inputs and try again."
            )

        return ErrorInfo(
            category=ErrorCategory.SYSTEM_ERROR,
            severity=ErrorSeverity.CRITICAL,
            message=f"Unexpected error in {context}: {str(error)}",
            user_message="An unexpected error occurred. Please try again or contact support.",
            technical_details=str(error)
        )

    def create_user_notification(self, error_info: ErrorInfo) -> Dict[str, Any]:
        """
        Build the notification payload shown to the planner.

        Critical errors are not dismissible and expose their technical
        details; the calculation error code is included when known.
        """
        notification = {
            'type': 'error' if error_info.severity == ErrorSeverity.CRITICAL else error_info.severity.value,
            'title': error_info.category.value.replace('_', ' ').title(),
            'message': error_info.user_message,
            'timestamp': error_info.timestamp.isoformat(),
            'dismissible': error_info.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)
        }

        if error_info.code is not None:
            notification['code'] = error_info.code.name
        if error_info.suggested_action:
            notification['action'] = error_info.suggested_action
        if error_info.technical_details and error_info.severity == ErrorSeverity.CRITICAL:
            notification['technical_details'] = error_info.technical_details

        return notification

    def log_error(self, error_info: ErrorInfo, context: str = ""):
        """Record an error in the bounded history and log it at its severity."""
        self.error_history.append(error_info)
        logger.log(SEVERITY_LOG_LEVELS[error_info.severity], f"{context}: {error_info.message}")

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Summarize the recorded errors.

        Returns:
            Dictionary with the total plus counts per category and per
            calculation error code
        """
        return {
            'total_errors': len(self.error_history),
            'category_breakdown': dict(Counter(err.category.value for err in self.error_history)),
            'code_breakdown': dict(Counter(err.code.name for err in self.error_history if err.code is not None))
        }


# Global error handler instance
error_handler = ErrorHandler()
