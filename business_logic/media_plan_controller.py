"""
Media Plan Controller - Orchestrates forecasting and pacing workflows.

This module ties the calculation components together behind a single
interface that works on an explicit, caller-owned PlannerState.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from models.data_models import ChannelPreviewRow, ForecastRow, PacingData, PacingResult, YTDPacingResult
from .forecast_builder import ForecastRowBuilder
from .pacing import PacingEvaluator, calculate_ytd_pacing
from .plan_validator import PlanValidator, ValidationError
from .planner_state import PlannerState
from .error_handler import error_handler, ErrorInfo, ErrorSeverity, ErrorCategory

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class MediaPlanController:
    """
    Main controller for the media planning workflow.

    Validates inputs, builds forecast rows and evaluates pacing. The
    controller holds collaborators only; all session data lives in the
    PlannerState passed to each call.
    """

    def __init__(self,
                 row_builder: Optional[ForecastRowBuilder] = None,
                 plan_validator: Optional[PlanValidator] = None,
                 pacing_evaluator: Optional[PacingEvaluator] = None):
        """
        Initialize the media plan controller.

        Args:
            row_builder: Optional ForecastRowBuilder instance
            plan_validator: Optional PlanValidator instance
            pacing_evaluator: Optional PacingEvaluator instance
        """
        self.row_builder = row_builder or ForecastRowBuilder()
        self.plan_validator = plan_validator or PlanValidator()
        self.pacing_evaluator = pacing_evaluator or PacingEvaluator()

        logger.info("MediaPlanController initialized")

    def generate_forecast(self,
                          state: PlannerState) -> Tuple[bool, List[ForecastRow], str, Optional[Dict[str, Any]]]:
        """
        Build forecast rows for the state's configuration and channel mix.

        Args:
            state: Planner state holding forecast config and channel mix

        Returns:
            Tuple of (success, list of ForecastRow objects, status message, user_notification)
        """
        if state.forecast_config is None:
            error_info = ErrorInfo(
                category=ErrorCategory.CONFIGURATION_ERROR,
                severity=ErrorSeverity.WARNING,
                message="Forecast requested without a forecast configuration",
                user_message="Set up the campaign budget and flighting before forecasting.",
                suggested_action="Enter a total budget and number of periods."
            )
            return False, [], error_info.user_message, error_handler.create_user_notification(error_info)

        validation = self.plan_validator.validate_forecast_inputs(state.forecast_config, state.channel_mix)
        if not validation.is_valid:
            message = " ".join(validation.error_messages)
            error_info = error_handler.handle_validation_error(ValidationError(message), "forecast inputs")
            error_handler.log_error(error_info, "Forecast generation")
            return False, [], message, error_handler.create_user_notification(error_info)

        try:
            rows = self.row_builder.build_rows(state.forecast_config, state.channel_mix)
        except ValidationError as e:
            error_info = error_handler.handle_validation_error(e, "channel mix allocation")
            error_handler.log_error(error_info, "Forecast generation")
            return False, [], error_info.user_message, error_handler.create_user_notification(error_info)

        message = f"Generated {len(rows)} forecast rows"
        logger.info(message)
        return True, rows, message, None

    def preview(self, state: PlannerState) -> List[ChannelPreviewRow]:
        """
        Per-channel preview of the current forecast.

        Returns an empty list while the inputs are incomplete or invalid,
        so callers can refresh the preview on every edit.
        """
        config = state.forecast_config
        if config is None or config.total_budget <= 0 or not state.channel_mix:
            return []

        try:
            return self.row_builder.build_preview_rows(config, state.channel_mix)
        except ValidationError:
            return []

    def evaluate_pacing(self, state: PlannerState) -> List[Tuple[PacingData, PacingResult]]:
        """Evaluate every pacing snapshot against its channel benchmark."""
        results = self.pacing_evaluator.evaluate_all(state.pacing_data, state.benchmarks)
        counts = self.pacing_evaluator.status_counts(results)
        logger.info(
            "Pacing evaluated: " +
            ", ".join(f"{status.value}={count}" for status, count in counts.items())
        )
        return results

    def ytd_pacing(self, state: PlannerState, channel_id: Optional[str] = None) -> YTDPacingResult:
        """
        Year-to-date pacing over the state's snapshots.

        Args:
            state: Planner state holding pacing data
            channel_id: Restrict to one channel when given

        Returns:
            Aggregated YTD pacing
        """
        records = state.pacing_data
        if channel_id is not None:
            records = [record for record in records if record.channel_id == channel_id]
        return calculate_ytd_pacing(records)
