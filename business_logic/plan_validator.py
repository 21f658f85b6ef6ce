"""
Input validation for forecast configurations and channel mixes.

This module checks numeric inputs against planning rules, verifies benchmark
weights, and collects issues for a forecast before any rows are built.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from models.data_models import ChannelMixEntry, ForecastConfig
from config.settings import PREVIEW_MIX_TOLERANCE, WEIGHT_SUM_TOLERANCE

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """Represents a validation issue found in forecast inputs."""
    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    channel_id: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of forecast input validation."""
    is_valid: bool
    issues: List[ValidationIssue]
    total_errors: int
    total_warnings: int

    @property
    def error_messages(self) -> List[str]:
        return [issue.message for issue in self.issues if issue.severity == ValidationSeverity.ERROR]


@dataclass(frozen=True)
class NumericRule:
    """Bounds for a named numeric input."""
    min: float
    max: float
    required: bool = False


class PlanValidator:
    """
    Validates forecast inputs before calculation.

    The calculation modules assume already-validated data; this class is
    the gate callers use to produce that data.
    """

    def __init__(self, mix_tolerance: float = PREVIEW_MIX_TOLERANCE):
        """Initialize the plan validator."""
        self.mix_tolerance = mix_tolerance
        self.rules: Dict[str, NumericRule] = {
            'budget': NumericRule(min=0, max=100_000_000, required=True),
            'impressions': NumericRule(min=0, max=10_000_000_000),
            'cpm': NumericRule(min=0.01, max=500, required=True),
            'weight': NumericRule(min=0, max=1),
            'vcr': NumericRule(min=0, max=1),
            'pacing': NumericRule(min=0, max=5),
        }

    def validate_numeric_value(self, value: Optional[float], rule_name: str) -> Optional[str]:
        """
        Validate a value against a named rule.

        Args:
            value: Value to check
            rule_name: Name of the rule (budget, impressions, cpm, ...)

        Returns:
            Error message, or None when the value passes or no rule exists
        """
        rule = self.rules.get(rule_name)
        if rule is None:
            return None
        if value is None:
            return f"{rule_name} is required" if rule.required else None
        if value < rule.min:
            return f"{rule_name} must be at least {rule.min}"
        if value > rule.max:
            return f"{rule_name} must be at most {rule.max}"
        return None

    def validate_weights(self, *weights: float) -> bool:
        """Check that weights sum to 1.0 within tolerance."""
        return abs(sum(weights) - 1) < WEIGHT_SUM_TOLERANCE

    def validate_forecast_inputs(self,
                                 config: ForecastConfig,
                                 channel_mix: Sequence[ChannelMixEntry]) -> ValidationResult:
        """
        Validate a forecast configuration and its channel mix.

        Args:
            config: Campaign forecast settings
            channel_mix: Channel entries making up the plan

        Returns:
            ValidationResult with all issues found
        """
        issues = []

        if config.total_budget <= 0:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message="Budget must be greater than 0.",
                field='total_budget'
            ))
        else:
            budget_error = self.validate_numeric_value(config.total_budget, 'budget')
            if budget_error:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    message=budget_error,
                    field='total_budget'
                ))

        if config.periods < 1:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message="Periods must be at least 1.",
                field='periods'
            ))

        if not channel_mix:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message="Add at least one channel.",
                field='channel_mix'
            ))
        else:
            total_pct = sum(entry.percentage for entry in channel_mix)
            if abs(total_pct - 100) > self.mix_tolerance:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    message=f"Channel allocation is {total_pct:.1f}%, must equal 100%.",
                    field='channel_mix'
                ))

            for entry in channel_mix:
                issues.extend(self._validate_mix_entry(entry))

        return self._create_validation_result(issues)

    def _validate_mix_entry(self, entry: ChannelMixEntry) -> List[ValidationIssue]:
        issues = []

        if entry.percentage < 0 or entry.percentage > 100:
            issues.append(ValidationIssue(
                severity=ValidationSeverity.ERROR,
                message=f"Percentage for {entry.channel_id} must be between 0 and 100.",
                field='percentage',
                channel_id=entry.channel_id
            ))

        if entry.min_spend is not None and entry.max_spend is not None and entry.min_spend > entry.max_spend:
            # Allocation clamps to max_spend in this case
            issues.append(ValidationIssue(
                severity=ValidationSeverity.WARNING,
                message=f"Minimum spend for {entry.channel_id} exceeds its maximum; maximum will apply.",
                field='min_spend',
                channel_id=entry.channel_id
            ))

        if entry.cpm_override is not None:
            cpm_error = self.validate_numeric_value(entry.cpm_override, 'cpm')
            if cpm_error:
                issues.append(ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    message=f"{entry.channel_id}: {cpm_error}",
                    field='cpm_override',
                    channel_id=entry.channel_id
                ))

        return issues

    def _create_validation_result(self, issues: List[ValidationIssue]) -> ValidationResult:
        total_errors = sum(1 for issue in issues if issue.severity == ValidationSeverity.ERROR)
        total_warnings = sum(1 for issue in issues if issue.severity == ValidationSeverity.WARNING)

        if total_errors:
            logger.info(f"Forecast input validation failed with {total_errors} errors")

        return ValidationResult(
            is_valid=total_errors == 0,
            issues=issues,
            total_errors=total_errors,
            total_warnings=total_warnings
        )
