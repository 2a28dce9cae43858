"""Errors surfaced to the user as retryable messages."""


class InvalidInputError(ValueError):
    """User input rejected before any external call."""


class AnalysisError(RuntimeError):
    """Food analysis failed upstream or returned an invalid payload."""


class PlanGenerationError(RuntimeError):
    """Meal plan generation failed upstream or returned an invalid payload."""
