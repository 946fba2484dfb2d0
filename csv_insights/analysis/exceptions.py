class AnalysisError(Exception):
    """Raised when an AI analysis call fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the AI response does not match the expected structure."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
