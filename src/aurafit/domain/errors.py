"""Error types raised by the tracker core."""


class AuraFitError(Exception):
    """Base class for tracker errors."""


class InputValidationError(AuraFitError):
    """User input was rejected before any state change or external call."""


class UpstreamError(AuraFitError):
    """The AI collaborator failed or returned an unusable payload."""


class OperationInProgressError(AuraFitError):
    """The same logical operation is already running."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is already in progress")
        self.operation = operation


class ConfigurationError(AuraFitError):
    """The application cannot start with the current configuration."""
