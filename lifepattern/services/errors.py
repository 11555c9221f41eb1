"""Conditions the analysis layer signals to its callers instead of computing a result."""


class AnalysisError(Exception):
    """Base for recoverable analysis conditions. Routers map these to client errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoDataAvailable(AnalysisError):
    """No metrics record (or stored assessment) exists for the subject."""


class InvalidRangeSpecification(AnalysisError):
    """Neither an explicit start/end pair nor a positive day count was supplied."""

    def __init__(
        self,
        message: str = "Please provide either 'days' or both 'start' and 'end' dates",
    ) -> None:
        super().__init__(message)
