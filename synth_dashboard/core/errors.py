from __future__ import annotations


class DashboardError(Exception):
    """Base class for every failure the dashboard core reports."""


class EmptyDataset(DashboardError):
    """Raised when a tabular export is requested for zero records."""

    def __init__(self, message: str = "Cannot export an empty dataset") -> None:
        super().__init__(message)


class InvalidPeriod(DashboardError):
    """Raised when a period outside the fixed enumeration is used."""

    def __init__(self, period: object) -> None:
        self.period = period
        super().__init__(f"Unknown period: {period!r}")


class CaptureFailed(DashboardError):
    """
    Raised when rasterizing a chart surface fails.

    The underlying exception is kept on `cause` (and chained as __cause__).
    """

    def __init__(self, filename: str, cause: BaseException) -> None:
        self.filename = filename
        self.cause = cause
        super().__init__(f"Failed to capture '{filename}': {cause}")
