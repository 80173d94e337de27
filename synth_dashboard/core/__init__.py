"""
Core domain layer: period enumeration, dataset model and generator,
and filter state
"""

from .errors import CaptureFailed, DashboardError, EmptyDataset, InvalidPeriod
from .periods import PERIODS, validate_period
from .dataset import Dataset, MetricRecord
from .generator import generate_dataset
from .filter_state import FilterState, FilteredView

__all__ = [
    "CaptureFailed",
    "DashboardError",
    "Dataset",
    "EmptyDataset",
    "FilterState",
    "FilteredView",
    "InvalidPeriod",
    "MetricRecord",
    "PERIODS",
    "generate_dataset",
    "validate_period",
]
