"""
Service layer: the dashboard controller that owns state and drives the exporters.
"""

from .controller import DashboardController

__all__ = ["DashboardController"]
