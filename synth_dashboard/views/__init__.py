from .base_view import BaseView
from .threats_view import ThreatsView
from .accuracy_view import AccuracyView
from .view_registry import ViewRegistry, default_registry

__all__ = ["BaseView", "ThreatsView", "AccuracyView", "ViewRegistry", "default_registry"]
