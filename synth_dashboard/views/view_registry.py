from __future__ import annotations

from typing import Dict, List, Type

from .base_view import BaseView


class ViewRegistry:
    """
    Registry for view classes so the app can build its chart cards dynamically

    Design Notes:
    - Stores the subclasses of BaseView, not instances, so that each view can be instantiated on demand
    - Enforces invariants:
        * only BaseView subclasses can be registered
        * each view 'id' is unique across the registry
    """

    def __init__(self):
        self._views: Dict[str, Type[BaseView]] = {}

    def register(self, view_cls: Type[BaseView]) -> None:
        """
        Register a BaseView subclass with the registry

        Raises:
            TypeError: if view_cls is not a subclass of BaseView
            ValueError: if a view with same 'id' already exists
        """
        if not isinstance(view_cls, type) or not issubclass(view_cls, BaseView):
            raise TypeError(f"View '{getattr(view_cls, 'id', view_cls)}' must be a subclass of BaseView")

        if view_cls.id in self._views:
            raise ValueError(f"View '{view_cls.id}' already registered")

        self._views[view_cls.id] = view_cls

    def create(self, view_id: str) -> BaseView:
        """
        Instantiate a view for the given view_id.

        Raises:
            KeyError: if no view with the given id exists in the registry
        """
        try:
            cls = self._views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")
        return cls()

    def all_classes(self) -> List[Type[BaseView]]:
        """Registered view classes, in registration order."""
        return list(self._views.values())


def default_registry() -> ViewRegistry:
    from synth_dashboard.views.threats_view import ThreatsView
    from synth_dashboard.views.accuracy_view import AccuracyView

    registry = ViewRegistry()
    registry.register(ThreatsView)
    registry.register(AccuracyView)
    return registry
