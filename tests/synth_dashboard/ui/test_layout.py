from __future__ import annotations

from pathlib import Path

from dash import dcc

from synth_dashboard.config import AppConfig
from synth_dashboard.core.periods import PERIODS
from synth_dashboard.services.controller import DashboardController
from synth_dashboard.ui.callbacks_utils import try_parse_controller
from synth_dashboard.ui.context import AppContext
from synth_dashboard.ui.dash_app import create_dash_app
from synth_dashboard.ui.ids import IDs, export_button_id, graph_id, image_download_id
from synth_dashboard.ui.layout import build_layout
from synth_dashboard.views.view_registry import default_registry


def _walk(component):
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        if hasattr(child, "to_plotly_json"):
            yield from _walk(child)


def _by_id(layout):
    return {getattr(c, "id", None): c for c in _walk(layout) if getattr(c, "id", None)}


def test_build_layout_contains_state_and_controls():
    ctx = AppContext(config=AppConfig(), registry=default_registry())

    components = _by_id(build_layout(ctx))

    store = components[IDs.Store.DASHBOARD_STATE]
    assert isinstance(store, dcc.Store)
    controller = DashboardController.from_dict(store.data)
    assert len(controller.dataset) == 12

    checklist = components[IDs.Control.PERIOD_CHECKLIST]
    assert checklist.value == list(PERIODS)

    for view_id in ("threats", "accuracy"):
        assert graph_id(view_id) in components
        assert export_button_id(view_id) in components
        assert image_download_id(view_id) in components

    assert IDs.Control.DOWNLOAD_CSV in components
    assert IDs.Control.REGENERATE_BTN in components


def test_each_layout_build_generates_fresh_data():
    ctx = AppContext(config=AppConfig(), registry=default_registry())

    first = _by_id(build_layout(ctx))[IDs.Store.DASHBOARD_STATE].data
    second = _by_id(build_layout(ctx))[IDs.Store.DASHBOARD_STATE].data

    assert first["records"] != second["records"]


def test_try_parse_controller():
    assert try_parse_controller(None) is None
    assert try_parse_controller({}) is None
    assert try_parse_controller({"records": [{"period": "Smarch"}]}) is None

    data = DashboardController.create().to_dict()
    assert try_parse_controller(data).to_dict() == data


def test_create_dash_app(tmp_path: Path):
    app = create_dash_app(tmp_path)

    assert app.title == "Synthetic Data Dashboard"
    assert len(app.callback_map) > 0
