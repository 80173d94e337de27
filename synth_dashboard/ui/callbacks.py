from __future__ import annotations

from typing import TYPE_CHECKING, Any

import dash
from dash import Input, Output, State, exceptions

from synth_dashboard.ui.callbacks_utils import (
    chart_download,
    csv_download,
    regenerate_state,
    render_figures,
    toggle_state,
)
from synth_dashboard.ui.ids import IDs, export_button_id, graph_id, image_download_id
from synth_dashboard.views.base_view import BaseView

if TYPE_CHECKING:
    from synth_dashboard.ui.context import AppContext


def register_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    register_state_callbacks(app)
    register_render_callbacks(app, ctx)
    register_export_callbacks(app, ctx)


def register_state_callbacks(app: dash.Dash) -> None:
    # ---------------------------------------------------------
    # Regenerate: new dataset, same period selection
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DASHBOARD_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.REGENERATE_BTN, "n_clicks"),
        State(IDs.Store.DASHBOARD_STATE, "data"),
        prevent_initial_call=True,
    )
    def regenerate_dataset(n_clicks, data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return regenerate_state(data)

    # ---------------------------------------------------------
    # Period checklist -> store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.DASHBOARD_STATE, "data", allow_duplicate=True),
        Input(IDs.Control.PERIOD_CHECKLIST, "value"),
        State(IDs.Store.DASHBOARD_STATE, "data"),
        prevent_initial_call=True,
    )
    def toggle_periods(checked, data):
        return toggle_state(checked, data)


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    views = [ctx.registry.create(cls.id) for cls in ctx.registry.all_classes()]

    # ---------------------------------------------------------
    # Dashboard state -> every chart
    # ---------------------------------------------------------
    @app.callback(
        *[Output(graph_id(view.id), "figure") for view in views],
        Input(IDs.Store.DASHBOARD_STATE, "data"),
    )
    def update_charts(data: dict[str, Any] | None):
        figures = render_figures(views, data)
        # Dash expects a bare value, not a list, for a single output
        return figures[0] if len(figures) == 1 else figures


def register_export_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # CSV: always the full dataset, whatever the filter
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DOWNLOAD_CSV, "data"),
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(IDs.Control.DOWNLOAD_CSV_BTN, "n_clicks"),
        State(IDs.Store.DASHBOARD_STATE, "data"),
        prevent_initial_call=True,
    )
    def download_csv(n_clicks, data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return csv_download(data)

    for cls in ctx.registry.all_classes():
        _register_chart_export(app, ctx, ctx.registry.create(cls.id))


def _register_chart_export(app: dash.Dash, ctx: AppContext, view: BaseView) -> None:
    @app.callback(
        Output(image_download_id(view.id), "data"),
        Output(IDs.Control.STATUS_BAR, "children", allow_duplicate=True),
        Input(export_button_id(view.id), "n_clicks"),
        State(graph_id(view.id), "figure"),
        State(IDs.Store.DASHBOARD_STATE, "data"),
        prevent_initial_call=True,
    )
    def export_chart(n_clicks, figure, data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return chart_download(view, figure, data, ctx.config.render_options)
