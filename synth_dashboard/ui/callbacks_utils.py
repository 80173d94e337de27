from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence, Tuple

import dash
import plotly.graph_objs as go
from dash import exceptions

from synth_dashboard.export.delivery import DashDownload
from synth_dashboard.export.image_export import SurfaceHandle
from synth_dashboard.export.model import CSV_FILENAME, RenderOptions
from synth_dashboard.services.controller import DashboardController
from synth_dashboard.views.base_view import BaseView

logger = logging.getLogger(__name__)

STATUS_NOT_READY = "Chart is not ready yet."


def try_parse_controller(data: object) -> Optional[DashboardController]:
    """Rebuild the controller from the dcc.Store payload, or None if it is missing/invalid."""
    if not isinstance(data, dict) or not data:
        return None
    try:
        return DashboardController.from_dict(data)
    except Exception:
        logger.exception("Invalid dashboard state: %r", data)
        return None


def regenerate_state(data: object) -> dict:
    """New dataset, same period selection. A broken store starts over from scratch."""
    controller = try_parse_controller(data)
    if controller is None:
        return DashboardController.create().to_dict()

    controller.regenerate()
    return controller.to_dict()


def toggle_state(checked: Optional[Sequence[str]], data: object) -> dict:
    """
    Apply the checklist value to the store: one toggle per period whose membership changed.

    Raises PreventUpdate when the checklist already matches the store.
    """
    controller = try_parse_controller(data) or DashboardController.create()

    current = set(controller.filter_state.selected)
    wanted = set(checked or [])
    changed = sorted(current ^ wanted, key=str)
    if not changed:
        raise exceptions.PreventUpdate

    for period in changed:
        controller.toggle_period(period)

    return controller.to_dict()


def render_figures(views: Sequence[BaseView], data: object) -> List[go.Figure]:
    controller = try_parse_controller(data)
    if controller is None:
        return [BaseView.empty_figure("No data available.") for _ in views]

    filtered = controller.filtered_view()
    return [view.figure_for(filtered) for view in views]


def csv_download(data: object) -> Tuple[Any, str]:
    """(dcc.Download payload or no_update, status text) for the full dataset."""
    controller = try_parse_controller(data)
    if controller is None:
        return dash.no_update, "No data to export."

    delivery = DashDownload()
    if not controller.export_data(delivery):
        return dash.no_update, "CSV export failed."
    return delivery.payload, f"Exported {CSV_FILENAME}"


def chart_download(
        view: BaseView,
        figure: Any,
        data: object,
        options: Optional[RenderOptions] = None,
) -> Tuple[Any, str]:
    """
    (dcc.Download payload or no_update, status text) for one chart.

    The image comes from `figure`, the graph as sent with the request, not from the store.
    """
    controller = try_parse_controller(data) or DashboardController.create()
    surface = SurfaceHandle(figure, name=view.id)
    delivery = DashDownload()

    asyncio.run(controller.export_chart(surface, view.export_filename, delivery, options))

    if delivery.delivered:
        return delivery.payload, f"Exported {view.export_filename}"
    if not surface.is_bound:
        return dash.no_update, STATUS_NOT_READY
    return dash.no_update, f"Export of {view.export_filename} failed."
