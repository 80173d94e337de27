from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from synth_dashboard.core.periods import PERIODS
from synth_dashboard.services.controller import DashboardController
from synth_dashboard.ui.context import AppContext
from synth_dashboard.ui.ids import IDs, export_button_id, graph_id, image_download_id
from synth_dashboard.views.base_view import BaseView


def build_layout(ctx: AppContext) -> dbc.Container:
    """
    Build the page. Called on every page load, so each visitor starts with
    freshly generated data and every period selected.
    """
    controller = DashboardController.create()
    views = [ctx.registry.create(cls.id) for cls in ctx.registry.all_classes()]

    return dbc.Container(
        fluid=True,
        className="p-4",
        children=[
            html.H1(ctx.config.ui_title, className="h3 fw-bold mb-3"),

            dcc.Store(
                id=IDs.Store.DASHBOARD_STATE,
                storage_type="memory",
                data=controller.to_dict(),
            ),

            _build_period_panel(controller.filter_state.selected_periods()),

            dbc.Row(
                [dbc.Col(_build_chart_card(view), md=12 if idx == 0 else 6, className="mb-3")
                 for idx, view in enumerate(views)],
                className="gx-3",
            ),

            _build_actions_panel(),
            html.Div(id=IDs.Control.STATUS_BAR, className="text-muted small mt-2"),
        ],
    )


def _build_period_panel(selected: list[str]) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            [
                html.Label("Select Months:", className="fw-semibold me-2"),
                dcc.Checklist(
                    id=IDs.Control.PERIOD_CHECKLIST,
                    options=[{"label": p, "value": p} for p in PERIODS],
                    value=selected,
                    inline=True,
                    inputClassName="me-1",
                    labelClassName="me-3",
                ),
            ],
            className="d-flex flex-wrap align-items-center",
        ),
        className="mb-3",
    )


def _build_chart_card(view: BaseView) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong(view.label),
                        dbc.Button(
                            "Export PNG",
                            id=export_button_id(view.id),
                            color="primary",
                            size="sm",
                        ),
                        dcc.Download(id=image_download_id(view.id)),
                    ],
                    className="d-flex justify-content-between align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    type="default",
                    children=dcc.Graph(
                        id=graph_id(view.id),
                        config={"responsive": True},
                    ),
                ),
            ),
        ],
    )


def _build_actions_panel() -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            html.Div(
                [
                    dbc.Button(
                        "Regenerate Synthetic Data",
                        id=IDs.Control.REGENERATE_BTN,
                        color="primary",
                    ),
                    dbc.Button(
                        "Download CSV",
                        id=IDs.Control.DOWNLOAD_CSV_BTN,
                        color="primary",
                    ),
                    dcc.Download(id=IDs.Control.DOWNLOAD_CSV),
                ],
                className="d-flex justify-content-center gap-3",
            ),
        ),
        className="text-center",
    )
