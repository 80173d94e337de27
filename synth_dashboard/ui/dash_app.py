from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from synth_dashboard.config import load_app_config
from synth_dashboard.ui.callbacks import register_callbacks
from synth_dashboard.ui.context import AppContext
from synth_dashboard.ui.layout import build_layout
from synth_dashboard.views.view_registry import default_registry

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    # 1) Load Config
    config = load_app_config(config_root)

    # 2) App Context
    ctx = AppContext(config=config, registry=default_registry())
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = config.ui_title

    # A function layout runs per page load, so every visitor gets their own fresh dataset
    app.layout = lambda: build_layout(ctx)

    register_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"views": [cls.id for cls in ctx.registry.all_classes()]},
    )
    return app
