from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from synth_dashboard.core.dataset import COL_PERIOD, COL_REAL_ACCURACY, COL_SYNTHETIC_ACCURACY
from synth_dashboard.export.model import ACCURACY_PNG_FILENAME
from synth_dashboard.views.base_view import BaseView

# (field, legend name, colour)
_SERIES = (
    (COL_REAL_ACCURACY, "Real Data", "#82ca9d"),
    (COL_SYNTHETIC_ACCURACY, "Synthetic Data", "#8884d8"),
)

Y_RANGE = [0.7, 1]


class AccuracyView(BaseView):
    """
    Grouped bars comparing real vs synthetic accuracy per period.
    """

    id = "accuracy"
    label = "Real vs Synthetic Data Accuracy"
    export_filename = ACCURACY_PNG_FILENAME

    x_field = COL_PERIOD
    y_fields = (COL_REAL_ACCURACY, COL_SYNTHETIC_ACCURACY)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = go.Figure()
        for field, name, colour in _SERIES:
            fig.add_trace(
                go.Bar(
                    x=data[self.x_field],
                    y=data[field],
                    name=name,
                    marker_color=colour,
                )
            )

        fig.update_layout(
            title=self.label,
            barmode="group",
            height=250,
            margin=dict(l=40, r=40, t=40, b=40),
            yaxis=dict(range=Y_RANGE),
        )
        return fig
