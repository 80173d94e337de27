from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from synth_dashboard.core.dataset import COL_PERIOD, COL_THREATS_DETECTED
from synth_dashboard.export.model import THREATS_PNG_FILENAME
from synth_dashboard.views.base_view import BaseView


class ThreatsView(BaseView):
    """
    Line chart of threats detected per period.
    """

    id = "threats"
    label = "Threat Detection Over Time"
    export_filename = THREATS_PNG_FILENAME

    x_field = COL_PERIOD
    y_fields = (COL_THREATS_DETECTED,)

    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        fig = px.line(
            data,
            x=self.x_field,
            y=COL_THREATS_DETECTED,
            line_shape="spline",
            markers=True,
        )
        fig.update_traces(line_color="#8884d8")
        fig.update_layout(
            title=self.label,
            height=300,
            margin=dict(l=40, r=40, t=40, b=40),
            xaxis_title=None,
            yaxis_title="Threats detected",
        )
        return fig
