from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import pandas as pd
import plotly.graph_objs as go

from synth_dashboard.core.dataset import records_to_frame
from synth_dashboard.core.filter_state import FilteredView


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every view in the app must follow
    - expose an 'id' - used internally and for component ids
    - expose a 'label' - used as the chart title
    - expose 'export_filename' - the fixed name of the PNG export
    - declare the field mapping: 'x_field' and the plotted 'y_fields'
    - implement 'render_figure' - used to render the figure using Plotly
    """

    id: str = None
    label: str = None
    export_filename: str = None

    x_field: str = None
    y_fields: Tuple[str, ...] = ()

    def compute_data(self, view: FilteredView) -> pd.DataFrame:
        """
        Frame with the mapped fields only, one row per visible record, in period order.
        """
        frame = records_to_frame(view)
        return frame[[self.x_field, *self.y_fields]]

    @abstractmethod
    def render_figure(self, data: pd.DataFrame) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by compute_data()
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def figure_for(self, view: FilteredView) -> go.Figure:
        data = self.compute_data(view)
        if data.empty:
            return self.empty_figure("No periods selected - tick at least one month")
        return self.render_figure(data)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
