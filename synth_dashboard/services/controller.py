from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import numpy as np

from synth_dashboard.core.dataset import Dataset
from synth_dashboard.core.errors import CaptureFailed, EmptyDataset, InvalidPeriod
from synth_dashboard.core.filter_state import FilteredView, FilterState
from synth_dashboard.core.generator import generate_dataset
from synth_dashboard.export.csv_export import export_csv
from synth_dashboard.export.delivery import FileDelivery
from synth_dashboard.export.image_export import SurfaceHandle, export_image
from synth_dashboard.export.model import CSV_FILENAME, RenderOptions

logger = logging.getLogger(__name__)


class DashboardController:
    """
    Owns the dashboard state (one Dataset, one FilterState) and the user actions on it.

    Purpose:
    - single owner of mutable state, no module level globals
    - exposes the FilteredView the charts render from
    - wires the user actions (regenerate, toggle, export CSV, export chart) to the core

    Design Notes:
    - every failure of an action is handled here: it is logged and the action reports False.
      Nothing raised by an action should reach the UI layer.
    - state round-trips through `to_dict`/`from_dict` so the UI can keep it in a dcc.Store
    """

    def __init__(self, dataset: Dataset, filter_state: Optional[FilterState] = None):
        self._dataset = dataset
        self._filter_state = filter_state if filter_state is not None else FilterState.all()

    @classmethod
    def create(cls, rng: Optional[np.random.Generator] = None) -> DashboardController:
        """Fresh controller: newly generated data, every period selected."""
        return cls(generate_dataset(rng), FilterState.all())

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def filter_state(self) -> FilterState:
        return self._filter_state

    def filtered_view(self) -> FilteredView:
        # Recomputed on every call, never cached
        return self._filter_state.apply(self._dataset)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def regenerate(self, rng: Optional[np.random.Generator] = None) -> None:
        """Replace the whole dataset. The filter selection is kept."""
        self._dataset = generate_dataset(rng)
        logger.info("dataset_regenerated", extra={"n_records": len(self._dataset)})

    def toggle_period(self, period: str) -> bool:
        try:
            self._filter_state = self._filter_state.toggle(period)
        except InvalidPeriod:
            logger.warning("Rejected toggle of unknown period", extra={"period": repr(period)})
            return False
        return True

    def export_data(self, delivery: FileDelivery, filename: str = CSV_FILENAME) -> bool:
        """
        Export the full dataset as CSV. The current filter is deliberately ignored.
        """
        try:
            export_csv(self._dataset.to_records(), delivery, filename=filename)
        except EmptyDataset:
            logger.error("CSV export aborted: dataset is empty")
            return False
        return True

    async def export_chart(
            self,
            surface: SurfaceHandle,
            filename: str,
            delivery: FileDelivery,
            options: Optional[RenderOptions] = None,
    ) -> bool:
        """
        Export a rendered chart as PNG.

        :return: True if a file was delivered; False for an unbound surface or a failed capture
        """
        try:
            return await export_image(surface, filename, delivery, options)
        except CaptureFailed as e:
            logger.error(
                "Chart export failed",
                extra={"export_filename": e.filename, "error": str(e.cause)},
            )
            return False

    # ------------------------------------------------------------------
    # (De)serialization for dcc.Store
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": self._dataset.to_records(),
            "filter_state": self._filter_state.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DashboardController:
        return cls(
            dataset=Dataset.from_records(data["records"]),
            filter_state=FilterState.from_dict(data.get("filter_state") or {}),
        )
