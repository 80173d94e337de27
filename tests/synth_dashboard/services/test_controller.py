from __future__ import annotations

import asyncio
import io

import numpy as np
import pandas as pd
import plotly.graph_objs as go
import pytest

from synth_dashboard.core.filter_state import FilterState
from synth_dashboard.core.periods import PERIODS
from synth_dashboard.export.delivery import MemoryDelivery
from synth_dashboard.export.image_export import SurfaceHandle
from synth_dashboard.services.controller import DashboardController


@pytest.fixture()
def controller() -> DashboardController:
    return DashboardController.create(np.random.default_rng(42))


def test_create_selects_every_period(controller):
    assert controller.filter_state == FilterState.all()
    assert len(controller.dataset) == 12
    assert controller.filtered_view() == controller.dataset.records


def test_toggle_off_then_export_ignores_filter(controller):
    assert controller.toggle_period("March") is True

    view = controller.filtered_view()
    assert len(view) == 11
    assert [r.period for r in view] == [p for p in PERIODS if p != "March"]

    delivery = MemoryDelivery()
    assert controller.export_data(delivery) is True

    exported = delivery.files[0]
    assert exported.filename == "synthetic_data.csv"

    text = exported.content.decode("utf-8")
    assert text.split("\n")[0] == "period,realAccuracy,syntheticAccuracy,threatsDetected"

    parsed = pd.read_csv(io.StringIO(text))
    assert list(parsed["period"]) == list(PERIODS)
    assert list(parsed["threatsDetected"]) == [r.threats_detected for r in controller.dataset]
    assert list(parsed["realAccuracy"]) == pytest.approx([r.real_accuracy for r in controller.dataset])


def test_toggle_invalid_period_keeps_state(controller):
    before = controller.filter_state

    assert controller.toggle_period("Smarch") is False
    assert controller.filter_state == before


def test_regenerate_replaces_dataset_and_keeps_filter(controller):
    controller.toggle_period("January")
    old_dataset = controller.dataset
    old_filter = controller.filter_state

    controller.regenerate(np.random.default_rng(99))

    assert controller.dataset is not old_dataset
    assert controller.dataset != old_dataset
    assert controller.filter_state == old_filter
    assert [r.period for r in controller.filtered_view()] == list(PERIODS[1:])


def test_filtered_view_is_recomputed(controller):
    first = controller.filtered_view()
    controller.toggle_period("April")
    second = controller.filtered_view()

    assert len(first) == 12
    assert len(second) == 11


def test_export_chart_unbound_surface(controller):
    delivery = MemoryDelivery()

    ok = asyncio.run(controller.export_chart(SurfaceHandle.unbound(), "x.png", delivery))

    assert ok is False
    assert delivery.files == []


def test_export_chart_failure_is_handled(controller, monkeypatch):
    def _failing_to_image(self, *args, **kwargs):
        raise RuntimeError("no renderer")

    monkeypatch.setattr(go.Figure, "to_image", _failing_to_image, raising=True)
    delivery = MemoryDelivery()
    before = controller.to_dict()

    ok = asyncio.run(controller.export_chart(SurfaceHandle(go.Figure()), "threats.png", delivery))

    assert ok is False
    assert delivery.files == []
    assert controller.to_dict() == before


def test_export_chart_success(controller, monkeypatch):
    monkeypatch.setattr(go.Figure, "to_image", lambda self, *a, **k: b"png-bytes", raising=True)
    delivery = MemoryDelivery()

    ok = asyncio.run(controller.export_chart(SurfaceHandle(go.Figure()), "accuracy.png", delivery))

    assert ok is True
    assert delivery.files[0].filename == "accuracy.png"
    assert delivery.files[0].content == b"png-bytes"


def test_regenerate_during_capture_does_not_affect_it(controller, monkeypatch):
    monkeypatch.setattr(
        go.Figure, "to_image", lambda self, *a, **k: self.layout.title.text.encode(), raising=True
    )
    fig = go.Figure()
    fig.update_layout(title="before")
    delivery = MemoryDelivery()

    async def _scenario():
        task = asyncio.ensure_future(controller.export_chart(SurfaceHandle(fig), "t.png", delivery))
        # let the export take its snapshot and start rasterizing
        await asyncio.sleep(0)
        controller.regenerate()
        controller.toggle_period("May")
        return await task

    assert asyncio.run(_scenario()) is True
    assert delivery.files[0].content == b"before"
    assert len(controller.dataset) == 12


def test_controller_to_from_dict_roundtrip(controller):
    controller.toggle_period("March")

    rebuilt = DashboardController.from_dict(controller.to_dict())

    assert rebuilt.dataset == controller.dataset
    assert rebuilt.filter_state == controller.filter_state
