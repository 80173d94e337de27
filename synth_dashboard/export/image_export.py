from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Union

import plotly.graph_objs as go

from synth_dashboard.core.errors import CaptureFailed
from .delivery import FileDelivery
from .model import PNG_MIME_TYPE, ExportedFile, RenderOptions

logger = logging.getLogger(__name__)

FigureLike = Union[go.Figure, Dict[str, Any]]


class SurfaceHandle:
    """
    Opaque reference to a chart surface as it is currently rendered.

    In the Dash app this wraps the `figure` property of a `dcc.Graph`. A handle
    whose graph has not been rendered yet (or is gone) is unbound.
    """

    def __init__(self, figure: Optional[FigureLike] = None, name: str = "") -> None:
        self._figure = figure
        self.name = name

    @classmethod
    def unbound(cls, name: str = "") -> SurfaceHandle:
        return cls(None, name=name)

    @property
    def is_bound(self) -> bool:
        return self._figure is not None

    def snapshot(self) -> go.Figure:
        """
        Independent copy of the figure as it is now.

        Later changes to the dashboard state do not reach a snapshot.
        """
        if self._figure is None:
            raise RuntimeError(f"Surface '{self.name}' is not bound")
        if isinstance(self._figure, go.Figure):
            return go.Figure(self._figure.to_dict())
        return go.Figure(self._figure)

    def __repr__(self) -> str:
        state = "bound" if self.is_bound else "unbound"
        return f"SurfaceHandle(name={self.name!r}, {state})"


def rasterize(figure: go.Figure, options: Optional[RenderOptions] = None) -> bytes:
    """Render a figure to PNG bytes (requires kaleido). Blocking."""
    options = options or RenderOptions()
    return figure.to_image(
        format="png",
        width=options.width_pixel,
        height=options.height_pixel,
        scale=options.scale,
    )


async def export_image(
        surface: SurfaceHandle,
        filename: str,
        delivery: FileDelivery,
        options: Optional[RenderOptions] = None,
) -> bool:
    """
    Capture a rendered chart surface as PNG and deliver it under `filename`.

    The rasterization runs in a worker thread so the event loop stays free.
    Concurrent calls are independent of each other.

    :return: True if a file was delivered, False if the surface was unbound (no-op)
    :raises CaptureFailed: if the surface could not be rasterized; nothing is delivered
    """
    if not surface.is_bound:
        logger.info(
            "image_export_skipped_unbound",
            extra={"surface": surface.name, "export_filename": filename},
        )
        return False

    try:
        figure = surface.snapshot()
        content = await asyncio.to_thread(rasterize, figure, options)
    except Exception as e:
        logger.exception(
            "image_export_failed",
            extra={"surface": surface.name, "export_filename": filename},
        )
        raise CaptureFailed(filename, e) from e

    delivery.deliver(ExportedFile(filename=filename, content=content, mime_type=PNG_MIME_TYPE))

    logger.info(
        "image_exported",
        extra={"surface": surface.name, "export_filename": filename, "n_bytes": len(content)},
    )
    return True
