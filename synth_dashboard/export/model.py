from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

CSV_FILENAME = "synthetic_data.csv"
THREATS_PNG_FILENAME = "threats.png"
ACCURACY_PNG_FILENAME = "accuracy.png"

CSV_MIME_TYPE = "text/csv"
PNG_MIME_TYPE = "image/png"


@dataclass(frozen=True)
class RenderOptions:
    """
    Raster settings passed to the image backend. None means the backend default.
    """
    width_pixel: Optional[int] = None
    height_pixel: Optional[int] = None
    scale: Optional[float] = None


@dataclass(frozen=True)
class ExportedFile:
    """
    A finished export, still in memory, ready to hand to a FileDelivery.
    """
    filename: str
    content: bytes
    mime_type: str
