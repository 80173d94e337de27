from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from dash import dcc

from .model import ExportedFile


class FileDelivery(ABC):
    """
    Abstract "save/download" primitive used by the exporters.
    """

    @abstractmethod
    def deliver(self, exported: ExportedFile) -> None:
        pass


class DashDownload(FileDelivery):
    """
    Turns a delivered file into the payload a `dcc.Download` component expects.

    A callback creates one instance per request, passes it to the exporter and
    returns `payload` (or dash.no_update when nothing was delivered).
    """

    def __init__(self) -> None:
        self.payload: Optional[Dict[str, Any]] = None

    @property
    def delivered(self) -> bool:
        return self.payload is not None

    def deliver(self, exported: ExportedFile) -> None:
        self.payload = dcc.send_bytes(
            exported.content, exported.filename, type=exported.mime_type
        )


class MemoryDelivery(FileDelivery):
    """Keeps every delivered file in order. Used by tests and scripts."""

    def __init__(self) -> None:
        self.files: List[ExportedFile] = []

    def deliver(self, exported: ExportedFile) -> None:
        self.files.append(exported)
