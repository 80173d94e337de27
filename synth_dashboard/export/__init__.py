"""
Exporters: CSV for the dataset, PNG for rendered charts, and the delivery targets they write to.
"""

from .csv_export import export_csv, records_to_csv
from .delivery import DashDownload, FileDelivery, MemoryDelivery
from .image_export import SurfaceHandle, export_image
from .model import ExportedFile, RenderOptions

__all__ = [
    "DashDownload",
    "ExportedFile",
    "FileDelivery",
    "MemoryDelivery",
    "RenderOptions",
    "SurfaceHandle",
    "export_csv",
    "export_image",
    "records_to_csv",
]
