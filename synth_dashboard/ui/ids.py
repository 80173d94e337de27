from __future__ import annotations

__all__ = ["IDs", "graph_id", "export_button_id", "image_download_id"]


class IDs:
    class Store:
        DASHBOARD_STATE = "dashboard-state"

    class Control:
        PERIOD_CHECKLIST = "period-checklist"

        REGENERATE_BTN = "regenerate-btn"
        DOWNLOAD_CSV_BTN = "download-csv-btn"
        DOWNLOAD_CSV = "download-csv"

        STATUS_BAR = "status-bar"


# Per-chart components are derived from the view id
def graph_id(view_id: str) -> str:
    return f"{view_id}-graph"


def export_button_id(view_id: str) -> str:
    return f"{view_id}-export-btn"


def image_download_id(view_id: str) -> str:
    return f"{view_id}-download"
