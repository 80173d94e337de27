from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from synth_dashboard.export.model import RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_UI_TITLE = "Synthetic Data Dashboard"


@dataclass
class AppConfig:
    """
    Settings read once at startup.

    - ui_title: browser title and page heading
    - render_options: raster settings for chart PNG exports
    """
    ui_title: str = DEFAULT_UI_TITLE
    render_options: RenderOptions = field(default_factory=RenderOptions)

    @classmethod
    def from_raw(cls, raw: Dict[str, Any]) -> AppConfig:
        return cls(
            ui_title=raw.get("ui_title", DEFAULT_UI_TITLE),
            render_options=RenderOptions(
                width_pixel=_optional_int(raw.get("image_width")),
                height_pixel=_optional_int(raw.get("image_height")),
                scale=_optional_float(raw.get("image_scale")),
            ),
        )


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def load_app_config(root: Path | str = Path("config")) -> AppConfig:
    """
    Load app settings from `root/global.json`.

    The file is optional; when it is missing every setting falls back to its default.

    :param root: directory holding global.json
    :raises ValueError: if global.json exists but is not a JSON object
    """
    root = Path(root)
    global_path = root / "global.json"

    if not global_path.is_file():
        logger.info("No global config found, using defaults", extra={"config_root": str(root)})
        return AppConfig()

    with global_path.open() as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"{global_path} must contain a JSON object")

    logger.info("Loaded global config", extra={"config_root": str(root)})
    return AppConfig.from_raw(raw)
