from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from synth_dashboard.config import AppConfig
from synth_dashboard.views.view_registry import ViewRegistry


@dataclass
class AppContext:
    config: AppConfig
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppContext.registry must be initialized.")
