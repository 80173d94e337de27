"""
Top-level package for the synthetic data dashboard.

This package exposes the core architecture (domain, exporters, views, UI adapters).
Most code should import from submodules such as:
    synth_dashboard.core
    synth_dashboard.export
    synth_dashboard.views
    synth_dashboard.ui
"""

__all__: list[str] = []
