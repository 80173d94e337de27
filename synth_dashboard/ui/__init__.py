"""
Dash adapter: layout, component ids and callbacks wiring the UI to the dashboard controller.
"""
