"""PyQt6 presentation layer: board scene/view, main window, theme."""
