"""Toolkit-independent building blocks for touch-driven overlay UIs: geometry, hit testing, input routing, layout, buttons and UI packages."""

__version__ = "0.1.0"

__all__ = [
    "buttons",
    "cli",
    "geometry",
    "inputsystem",
    "layout",
    "mask",
    "package",
    "pool",
    "process",
    "quadtree",
    "range_interpreter",
]