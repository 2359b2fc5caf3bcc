"""Immediate-mode 2D draw-list geometry and shadow texture generation."""

__version__ = "0.1.0"