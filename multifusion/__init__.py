"""Keyframed vector figures, nested containers, geometry and style values for 2D animation."""

__version__ = "0.1.0"