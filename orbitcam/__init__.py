"""Camera, trackball, mouse state and 3D math utilities for interactive viewers."""

__version__ = "0.1.0"