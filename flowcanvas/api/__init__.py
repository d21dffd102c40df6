"""API route modules."""
from flowcanvas.api import layout

__all__ = ["layout"]
