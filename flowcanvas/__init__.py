"""Workflow graph reconciliation and layered layout for canvas rendering."""
from flowcanvas.graph.pipeline import build_render_model

__version__ = "0.1.0"

__all__ = ["build_render_model", "__version__"]
