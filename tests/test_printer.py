"""Tests for the plain-text layout printer."""
from flowcanvas.graph.pipeline import analyze_connections, build_render_model
from flowcanvas.models.render import RenderModel
from flowcanvas.utils.workflow_printer import print_layers, print_render_model


def test_render_model_summary(triage_workflow):
    text = print_render_model(build_render_model(triage_workflow), title="Triage")

    assert "LAYOUT: Triage" in text
    assert "Nodes: 8    Edges: 7" in text
    assert "Log @ (500, 100) <root, branch>" in text
    assert "  Webhook ──→ Classify" in text
    assert "  Route ──→ Outage (output 1)" in text
    assert "  Classify ══✗ Report Failure (error)" in text
    assert "  Log ┄┄→ Respond (logical)" in text


def test_summary_accepts_alias_dump(triage_workflow):
    """The by-alias JSON the canvas receives prints the same way."""
    model = build_render_model(triage_workflow)
    dumped = model.model_dump(by_alias=True, mode="json")

    assert print_render_model(dumped) == print_render_model(model)


def test_empty_model():
    text = print_render_model(RenderModel())

    assert "(No nodes)" in text
    assert "(No edges)" in text


def test_print_layers(triage_workflow):
    assert print_layers(analyze_connections(triage_workflow)) == "\n".join(
        [
            "0: Log",
            "1: Webhook | Respond",
            "2: Classify",
            "3: Route | Report Failure",
            "4: Billing | Outage",
        ]
    )
