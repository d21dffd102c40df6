"""Tests for the node capability table."""
import pytest

from flowcanvas.graph.capabilities import DEFAULT_CAPABILITY, NodeCapability, get_capability
from flowcanvas.graph.pipeline import build_render_model


class TestGetCapability:
    """Lookup by full n8n type id."""

    @pytest.mark.parametrize(
        "node_type,outputs",
        [
            ("n8n-nodes-base.if", 2),
            ("n8n-nodes-base.switch", 4),
            ("n8n-nodes-base.merge", 2),
            ("n8n-nodes-base.splitInBatches", 2),
            ("n8n-nodes-base.splitOut", 2),
            ("n8n-nodes-base.set", 1),
        ],
    )
    def test_output_handles(self, node_type, outputs):
        assert get_capability(node_type).max_outputs == outputs

    def test_unknown_type_is_a_plain_step(self):
        assert get_capability("community.unknownNode") == DEFAULT_CAPABILITY
        assert DEFAULT_CAPABILITY.max_outputs == 1
        assert DEFAULT_CAPABILITY.supports_error is False
        assert DEFAULT_CAPABILITY.is_trigger is False

    def test_custom_table_replaces_defaults(self):
        table = {"acme.router": NodeCapability(max_outputs=3)}

        assert get_capability("acme.router", table).max_outputs == 3
        assert get_capability("n8n-nodes-base.merge", table) == DEFAULT_CAPABILITY


def test_merge_node_renders_two_outputs(make_workflow):
    workflow = make_workflow(
        ["A", "B", ("Merge", "n8n-nodes-base.merge", None)],
        main={"A": "Merge", "B": "Merge"},
    )
    model = build_render_model(workflow)

    assert model.get_node("id-Merge").data.outputs == 2
