"""Tests for the graph model builder."""
import dataclasses

import pytest

from flowcanvas.graph.builder import build_graph, unique_node_names
from flowcanvas.graph.model import WorkflowGraph
from flowcanvas.models.workflow import parse_workflow


class TestBuildGraph:
    """Declared connections become adjacency records."""

    def test_every_node_gets_a_record(self, make_workflow):
        workflow = make_workflow(["A", "B", "C"])
        graph = build_graph(workflow)

        assert graph.order == ("A", "B", "C")
        assert set(graph.connections) == {"A", "B", "C"}
        assert all(info.level == 0 for info in graph.connections.values())
        assert graph.processed == frozenset()

    def test_main_connection_links_both_ends(self, make_workflow):
        graph = build_graph(make_workflow(["A", "B"], main={"A": "B"}))

        assert graph.info("A").outgoing == ("B",)
        assert graph.info("B").incoming == ("A",)
        assert graph.info("A").has_main_connections is True
        assert graph.info("A").has_error_connections is False
        assert graph.info("B").has_main_connections is False
        assert graph.processed == frozenset({"A", "B"})

    def test_error_connection_marks_source_and_handler(self, make_workflow):
        graph = build_graph(make_workflow(["Call", "Alert"], error={"Call": "Alert"}))

        assert graph.info("Call").outgoing == ("Alert",)
        assert graph.info("Call").has_error_connections is True
        assert graph.info("Call").has_main_connections is False
        assert graph.info("Alert").handles_errors is True

    def test_multiple_output_groups_are_flattened(self, make_workflow):
        graph = build_graph(
            make_workflow(["If", "Yes", "No"], main={"If": [["Yes"], ["No"]]})
        )

        assert graph.info("If").outgoing == ("Yes", "No")

    def test_null_output_group_is_empty(self, make_workflow):
        graph = build_graph(
            make_workflow(["If", "No"], main={"If": [None, ["No"]]})
        )

        assert graph.info("If").outgoing == ("No",)
        assert graph.info("No").incoming == ("If",)

    # =========================================================================
    # Malformed documents
    # =========================================================================

    def test_unknown_target_is_skipped(self, make_workflow):
        graph = build_graph(make_workflow(["A", "B"], main={"A": ["Ghost"]}))

        assert graph.info("A").outgoing == ()
        assert graph.info("A").has_main_connections is False
        assert graph.processed == frozenset()

    def test_unknown_source_is_skipped(self, make_workflow):
        graph = build_graph(make_workflow(["A", "B"], main={"Ghost": "B"}))

        assert graph.info("B").incoming == ()
        assert "Ghost" not in graph

    def test_partial_group_keeps_known_targets(self, make_workflow):
        graph = build_graph(make_workflow(["A", "B"], main={"A": [["Ghost", "B"]]}))

        assert graph.info("A").outgoing == ("B",)
        assert graph.processed == frozenset({"A", "B"})

    def test_self_reference_is_kept(self, make_workflow):
        graph = build_graph(make_workflow(["Loop"], main={"Loop": "Loop"}))

        assert graph.info("Loop").outgoing == ("Loop",)
        assert graph.info("Loop").incoming == ("Loop",)

    def test_other_connection_kinds_are_ignored(self):
        workflow = parse_workflow(
            {
                "nodes": [
                    {"id": "1", "name": "Agent", "type": "agent"},
                    {"id": "2", "name": "Tool", "type": "tool"},
                ],
                "connections": {
                    "Tool": {"ai_tool": [[{"node": "Agent", "type": "ai_tool", "index": 0}]]}
                },
            }
        )
        graph = build_graph(workflow)

        assert graph.info("Agent").incoming == ()
        assert graph.processed == frozenset()


def test_duplicate_names_share_one_record(make_workflow):
    workflow = make_workflow(["A", {"id": "other", "name": "A", "type": "x"}, "B"])

    assert unique_node_names(workflow) == ("A", "B")
    assert len(build_graph(workflow)) == 2


def test_graph_records_are_read_only(make_workflow):
    graph = build_graph(make_workflow(["A", "B"], main={"A": "B"}))

    with pytest.raises(TypeError):
        graph.connections["A"] = None


def test_name_sets_are_typed_as_strings():
    hints = {field.name: field.type for field in dataclasses.fields(WorkflowGraph)}

    assert hints["processed"] == frozenset[str]
    assert hints["visited"] == frozenset[str]
    assert hints["order"] == tuple[str, ...]
