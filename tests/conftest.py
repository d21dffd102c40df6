"""Shared fixtures for workflow documents."""
import pytest

from flowcanvas.models.workflow import Workflow, parse_workflow


def _node(entry) -> dict:
    if isinstance(entry, dict):
        return entry
    if isinstance(entry, str):
        return {"id": f"id-{entry}", "name": entry, "type": "n8n-nodes-base.set"}
    name, node_type, position = (list(entry) + [None, None])[:3]
    node = {"id": f"id-{name}", "name": name, "type": node_type or "n8n-nodes-base.set"}
    if position is not None:
        node["position"] = list(position)
    return node


def _targets(targets) -> list:
    if isinstance(targets, str):
        targets = [targets]
    return [{"node": target, "type": "main", "index": 0} for target in targets]


@pytest.fixture
def make_workflow():
    """Build a Workflow from compact node entries and connection maps.

    Nodes are names, (name, type, position) tuples or raw dicts.
    `main` maps a source to its output groups (a list per slot, or a single
    name for one slot); `error` maps a source to error targets.
    """

    def factory(nodes, main=None, error=None, name="Test Workflow") -> Workflow:
        connections: dict = {}
        for source, groups in (main or {}).items():
            if isinstance(groups, str):
                groups = [groups]
            connections.setdefault(source, {})["main"] = [
                None if group is None else _targets(group) for group in groups
            ]
        for source, targets in (error or {}).items():
            connections.setdefault(source, {})["error"] = [_targets(targets)]
        return parse_workflow(
            {
                "name": name,
                "nodes": [_node(entry) for entry in nodes],
                "connections": connections,
            }
        )

    return factory


@pytest.fixture
def triage_workflow(make_workflow):
    """Partially wired workflow: branches, an error path, two unwired steps."""
    return make_workflow(
        [
            ("Webhook", "n8n-nodes-base.webhook", (240, 300)),
            ("Classify", "n8n-nodes-base.httpRequest", (460, 300)),
            ("Route", "n8n-nodes-base.switch", (680, 300)),
            ("Billing", "n8n-nodes-base.set", (900, 160)),
            ("Outage", "n8n-nodes-base.httpRequest", (900, 300)),
            ("Report Failure", "n8n-nodes-base.slack", (680, 520)),
            ("Log", "n8n-nodes-base.postgres", (1120, 300)),
            ("Respond", "n8n-nodes-base.respondToWebhook", (1340, 310)),
        ],
        main={
            "Webhook": "Classify",
            "Classify": "Route",
            "Route": [["Billing"], ["Outage"]],
        },
        error={"Classify": "Report Failure"},
    )
