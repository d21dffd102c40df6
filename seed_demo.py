"""Seed demo: Customer Support Triage workflow.

Renders a workflow document the way it often arrives from the editor:
the main flow is wired, but two steps dropped onto the canvas later have
no connections yet. The demo prints the computed layers and edges, with
the synthesized `logical` edges that pull those steps into the flow.

Run this script to check the layout pipeline end to end.
"""

import json

from flowcanvas.graph.pipeline import analyze_connections, build_render_model
from flowcanvas.main import configure_logging
from flowcanvas.utils.workflow_printer import print_layers, print_render_model

SEED_WORKFLOW = {
    "name": "Customer Support Triage",
    "nodes": [
        {
            "id": "n1",
            "name": "Webhook",
            "type": "n8n-nodes-base.webhook",
            "position": [240, 300],
            "parameters": {"path": "support", "httpMethod": "POST"},
        },
        {
            "id": "n2",
            "name": "Classify",
            "type": "n8n-nodes-base.httpRequest",
            "position": [460, 300],
        },
        {
            "id": "n3",
            "name": "Route",
            "type": "n8n-nodes-base.switch",
            "position": [680, 300],
        },
        {
            "id": "n4",
            "name": "Billing Draft",
            "type": "n8n-nodes-base.set",
            "position": [900, 160],
        },
        {
            "id": "n5",
            "name": "Outage Check",
            "type": "n8n-nodes-base.httpRequest",
            "position": [900, 300],
        },
        {
            "id": "n6",
            "name": "Ask Clarification",
            "type": "n8n-nodes-base.set",
            "position": [900, 440],
        },
        {
            "id": "n7",
            "name": "Report Failure",
            "type": "n8n-nodes-base.slack",
            "position": [680, 520],
        },
        # Added on the canvas, never wired
        {
            "id": "n8",
            "name": "Log To DB",
            "type": "n8n-nodes-base.postgres",
            "position": [1120, 300],
        },
        {
            "id": "n9",
            "name": "Respond",
            "type": "n8n-nodes-base.respondToWebhook",
            "position": [1340, 310],
        },
    ],
    "connections": {
        "Webhook": {"main": [[{"node": "Classify", "type": "main", "index": 0}]]},
        "Classify": {
            "main": [[{"node": "Route", "type": "main", "index": 0}]],
            "error": [[{"node": "Report Failure", "type": "main", "index": 0}]],
        },
        "Route": {
            "main": [
                [{"node": "Billing Draft", "type": "main", "index": 0}],
                [{"node": "Outage Check", "type": "main", "index": 0}],
                [{"node": "Ask Clarification", "type": "main", "index": 0}],
            ]
        },
    },
}


def main() -> None:
    configure_logging()

    graph = analyze_connections(SEED_WORKFLOW)
    print(print_layers(graph))
    print()

    model = build_render_model(SEED_WORKFLOW)
    print(print_render_model(model, title=SEED_WORKFLOW["name"]))
    print()
    print(json.dumps(model.model_dump(by_alias=True, mode="json")["edges"], indent=2))


if __name__ == "__main__":
    main()
