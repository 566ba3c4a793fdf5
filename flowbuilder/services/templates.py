# flowbuilder/services/templates.py
"""Starter graphs offered when creating a workflow, plus the seeded sample."""
from typing import List, Optional

from flowbuilder.models import (
    InsertWorkflow, NodeCategory, NodeData, NodePosition, TemplateInstance,
    WorkflowEdge, WorkflowNode, WorkflowTemplate,
)


def _node(node_id, node_type, x, y, label, description, category, **config) -> WorkflowNode:
    return WorkflowNode(
        id=node_id,
        type=node_type,
        position=NodePosition(x=x, y=y),
        data=NodeData(label=label, description=description, category=category, config=config),
    )


def _edge(source: str, target: str, edge_id: Optional[str] = None) -> WorkflowEdge:
    return WorkflowEdge(id=edge_id or f"{source}-{target}", source=source, target=target)


TEMPLATES: List[WorkflowTemplate] = [
    WorkflowTemplate(
        id="webhook",
        name="Webhook Trigger",
        description="Start with an HTTP webhook that can receive data from external sources",
        nodes=[
            _node("webhook-start", "webhook", 200, 150, "Webhook Trigger", "Receives HTTP requests",
                  NodeCategory.trigger, method="POST", path="/webhook/new"),
        ],
    ),
    WorkflowTemplate(
        id="schedule",
        name="Scheduled Flow",
        description="Create a workflow that runs automatically on a schedule",
        nodes=[
            _node("schedule-start", "schedule", 200, 150, "Schedule Trigger", "Runs on a schedule",
                  NodeCategory.trigger, cron="0 9 * * *"),
        ],
    ),
    WorkflowTemplate(
        id="blank",
        name="Blank Flow",
        description="Start with an empty canvas and build your workflow from scratch",
    ),
]


def list_templates() -> List[WorkflowTemplate]:
    return list(TEMPLATES)


def get_template(template_id: str) -> Optional[WorkflowTemplate]:
    return next((t for t in TEMPLATES if t.id == template_id), None)


def instantiate(template: WorkflowTemplate, body: TemplateInstance) -> InsertWorkflow:
    """New workflows start inactive, with their own copy of the template graph."""
    return InsertWorkflow(
        name=body.name.strip(),
        description=(body.description or "").strip() or None,
        nodes=[n.model_copy(deep=True) for n in template.nodes],
        edges=[e.model_copy(deep=True) for e in template.edges],
        is_active=False,
    )


def sample_workflow() -> InsertWorkflow:
    return InsertWorkflow(
        name="Customer Onboarding Flow",
        description="Automated customer onboarding process",
        nodes=[
            _node("webhook-1", "webhook", 200, 150, "Webhook Trigger", "Listens for HTTP requests",
                  NodeCategory.trigger, method="POST", path="/webhook/abc123"),
            _node("filter-1", "filter", 500, 150, "Filter Data", "Only process valid emails",
                  NodeCategory.transform, condition="email != null", action="Continue if true"),
            _node("http-1", "http-request", 350, 300, "API Request", "Create user account",
                  NodeCategory.action, url="api.example.com/users", method="POST"),
            _node("email-1", "email", 800, 150, "Send Email", "Welcome message",
                  NodeCategory.action, to="{{user.email}}", template="welcome_email"),
            _node("database-1", "database", 650, 300, "Save to Database", "Store user data",
                  NodeCategory.action, table="users", operation="INSERT"),
        ],
        edges=[
            _edge("webhook-1", "filter-1", "webhook-filter"),
            _edge("filter-1", "http-1", "filter-http"),
            _edge("filter-1", "email-1", "filter-email"),
            _edge("http-1", "database-1", "http-database"),
        ],
        is_active=True,
    )
