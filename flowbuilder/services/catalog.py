# flowbuilder/services/catalog.py
from typing import List, Optional

from flowbuilder.models import NodeCategory, NodeType

NODE_TYPES: List[NodeType] = [
    NodeType(
        id="webhook",
        name="Webhook",
        description="Listens for HTTP requests",
        category=NodeCategory.trigger,
        icon="fas fa-satellite-dish",
        color="bg-green-500",
        config={"method": "POST", "path": "/webhook/new"},
    ),
    NodeType(
        id="schedule",
        name="Schedule",
        description="Triggers on a schedule",
        category=NodeCategory.trigger,
        icon="fas fa-clock",
        color="bg-blue-500",
        config={"cron": "0 0 * * *"},
    ),
    NodeType(
        id="http-request",
        name="HTTP Request",
        description="Make HTTP API calls",
        category=NodeCategory.action,
        icon="fas fa-globe",
        color="bg-purple-500",
        config={"method": "GET", "url": ""},
    ),
    NodeType(
        id="email",
        name="Send Email",
        description="Send email notifications",
        category=NodeCategory.action,
        icon="fas fa-envelope",
        color="bg-red-500",
        config={"to": "", "subject": "", "body": ""},
    ),
    NodeType(
        id="database",
        name="Database",
        description="Database operations",
        category=NodeCategory.action,
        icon="fas fa-database",
        color="bg-orange-500",
        config={"operation": "SELECT", "table": ""},
    ),
    NodeType(
        id="filter",
        name="Filter",
        description="Filter and validate data",
        category=NodeCategory.transform,
        icon="fas fa-filter",
        color="bg-yellow-500",
        config={"condition": ""},
    ),
    NodeType(
        id="transform",
        name="Transform",
        description="Transform data structure",
        category=NodeCategory.transform,
        icon="fas fa-magic",
        color="bg-indigo-500",
        config={"mapping": {}},
    ),
]


def list_node_types(category: Optional[NodeCategory] = None) -> List[NodeType]:
    if category is None:
        return list(NODE_TYPES)
    return [nt for nt in NODE_TYPES if nt.category == category]


def get_node_type(type_id: str) -> Optional[NodeType]:
    return next((nt for nt in NODE_TYPES if nt.id == type_id), None)
