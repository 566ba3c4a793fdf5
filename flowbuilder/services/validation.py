# flowbuilder/services/validation.py
"""
Graph shape report for a workflow.

Nothing here is enforced on save: edges may point at missing nodes and
node ids may repeat. The report only tells the canvas about it.
"""
from collections import Counter
from typing import List

from flowbuilder.models import GraphReport, NodeCategory, WorkflowEdge, WorkflowNode


class EmptyGraphError(ValueError):
    """The graph has no nodes at all."""


def inspect_graph(nodes: List[WorkflowNode], edges: List[WorkflowEdge]) -> GraphReport:
    if not nodes:
        raise EmptyGraphError("Flow must contain at least one node")

    node_ids = {node.id for node in nodes}
    dangling = [edge.id for edge in edges if edge.source not in node_ids or edge.target not in node_ids]
    duplicates = sorted(node_id for node_id, n in Counter(node.id for node in nodes).items() if n > 1)
    triggers = sum(1 for node in nodes if node.data.category == NodeCategory.trigger)

    issues = len(dangling) + len(duplicates)
    return GraphReport(
        valid=issues == 0,
        message="Flow validation successful" if not issues else f"Flow has {issues} issue(s)",
        node_count=len(nodes),
        edge_count=len(edges),
        trigger_count=triggers,
        dangling_edges=dangling,
        duplicate_node_ids=duplicates,
    )
