from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field, model_validator

from .base import CamelModel


class NodeCategory(str, Enum):
    trigger = "trigger"
    action = "action"
    transform = "transform"


class NodePosition(CamelModel):
    x: float
    y: float


class NodeData(CamelModel):
    label: str
    description: Optional[str] = None
    category: NodeCategory
    config: Dict[str, Any] = Field(default_factory=dict)


class WorkflowNode(CamelModel):
    id: str
    type: str  # node-type id from the catalog, not enforced
    position: NodePosition
    data: NodeData


class WorkflowEdge(CamelModel):
    id: str
    source: str
    target: str


class InsertWorkflow(CamelModel):
    """Request body for creating a workflow"""
    name: str
    description: Optional[str] = None
    nodes: List[WorkflowNode] = Field(default_factory=list)
    edges: List[WorkflowEdge] = Field(default_factory=list)
    is_active: bool = False


class WorkflowUpdate(CamelModel):
    """Partial update: only fields present in the body are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    nodes: Optional[List[WorkflowNode]] = None
    edges: Optional[List[WorkflowEdge]] = None
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "WorkflowUpdate":
        # description is the only nullable column
        for name in ("name", "nodes", "edges", "is_active"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}


class Workflow(InsertWorkflow):
    """Stored workflow"""
    id: str
    created_at: datetime
    updated_at: datetime


class WorkflowGraph(CamelModel):
    """Unsaved canvas graph, as sent for validation"""
    nodes: List[WorkflowNode] = Field(default_factory=list)
    edges: List[WorkflowEdge] = Field(default_factory=list)


class GraphReport(CamelModel):
    valid: bool
    message: str
    node_count: int
    edge_count: int
    trigger_count: int
    dangling_edges: List[str] = Field(default_factory=list)
    duplicate_node_ids: List[str] = Field(default_factory=list)
