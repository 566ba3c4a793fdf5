from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import CamelModel
from .workflow import NodeCategory, WorkflowEdge, WorkflowNode


class NodeType(CamelModel):
    """Palette entry the canvas offers for dragging onto a workflow"""
    id: str
    name: str
    description: str
    category: NodeCategory
    icon: str
    color: str
    config: Dict[str, Any] = Field(default_factory=dict)


class WorkflowTemplate(CamelModel):
    """Starting graph for a new workflow"""
    id: str
    name: str
    description: str
    nodes: List[WorkflowNode] = Field(default_factory=list)
    edges: List[WorkflowEdge] = Field(default_factory=list)


class TemplateInstance(CamelModel):
    name: str
    description: Optional[str] = None
