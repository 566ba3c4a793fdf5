from .base import CamelModel
from .user import User, InsertUser
from .workflow import (
    NodeCategory, NodePosition, NodeData, WorkflowNode, WorkflowEdge,
    InsertWorkflow, WorkflowUpdate, Workflow, WorkflowGraph, GraphReport,
)
from .execution import ExecutionStatus, ExecutionState, ExecutionResponse, ExecutionHistory
from .catalog import NodeType, WorkflowTemplate, TemplateInstance

__all__ = [
    "CamelModel",
    "User", "InsertUser",
    "NodeCategory", "NodePosition", "NodeData", "WorkflowNode", "WorkflowEdge",
    "InsertWorkflow", "WorkflowUpdate", "Workflow", "WorkflowGraph", "GraphReport",
    "ExecutionStatus", "ExecutionState", "ExecutionResponse", "ExecutionHistory",
    "NodeType", "WorkflowTemplate", "TemplateInstance",
]
