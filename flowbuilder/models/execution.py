from datetime import datetime
from enum import Enum
from typing import List, Optional

from .base import CamelModel


class ExecutionStatus(str, Enum):
    idle = "idle"
    running = "running"
    paused = "paused"
    stopped = "stopped"
    completed = "completed"
    error = "error"


class ExecutionState(CamelModel):
    workflow_id: str
    status: ExecutionStatus = ExecutionStatus.idle
    execution_id: Optional[str] = None
    last_execution: Optional[datetime] = None
    message: Optional[str] = None


class ExecutionResponse(CamelModel):
    message: str
    status: ExecutionStatus
    execution_id: Optional[str] = None


class ExecutionHistory(CamelModel):
    """One page of a workflow's past runs, newest first"""
    executions: List[ExecutionState]
    total: int
    page: int
    page_size: int
