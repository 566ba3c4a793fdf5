import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from flowbuilder.deps import existing_workflow, get_tracker
from flowbuilder.models import ExecutionHistory, ExecutionResponse, ExecutionState, Workflow
from flowbuilder.services.executions import ExecutionTracker

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/workflows/{id}/execute", response_model=ExecutionResponse)
def execute_workflow(
    workflow: Workflow = Depends(existing_workflow),
    tracker: ExecutionTracker = Depends(get_tracker),
) -> ExecutionResponse:
    """
    Start a simulated run. Nothing is executed; the run reports itself
    completed once the configured duration has passed.
    """
    try:
        state = tracker.start(workflow.id)
    except Exception:
        logger.exception("Could not start workflow %s", workflow.id)
        tracker.fail(workflow.id, "Failed to execute workflow")
        raise HTTPException(status_code=500, detail="Failed to execute workflow")
    return ExecutionResponse(message=state.message, status=state.status, execution_id=state.execution_id)


@router.post("/workflows/{id}/pause", response_model=ExecutionResponse, response_model_exclude_none=True)
def pause_workflow(
    workflow: Workflow = Depends(existing_workflow),
    tracker: ExecutionTracker = Depends(get_tracker),
) -> ExecutionResponse:
    state = tracker.pause(workflow.id)
    return ExecutionResponse(message=state.message, status=state.status)


@router.post("/workflows/{id}/stop", response_model=ExecutionResponse, response_model_exclude_none=True)
def stop_workflow(
    workflow: Workflow = Depends(existing_workflow),
    tracker: ExecutionTracker = Depends(get_tracker),
) -> ExecutionResponse:
    state = tracker.stop(workflow.id)
    return ExecutionResponse(message=state.message, status=state.status)


@router.get("/workflows/{id}/status", response_model=ExecutionState)
def workflow_status(
    workflow: Workflow = Depends(existing_workflow),
    tracker: ExecutionTracker = Depends(get_tracker),
) -> ExecutionState:
    return tracker.status(workflow.id)


@router.get("/workflows/{id}/executions", response_model=ExecutionHistory)
def execution_history(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=100),
    workflow: Workflow = Depends(existing_workflow),
    tracker: ExecutionTracker = Depends(get_tracker),
) -> ExecutionHistory:
    """Past runs of a workflow, newest first"""
    runs, total = tracker.history(workflow.id, page=page, page_size=page_size)
    return ExecutionHistory(executions=runs, total=total, page=page, page_size=page_size)
