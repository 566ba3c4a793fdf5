from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from flowbuilder.deps import existing_workflow, get_storage, get_tracker
from flowbuilder.models import GraphReport, InsertWorkflow, Workflow, WorkflowGraph, WorkflowUpdate
from flowbuilder.services.executions import ExecutionTracker
from flowbuilder.services.storage import IStorage
from flowbuilder.services.validation import EmptyGraphError, inspect_graph

router = APIRouter()


def _report(graph) -> GraphReport:
    try:
        return inspect_graph(graph.nodes, graph.edges)
    except EmptyGraphError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.get("/workflows", response_model=List[Workflow])
def list_workflows(
    active: Optional[bool] = None,
    storage: IStorage = Depends(get_storage),
) -> List[Workflow]:
    """All workflows in creation order, optionally only (in)active ones"""
    workflows = storage.get_workflows()
    if active is not None:
        workflows = [wf for wf in workflows if wf.is_active == active]
    return workflows


@router.get("/workflows/{id}", response_model=Workflow)
def get_workflow(workflow: Workflow = Depends(existing_workflow)) -> Workflow:
    return workflow


@router.post("/workflows", response_model=Workflow, status_code=status.HTTP_201_CREATED)
def create_workflow(data: InsertWorkflow, storage: IStorage = Depends(get_storage)) -> Workflow:
    return storage.create_workflow(data)


@router.post("/workflows/validate", response_model=GraphReport)
def validate_graph(graph: WorkflowGraph) -> GraphReport:
    """Report on an unsaved canvas graph without storing or executing it"""
    return _report(graph)


@router.post("/workflows/{id}/validate", response_model=GraphReport)
def validate_workflow(workflow: Workflow = Depends(existing_workflow)) -> GraphReport:
    return _report(workflow)


@router.put("/workflows/{id}", response_model=Workflow)
def update_workflow(
    id: str,
    data: WorkflowUpdate,
    storage: IStorage = Depends(get_storage),
) -> Workflow:
    """Partial update: fields missing from the body keep their stored values"""
    workflow = storage.update_workflow(id, data)
    if not workflow:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return workflow


@router.delete("/workflows/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workflow(
    id: str,
    storage: IStorage = Depends(get_storage),
    tracker: ExecutionTracker = Depends(get_tracker),
):
    if not storage.delete_workflow(id):
        raise HTTPException(status_code=404, detail="Workflow not found")
    tracker.forget(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
