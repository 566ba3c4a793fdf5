from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from flowbuilder.deps import get_storage
from flowbuilder.models import NodeCategory, NodeType, TemplateInstance, Workflow, WorkflowTemplate
from flowbuilder.services import catalog, templates
from flowbuilder.services.storage import IStorage

router = APIRouter()


@router.get("/node-types", response_model=List[NodeType])
def list_node_types(category: Optional[NodeCategory] = None) -> List[NodeType]:
    return catalog.list_node_types(category)


@router.get("/node-types/{type_id}", response_model=NodeType)
def get_node_type(type_id: str) -> NodeType:
    node_type = catalog.get_node_type(type_id)
    if not node_type:
        raise HTTPException(status_code=404, detail="Node type not found")
    return node_type


@router.get("/templates", response_model=List[WorkflowTemplate])
def list_templates() -> List[WorkflowTemplate]:
    return templates.list_templates()


@router.post("/templates/{template_id}/workflows", response_model=Workflow, status_code=status.HTTP_201_CREATED)
def create_from_template(
    template_id: str,
    body: TemplateInstance,
    storage: IStorage = Depends(get_storage),
) -> Workflow:
    template = templates.get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    if not body.name.strip():
        raise HTTPException(status_code=400, detail="Workflow name is required")
    return storage.create_workflow(templates.instantiate(template, body))
