# flowbuilder/deps.py
"""
Request dependencies.

Storage and the execution tracker are process-wide singletons created on
first use; tests replace them through `app.dependency_overrides`.
"""
from typing import Optional

from fastapi import Depends, HTTPException

from flowbuilder.config import settings
from flowbuilder.models import Workflow
from flowbuilder.services.executions import ExecutionTracker
from flowbuilder.services.factory import build_storage
from flowbuilder.services.storage import IStorage

_storage: Optional[IStorage] = None
_tracker: Optional[ExecutionTracker] = None


def get_storage() -> IStorage:
    global _storage
    if _storage is None:
        _storage = build_storage(settings)
    return _storage


def get_tracker() -> ExecutionTracker:
    global _tracker
    if _tracker is None:
        _tracker = ExecutionTracker(
            duration_seconds=settings.execution_duration_seconds,
            history_limit=settings.execution_history_limit,
        )
    return _tracker


def existing_workflow(id: str, storage: IStorage = Depends(get_storage)) -> Workflow:
    workflow = storage.get_workflow(id)
    if not workflow:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return workflow
