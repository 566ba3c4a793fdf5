# flowbuilder/services/storage.py
"""
Storage layer.

`IStorage` is the CRUD contract the routers depend on; "not found" is always
an absent result (None / False), never an exception. `MemStorage` keeps
everything in two dicts and is the default backend.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, UTC
from typing import Dict, List, Optional

from flowbuilder.models import InsertUser, InsertWorkflow, User, Workflow, WorkflowUpdate
from flowbuilder.util.ids import new_id

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


class IStorage(ABC):

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, data: InsertUser) -> User: ...

    @abstractmethod
    def get_workflow(self, workflow_id: str) -> Optional[Workflow]: ...

    @abstractmethod
    def get_workflows(self) -> List[Workflow]:
        """All workflows in insertion order."""

    @abstractmethod
    def create_workflow(self, data: InsertWorkflow) -> Workflow: ...

    @abstractmethod
    def update_workflow(self, workflow_id: str, data: WorkflowUpdate) -> Optional[Workflow]:
        """Merge the fields set on `data` and bump `updated_at`; None if absent."""

    @abstractmethod
    def delete_workflow(self, workflow_id: str) -> bool: ...


class MemStorage(IStorage):
    """Dict-backed storage. Returns copies so callers cannot mutate stored state."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._workflows: Dict[str, Workflow] = {}

    # --- users ---

    def get_user(self, user_id: str) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy() if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy()
        return None

    def create_user(self, data: InsertUser) -> User:
        user = User(id=new_id(), **data.model_dump())
        self._users[user.id] = user
        logger.info("Created user %s (%s)", user.id, user.username)
        return user.model_copy()

    # --- workflows ---

    def get_workflow(self, workflow_id: str) -> Optional[Workflow]:
        wf = self._workflows.get(workflow_id)
        return wf.model_copy(deep=True) if wf else None

    def get_workflows(self) -> List[Workflow]:
        return [wf.model_copy(deep=True) for wf in self._workflows.values()]

    def create_workflow(self, data: InsertWorkflow) -> Workflow:
        now = utcnow()
        wf = Workflow(
            id=new_id(),
            name=data.name,
            description=data.description,
            nodes=[n.model_copy(deep=True) for n in data.nodes],
            edges=[e.model_copy(deep=True) for e in data.edges],
            is_active=data.is_active,
            created_at=now,
            updated_at=now,
        )
        self._workflows[wf.id] = wf
        logger.info("Created workflow %s (%r, %d nodes)", wf.id, wf.name, len(wf.nodes))
        return wf.model_copy(deep=True)

    def update_workflow(self, workflow_id: str, data: WorkflowUpdate) -> Optional[Workflow]:
        wf = self._workflows.get(workflow_id)
        if not wf:
            return None

        changes = data.model_copy(deep=True).changes()
        updated = wf.model_copy(update={**changes, "updated_at": utcnow()})
        self._workflows[workflow_id] = updated
        logger.info("Updated workflow %s: %s", workflow_id, sorted(changes))
        return updated.model_copy(deep=True)

    def delete_workflow(self, workflow_id: str) -> bool:
        removed = self._workflows.pop(workflow_id, None) is not None
        if removed:
            logger.info("Deleted workflow %s", workflow_id)
        return removed
