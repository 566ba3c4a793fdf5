# flowbuilder/services/sql_storage.py
"""
SQLModel-backed implementation of IStorage.

Interchangeable with MemStorage. With the default `sqlite://` URL the
database lives in memory, so it gives SQL semantics without durability.
Nodes and edges are stored as JSON columns; an autoincrement `seq`
column keeps listing in insertion order.
"""
import logging
from datetime import datetime, UTC
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, DateTime, Engine
from sqlmodel import Column, Field, Session, SQLModel, select

from flowbuilder.models import InsertUser, InsertWorkflow, User, Workflow, WorkflowUpdate
from flowbuilder.util.ids import new_id
from .storage import IStorage, utcnow

logger = logging.getLogger(__name__)


class UserRecord(SQLModel, table=True):
    __tablename__ = "users"

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(index=True, unique=True)
    username: str = Field(index=True)
    password: str


class WorkflowRecord(SQLModel, table=True):
    __tablename__ = "workflows"

    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(index=True, unique=True)
    name: str
    description: Optional[str] = None
    nodes: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    edges: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    is_active: bool = False
    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))


def _aware(ts: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    return ts if ts.tzinfo else ts.replace(tzinfo=UTC)


def _dump(items) -> List[Dict[str, Any]]:
    return [item.model_dump(mode="json") for item in items]


def _to_user(rec: UserRecord) -> User:
    return User(id=rec.id, username=rec.username, password=rec.password)


def _to_workflow(rec: WorkflowRecord) -> Workflow:
    return Workflow(
        id=rec.id,
        name=rec.name,
        description=rec.description,
        nodes=rec.nodes,
        edges=rec.edges,
        is_active=rec.is_active,
        created_at=_aware(rec.created_at),
        updated_at=_aware(rec.updated_at),
    )


class SqlStorage(IStorage):
    """Storage over SQLModel tables"""

    def __init__(self, engine: Engine):
        self.engine = engine

    def create_schema(self):
        """Create all database tables"""
        SQLModel.metadata.create_all(self.engine)

    def _find_workflow(self, session: Session, workflow_id: str) -> Optional[WorkflowRecord]:
        return session.exec(select(WorkflowRecord).where(WorkflowRecord.id == workflow_id)).first()

    # --- users ---

    def get_user(self, user_id: str) -> Optional[User]:
        with Session(self.engine) as session:
            rec = session.exec(select(UserRecord).where(UserRecord.id == user_id)).first()
            return _to_user(rec) if rec else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with Session(self.engine) as session:
            rec = session.exec(
                select(UserRecord).where(UserRecord.username == username).order_by(UserRecord.seq)
            ).first()
            return _to_user(rec) if rec else None

    def create_user(self, data: InsertUser) -> User:
        with Session(self.engine) as session:
            rec = UserRecord(id=new_id(), username=data.username, password=data.password)
            session.add(rec)
            session.commit()
            session.refresh(rec)
            logger.info("Created user %s (%s)", rec.id, rec.username)
            return _to_user(rec)

    # --- workflows ---

    def get_workflow(self, workflow_id: str) -> Optional[Workflow]:
        with Session(self.engine) as session:
            rec = self._find_workflow(session, workflow_id)
            return _to_workflow(rec) if rec else None

    def get_workflows(self) -> List[Workflow]:
        with Session(self.engine) as session:
            records = session.exec(select(WorkflowRecord).order_by(WorkflowRecord.seq)).all()
            return [_to_workflow(rec) for rec in records]

    def create_workflow(self, data: InsertWorkflow) -> Workflow:
        now = utcnow()
        with Session(self.engine) as session:
            rec = WorkflowRecord(
                id=new_id(),
                name=data.name,
                description=data.description,
                nodes=_dump(data.nodes),
                edges=_dump(data.edges),
                is_active=data.is_active,
                created_at=now,
                updated_at=now,
            )
            session.add(rec)
            session.commit()
            session.refresh(rec)
            logger.info("Created workflow %s (%r, %d nodes)", rec.id, rec.name, len(rec.nodes))
            return _to_workflow(rec)

    def update_workflow(self, workflow_id: str, data: WorkflowUpdate) -> Optional[Workflow]:
        with Session(self.engine) as session:
            rec = self._find_workflow(session, workflow_id)
            if not rec:
                return None

            changes = data.changes()
            for name, value in changes.items():
                if name in ("nodes", "edges"):
                    value = _dump(value)
                setattr(rec, name, value)
            rec.updated_at = utcnow()

            session.add(rec)
            session.commit()
            session.refresh(rec)
            logger.info("Updated workflow %s: %s", workflow_id, sorted(changes))
            return _to_workflow(rec)

    def delete_workflow(self, workflow_id: str) -> bool:
        with Session(self.engine) as session:
            rec = self._find_workflow(session, workflow_id)
            if not rec:
                return False
            session.delete(rec)
            session.commit()
            logger.info("Deleted workflow %s", workflow_id)
            return True
