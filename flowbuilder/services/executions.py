# flowbuilder/services/executions.py
"""
Simulated execution tracking.

Nothing runs: `start` records a running state and a later read reports it
completed once the configured duration has elapsed. Pause and stop only
record the status. Each workflow keeps its last `history_limit` runs.
"""
import logging
from datetime import datetime, timedelta, UTC
from typing import Callable, Dict, List, Optional, Tuple

from flowbuilder.models import ExecutionState, ExecutionStatus
from flowbuilder.util.ids import new_execution_id

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ExecutionTracker:

    def __init__(self, duration_seconds: float = 3.0, clock: Optional[Clock] = None, history_limit: int = 50):
        self.duration = timedelta(seconds=duration_seconds)
        self.history_limit = history_limit
        self._clock: Clock = clock or (lambda: datetime.now(UTC))
        self._states: Dict[str, ExecutionState] = {}
        # oldest first; the last entry is the same object as _states[workflow_id]
        self._history: Dict[str, List[ExecutionState]] = {}

    def status(self, workflow_id: str) -> ExecutionState:
        state = self._states.get(workflow_id)
        if state is None:
            return ExecutionState(workflow_id=workflow_id)
        if (
            state.status == ExecutionStatus.running
            and state.last_execution is not None
            and self._clock() - state.last_execution >= self.duration
        ):
            state.status = ExecutionStatus.completed
            state.message = "Workflow execution completed successfully"
            logger.info("Execution %s of workflow %s completed", state.execution_id, workflow_id)
        return state.model_copy()

    def history(self, workflow_id: str, page: int = 1, page_size: int = 50) -> Tuple[List[ExecutionState], int]:
        """A page of past runs, newest first, and the total number kept."""
        self.status(workflow_id)
        runs = list(reversed(self._history.get(workflow_id, [])))
        start = (page - 1) * page_size
        return [run.model_copy() for run in runs[start:start + page_size]], len(runs)

    def start(self, workflow_id: str) -> ExecutionState:
        state = self._new_run(workflow_id, ExecutionStatus.running, "Workflow execution started")
        logger.info("Execution %s of workflow %s started", state.execution_id, workflow_id)
        return state

    def pause(self, workflow_id: str) -> ExecutionState:
        return self._set(workflow_id, ExecutionStatus.paused, "Workflow paused")

    def stop(self, workflow_id: str) -> ExecutionState:
        return self._set(workflow_id, ExecutionStatus.stopped, "Workflow stopped")

    def fail(self, workflow_id: str, message: str) -> ExecutionState:
        """Record a run that failed to start; earlier runs keep their status."""
        state = self._new_run(workflow_id, ExecutionStatus.error, message)
        logger.warning("Execution %s of workflow %s failed: %s", state.execution_id, workflow_id, message)
        return state

    def forget(self, workflow_id: str) -> None:
        self._states.pop(workflow_id, None)
        self._history.pop(workflow_id, None)

    def _new_run(self, workflow_id: str, status: ExecutionStatus, message: str) -> ExecutionState:
        self.status(workflow_id)
        state = ExecutionState(
            workflow_id=workflow_id,
            status=status,
            execution_id=new_execution_id(),
            last_execution=self._clock(),
            message=message,
        )
        self._record(state)
        return state.model_copy()

    def _set(self, workflow_id: str, status: ExecutionStatus, message: str) -> ExecutionState:
        # settle a finished run first so a late pause does not hide the completion time
        current = self.status(workflow_id)
        state = current.model_copy(update={"status": status, "message": message})
        self._record(state)
        logger.info("Workflow %s -> %s", workflow_id, status.value)
        return state.model_copy()

    def _record(self, state: ExecutionState) -> None:
        self._states[state.workflow_id] = state
        if state.execution_id is None:
            # pause/stop before any run: not a run of its own
            return
        runs = self._history.setdefault(state.workflow_id, [])
        if runs and runs[-1].execution_id == state.execution_id:
            runs[-1] = state
        else:
            runs.append(state)
            del runs[:-self.history_limit]
