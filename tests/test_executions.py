# tests/test_executions.py
from flowbuilder.models import ExecutionStatus


def test_unknown_workflow_is_idle(tracker):
    state = tracker.status("wf-1")
    assert state.status is ExecutionStatus.idle
    assert state.execution_id is None


def test_start_sets_running(tracker, clock):
    state = tracker.start("wf-1")
    assert state.status is ExecutionStatus.running
    assert state.execution_id.startswith("exec_")
    assert state.last_execution == clock.now
    assert state.message == "Workflow execution started"


def test_running_completes_after_duration(tracker, clock):
    tracker.start("wf-1")
    clock.advance(2.9)
    assert tracker.status("wf-1").status is ExecutionStatus.running
    clock.advance(0.1)
    state = tracker.status("wf-1")
    assert state.status is ExecutionStatus.completed
    assert state.message == "Workflow execution completed successfully"


def test_each_start_gets_new_execution_id(tracker):
    first = tracker.start("wf-1").execution_id
    second = tracker.start("wf-1").execution_id
    assert first != second


def test_pause_and_stop(tracker, clock):
    tracker.start("wf-1")
    assert tracker.pause("wf-1").status is ExecutionStatus.paused
    clock.advance(10)
    # a paused run never completes on its own
    assert tracker.status("wf-1").status is ExecutionStatus.paused
    stopped = tracker.stop("wf-1")
    assert stopped.status is ExecutionStatus.stopped
    assert stopped.message == "Workflow stopped"


def test_pause_after_completion_keeps_last_execution(tracker, clock):
    started = tracker.start("wf-1")
    clock.advance(5)
    paused = tracker.pause("wf-1")
    assert paused.status is ExecutionStatus.paused
    assert paused.last_execution == started.last_execution
    assert paused.execution_id == started.execution_id


def test_fail_sets_error(tracker):
    state = tracker.fail("wf-1", "boom")
    assert state.status is ExecutionStatus.error
    assert state.message == "boom"


def test_forget_resets_to_idle(tracker):
    tracker.start("wf-1")
    tracker.forget("wf-1")
    assert tracker.status("wf-1").status is ExecutionStatus.idle


def test_states_are_per_workflow(tracker):
    tracker.start("wf-1")
    assert tracker.status("wf-2").status is ExecutionStatus.idle


def test_history_lists_runs_newest_first(tracker, clock):
    first = tracker.start("wf-1")
    clock.advance(5)
    second = tracker.start("wf-1")
    runs, total = tracker.history("wf-1")
    assert total == 2
    assert [r.execution_id for r in runs] == [second.execution_id, first.execution_id]
    assert runs[1].status is ExecutionStatus.completed
    assert runs[0].status is ExecutionStatus.running


def test_history_follows_pause_and_stop(tracker):
    started = tracker.start("wf-1")
    tracker.stop("wf-1")
    [run], total = tracker.history("wf-1")
    assert total == 1
    assert run.execution_id == started.execution_id
    assert run.status is ExecutionStatus.stopped


def test_history_is_bounded(clock):
    from flowbuilder.services.executions import ExecutionTracker

    tracker = ExecutionTracker(clock=clock, history_limit=3)
    ids = [tracker.start("wf-1").execution_id for _ in range(5)]
    runs, total = tracker.history("wf-1")
    assert total == 3
    assert [r.execution_id for r in runs] == ids[:1:-1]


def test_history_pages(tracker):
    ids = [tracker.start("wf-1").execution_id for _ in range(5)]
    runs, total = tracker.history("wf-1", page=2, page_size=2)
    assert total == 5
    assert [r.execution_id for r in runs] == [ids[2], ids[1]]


def test_fail_keeps_earlier_runs(tracker, clock):
    started = tracker.start("wf-1")
    clock.advance(5)
    failed = tracker.fail("wf-1", "boom")
    runs, _ = tracker.history("wf-1")
    assert [r.status for r in runs] == [ExecutionStatus.error, ExecutionStatus.completed]
    assert runs[1].execution_id == started.execution_id
    assert failed.execution_id != started.execution_id


def test_pause_without_run_adds_no_history(tracker):
    tracker.pause("wf-1")
    assert tracker.history("wf-1") == ([], 0)


def test_forget_clears_history(tracker):
    tracker.start("wf-1")
    tracker.forget("wf-1")
    assert tracker.history("wf-1") == ([], 0)
