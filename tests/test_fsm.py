"""Tests for the run state machine."""

from gridsearch.app.fsm import RunState, RunStateMachine


def test_starts_idle():
    fsm = RunStateMachine()
    assert fsm.current_state is RunState.IDLE
    assert fsm.get_state_description() == "Ready to start"


def test_run_pause_resume_finish():
    fsm = RunStateMachine()
    assert fsm.start()
    assert fsm.is_running() and fsm.is_active()

    assert fsm.toggle_pause()
    assert fsm.is_paused() and fsm.is_active()
    assert not fsm.path_found()

    assert fsm.toggle_pause()
    assert fsm.path_found()
    assert fsm.is_finished()
    assert fsm.get_state_description() == "Path found"


def test_start_is_rejected_while_active():
    fsm = RunStateMachine()
    fsm.start()
    assert not fsm.start()
    fsm.toggle_pause()
    assert not fsm.start()


def test_restart_from_finished_states():
    fsm = RunStateMachine()
    fsm.start()
    fsm.no_path()
    assert fsm.current_state is RunState.NO_PATH
    assert fsm.start()
    assert fsm.is_running()


def test_pause_toggle_outside_a_run_is_rejected():
    fsm = RunStateMachine()
    assert not fsm.toggle_pause()
    fsm.start()
    fsm.path_found()
    assert not fsm.toggle_pause()


def test_error_only_leaves_to_idle():
    fsm = RunStateMachine()
    fsm.start()
    assert fsm.fail_error()
    assert not fsm.start()
    assert fsm.reset_to_idle()
    assert fsm.is_idle()


def test_idle_cannot_reset_to_idle():
    fsm = RunStateMachine()
    assert not fsm.reset_to_idle()


def test_enter_callbacks_receive_context():
    fsm = RunStateMachine()
    seen = []
    fsm.on_state_enter(RunState.NO_PATH, seen.append)
    fsm.start()
    fsm.no_path({"cells": 3})
    assert seen == [{"cells": 3}]
