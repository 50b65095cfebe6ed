"""Finite State Machine for the search run lifecycle."""

from enum import Enum
from typing import Callable, Optional, Set


class RunState(Enum):
    """States of a search run."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    PATH_FOUND = "path_found"
    NO_PATH = "no_path"
    ERROR = "error"


FINISHED_STATES = frozenset({RunState.PATH_FOUND, RunState.NO_PATH})


class RunStateMachine:
    """
    Finite State Machine for managing search run states.

    State Transitions:
    IDLE -> RUNNING (start)
    RUNNING -> PAUSED (pause toggle)
    RUNNING -> PATH_FOUND (goal settled and path reconstructed)
    RUNNING -> NO_PATH (frontier exhausted)
    RUNNING -> ERROR (invariant violation)
    PAUSED -> RUNNING (pause toggle)
    PATH_FOUND / NO_PATH -> RUNNING (restart)
    any non-IDLE -> IDLE (cancel / clear)
    """

    def __init__(self):
        self._current_state = RunState.IDLE
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict:
        """Build the valid state transition map."""
        return {
            RunState.IDLE: {RunState.RUNNING},
            RunState.RUNNING: {RunState.PAUSED, RunState.PATH_FOUND, RunState.NO_PATH,
                               RunState.ERROR, RunState.IDLE},
            RunState.PAUSED: {RunState.RUNNING, RunState.IDLE},
            RunState.PATH_FOUND: {RunState.RUNNING, RunState.IDLE},
            RunState.NO_PATH: {RunState.RUNNING, RunState.IDLE},
            RunState.ERROR: {RunState.IDLE},
        }

    @property
    def current_state(self) -> RunState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: RunState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: RunState, context: dict = None) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: RunState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    # Convenience methods for common operations

    def can_start(self) -> bool:
        """A run starts from IDLE or after a finished run."""
        return self._current_state is RunState.IDLE or self.is_finished()

    def is_idle(self) -> bool:
        return self._current_state is RunState.IDLE

    def is_running(self) -> bool:
        return self._current_state is RunState.RUNNING

    def is_paused(self) -> bool:
        return self._current_state is RunState.PAUSED

    def is_active(self) -> bool:
        """Running or paused: configuration and editing are locked."""
        return self._current_state in (RunState.RUNNING, RunState.PAUSED)

    def is_finished(self) -> bool:
        """Check if the run has finished (path found or no path)."""
        return self._current_state in FINISHED_STATES

    def start(self, context: dict = None) -> bool:
        if not self.can_start():
            return False
        return self.transition_to(RunState.RUNNING, context)

    def toggle_pause(self, context: dict = None) -> bool:
        if self.is_running():
            return self.transition_to(RunState.PAUSED, context)
        if self.is_paused():
            return self.transition_to(RunState.RUNNING, context)
        return False

    def path_found(self, context: dict = None) -> bool:
        return self.transition_to(RunState.PATH_FOUND, context)

    def no_path(self, context: dict = None) -> bool:
        return self.transition_to(RunState.NO_PATH, context)

    def fail_error(self, context: dict = None) -> bool:
        return self.transition_to(RunState.ERROR, context)

    def reset_to_idle(self, context: dict = None) -> bool:
        """Reset to idle state."""
        return self.transition_to(RunState.IDLE, context)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            RunState.IDLE: "Ready to start",
            RunState.RUNNING: "Search running",
            RunState.PAUSED: "Search paused",
            RunState.PATH_FOUND: "Path found",
            RunState.NO_PATH: "No path exists",
            RunState.ERROR: "Error occurred",
        }
        return descriptions.get(self._current_state, "Unknown state")
