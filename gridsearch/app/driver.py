"""Fixed-rate tick driver for paced search runs."""

from PySide6.QtCore import QObject, QTimer

from .controller import SearchController
from .fsm import RunState
from .settings import clamp_sim_speed


class TickDriver(QObject):
    """
    Calls controller.tick() at a fixed number of steps per second.

    The timer runs only while the controller is in RUNNING; every other
    state stops it.
    """

    def __init__(self, controller: SearchController, steps_per_second: float = None):
        super().__init__()
        self._controller = controller
        self._speed = clamp_sim_speed(steps_per_second or controller.settings.sim_speed)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timer_tick)
        self._timer.setInterval(self._interval_ms())

        self._controller.state_changed.connect(self._on_state_changed)

    @property
    def speed(self) -> float:
        """Get the current speed in steps per second."""
        return self._speed

    @speed.setter
    def speed(self, steps_per_second: float):
        """Set the speed, clamped to the supported range."""
        self._speed = clamp_sim_speed(steps_per_second)
        self._timer.setInterval(self._interval_ms())

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def stop(self):
        self._timer.stop()

    def _interval_ms(self) -> int:
        return int(round(1000.0 / self._speed))

    def _on_state_changed(self, state: RunState):
        if state is RunState.RUNNING:
            self._timer.start()
        else:
            self._timer.stop()

    def _on_timer_tick(self):
        """Called on each timer tick during run mode."""
        self._controller.tick()
