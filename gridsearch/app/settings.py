"""Application settings with environment overrides."""

import os
from dataclasses import dataclass

SIM_SPEED_MIN = 1.0
SIM_SPEED_MAX = 60.0


def clamp_sim_speed(steps_per_second: float) -> float:
    return max(SIM_SPEED_MIN, min(SIM_SPEED_MAX, steps_per_second))


@dataclass
class AppSettings:
    """Startup settings for the controller and pacing driver."""
    grid_count: int = 50
    sim_speed: float = SIM_SPEED_MAX  # steps per second
    weight_min: float = 0.0
    weight_max: float = 10.0

    def __post_init__(self):
        if self.grid_count <= 0:
            raise ValueError(f"Grid count must be positive, got {self.grid_count}")
        self.sim_speed = clamp_sim_speed(self.sim_speed)

    def weight_in_range(self, weight: float) -> bool:
        return self.weight_min <= weight <= self.weight_max

    @classmethod
    def from_env(cls, environ=None) -> "AppSettings":
        """Build settings from GRIDSEARCH_* variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            grid_count=int(environ.get("GRIDSEARCH_GRID_COUNT", defaults.grid_count)),
            sim_speed=float(environ.get("GRIDSEARCH_SIM_SPEED", defaults.sim_speed)),
        )
