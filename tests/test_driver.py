"""Tests for the fixed-rate tick driver."""

import pytest

from gridsearch.app.controller import SearchController
from gridsearch.app.driver import TickDriver
from gridsearch.app.fsm import RunState
from gridsearch.app.settings import AppSettings
from gridsearch.utils.grid_factory import parse_layout


@pytest.fixture
def controller(qapp, open_5x5):
    return SearchController(parse_layout(open_5x5), AppSettings(sim_speed=20))


def test_defaults_to_settings_speed(controller):
    driver = TickDriver(controller)
    assert driver.speed == 20
    assert driver.interval_ms == 50


def test_speed_is_clamped(controller):
    driver = TickDriver(controller, 30)
    assert driver.interval_ms == 33

    driver.speed = 120
    assert driver.speed == 60
    assert driver.interval_ms == 17

    driver.speed = 0.25
    assert driver.speed == 1
    assert driver.interval_ms == 1000


def test_timer_follows_run_state(controller):
    driver = TickDriver(controller)
    assert not driver.is_active()

    controller.start()
    assert driver.is_active()

    controller.pause_toggle()
    assert not driver.is_active()

    controller.pause_toggle()
    assert driver.is_active()

    controller.cancel()
    assert not driver.is_active()


def test_timeout_ticks_the_controller(controller):
    driver = TickDriver(controller)
    controller.start()

    driver._on_timer_tick()
    driver._on_timer_tick()

    assert controller.statistics()["steps_taken"] == 2


def test_timer_stops_when_run_finishes(controller):
    driver = TickDriver(controller)
    controller.start()
    while controller.current_state is RunState.RUNNING:
        driver._on_timer_tick()

    assert controller.current_state is RunState.PATH_FOUND
    assert not driver.is_active()
