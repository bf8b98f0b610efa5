"""Tests for container wiring."""

from diet_planner.adapters.console import StdConsole
from diet_planner.config import Settings
from diet_planner.containers import build_container


def test_build_container_wires_session(settings, console) -> None:
    container = build_container(settings, console)

    assert container.session.console is console
    assert container.session.planner_service is container.planner_service
    assert container.planner_service.debug is False


def test_build_container_defaults_to_std_console() -> None:
    container = build_container(Settings(debug=True))

    assert isinstance(container.console, StdConsole)
    assert container.planner_service.debug is True
