"""
Pytest fixtures for console tests.

Provides a cvar registry with one cvar of each type, a console bound to
it, and an event recorder.
"""

from typing import Dict, List

import pytest

from cvars import CVarFlag, CVarRegistry, CVarType
from devconsole import Console, ConsoleEvent, ConsoleTopic, create_console


class EventRecorder:
    """Collects every event published on a bus."""

    def __init__(self):
        self.events: List[ConsoleEvent] = []

    def __call__(self, event: ConsoleEvent) -> None:
        self.events.append(event)

    def count(self, topic: ConsoleTopic) -> int:
        return sum(1 for e in self.events if e.topic == topic)

    def counts(self) -> Dict[ConsoleTopic, int]:
        return {topic: self.count(topic) for topic in ConsoleTopic}


@pytest.fixture
def cvar_registry() -> CVarRegistry:
    registry = CVarRegistry()
    registry.define("v", CVarType.BOOLEAN, False)
    registry.define("n", CVarType.INTEGER, 0)
    registry.define("f", CVarType.FLOAT, 1.5)
    registry.define("s", CVarType.STRING, "hello", flags=CVarFlag.SAVE)
    return registry


@pytest.fixture
def console(cvar_registry) -> Console:
    return create_console(cvar_registry)


@pytest.fixture
def recorder(console) -> EventRecorder:
    rec = EventRecorder()
    console.bus.subscribe(rec)
    return rec
