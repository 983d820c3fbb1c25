"""
================================================================================
Report Tools
================================================================================

Scenario lifecycle events emitted from pytest report hooks.

Exports:
    - ScenarioEvent / ScenarioEventType: event payloads
    - ScenarioListener: listener protocol (subclass and override on_event)
    - LoggingScenarioListener: default loguru listener
    - ScenarioEventEmitter: pytest plugin dispatching events to listeners

================================================================================
"""

from .scenario_listener import (
    LoggingScenarioListener,
    ScenarioEvent,
    ScenarioEventEmitter,
    ScenarioEventType,
    ScenarioListener,
)

__all__ = [
    "LoggingScenarioListener",
    "ScenarioEvent",
    "ScenarioEventEmitter",
    "ScenarioEventType",
    "ScenarioListener",
]
