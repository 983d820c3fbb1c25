"""
================================================================================
Scenario Listener
================================================================================

Translates pytest's report hooks into scenario lifecycle events
(started / passed / failed / skipped) and dispatches them to listeners.

The emitter only produces events; listeners decide how to present them.
The default LoggingScenarioListener writes them through loguru.

Usage (conftest.py):
    def pytest_configure(config):
        emitter = ScenarioEventEmitter()
        emitter.subscribe(LoggingScenarioListener())
        config.pluginmanager.register(emitter, "scenario_event_emitter")

================================================================================
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from loguru import logger


class ScenarioEventType(str, Enum):
    """Lifecycle event kinds."""

    STARTED = "started"
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ScenarioEvent:
    """A single scenario lifecycle event."""

    type: ScenarioEventType
    nodeid: str
    phase: str = ""
    duration: float = 0.0
    message: str = ""


class ScenarioListener:
    """Base listener. Override the callbacks you need."""

    def on_event(self, event: ScenarioEvent) -> None:
        pass

    def on_session_finish(self, exitstatus: int) -> None:
        pass


class LoggingScenarioListener(ScenarioListener):
    """Logs every scenario event and a final outcome summary."""

    def __init__(self):
        self.outcomes: Dict[str, ScenarioEventType] = {}

    def on_event(self, event: ScenarioEvent) -> None:
        if event.type == ScenarioEventType.STARTED:
            logger.info(f"Scenario started: {event.nodeid}")
            return

        # A teardown problem never overrides the outcome of the body
        previous = self.outcomes.get(event.nodeid)
        if previous in (ScenarioEventType.FAILED, ScenarioEventType.SKIPPED) and event.phase == "teardown":
            logger.warning(f"Teardown problem after {previous.value} scenario: {event.nodeid}")
            return
        self.outcomes[event.nodeid] = event.type

        if event.type == ScenarioEventType.PASSED:
            logger.info(f"Scenario passed: {event.nodeid} ({event.duration:.2f}s)")
        elif event.type == ScenarioEventType.SKIPPED:
            logger.info(f"Scenario skipped: {event.nodeid}")
        else:
            logger.error(f"Scenario failed in {event.phase}: {event.nodeid}\n{event.message}")

    def summary(self) -> Dict[str, int]:
        """Count final outcomes by event type value."""
        counts = Counter(outcome.value for outcome in self.outcomes.values())
        return {kind.value: counts.get(kind.value, 0) for kind in ScenarioEventType if kind != ScenarioEventType.STARTED}

    def on_session_finish(self, exitstatus: int) -> None:
        if not self.outcomes:
            return
        summary = self.summary()
        logger.info(
            f"Scenario summary: {summary['passed']} passed, "
            f"{summary['failed']} failed, {summary['skipped']} skipped "
            f"(exit status {exitstatus})"
        )


class ScenarioEventEmitter:
    """
    pytest plugin emitting ScenarioEvents to subscribed listeners.

    Mapping:
        - pytest_runtest_logstart             -> STARTED
        - call phase passed / failed          -> PASSED / FAILED
        - any phase skipped (incl. xfail)     -> SKIPPED
        - setup or teardown failure           -> FAILED (phase recorded)
    """

    MAX_MESSAGE_LENGTH = 2000

    def __init__(self, listeners: Optional[List[ScenarioListener]] = None):
        self._listeners: List[ScenarioListener] = list(listeners or [])

    def subscribe(self, listener: ScenarioListener) -> None:
        self._listeners.append(listener)

    @property
    def listeners(self) -> List[ScenarioListener]:
        return list(self._listeners)

    def emit(self, event: ScenarioEvent) -> None:
        for listener in self._listeners:
            try:
                listener.on_event(event)
            except Exception as e:
                logger.warning(f"Scenario listener {type(listener).__name__} failed on {event.type.value}: {e}")

    # =========================================================================
    # pytest hooks
    # =========================================================================

    def pytest_runtest_logstart(self, nodeid, location):
        self.emit(ScenarioEvent(type=ScenarioEventType.STARTED, nodeid=nodeid))

    def pytest_runtest_logreport(self, report):
        event_type = self._classify(report)
        if event_type is None:
            return

        message = ""
        if report.failed:
            message = (report.longreprtext or "")[: self.MAX_MESSAGE_LENGTH]

        self.emit(
            ScenarioEvent(
                type=event_type,
                nodeid=report.nodeid,
                phase=report.when,
                duration=getattr(report, "duration", 0.0),
                message=message,
            )
        )

    def pytest_sessionfinish(self, session, exitstatus):
        for listener in self._listeners:
            try:
                listener.on_session_finish(int(exitstatus))
            except Exception as e:
                logger.warning(f"Scenario listener {type(listener).__name__} failed at session finish: {e}")

    @staticmethod
    def _classify(report) -> Optional[ScenarioEventType]:
        if report.skipped:
            return ScenarioEventType.SKIPPED
        if report.failed:
            return ScenarioEventType.FAILED
        if report.when == "call":
            return ScenarioEventType.PASSED
        return None


__all__ = [
    "LoggingScenarioListener",
    "ScenarioEvent",
    "ScenarioEventEmitter",
    "ScenarioEventType",
    "ScenarioListener",
]
