"""
In-memory stand-ins for the Playwright page API used by the framework.

The fake DOM maps a selector string to a list of elements. Waits never
sleep: an unmet condition raises Playwright's TimeoutError immediately,
which is what a real page does once the timeout expires.
"""

from typing import Any, Dict, List, Optional, Tuple

import allure_commons
import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.element_actions import ElementActions

VISIBLE_SUFFIX = " >> visible=true"


class FakeElement:
    def __init__(self, text: str = "", visible: bool = True, enabled: bool = True):
        self.text = text
        self.visible = visible
        self.enabled = enabled
        self.value = ""


class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, index: Optional[int] = None):
        self._page = page
        self._selector = selector
        self._index = index

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self._page, self._selector, 0)

    def all(self) -> List["FakeLocator"]:
        return [FakeLocator(self._page, self._selector, i) for i in range(self.count())]

    def count(self) -> int:
        return len(self._targets())

    def wait_for(self, state: str = "visible", timeout: Optional[int] = None) -> None:
        self._page.waits.append(timeout)
        element = self._element(timeout)
        if state == "visible" and not element.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self._selector}")

    def click(self, timeout: Optional[int] = None, trial: bool = False) -> None:
        self._page.action_timeouts.append(("trial_click" if trial else "click", timeout))
        element = self._element(timeout)
        if not (element.visible and element.enabled):
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded: element is not actionable")
        if not trial:
            self._page.record("click", self._selector, self._index)

    def fill(self, value: str, timeout: Optional[int] = None) -> None:
        self._page.action_timeouts.append(("fill", timeout))
        element = self._element(timeout)
        if not element.enabled:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded: element is not editable")
        element.value = value
        self._page.record("fill", self._selector, value)

    def inner_text(self, timeout: Optional[int] = None) -> str:
        return self._element(timeout).text

    def is_visible(self) -> bool:
        targets = self._targets()
        return bool(targets) and targets[0].visible

    def _targets(self) -> List[FakeElement]:
        matches = self._page.matches(self._selector)
        if self._index is None:
            return matches
        return matches[self._index:self._index + 1]

    def _element(self, timeout: Optional[int]) -> FakeElement:
        targets = self._targets()
        if not targets:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self._selector}")
        return targets[0]


class FakePage:
    def __init__(self):
        self.dom: Dict[str, List[FakeElement]] = {}
        self.calls: List[Tuple[str, str, Any]] = []
        self.waits: List[Optional[int]] = []
        self.action_timeouts: List[Tuple[str, Optional[int]]] = []
        self.load_states: List[Tuple[str, Optional[int]]] = []
        self.url = "about:blank"

    def add(self, selector: str, *texts: str, visible: bool = True, enabled: bool = True) -> List[FakeElement]:
        elements = [FakeElement(text, visible, enabled) for text in (texts or ("",))]
        self.dom.setdefault(selector, []).extend(elements)
        return elements

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def matches(self, selector: str) -> List[FakeElement]:
        if selector.endswith(VISIBLE_SUFFIX):
            return [e for e in self.dom.get(selector[: -len(VISIBLE_SUFFIX)], []) if e.visible]
        return list(self.dom.get(selector, []))

    def record(self, action: str, selector: str, value: Any) -> None:
        if selector.endswith(VISIBLE_SUFFIX):
            selector = selector[: -len(VISIBLE_SUFFIX)]
        self.calls.append((action, selector, value))

    def goto(self, url: str, wait_until: Optional[str] = None) -> None:
        self.url = url
        self.calls.append(("goto", url, wait_until))

    def wait_for_load_state(self, state: str = "load", timeout: Optional[int] = None) -> None:
        self.load_states.append((state, timeout))


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def actions(fake_page: FakePage) -> ElementActions:
    return ElementActions(fake_page)


class StepRecorder:
    """allure-commons plugin collecting the steps started while registered."""

    def __init__(self):
        self.steps: List[Tuple[str, Dict[str, Any]]] = []

    @allure_commons.hookimpl
    def start_step(self, uuid, title, params):
        self.steps.append((title, dict(params or {})))


@pytest.fixture
def allure_steps():
    recorder = StepRecorder()
    allure_commons.plugin_manager.register(recorder)
    yield recorder.steps
    allure_commons.plugin_manager.unregister(recorder)
