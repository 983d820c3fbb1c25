"""
================================================================================
UI Framework Exceptions
================================================================================

Error taxonomy raised by the element interaction layer and session provider.

    ElementError
        ElementNotVisibleError      - element never became visible
            ElementNotFoundError    - locator resolves to no element at all
        ElementNotInteractableError - visible but the action could not be performed
        IndexOutOfRangeError        - list index outside [0, count)
    SessionError                    - browser session misuse

================================================================================
"""


class ElementError(Exception):
    """Base class for element interaction failures."""

    def __init__(self, message: str, locator=None):
        super().__init__(message)
        self.locator = locator


class ElementNotVisibleError(ElementError):
    """Raised when matching elements never become visible within the timeout."""
    pass


class ElementNotFoundError(ElementNotVisibleError):
    """Raised when a locator resolves to no element (a visibility wait can never succeed)."""
    pass


class ElementNotInteractableError(ElementError):
    """Raised when a visible element cannot be clicked or typed into."""
    pass


class IndexOutOfRangeError(ElementError, IndexError):
    """Raised when a list index is outside the resolved element list."""

    def __init__(self, message: str, locator=None, index: int = None, count: int = None):
        super().__init__(message, locator)
        self.index = index
        self.count = count


class SessionError(RuntimeError):
    """Raised when a browser session is used after disposal or from a foreign thread."""
    pass


__all__ = [
    "ElementError",
    "ElementNotFoundError",
    "ElementNotVisibleError",
    "ElementNotInteractableError",
    "IndexOutOfRangeError",
    "SessionError",
]
