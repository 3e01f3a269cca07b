# /sanctuary/errors.py

"""
Exceptions raised by the guidance flow and grouping engines.

Only load-time problems are raised. Navigation and strategy selection
failures are reported as result dictionaries so that a caller can degrade
gracefully (see sanctuary.flows.engine and sanctuary.grouping.engine).
"""

from enum import Enum
from typing import Optional, Sequence, Tuple


class FlowErrorCode(str, Enum):
    """Error codes for structural defects in a flow tree."""
    MALFORMED_FLOW = "MALFORMED_FLOW"
    EMPTY_PROMPT = "EMPTY_PROMPT"
    EMPTY_PROMPT_LINE = "EMPTY_PROMPT_LINE"
    EMPTY_OPTIONS = "EMPTY_OPTIONS"
    DUPLICATE_OPTION = "DUPLICATE_OPTION"
    CYCLE_DETECTED = "CYCLE_DETECTED"
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"


class NavigationError(str, Enum):
    """Recoverable failures reported by navigator transitions."""
    INVALID_OPTION = "INVALID_OPTION"
    NO_HISTORY = "NO_HISTORY"


class GroupingError(str, Enum):
    """Recoverable failures reported when selecting a grouping strategy."""
    STRATEGY_NOT_FOUND = "STRATEGY_NOT_FOUND"


class SanctuaryError(Exception):
    """Base exception for this package."""
    pass


class StructuralDefect(SanctuaryError):
    """Raised when a flow tree breaks a structural invariant."""

    def __init__(self, error_code: FlowErrorCode, message: str, path: Sequence[str] = ()):
        self.error_code = error_code
        self.path: Tuple[str, ...] = tuple(path)
        self.message = message
        location = " > ".join(self.path) if self.path else "<root>"
        super().__init__(f"{error_code.value} at {location}: {message}")


class FlowNotFound(SanctuaryError, LookupError):
    """Raised when a flow key is not present in the registry."""

    def __init__(self, key: str, known: Optional[Sequence[str]] = None):
        self.key = key
        msg = f"Flow '{key}' is not registered"
        if known:
            msg += f". Known flows: {', '.join(known)}"
        super().__init__(msg)


class StrategyNotFound(SanctuaryError, LookupError):
    """Raised when a grouped view is built with no usable sort option."""

    def __init__(self, key: str, known: Optional[Sequence[str]] = None):
        self.key = key
        msg = f"Sort option '{key}' is not registered"
        if known:
            msg += f". Available options: {', '.join(known)}"
        super().__init__(msg)
