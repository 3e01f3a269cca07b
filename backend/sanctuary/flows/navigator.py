# /sanctuary/flows/navigator.py

import logging
from typing import List, Optional, Sequence

from sanctuary.flows import engine
from sanctuary.flows.engine import TransitionResult
from sanctuary.flows.loader import get_flow
from sanctuary.models.flow import FlowNode
from sanctuary.models.navigation import NavigationState

logger = logging.getLogger(__name__)


class FlowNavigator:
    """
    One visitor's walk through a validated guidance flow.

    Wraps the pure reducers in sanctuary.flows.engine and keeps the latest
    NavigationState. Transitions must be applied one at a time; a navigator
    is never shared between sessions.
    """

    def __init__(self, root: FlowNode, flow_key: Optional[str] = None):
        self.flow_key = flow_key or "custom"
        self._state = engine.start(root)

    @classmethod
    def for_flow(cls, key: str) -> "FlowNavigator":
        """Start a session on a registered flow (loaded and validated once)."""
        return cls(get_flow(key), flow_key=key)

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def path(self) -> List[str]:
        return list(self._state.path)

    @property
    def depth(self) -> int:
        return len(self._state.history)

    def get_current_prompt(self) -> List[str]:
        return list(self._state.current.prompt)

    def get_available_options(self) -> List[str]:
        return list(engine.available_options(self._state))

    def is_terminal(self) -> bool:
        return engine.is_terminal(self._state)

    def _apply(self, action: str, result: TransitionResult) -> TransitionResult:
        if result["applied"]:
            self._state = result["state"]
            logger.debug(f"[{self.flow_key}] {action} -> path={list(self._state.path)} terminal={self.is_terminal()}")
        else:
            logger.info(f"[{self.flow_key}] {action} rejected ({result['error_code']}): {result['reason']}")
        return result

    def select_option(self, name: str) -> TransitionResult:
        return self._apply(f"select '{name}'", engine.select_option(self._state, name))

    def back(self) -> TransitionResult:
        return self._apply("back", engine.back(self._state))

    def restart(self) -> TransitionResult:
        return self._apply("restart", engine.restart(self._state))

    def replay(self, path: Sequence[str]) -> TransitionResult:
        """
        Restart and re-select each option name in order.

        Stops at the first name that is not available and returns that failure;
        the navigator is left at the last node that could be reached.
        """
        result = self.restart()
        for name in path:
            result = self.select_option(name)
            if not result["applied"]:
                break
        return result
