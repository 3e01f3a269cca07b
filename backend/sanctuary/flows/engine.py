# /sanctuary/flows/engine.py

"""
Pure navigation engine for guidance flows.

This module provides the state machine behind a guidance session:
- Branching state: the current node offers options
- Terminal state: the current node offers none and ends the session

Transitions take a NavigationState and return a TransitionResult holding a
new state when applied. Failures (INVALID_OPTION, NO_HISTORY) are returned,
never raised, and leave the given state untouched.

All functions are:
- Pure (no side effects)
- Deterministic (same input = same output)
- No logging
- Pure business logic only
"""

from typing import Optional, Tuple, TypedDict

from sanctuary.errors import NavigationError
from sanctuary.models.flow import FlowNode, NodeKind
from sanctuary.models.navigation import NavigationState


class TransitionResult(TypedDict):
    """Result of a navigation transition."""
    applied: bool
    error_code: Optional[str]
    reason: Optional[str]
    state: NavigationState


def node_kind(node: FlowNode) -> NodeKind:
    return NodeKind.BRANCHING if node.options else NodeKind.TERMINAL


def option_names(node: FlowNode) -> Tuple[str, ...]:
    return tuple(option.name for option in node.options or ())


def start(root: FlowNode) -> NavigationState:
    """Create the initial state of a session: at the root, no history."""
    return NavigationState(root=root, current=root)


def is_terminal(state: NavigationState) -> bool:
    return node_kind(state.current) is NodeKind.TERMINAL


def available_options(state: NavigationState) -> Tuple[str, ...]:
    """Option names at the current node, in declaration order; empty when terminal."""
    return option_names(state.current)


def _rejected(state: NavigationState, error: NavigationError, reason: str) -> TransitionResult:
    return {
        "applied": False,
        "error_code": error.value,
        "reason": reason,
        "state": state
    }


def _applied(state: NavigationState) -> TransitionResult:
    return {
        "applied": True,
        "error_code": None,
        "reason": None,
        "state": state
    }


def select_option(state: NavigationState, name: str) -> TransitionResult:
    """
    Follow the option called `name` from the current node.

    The match is exact and case-sensitive. On success the current node is
    pushed onto history and the option's child becomes current.

    Args:
        state: The session state
        name: Option name as shown to the user

    Returns:
        TransitionResult with applied=True and the new state, or
        applied=False with INVALID_OPTION and the unchanged state
    """
    if is_terminal(state):
        return _rejected(
            state,
            NavigationError.INVALID_OPTION,
            f"Option '{name}' is not available: the current step is terminal"
        )

    for option in state.current.options:
        if option.name == name:
            return _applied(state.model_copy(update={
                "current": option.flow,
                "history": state.history + (state.current,),
                "path": state.path + (name,)
            }))

    return _rejected(
        state,
        NavigationError.INVALID_OPTION,
        f"Option '{name}' is not available. Available options: {list(available_options(state))}"
    )


def back(state: NavigationState) -> TransitionResult:
    """Return to the previously visited node, or fail with NO_HISTORY at the root."""
    if not state.history:
        return _rejected(state, NavigationError.NO_HISTORY, "There is no previous step to return to")

    return _applied(state.model_copy(update={
        "current": state.history[-1],
        "history": state.history[:-1],
        "path": state.path[:-1]
    }))


def restart(state: NavigationState) -> TransitionResult:
    """Return to the root and clear history. Always applied."""
    return _applied(start(state.root))
